"""
Mount actions on a FastAPI application.

Each request gets a fresh action instance. The env handed to the action carries
the request method and path, the raw query string, the path parameters under
``router.params`` and a JSON object body under ``actionwire.body``.
"""

import json
from typing import Any, Awaitable, Callable, Dict, Iterable, Type, Union

from fastapi import APIRouter, FastAPI, Request, Response
from starlette.concurrency import run_in_threadpool

from actionwire.action import Action
from actionwire.action.params import QUERY_STRING, REQUEST_BODY, ROUTER_PARAMS
from actionwire.core import http_status
from actionwire.core.logging_config import get_logger

logger = get_logger(__name__)

Endpoint = Callable[[Request], Awaitable[Response]]


async def build_env(request: Request) -> Dict[str, Any]:
    env: Dict[str, Any] = {
        "REQUEST_METHOD": request.method,
        "PATH_INFO": request.url.path,
        QUERY_STRING: request.url.query,
        ROUTER_PARAMS: dict(request.path_params),
        "actionwire.request": request,
    }
    raw = await request.body()
    if raw and request.headers.get("content-type", "").startswith("application/json"):
        try:
            body = json.loads(raw)
        except ValueError:
            logger.info(f"Ignoring malformed JSON body on {request.method} {request.url.path}")
        else:
            if isinstance(body, dict):
                env[REQUEST_BODY] = body
    return env


def to_response(status: int, headers: Dict[str, str], body: Iterable[Any]) -> Response:
    if not http_status.body_allowed(status):
        return Response(status_code=status, headers=headers)
    content = b"".join(chunk if isinstance(chunk, bytes) else str(chunk).encode("utf-8") for chunk in body)
    return Response(content=content, status_code=status, headers=headers)


def as_endpoint(action_cls: Type[Action]) -> Endpoint:
    """Wrap an action class into an async FastAPI endpoint."""

    async def endpoint(request: Request) -> Response:
        env = await build_env(request)
        status, headers, body = await run_in_threadpool(action_cls(), env)
        logger.debug(f"{request.method} {request.url.path} -> {action_cls.__qualname__} {status}")
        return to_response(status, headers, body)

    endpoint.__name__ = action_cls.__qualname__.replace(".", "_")
    endpoint.__doc__ = action_cls.__doc__
    return endpoint


def mount_action(
    target: Union[FastAPI, APIRouter],
    path: str,
    action_cls: Type[Action],
    methods: Iterable[str] = ("GET",),
) -> None:
    """Route ``methods`` on ``path`` to ``action_cls``."""
    target.add_api_route(
        path,
        as_endpoint(action_cls),
        methods=list(methods),
        name=action_cls.__qualname__,
        include_in_schema=False,
    )
    logger.debug(f"Mounted {action_cls.__qualname__} on {path} {list(methods)}")
