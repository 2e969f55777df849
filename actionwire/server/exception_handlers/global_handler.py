"""
Global Exception Handler for FastAPI Application.

Actions translate their own exceptions into statuses. An exception only reaches
this handler when ``Controller.handle_exceptions`` is disabled, or when it is
raised outside an action (env building, another endpoint). The handler logs it
with the request and the action it was routed to, and answers a 500 JSON body
carrying an error ID.
"""

import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from actionwire.controller import Controller
from actionwire.core.logging_config import get_logger

logger = get_logger(__name__)

UNKNOWN_ACTION = "unknown"


def routed_action(request: Request) -> str:
    """Name of the action the request was routed to, as set by ``mount_action``."""
    route = request.scope.get("route")
    return getattr(route, "name", None) or UNKNOWN_ACTION


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Log an exception that escaped dispatch and answer 500.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with error details and error ID
    """
    error_id = id(exc)
    action_name = routed_action(request)
    handle_exceptions = Controller.handle_exceptions

    if handle_exceptions:
        reason = "raised outside action dispatch"
    else:
        reason = "propagated because Controller.handle_exceptions is disabled"

    logger.error(
        f"Exception [{error_id}] in {action_name} ({request.method} {request.url.path}) {reason}: "
        f"{type(exc).__name__}: {exc}",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "action": action_name,
            "handle_exceptions": handle_exceptions,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
            "traceback": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        },
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "error_type": type(exc).__name__,
            "action": action_name,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
