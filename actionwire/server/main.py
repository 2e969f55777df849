"""
Application Factory.

``create_app`` builds a FastAPI application around a set of actions: it
configures logging, applies the settings to the global controller
configuration, registers the exception handlers and mounts the routes.
"""

from contextlib import asynccontextmanager
from typing import Iterable, NamedTuple, Optional, Tuple, Type

from fastapi import FastAPI

from actionwire.action import Action
from actionwire.controller import Controller
from actionwire.core.config import Settings
from actionwire.core.logging_config import get_logger, setup_logging

from .adapter import mount_action
from .exception_handlers import setup_exception_handlers

logger = get_logger(__name__)


class ActionRoute(NamedTuple):
    path: str
    action: Type[Action]
    methods: Tuple[str, ...] = ("GET",)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log application startup and shutdown."""
    logger.info(f"Starting up {app.title} with {len(app.state.action_routes)} action route(s)...")
    yield
    logger.info(f"Shutting down {app.title}...")


def create_app(
    routes: Iterable[ActionRoute] = (),
    settings: Optional[Settings] = None,
    title: str = "actionwire",
) -> FastAPI:
    """
    Build a FastAPI application serving ``routes``.

    Args:
        routes: Actions to mount
        settings: Settings to apply; read from the environment when omitted
        title: Application title
    """
    settings = settings or Settings()
    setup_logging(settings=settings)
    Controller.configure_from_settings(settings)

    app = FastAPI(title=title, lifespan=lifespan)
    setup_exception_handlers(app)

    app.state.action_routes = list(routes)
    for route in app.state.action_routes:
        mount_action(app, route.path, route.action, route.methods)

    return app
