"""
A set of logically grouped actions.

Subclassing ``Controller`` installs the action DSL on the new class::

    from actionwire.controller import Controller, action

    class ArticlesController(Controller):
        @action("Index")
        def index(self, params):
            ...

        @action("Show")
        def show(self, params):
            ...

``Controller`` also carries the process-wide exception handling configuration
read by every action.
"""

from typing import Dict, Mapping, Optional, Type

from actionwire.controller.dsl import ActionDefinition, Dsl, action, install
from actionwire.core.config import Settings
from actionwire.core.logging_config import get_logger

logger = get_logger(__name__)


class Controller(Dsl):
    """
    Base class for controllers and home of the global exception configuration.

    ``handled_exceptions``
        Global handled exceptions. When a handled exception is raised while an
        action runs, it is translated into the associated HTTP status. By
        default there are none, and every error is treated as a server side
        error (500)::

            Controller.handled_exceptions = {RecordNotFound: 404}

    ``handle_exceptions``
        Global switch for exception translation. When disabled, exceptions
        raised by actions propagate to the caller, which is handy in tests::

            Controller.handle_exceptions = False

    Set both during application bootstrap, **before** the actions and
    controllers of the application are loaded: every action class copies
    ``handled_exceptions`` when it is defined.
    """

    handled_exceptions: Dict[Type[BaseException], int] = {}
    handle_exceptions: bool = True

    # Number of action classes created so far, see ``configure``.
    _defined_actions: int = 0

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        install(cls)

    @classmethod
    def configure(
        cls,
        handled_exceptions: Optional[Mapping[Type[BaseException], int]] = None,
        handle_exceptions: Optional[bool] = None,
    ) -> None:
        """
        Set the global exception configuration.

        Only the given values are changed. Actions defined before this call keep
        the registry they copied, so a warning is logged when any exist.
        """
        if Controller._defined_actions and handled_exceptions is not None:
            logger.warning(
                f"handled_exceptions configured after {Controller._defined_actions} action(s) were defined; "
                "those actions keep their previous registry"
            )
        if handled_exceptions is not None:
            Controller.handled_exceptions = dict(handled_exceptions)
        if handle_exceptions is not None:
            Controller.handle_exceptions = handle_exceptions
        logger.debug(
            f"Controller configured: handled_exceptions={len(Controller.handled_exceptions)}, "
            f"handle_exceptions={Controller.handle_exceptions}"
        )

    @classmethod
    def configure_from_settings(cls, settings: Settings) -> None:
        """
        Apply environment-bound ``Settings`` to the global configuration.

        An unset ``handle_exceptions`` leaves the current toggle alone.
        """
        cls.configure(handle_exceptions=settings.handle_exceptions)

    @classmethod
    def reset(cls) -> None:
        """Restore the default configuration."""
        Controller.handled_exceptions = {}
        Controller.handle_exceptions = True
        Controller._defined_actions = 0


__all__ = ["ActionDefinition", "Controller", "action"]
