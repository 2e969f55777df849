"""
Exception handling for actions.

Every action class copies the global ``Controller.handled_exceptions`` registry
when it is defined, then extends it with its own ``handle_exception``
declarations. At call time an escaping exception is looked up in that registry
and translated into an HTTP status, unless ``Controller.handle_exceptions`` is
disabled, in which case it propagates.
"""

from typing import Any, Dict, Mapping, MutableMapping, NoReturn, Optional, Type

from actionwire.controller import Controller
from actionwire.core import http_status
from actionwire.core.logging_config import get_logger
from actionwire.exceptions import Halt

logger = get_logger(__name__)

EXCEPTION_KEY = "actionwire.exception"


class Throwable:
    handled_exceptions: Dict[Type[BaseException], int] = {}
    _declared_handled_exceptions: Dict[Type[BaseException], int] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        declared: Dict[Type[BaseException], int] = {}
        for base in reversed(cls.__mro__[1:]):
            declared.update(base.__dict__.get("_declared_handled_exceptions", {}))
        cls._declared_handled_exceptions = {}
        cls.handled_exceptions = {**Controller.handled_exceptions, **declared}
        if not cls.__dict__.get("_framework_base", False):
            Controller._defined_actions += 1

    @classmethod
    def handle_exception(cls, exceptions: Mapping[Type[BaseException], int]) -> None:
        """
        Map exception classes to HTTP statuses for this action and its subclasses.

        Example::

            class Show(Action):
                def call(self, params):
                    raise RecordNotFound()

            Show.handle_exception({RecordNotFound: 404})
            Show()({"id": 1})  # => (404, {}, ["Not Found"])
        """
        cls._declared_handled_exceptions.update(exceptions)
        cls.handled_exceptions.update(exceptions)

    def halt(self, code: int, message: Optional[str] = None) -> NoReturn:
        """
        Stop the action and respond with ``code``.

        The body becomes ``message``, or the standard reason phrase of ``code``.

        Raises:
            UnknownHttpStatusError: if ``code`` is not a standard status
        """
        status, reason = http_status.for_code(code)
        raise Halt(status, message or reason)

    def _registered_status(self, exception: BaseException) -> Optional[int]:
        # The most specific registered class wins.
        registry = type(self).handled_exceptions
        for klass in type(exception).__mro__:
            if klass in registry:
                return registry[klass]
        return None

    def _reference_exception(self, env: Any, exception: BaseException) -> None:
        if isinstance(env, MutableMapping):
            env[EXCEPTION_KEY] = exception

    def _handle_exception(self, exception: BaseException) -> NoReturn:
        status = self._registered_status(exception)
        name = type(self).__qualname__
        if status is None:
            status = http_status.SERVER_ERROR
            logger.error(f"Unhandled exception in {name}: {type(exception).__name__}: {exception}", exc_info=exception)
        else:
            logger.warning(f"Handled exception in {name}: {type(exception).__name__} -> {status}")
        self.halt(status)
