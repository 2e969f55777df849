"""
Request-handling units.

An action receives an env, computes ``Params`` from it and runs ``call``. The
result is a ``(status, headers, body)`` triple::

    from actionwire.action import Action

    class Show(Action):
        def call(self, params):
            self.body = f"article {params['id']}"

    Show()({"id": 1})  # => (200, {}, ["article 1"])

Exceptions escaping ``call`` are translated into HTTP statuses, see
``actionwire.action.throwable``.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple, Type

from pydantic import BaseModel, ValidationError

from actionwire.action.callbacks import Callbacks
from actionwire.action.exposable import Exposable
from actionwire.action.params import Params
from actionwire.action.redirect import Redirect
from actionwire.action.throwable import Throwable
from actionwire.controller import Controller
from actionwire.core import http_status
from actionwire.core.logging_config import get_logger
from actionwire.exceptions import Halt

logger = get_logger(__name__)

DEFAULT_RESPONSE_CODE = 200

Response = Tuple[int, Dict[str, str], List[Any]]


class Action(Throwable, Callbacks, Exposable, Redirect):
    """Base class for actions. Subclasses implement ``call(self, params)``."""

    _framework_base = True

    # Pydantic model used to validate and whitelist params. Invalid params halt with 400.
    params_schema: Optional[Type[BaseModel]] = None

    def __init__(self) -> None:
        self._reset({})

    def __call__(self, env: Mapping[str, Any]) -> Response:
        self._reset(env)
        try:
            try:
                self.params = self._build_params(env)
                self._run_before_callbacks(self.params)
                self.call(self.params)
                self._run_after_callbacks(self.params)
            except Halt:
                raise
            except Exception as exception:
                self._reference_exception(env, exception)
                if not Controller.handle_exceptions:
                    raise
                self._handle_exception(exception)
        except Halt as halt:
            self.status = halt.status
            self.body = halt.message if http_status.body_allowed(halt.status) else None
        return self.response

    def call(self, params: Params) -> None:
        raise NotImplementedError(f"{type(self).__qualname__} must implement call(params)")

    @property
    def body(self) -> List[Any]:
        return self._body

    @body.setter
    def body(self, value: Any) -> None:
        if value is None:
            self._body = []
        elif isinstance(value, (str, bytes)):
            self._body = [value]
        elif isinstance(value, (list, tuple)):
            self._body = list(value)
        else:
            self._body = [value]

    @property
    def response(self) -> Response:
        return self.status, dict(self.headers), list(self.body)

    def _reset(self, env: Mapping[str, Any]) -> None:
        self.env = env
        self.status = DEFAULT_RESPONSE_CODE
        self.headers: Dict[str, str] = {}
        self._body: List[Any] = []
        self.params = Params({})

    def _build_params(self, env: Mapping[str, Any]) -> Params:
        try:
            return Params.from_env(env, type(self).params_schema)
        except ValidationError as error:
            logger.info(f"Invalid params for {type(self).__qualname__}: {error.error_count()} error(s)")
            self.halt(400)


__all__ = ["Action", "Params", "Response"]
