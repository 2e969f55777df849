"""
Request parameters.

``Params.from_env`` computes the parameters of a request from its env:

- when the env describes an HTTP request (it has ``QUERY_STRING`` or a parsed
  body under ``actionwire.body``), the query string values are merged with the
  body, then with ``router.params``;
- otherwise ``router.params`` is used when present, else the env itself
  without its ``actionwire.*`` keys, so a plain mapping can be passed straight
  to an action.
"""

from typing import Any, Dict, Iterator, Mapping, Optional, Type

from pydantic import BaseModel
from starlette.datastructures import QueryParams

QUERY_STRING = "QUERY_STRING"
ROUTER_PARAMS = "router.params"
REQUEST_BODY = "actionwire.body"
FRAMEWORK_PREFIX = "actionwire."


class Params(Mapping[str, Any]):
    """Read-only mapping of request parameters."""

    def __init__(self, data: Mapping[str, Any], validated: Optional[BaseModel] = None):
        self._data: Dict[str, Any] = dict(data)
        self.validated = validated

    @classmethod
    def from_env(cls, env: Mapping[str, Any], schema: Optional[Type[BaseModel]] = None) -> "Params":
        """
        Build params from ``env``, validating them with ``schema`` when given.

        With a schema only its declared fields are kept.

        Raises:
            pydantic.ValidationError: if the parameters do not match ``schema``
        """
        raw = cls._compute(env)
        if schema is None:
            return cls(raw)
        model = schema.model_validate(raw)
        return cls(model.model_dump(), model)

    @staticmethod
    def _compute(env: Mapping[str, Any]) -> Dict[str, Any]:
        if QUERY_STRING in env or REQUEST_BODY in env:
            data: Dict[str, Any] = dict(QueryParams(env.get(QUERY_STRING) or "").items())
            data.update(env.get(REQUEST_BODY) or {})
            data.update(env.get(ROUTER_PARAMS) or {})
            return data
        if ROUTER_PARAMS in env:
            return dict(env[ROUTER_PARAMS])
        return {key: value for key, value in env.items() if not str(key).startswith(FRAMEWORK_PREFIX)}

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._data)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Params({self._data!r})"
