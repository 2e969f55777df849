"""
Exceptions raised by the actionwire framework.

``Halt`` is a control-flow signal used by actions to stop processing early.
It is always caught by ``Action.__call__`` and never reaches callers.
"""

from typing import Optional


class ActionwireError(Exception):
    """Base class for framework errors."""


class UnknownHttpStatusError(ActionwireError, KeyError):
    """Raised when a status code has no standard reason phrase."""

    def __init__(self, code: int):
        self.code = code
        super().__init__(f"Unknown HTTP status code: {code}")

    def __str__(self) -> str:
        return self.args[0]


class DuplicateActionError(ActionwireError):
    """Raised when a controller declares the same action name twice."""

    def __init__(self, controller: str, name: str):
        self.controller = controller
        self.name = name
        super().__init__(f"Action {name!r} is already defined on {controller}")


class Halt(Exception):
    """Stop the current action and respond with ``status``."""

    def __init__(self, status: int, message: Optional[str] = None):
        self.status = status
        self.message = message
        super().__init__(status, message)
