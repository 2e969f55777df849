"""Before and after callbacks for actions."""

from typing import Any, Callable, Tuple, Union

Callback = Union[str, Callable[[Any, Any], Any]]


class Callbacks:
    before_callbacks: Tuple[Callback, ...] = ()
    after_callbacks: Tuple[Callback, ...] = ()

    @classmethod
    def before(cls, *callbacks: Callback) -> None:
        """
        Run ``callbacks`` before ``call``.

        A string names a method invoked as ``self.<name>(params)``; any other
        callable is invoked as ``callback(action, params)``.
        """
        cls.before_callbacks = cls.before_callbacks + callbacks

    @classmethod
    def after(cls, *callbacks: Callback) -> None:
        """Run ``callbacks`` after ``call`` returns without raising or halting."""
        cls.after_callbacks = cls.after_callbacks + callbacks

    def _run_callbacks(self, callbacks: Tuple[Callback, ...], params: Any) -> None:
        for callback in callbacks:
            if isinstance(callback, str):
                getattr(self, callback)(params)
            else:
                callback(self, params)

    def _run_before_callbacks(self, params: Any) -> None:
        self._run_callbacks(type(self).before_callbacks, params)

    def _run_after_callbacks(self, params: Any) -> None:
        self._run_callbacks(type(self).after_callbacks, params)
