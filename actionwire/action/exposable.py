"""Publish action attributes, e.g. to a view layer or a test."""

from typing import Any, Dict, Tuple


class Exposable:
    exposed_names: Tuple[str, ...] = ()

    @classmethod
    def expose(cls, *names: str) -> None:
        """Declare attributes returned by ``exposures``."""
        cls.exposed_names = cls.exposed_names + tuple(name for name in names if name not in cls.exposed_names)

    @property
    def exposures(self) -> Dict[str, Any]:
        return {name: getattr(self, name, None) for name in type(self).exposed_names}
