"""HTTP redirects."""

from typing import NoReturn

LOCATION = "Location"
DEFAULT_REDIRECT_CODE = 302


class Redirect:
    def redirect_to(self, url: str, status: int = DEFAULT_REDIRECT_CODE) -> NoReturn:
        """Set the ``Location`` header and halt with ``status``."""
        self.headers[LOCATION] = str(url)
        self.halt(status)
