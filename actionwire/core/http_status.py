"""HTTP status codes and their reason phrases."""

from http import HTTPStatus
from typing import Tuple

from actionwire.exceptions import UnknownHttpStatusError

SERVER_ERROR = 500

ALL = {status.value: status.phrase for status in HTTPStatus}


def for_code(code: int) -> Tuple[int, str]:
    """
    Return the ``(code, reason_phrase)`` pair for a status code.

    Raises:
        UnknownHttpStatusError: if ``code`` is not a standard status
    """
    try:
        return code, ALL[code]
    except KeyError:
        raise UnknownHttpStatusError(code) from None


def body_allowed(code: int) -> bool:
    """Informational, 204 and 304 responses carry no body."""
    return not (100 <= code < 200 or code in (204, 304))
