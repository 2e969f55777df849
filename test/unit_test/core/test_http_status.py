import pytest

from actionwire.core import http_status
from actionwire.exceptions import UnknownHttpStatusError


@pytest.mark.parametrize(
    "code,phrase",
    [
        (200, "OK"),
        (302, "Found"),
        (404, "Not Found"),
        (403, "Forbidden"),
        (500, "Internal Server Error"),
    ],
)
def test_for_code(code, phrase):
    assert http_status.for_code(code) == (code, phrase)


def test_unknown_code_raises():
    with pytest.raises(UnknownHttpStatusError) as exc_info:
        http_status.for_code(999)

    assert exc_info.value.code == 999
    assert "999" in str(exc_info.value)


def test_unknown_code_error_is_a_key_error():
    with pytest.raises(KeyError):
        http_status.for_code(1)


def test_server_error_constant():
    assert http_status.SERVER_ERROR == 500
