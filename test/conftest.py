from __future__ import annotations

import pytest

from actionwire.controller import Controller


@pytest.fixture(autouse=True)
def _reset_controller_configuration():
    """Every test starts and ends with the default global configuration."""
    Controller.reset()
    yield
    Controller.reset()


class RecordNotFound(Exception):
    """Raised by test actions when a record is missing."""


class RecordExpired(RecordNotFound):
    """A more specific record error."""


@pytest.fixture
def record_not_found():
    return RecordNotFound


@pytest.fixture
def record_expired():
    return RecordExpired
