import pytest

import flu
from flu import _settings


@pytest.fixture(scope="function")
def root() -> flu.Flu:
    """Fresh root builder, so registrations don't leak between tests."""
    return flu.create_flu()


@pytest.fixture(scope="function", autouse=True)
def options():
    """Restore global options after each test."""
    original = dict(_settings.options)
    yield _settings.options
    _settings.options.update(original)  # type: ignore
