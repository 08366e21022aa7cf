import pytest

from hyperhtml import config


@pytest.fixture(autouse=True)
def default_settings():
    """Every test starts and ends with default settings."""
    config.reset()
    yield
    config.reset()
