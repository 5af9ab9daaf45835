import pytest

from tierdiscount.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings from the environment for every test"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
