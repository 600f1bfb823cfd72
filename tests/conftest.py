import pytest

from densegraph.config import get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch):
    """Each test sees settings built from its own environment."""
    for name in ("DENSEGRAPH_GRAPH__MAX_NODES", "DENSEGRAPH_GRAPH__DEFAULT_MODE"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
