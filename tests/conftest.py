import logging

import pytest
import structlog

from bzlindex.config import get_settings


@pytest.fixture(autouse=True)
def test_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("APP_ENV", "dev")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.delenv("BZLINDEX_COMPUTE_ARTIFACT_AGES", raising=False)
    monkeypatch.delenv("BZLINDEX_DEPRECATED_LABEL_PREFIX", raising=False)
    monkeypatch.delenv("BZLINDEX_HISTOGRAM_MAX_YEAR_AGE", raising=False)
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()
