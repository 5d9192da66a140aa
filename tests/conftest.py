import os

import pytest

from modules.base_convert.core.settings import ConvertSettings, get_settings


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    for key in list(os.environ):
        if key.startswith("BASE_CONVERT_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> ConvertSettings:
    return get_settings()
