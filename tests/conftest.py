"""
Pytest configuration for calculator tests

Settings are cached per process, so every test starts from a clean
environment and an empty settings cache.
"""
import os

import pytest

from settings import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in list(os.environ):
        if name.upper().startswith("BMI_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
