# tests/conftest.py
from __future__ import annotations

import pytest
from dateutil import tz

from timekit.config import TimeConfig, set_config


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """
    Every test starts from the built-in defaults: no config file, no
    TIMEKIT_TZ, host zone never consulted unless a test asks for it.
    """
    monkeypatch.delenv("TIMEKIT_CONFIG", raising=False)
    monkeypatch.delenv("TIMEKIT_TZ", raising=False)
    cfg = TimeConfig()
    set_config(cfg)
    yield cfg
    set_config(None)


@pytest.fixture
def utc():
    return tz.gettz("UTC")


@pytest.fixture
def los_angeles():
    return tz.gettz("America/Los_Angeles")


@pytest.fixture
def sydney():
    return tz.gettz("Australia/Sydney")


@pytest.fixture
def kolkata():
    return tz.gettz("Asia/Kolkata")
