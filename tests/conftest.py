"""Shared fixtures for the DataVerify test-suite."""
from __future__ import annotations

import os

import pytest

from dataverify.config import get_settings
from dataverify.translation import reset_base_translator
from dataverify.validation import DataVerify, StrategyRegistry
from dataverify.validation.rules import BUILTIN_RULES


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Ignore DATAVERIFY_* variables from the developer's shell."""
    for key in [k for k in os.environ if k.startswith("DATAVERIFY_")]:
        monkeypatch.delenv(key)
    get_settings.cache_clear()
    reset_base_translator()
    yield
    get_settings.cache_clear()
    reset_base_translator()


@pytest.fixture
def registry() -> StrategyRegistry:
    """Fresh registry with the built-in rules, independent from the process-wide one."""
    return StrategyRegistry(BUILTIN_RULES, allow_override=False)


@pytest.fixture
def make_dv(registry):
    def _make(data, **kwargs) -> DataVerify:
        return DataVerify(data, registry=registry, **kwargs)

    return _make
