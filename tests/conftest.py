"""
Shared fixtures for the vacation calculator tests.
"""

import os

import pytest

from vacation_calculator.i18n import translator as translator_module


def pytest_configure(config):
    # api and mcp_server load their configuration at import time
    os.environ["LANG"] = "C.UTF-8"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep VACATION_CALC_* settings from the host out of the tests."""
    for name in list(os.environ):
        if name.startswith("VACATION_CALC_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(translator_module, "_translator", None)
