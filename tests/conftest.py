"""Shared fixtures."""

import logging

import pytest
from rich.logging import RichHandler
from typer.testing import CliRunner


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep developer settings and installed log handlers out of the tests."""
    monkeypatch.delenv("LSR_LOG_LEVEL", raising=False)
    root = logging.getLogger()
    level = root.level
    yield
    for handler in [h for h in root.handlers if isinstance(h, RichHandler)]:
        root.removeHandler(handler)
    root.setLevel(level)
