"""Shared pytest fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog

from string_calculator.utils.settings import reset_calculator_settings, reset_settings


@pytest.fixture(autouse=True)
def reset_global_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate every test from cached settings and calculator environment."""
    for name in ("STRING_CALCULATOR_DEFAULT_DELIMITER", "STRING_CALCULATOR_DECLARATION_MARKER"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    reset_calculator_settings()
    yield
    reset_settings()
    reset_calculator_settings()


@pytest.fixture(autouse=True)
def quiet_structlog() -> Iterator[None]:
    """Keep structured log lines out of captured CLI output."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
    )
    yield
    structlog.reset_defaults()
