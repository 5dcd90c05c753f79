"""Shared pytest fixtures and configuration for the romanum test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* Tests must not depend on the caller's ``ROMANUM_*`` environment.
* Logging configured by one CLI test must not leak into the next.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

_ENV_VARS = (
    "ROMANUM_CLASSICAL",
    "ROMANUM_RELAXED_SUBTRACTION",
    "ROMANUM_IGNORE_CASE",
)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("romanum")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
