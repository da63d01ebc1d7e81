"""Shared fixtures: isolate tests from the caller's mortarcalc settings."""

from __future__ import annotations

import logging

import pytest

from mortarcalc.models.room import RoomInput

_ENV_KEYS = ("MORTARCALC_LOG_LEVEL", "MORTARCALC_MAX_WORKERS")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove mortarcalc variables and restore the package log level."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    pkg_logger = logging.getLogger("mortarcalc")
    level = pkg_logger.level
    yield
    pkg_logger.setLevel(level)


@pytest.fixture
def bedroom() -> RoomInput:
    """5 m x 4 m room, 3 m walls, 0.15 m thick."""
    return RoomInput(name="Bedroom", length="5", width="4", height="3", thickness="0.15")


@pytest.fixture
def hall() -> RoomInput:
    """3 m x 3 m room, 2.5 m walls, 12 mm plaster."""
    return RoomInput(name="Hall", length="3", width="3", height="2.5", thickness="0.012")
