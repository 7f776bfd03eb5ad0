"""Root-level pytest configuration for all tests."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest
import structlog

from firebase_cli.container import reset_container
from firebase_cli.origins import Origins
from firebase_cli.session import ClientSession


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop FIREBASE_* overrides and reset cached state around each test."""
    for name in list(os.environ):
        if name.upper().startswith("FIREBASE_"):
            monkeypatch.delenv(name)
    reset_container()
    yield
    reset_container()
    structlog.reset_defaults()


@pytest.fixture
def origins() -> Origins:
    """Origin table with compiled-in defaults."""
    return Origins()


@pytest.fixture
def session() -> ClientSession:
    """Session holding a refresh token and the baseline scopes."""
    session = ClientSession()
    session.set_token("1//refresh-token")
    session.set_scopes([])
    return session
