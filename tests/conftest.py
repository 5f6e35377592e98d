"""Shared test fixtures for cookie_signature tests."""

from __future__ import annotations

import pytest

from cookie_signature.config import ENV_HASH, ENV_SECRET, ENV_SEPARATOR
from cookie_signature.signer import CookieSignature


@pytest.fixture
def byte_secret() -> bytes:
    return bytes.fromhex("A0ABBC0C")


@pytest.fixture
def secret() -> str:
    return "actual sekrit password"


@pytest.fixture
def signer() -> CookieSignature:
    """A freshly built signer with default settings."""
    return CookieSignature()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove all cookie_signature environment variables for the test."""
    for name in (ENV_SEPARATOR, ENV_HASH, ENV_SECRET):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
