"""Shared test fixtures."""

from __future__ import annotations

import pytest

from shield_csp.config.loader import reset_presets_cache
from shield_csp.nonce import StaticNonce


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch):
    """Provide default settings for all tests."""
    for key in ("CSP_ENABLED", "CSP_POLICY", "CSP_REPORT_ONLY_POLICY", "CSP_REPORT_URI", "CSP_NONCE_GENERATOR"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("CSP_LOG_JSON", "false")
    monkeypatch.setenv("CSP_LOG_LEVEL", "debug")

    # Reset cached settings
    import shield_csp.config.loader as loader
    loader._settings = None
    reset_presets_cache()
    yield
    loader._settings = None
    reset_presets_cache()


@pytest.fixture
def nonce() -> StaticNonce:
    """Nonce generator with a predictable token."""
    return StaticNonce("abc123")
