"""Tests for YAML policy presets."""

from __future__ import annotations

import pytest

from shield_csp.config.loader import CspSettings, load_presets
from shield_csp.header import HEADER, REPORT_ONLY_HEADER
from shield_csp.nonce import StaticNonce
from shield_csp.policies.basic import PresetPolicy


def _apply(name: str) -> dict[str, str]:
    headers: dict[str, str] = {}
    PresetPolicy(name, settings=CspSettings(), nonce_generator=StaticNonce("abc123")).apply_to(headers)
    return headers


class TestLoadPresets:
    def test_shipped_presets(self):
        assert {"strict", "balanced", "permissive"} <= set(load_presets())

    def test_presets_cached(self):
        assert load_presets() is load_presets()

    def test_missing_file(self, tmp_path):
        assert load_presets(tmp_path / "missing.yaml") == {}


class TestPresetPolicy:
    def test_strict(self):
        csp = _apply("strict")[HEADER]
        assert csp.startswith("default-src 'none';")
        assert "frame-ancestors 'none'" in csp
        assert "script-src 'self' 'nonce-abc123'" in csp
        assert "style-src 'self' 'nonce-abc123'" in csp
        assert "upgrade-insecure-requests" in csp.split(";")

    def test_balanced(self):
        csp = _apply("balanced")[HEADER]
        assert "script-src 'self' 'unsafe-inline'" in csp
        assert "img-src 'self' data: https:" in csp
        assert "object-src 'none'" in csp

    def test_permissive_is_report_only(self):
        headers = _apply("permissive")
        assert HEADER not in headers
        assert "'unsafe-eval'" in headers[REPORT_ONLY_HEADER]
        assert "connect-src *" in headers[REPORT_ONLY_HEADER]

    def test_unknown_preset(self):
        with pytest.raises(KeyError):
            PresetPolicy("nope")
