"""Env var config loading with pydantic-settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger()

_PRESETS_PATH = Path(__file__).parent / "policy_presets.yaml"


class CspSettings(BaseSettings):
    """CSP configuration, overridable with ``CSP_*`` env vars."""

    model_config = SettingsConfigDict(
        env_prefix="CSP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Master switch checked by Policy.should_be_applied
    enabled: bool = True

    # Enforced policy, and an optional second one sent as report-only
    policy: str = "shield_csp.policies.basic.Basic"
    report_only_policy: str = ""

    # Added as report-uri to every policy the factory builds
    report_uri: str = ""

    nonce_generator: str = "shield_csp.nonce.RandomString"

    log_level: str = "info"
    log_json: bool = True


_settings: CspSettings | None = None

# Cache loaded presets
_presets: dict[str, Any] | None = None


def get_settings() -> CspSettings:
    """Get or create the singleton settings instance."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def load_settings() -> CspSettings:
    """Load settings from env vars (env vars override model defaults)."""
    global _settings
    _settings = CspSettings()
    logger.info("config_loaded", enabled=_settings.enabled, policy=_settings.policy)
    return _settings


def load_presets(path: Path = _PRESETS_PATH) -> dict[str, Any]:
    """Load policy presets from YAML, caching after first load."""
    global _presets
    if _presets is not None:
        return _presets
    if not path.exists():
        logger.error("policy_presets_not_found", path=str(path))
        _presets = {}
        return _presets
    with open(path) as f:
        _presets = yaml.safe_load(f) or {}
    return _presets


def reset_presets_cache() -> None:
    """Reset the presets cache (for testing)."""
    global _presets
    _presets = None
