#!/usr/bin/env python3
"""Configuration loader for Tolk."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple, Union

import yaml

from tolk.utils import tolk_log

DEFAULT_CONFIG_PATH = "config.yaml"


def load_config_yaml(config_path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> dict:
    """Load the YAML config file; ``{}`` when it is absent, unreadable or not a mapping."""
    path = Path(config_path)
    if not path.is_file():
        return {}

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        tolk_log("CONFIG", f"Warning: Failed to load {path}: {e}", level="WARNING")
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        tolk_log("CONFIG", f"Warning: {path} must hold a mapping, got {type(data).__name__}", level="WARNING")
        return {}
    return data


@dataclass
class LocaleConfig:
    """Active locale, fallback locale and the known locales."""
    locale: str = "en"
    fallback_locale: Optional[str] = "en"
    locales: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_yaml(cls, yaml_config: dict) -> "LocaleConfig":
        """Create config from YAML + env vars."""
        config = cls()

        l10n_cfg = yaml_config.get("localization", {}) if isinstance(yaml_config, dict) else {}
        if not isinstance(l10n_cfg, dict):
            l10n_cfg = {}

        config.locale = str(l10n_cfg.get("locale", config.locale)).strip() or "en"

        raw_fallback = l10n_cfg.get("fallback_locale", config.fallback_locale)
        config.fallback_locale = str(raw_fallback).strip() if raw_fallback else None

        raw_locales = l10n_cfg.get("locales", config.locales)
        if isinstance(raw_locales, str):
            raw_locales = raw_locales.split(",")
        if isinstance(raw_locales, (list, tuple)):
            config.locales = tuple(
                str(name).strip() for name in raw_locales if str(name).strip()
            )

        # Env var overrides
        if os.getenv("TOLK_LOCALE"):
            config.locale = os.getenv("TOLK_LOCALE").strip() or "en"
        if os.getenv("TOLK_FALLBACK_LOCALE") is not None:
            config.fallback_locale = os.getenv("TOLK_FALLBACK_LOCALE").strip() or None

        return config


def load_locale_config(config_path: Optional[str] = None) -> LocaleConfig:
    """Read the locale configuration from ``config_path``, ``TOLK_CONFIG`` or config.yaml."""
    path = config_path or os.getenv("TOLK_CONFIG") or DEFAULT_CONFIG_PATH
    return LocaleConfig.from_yaml(load_config_yaml(path))
