"""Configuration loader wrapping the shared schema models."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .schema import (
    ConfigurationError,
    ContentEntry,
    LanguageConfig,
    SiteConfiguration,
    TranslationServiceConfig,
)

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
DEFAULT_CONFIG_FILE = CONFIG_DIRECTORY / "site.yaml"
CONFIG_PATH_ENV = "TRANSEXCLUDE_CONFIG"


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


def resolve_configuration_path(path: str | os.PathLike[str] | None = None) -> Path:
    """Return the configuration file to load, honouring ``TRANSEXCLUDE_CONFIG``."""

    if path is not None:
        return Path(path).expanduser()

    override = os.getenv(CONFIG_PATH_ENV)
    if override and override.strip():
        return Path(override.strip()).expanduser()

    return DEFAULT_CONFIG_FILE


@lru_cache(maxsize=8)
def _load_configuration_file(path: Path) -> SiteConfiguration:
    if not path.exists():
        raise FileNotFoundError(f"Site configuration file missing: {path}")

    raw_config = _load_yaml(path)

    try:
        return SiteConfiguration.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigurationError(f"Configuration validation failed for {path.name}: {error}") from error


def load_site_configuration(
    path: str | os.PathLike[str] | None = None,
) -> SiteConfiguration:
    """Load the site configuration from disk, caching it per resolved path."""

    return _load_configuration_file(resolve_configuration_path(path).resolve())


def clear_configuration_cache() -> None:
    """Forget cached configurations so edited files are re-read."""

    _load_configuration_file.cache_clear()


__all__ = [
    "CONFIG_DIRECTORY",
    "CONFIG_PATH_ENV",
    "ConfigurationError",
    "ContentEntry",
    "DEFAULT_CONFIG_FILE",
    "LanguageConfig",
    "SiteConfiguration",
    "TranslationServiceConfig",
    "clear_configuration_cache",
    "load_site_configuration",
    "resolve_configuration_path",
]
