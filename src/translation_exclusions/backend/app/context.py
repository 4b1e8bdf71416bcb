"""Per-application wiring of the exclusion services."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from flask import Flask, current_app

from translation_exclusions.backend.config.schema import SiteConfiguration

from .hooks import HookRegistry, register_translation_hooks
from .services.admin_form import AdminNotice
from .services.category_registry import ConfiguredCategoryRegistry
from .services.dependency_check import check_translation_service
from .services.gatekeeper import TranslationGatekeeper
from .services.options import InMemoryOptionStore, OptionStore, SQLiteOptionStore
from .services.settings_store import SettingsStore

logger = logging.getLogger(__name__)

EXTENSION_NAME = "translation_exclusions"
OPTIONS_DB_ENV = "TRANSEXCLUDE_OPTIONS_DB"


@dataclass(frozen=True)
class ExclusionContext:
    """Services shared by every request handled by one application."""

    config: SiteConfiguration
    options: OptionStore
    registry: ConfiguredCategoryRegistry
    store: SettingsStore
    gatekeeper: TranslationGatekeeper
    hooks: HookRegistry
    dependency_notice: AdminNotice | None

    @property
    def translation_service_active(self) -> bool:
        return self.dependency_notice is None


def build_option_store() -> OptionStore:
    """Select the option backend from ``TRANSEXCLUDE_OPTIONS_DB``."""

    db_path = os.getenv(OPTIONS_DB_ENV)
    if db_path and db_path.strip():
        logger.info("Persisting options to %s", db_path)
        return SQLiteOptionStore(Path(db_path.strip()).expanduser())

    logger.info("No %s configured; options are kept in memory", OPTIONS_DB_ENV)
    return InMemoryOptionStore()


def build_context(config: SiteConfiguration, options: OptionStore) -> ExclusionContext:
    """Compose the exclusion services and register the translation filters."""

    registry = ConfiguredCategoryRegistry.from_configuration(config)
    store = SettingsStore(
        options,
        registry,
        option_key=config.option_key,
        legacy_option_keys=config.legacy_option_keys,
    )
    gatekeeper = TranslationGatekeeper(store, registry)

    hooks = HookRegistry()
    register_translation_hooks(hooks, gatekeeper)

    return ExclusionContext(
        config=config,
        options=options,
        registry=registry,
        store=store,
        gatekeeper=gatekeeper,
        hooks=hooks,
        dependency_notice=check_translation_service(config.translation_service),
    )


def init_app(app: Flask, context: ExclusionContext) -> None:
    app.extensions[EXTENSION_NAME] = context


def get_context() -> ExclusionContext:
    """Return the exclusion services bound to the active application."""

    return current_app.extensions[EXTENSION_NAME]


__all__ = [
    "EXTENSION_NAME",
    "ExclusionContext",
    "OPTIONS_DB_ENV",
    "build_context",
    "build_option_store",
    "get_context",
    "init_app",
]
