"""Startup check for the translation service the filters plug into."""

from __future__ import annotations

import logging
from importlib import util as importlib_util

from translation_exclusions.backend.config.schema import TranslationServiceConfig

from .admin_form import AdminNotice

logger = logging.getLogger(__name__)


def translation_service_active(config: TranslationServiceConfig) -> bool:
    """Return ``True`` when the configured translation service is available."""

    if not config.module:
        return config.active

    try:
        return importlib_util.find_spec(config.module) is not None
    except (ImportError, ValueError):
        return False


def check_translation_service(config: TranslationServiceConfig) -> AdminNotice | None:
    """Return an admin notice when the translation service is not active."""

    if translation_service_active(config):
        return None

    logger.warning(
        "%s is not installed or activated; exclusion filters are registered but idle",
        config.name,
    )
    return AdminNotice(
        level="error",
        message_key="notice.translation_service_inactive",
        params={"service": config.name},
    )


__all__ = ["check_translation_service", "translation_service_active"]
