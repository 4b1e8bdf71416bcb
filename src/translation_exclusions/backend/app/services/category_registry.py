"""Registered content categories and entity lookups."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Protocol, Sequence
from urllib.parse import urlsplit

from translation_exclusions.backend.config.schema import ContentEntry, SiteConfiguration

from .language import split_language_prefix

logger = logging.getLogger(__name__)


class CategoryRegistry(Protocol):
    """Read-only view of the categories registered by the host site."""

    def list_registered_categories(self) -> Sequence[str]:
        ...

    def resolve_category_of(self, entity_id: str) -> str | None:
        ...


def _normalise_path(path: str) -> str:
    if not path:
        return "/"
    if not path.startswith("/"):
        path = f"/{path}"
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return path


class ConfiguredCategoryRegistry:
    """Category registry backed by the site configuration."""

    def __init__(
        self,
        categories: Iterable[str],
        content: Iterable[ContentEntry] = (),
        *,
        languages: Iterable[str] = (),
    ) -> None:
        self._categories = tuple(dict.fromkeys(categories))
        entries = tuple(content)
        self._entity_categories: Mapping[str, str] = {
            entry.id: entry.category for entry in entries
        }
        self._paths: Mapping[str, str] = {entry.path: entry.id for entry in entries}
        self._languages = tuple(languages)

    @classmethod
    def from_configuration(cls, config: SiteConfiguration) -> "ConfiguredCategoryRegistry":
        return cls(
            config.categories,
            config.content,
            languages=config.languages.destinations,
        )

    def list_registered_categories(self) -> tuple[str, ...]:
        return self._categories

    def resolve_category_of(self, entity_id: str) -> str | None:
        return self._entity_categories.get(str(entity_id))

    def resolve_entity_from_url(self, url: str) -> str | None:
        """Return the id of the entity published at ``url``, if any.

        Translated URLs carry a language prefix (``/fr/about``); it is stripped
        before the lookup so every language variant maps to the same entity.
        """

        try:
            path = urlsplit(url).path
        except ValueError as exc:
            logger.debug("Ignoring malformed URL %r: %s", url, exc)
            return None
        _, original_path = split_language_prefix(path, self._languages)
        return self._paths.get(_normalise_path(original_path))


__all__ = ["CategoryRegistry", "ConfiguredCategoryRegistry"]
