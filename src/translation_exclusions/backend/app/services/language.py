"""Helpers deriving the language state of a request from its URL."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable
from urllib.parse import urlsplit, urlunsplit

from translation_exclusions.backend.config.schema import LanguageConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LanguageState:
    """Current and original language of a request plus its original URL."""

    current_language: str
    original_language: str
    original_url: str

    @property
    def is_original(self) -> bool:
        return self.current_language == self.original_language


def split_language_prefix(path: str, languages: Iterable[str]) -> tuple[str | None, str]:
    """Split ``/fr/about`` into ``("fr", "/about")``.

    Paths without a recognised language segment are returned unchanged with
    ``None`` as the language.
    """

    known = {language.lower() for language in languages}
    segments = path.lstrip("/").split("/", 1)
    head = segments[0].lower()
    if head and head in known:
        remainder = segments[1] if len(segments) > 1 else ""
        return head, f"/{remainder}"
    return None, path or "/"


def resolve_language_state(url: str, languages: LanguageConfig) -> LanguageState:
    """Return the language state for a request made to ``url``.

    A URL that cannot be parsed is treated as a request for the original
    language, so it is served untouched.
    """

    try:
        parts = urlsplit(url)
    except ValueError as exc:
        logger.debug("Treating malformed URL %r as original language: %s", url, exc)
        return LanguageState(
            current_language=languages.original,
            original_language=languages.original,
            original_url=url,
        )
    language, original_path = split_language_prefix(parts.path, languages.destinations)
    original_url = urlunsplit(
        (parts.scheme, parts.netloc, original_path, parts.query, parts.fragment)
    )
    return LanguageState(
        current_language=language or languages.original,
        original_language=languages.original,
        original_url=original_url,
    )


__all__ = ["LanguageState", "resolve_language_state", "split_language_prefix"]
