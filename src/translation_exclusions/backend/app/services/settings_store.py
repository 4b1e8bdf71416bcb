"""Persistence of the excluded category list."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Sequence

from .category_registry import CategoryRegistry
from .options import OptionStore

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass(frozen=True)
class ExclusionSet:
    """Ordered, duplicate-free collection of excluded category identifiers."""

    categories: tuple[str, ...] = ()

    @classmethod
    def from_stored(cls, value: Any) -> "ExclusionSet":
        """Build a set from a persisted option value, ignoring malformed data."""

        if not isinstance(value, (list, tuple)):
            return cls()
        return cls(tuple(dict.fromkeys(item for item in value if isinstance(item, str))))

    def __contains__(self, category: object) -> bool:
        return isinstance(category, str) and category in self.categories

    def __iter__(self) -> Iterator[str]:
        return iter(self.categories)

    def __len__(self) -> int:
        return len(self.categories)

    def as_list(self) -> list[str]:
        return list(self.categories)


def sanitize_categories(candidate: Any, catalog: Iterable[str]) -> list[str]:
    """Keep only candidate entries that name a registered category.

    Anything other than a list or tuple is treated as an empty submission.
    Candidate order is preserved and duplicates are dropped.
    """

    if not isinstance(candidate, (list, tuple)):
        return []

    registered = set(catalog)
    kept: list[str] = []
    for item in candidate:
        if isinstance(item, str) and item in registered and item not in kept:
            kept.append(item)
    return kept


class SettingsStore:
    """Reads and writes the exclusion list through the option facility."""

    def __init__(
        self,
        options: OptionStore,
        registry: CategoryRegistry,
        *,
        option_key: str,
        legacy_option_keys: Sequence[str] = (),
    ) -> None:
        self._options = options
        self._registry = registry
        self.option_key = option_key
        self._legacy_option_keys = tuple(legacy_option_keys)
        options.register(option_key, self.sanitize)

    def sanitize(self, candidate: Any) -> list[str]:
        return sanitize_categories(candidate, self._registry.list_registered_categories())

    def load(self) -> ExclusionSet:
        """Return the stored exclusions, or an empty set when none exist."""

        value = self._options.get(self.option_key, _MISSING)
        if value is _MISSING:
            for legacy_key in self._legacy_option_keys:
                value = self._options.get(legacy_key, _MISSING)
                if value is not _MISSING:
                    logger.debug("Reading exclusions from legacy option %s", legacy_key)
                    break
        if value is _MISSING:
            return ExclusionSet()
        return ExclusionSet.from_stored(value)

    def save(self, candidate: Any) -> ExclusionSet:
        """Filter ``candidate`` against the catalog and persist the result."""

        stored = self._options.set(self.option_key, candidate)
        exclusions = ExclusionSet.from_stored(stored)

        submitted = len(candidate) if isinstance(candidate, (list, tuple)) else 0
        logger.info(
            "Saved %d excluded categories to %s (%d submitted entries dropped)",
            len(exclusions),
            self.option_key,
            submitted - len(exclusions),
        )
        return exclusions


__all__ = ["ExclusionSet", "SettingsStore", "sanitize_categories"]
