"""Translation decisions for excluded content categories.

The two module-level functions are pure: they receive the exclusion set, the
requested entity's category and, for the redirect check, the language state.
:class:`TranslationGatekeeper` binds them to a settings store and a category
registry so they can be registered on the translation service's filters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .category_registry import CategoryRegistry
from .language import LanguageState
from .settings_store import ExclusionSet, SettingsStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RedirectDirective:
    """Instruction to send the visitor to ``location`` instead of translating."""

    location: str
    status: int = 302


class Continue(Enum):
    """Marker returned when the translated page should render normally."""

    CONTINUE = "continue"


CONTINUE = Continue.CONTINUE

PageDecision = RedirectDirective | Continue


def is_eligible_for_translation(
    exclusions: ExclusionSet,
    category: str | None,
    current_eligibility: bool,
) -> bool:
    """Narrow ``current_eligibility`` to ``False`` for excluded categories."""

    if category is not None and category in exclusions:
        return False
    return current_eligibility


def check_page_translation(
    exclusions: ExclusionSet,
    category: str | None,
    language_state: LanguageState,
) -> PageDecision:
    """Redirect translated views of excluded content to the original URL."""

    if category is None or category not in exclusions:
        return CONTINUE
    if language_state.is_original:
        return CONTINUE
    return RedirectDirective(location=language_state.original_url)


class TranslationGatekeeper:
    """Filter callbacks resolving categories before delegating to the pure checks."""

    def __init__(self, store: SettingsStore, registry: CategoryRegistry) -> None:
        self._store = store
        self._registry = registry

    def resolve_category(self, entity_id: Any) -> str | None:
        """Return the category of ``entity_id`` or ``None`` when unresolvable."""

        if entity_id is None:
            return None
        try:
            category = self._registry.resolve_category_of(str(entity_id))
        except (LookupError, ValueError) as exc:
            logger.debug("Unable to resolve category for entity %s: %s", entity_id, exc)
            return None
        except Exception:
            logger.warning("Category lookup failed for entity %s", entity_id, exc_info=True)
            return None
        if category is None:
            logger.debug("No category registered for entity %s", entity_id)
        return category

    def filter_eligible_url(self, current_eligibility: bool, entity_id: Any = None) -> bool:
        category = self.resolve_category(entity_id)
        return is_eligible_for_translation(self._store.load(), category, current_eligibility)

    def filter_before_process(
        self,
        decision: PageDecision,
        entity_id: Any,
        language_state: LanguageState,
    ) -> PageDecision:
        # An earlier callback already short-circuited the request.
        if isinstance(decision, RedirectDirective):
            return decision
        category = self.resolve_category(entity_id)
        return check_page_translation(self._store.load(), category, language_state)


__all__ = [
    "CONTINUE",
    "Continue",
    "PageDecision",
    "RedirectDirective",
    "TranslationGatekeeper",
    "check_page_translation",
    "is_eligible_for_translation",
]
