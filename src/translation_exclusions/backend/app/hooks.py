"""Explicit filter registry standing in for the translation service's hooks."""

from __future__ import annotations

import logging
from collections import defaultdict
from itertools import count
from threading import Lock
from typing import Any, Callable, Dict, List, Tuple

from .services.gatekeeper import TranslationGatekeeper

logger = logging.getLogger(__name__)

ELIGIBLE_URL_FILTER = "translation_is_eligible_url"
BEFORE_PROCESS_FILTER = "translation_active_translation_before_process"

DEFAULT_PRIORITY = 10

FilterCallback = Callable[..., Any]


class HookRegistry:
    """Ordered filter callbacks keyed by extension point name.

    Callbacks run by ascending priority and, within a priority, in the order
    they were added. Each receives the value returned by the previous one.
    """

    def __init__(self) -> None:
        self._filters: Dict[str, List[Tuple[int, int, FilterCallback]]] = defaultdict(list)
        self._sequence = count()
        self._lock = Lock()

    def add_filter(
        self,
        name: str,
        callback: FilterCallback,
        priority: int = DEFAULT_PRIORITY,
    ) -> None:
        with self._lock:
            self._filters[name].append((priority, next(self._sequence), callback))
            self._filters[name].sort(key=lambda entry: (entry[0], entry[1]))

    def remove_filter(self, name: str, callback: FilterCallback) -> bool:
        with self._lock:
            entries = self._filters.get(name, [])
            remaining = [entry for entry in entries if entry[2] != callback]
            removed = len(remaining) != len(entries)
            if remaining:
                self._filters[name] = remaining
            else:
                self._filters.pop(name, None)
            return removed

    def has_filter(self, name: str) -> bool:
        with self._lock:
            return bool(self._filters.get(name))

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        with self._lock:
            callbacks = [entry[2] for entry in self._filters.get(name, [])]
        for callback in callbacks:
            value = callback(value, *args)
        return value


def register_translation_hooks(
    hooks: HookRegistry,
    gatekeeper: TranslationGatekeeper,
) -> None:
    """Attach the gatekeeper callbacks to both translation extension points."""

    hooks.add_filter(ELIGIBLE_URL_FILTER, gatekeeper.filter_eligible_url)
    hooks.add_filter(BEFORE_PROCESS_FILTER, gatekeeper.filter_before_process)
    logger.debug("Registered translation exclusion filters")


__all__ = [
    "BEFORE_PROCESS_FILTER",
    "DEFAULT_PRIORITY",
    "ELIGIBLE_URL_FILTER",
    "HookRegistry",
    "register_translation_hooks",
]
