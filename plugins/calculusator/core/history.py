"""Bounded, newest-first calculation history."""

from __future__ import annotations

from collections import deque
from typing import Any, Mapping

from .results import CalculationResult

DEFAULT_HISTORY_LIMIT = 50


def history_limit_from_settings(settings: Mapping[str, Any] | None) -> int:
    """Read ``history_limit`` from plugin settings, falling back to the default.

    Missing or malformed values never raise so a bad ``config.yml`` cannot
    stop the application from starting.
    """

    if not settings:
        return DEFAULT_HISTORY_LIMIT
    try:
        limit = int(settings.get("history_limit", DEFAULT_HISTORY_LIMIT))
    except (TypeError, ValueError):
        return DEFAULT_HISTORY_LIMIT
    return limit if limit > 0 else DEFAULT_HISTORY_LIMIT


class History:
    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if limit < 1:
            raise ValueError("History limit must be at least 1")
        # appendleft on a bounded deque evicts from the right, i.e. the oldest entry.
        self._entries: deque[CalculationResult] = deque(maxlen=limit)

    @property
    def limit(self) -> int:
        return self._entries.maxlen or DEFAULT_HISTORY_LIMIT

    def record(self, result: CalculationResult) -> None:
        self._entries.appendleft(result)

    def list(self) -> list[CalculationResult]:
        """Return a copy of the entries, newest first."""

        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["DEFAULT_HISTORY_LIMIT", "History", "history_limit_from_settings"]
