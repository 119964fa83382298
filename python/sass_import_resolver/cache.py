"""Per-importer resolution cache.

Keyed by the raw specifier, so the first resolution of a specifier is
reused for every later referrer.
"""

from __future__ import annotations

import threading

from .types import ResolvedFile


class ResolutionCache:
    """Thread-safe specifier -> ResolvedFile mapping with no eviction."""

    def __init__(self) -> None:
        self._entries: dict[str, ResolvedFile] = {}
        self._lock = threading.RLock()

    def get(self, specifier: str) -> ResolvedFile | None:
        with self._lock:
            return self._entries.get(specifier)

    def set(self, specifier: str, resolved: ResolvedFile) -> None:
        with self._lock:
            self._entries[specifier] = resolved

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def specifiers(self) -> list[str]:
        """Return cached specifiers in insertion order."""
        with self._lock:
            return list(self._entries)

    def __contains__(self, specifier: object) -> bool:
        with self._lock:
            return specifier in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__ = ["ResolutionCache"]
