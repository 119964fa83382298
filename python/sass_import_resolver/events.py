"""Import lifecycle events.

Each Importer owns an ImportEvents emitter wrapping pyee's EventEmitter.
Subscribers receive an ImportEvent describing each resolution outcome,
which is useful for dependency tracking and diagnostics.

Example:
    >>> importer = Importer(paths=["/proj"])
    >>> seen = []
    >>> importer.events.subscribe(EventNames.IMPORT_RESOLVED, seen.append)
    >>> importer.resolve("second", "/proj/index.scss")
    >>> seen[0].file
    '/proj/second.scss'
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pyee.base import EventEmitter

from .logging import log_debug
from .types import ImportEvent


class EventNames:
    """Constants for event names published by an Importer.

    Attributes:
        IMPORT_RESOLVED: A specifier resolved to a file through the chain.
        IMPORT_CACHED: A specifier was answered from the cache.
        IMPORT_CIRCULAR: A circular import was replaced by the stand-in file.
        IMPORT_NOT_FOUND: No strategy matched; the host falls back.
        IMPORT_FAILED: No strategy matched and at least one failed.
    """

    IMPORT_RESOLVED = "import.resolved"
    IMPORT_CACHED = "import.cached"
    IMPORT_CIRCULAR = "import.circular"
    IMPORT_NOT_FOUND = "import.not_found"
    IMPORT_FAILED = "import.failed"

    ALL = (
        IMPORT_RESOLVED,
        IMPORT_CACHED,
        IMPORT_CIRCULAR,
        IMPORT_NOT_FOUND,
        IMPORT_FAILED,
    )


class ImportEvents:
    """In-process pub/sub for import outcomes of one Importer."""

    def __init__(self) -> None:
        self._emitter = EventEmitter()

    def subscribe(self, event: str, handler: Callable[[ImportEvent], Any]) -> None:
        """Subscribe ``handler`` to ``event``."""
        self._emitter.on(event, handler)
        handler_name = getattr(handler, "__name__", str(handler))
        log_debug(f"Subscribed to {event}: {handler_name}")

    def subscribe_once(self, event: str, handler: Callable[[ImportEvent], Any]) -> None:
        self._emitter.once(event, handler)

    def unsubscribe(self, event: str, handler: Callable[[ImportEvent], Any]) -> None:
        self._emitter.remove_listener(event, handler)

    def publish(self, event: str, payload: ImportEvent) -> None:
        """Deliver ``payload`` to every subscriber of ``event``."""
        if not self._emitter.listeners(event):
            return
        self._emitter.emit(event, payload)

    def listener_count(self, event: str) -> int:
        return len(self._emitter.listeners(event))

    def clear(self) -> None:
        """Remove all subscribers."""
        self._emitter.remove_all_listeners()


__all__ = ["EventNames", "ImportEvents"]
