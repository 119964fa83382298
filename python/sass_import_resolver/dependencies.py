"""Import dependency graph.

Records which files each file imported and answers whether a new import
would close a mutual reference. The check is one hop only: it catches
``a -> b -> a`` but not ``a -> b -> c -> a``.
"""

from __future__ import annotations

import threading


class DependencyGraph:
    """Directed parent -> dependency adjacency lists.

    Lists keep insertion order and may hold duplicates. Edges are never
    removed except by ``clear()``.

    Example:
        >>> graph = DependencyGraph()
        >>> graph.add("/proj/a.scss", "/proj/b.scss")
        >>> graph.is_circular("/proj/b.scss", "/proj/a.scss")
        True
    """

    def __init__(self) -> None:
        self._edges: dict[str, list[str]] = {}
        self._lock = threading.RLock()

    def add(self, parent: str, dependency: str) -> None:
        """Record that ``parent`` imports ``dependency``."""
        with self._lock:
            self._edges.setdefault(parent, []).append(dependency)

    def is_circular(self, parent: str, dependency: str) -> bool:
        """Check whether ``dependency`` already imports ``parent``.

        Args:
            parent: File issuing the import.
            dependency: File the import resolved to.

        Returns:
            True if adding the edge would create a mutual reference.
        """
        with self._lock:
            return parent in self._edges.get(dependency, ())

    def dependencies_of(self, parent: str) -> list[str]:
        """Return a copy of the files ``parent`` imported, in order."""
        with self._lock:
            return list(self._edges.get(parent, ()))

    def clear(self) -> None:
        with self._lock:
            self._edges.clear()

    def __contains__(self, parent: object) -> bool:
        with self._lock:
            return parent in self._edges

    def __len__(self) -> int:
        """Return the number of files with recorded dependencies."""
        with self._lock:
            return len(self._edges)


__all__ = ["DependencyGraph"]
