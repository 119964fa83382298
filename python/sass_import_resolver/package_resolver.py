"""node_modules package resolution.

The node module strategies treat package lookup as an opaque capability
(``PackageResolver``). ``NodePackageResolver`` is the default
implementation and follows the Node.js lookup algorithm:

1. Relative and absolute specifiers (``./x``, ``../x``, ``/x``) are loaded
   against the base directory only.
2. Bare specifiers are tried in every ``node_modules`` directory from the
   base directory up to the filesystem root.
3. Each candidate is loaded as a file (exact name, then each extension),
   then as a directory: the ``package.json`` main field (as a file, then
   as a directory index), then ``index`` with each extension.

Resolved paths are returned with symlinks resolved.

Example:
    >>> resolver = NodePackageResolver()
    >>> resolver.resolve("bootstrap/scss/bootstrap", "/proj", [".scss"])
    '/proj/node_modules/bootstrap/scss/bootstrap.scss'
"""

from __future__ import annotations

import json
import os
from collections.abc import Iterator, Sequence
from typing import Protocol, runtime_checkable

from .exceptions import PackageNotFoundError
from .logging import log_trace, log_warn
from .probe import FileProbe, OsFileProbe


@runtime_checkable
class PackageResolver(Protocol):
    """Capability resolving a package specifier to a file path."""

    def resolve(
        self,
        specifier: str,
        base_directory: str,
        extensions: Sequence[str],
    ) -> str:
        """Resolve ``specifier`` starting from ``base_directory``.

        Returns:
            Absolute path of the resolved file.

        Raises:
            PackageNotFoundError: If nothing matches.
            OSError: For filesystem failures other than absence.
        """
        ...


class NodePackageResolver:
    """Node.js-style ``node_modules`` resolver.

    Args:
        probe: File probe used for every existence check.
        main_fields: ``package.json`` fields consulted, in order, for the
            package entry point.
    """

    def __init__(
        self,
        probe: FileProbe | None = None,
        main_fields: Sequence[str] = ("main",),
    ) -> None:
        self._probe = probe or OsFileProbe()
        self._main_fields = tuple(main_fields)

    def resolve(
        self,
        specifier: str,
        base_directory: str,
        extensions: Sequence[str],
    ) -> str:
        base = os.path.abspath(base_directory)

        if _is_path_specifier(specifier):
            found = self._load(os.path.join(base, specifier), extensions)
            if found:
                return os.path.realpath(found)
            raise PackageNotFoundError(specifier, base_directory)

        for modules_dir in self.node_modules_paths(base):
            found = self._load(os.path.join(modules_dir, specifier), extensions)
            if found:
                return os.path.realpath(found)

        raise PackageNotFoundError(specifier, base_directory)

    @staticmethod
    def node_modules_paths(base_directory: str) -> Iterator[str]:
        """Yield candidate node_modules directories, nearest first."""
        current = os.path.abspath(base_directory)
        while True:
            if os.path.basename(current) != "node_modules":
                yield os.path.join(current, "node_modules")
            parent = os.path.dirname(current)
            if parent == current:
                return
            current = parent

    def _load(self, candidate: str, extensions: Sequence[str]) -> str | None:
        return self._load_as_file(candidate, extensions) or self._load_as_directory(
            candidate, extensions
        )

    def _load_as_file(self, candidate: str, extensions: Sequence[str]) -> str | None:
        for path in (candidate, *(candidate + ext for ext in extensions)):
            log_trace("Probing package file", {"path": path})
            if self._probe.exists(path):
                return path
        return None

    def _load_as_directory(self, directory: str, extensions: Sequence[str]) -> str | None:
        main = self._read_main(directory)
        if main:
            entry = os.path.normpath(os.path.join(directory, main))
            found = self._load_as_file(entry, extensions) or self._load_index(
                entry, extensions
            )
            if found:
                return found
        return self._load_index(directory, extensions)

    def _load_index(self, directory: str, extensions: Sequence[str]) -> str | None:
        for ext in extensions:
            path = os.path.join(directory, "index" + ext)
            if self._probe.exists(path):
                return path
        return None

    def _read_main(self, directory: str) -> str | None:
        manifest = os.path.join(directory, "package.json")
        if not self._probe.exists(manifest):
            return None

        try:
            with open(manifest, encoding="utf-8") as fh:
                data = json.load(fh)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            log_warn(f"Ignoring malformed package.json: {e}", {"path": manifest})
            return None

        if not isinstance(data, dict):
            return None
        for field_name in self._main_fields:
            value = data.get(field_name)
            if isinstance(value, str) and value:
                return value
        return None


def _is_path_specifier(specifier: str) -> bool:
    return (
        specifier.startswith(("./", "../", "/"))
        or specifier in (".", "..")
        or os.path.isabs(specifier)
    )


__all__ = ["NodePackageResolver", "PackageResolver"]
