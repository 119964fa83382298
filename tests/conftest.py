"""pytest configuration and fixtures for sass_import_resolver tests.

This module provides a stylesheet project laid out in a temporary
directory, plus probe and package resolver doubles that record calls.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from sass_import_resolver import OsFileProbe, PackageNotFoundError


class CountingProbe:
    """FileProbe that records every probed path."""

    def __init__(self) -> None:
        self._inner = OsFileProbe()
        self.calls: list[str] = []

    def exists(self, path: str) -> bool:
        self.calls.append(path)
        return self._inner.exists(path)


class FailingProbe:
    """FileProbe raising PermissionError for paths matching a predicate."""

    def __init__(self, should_fail: Callable[[str], bool]) -> None:
        self._inner = OsFileProbe()
        self._should_fail = should_fail
        self.calls: list[str] = []

    def exists(self, path: str) -> bool:
        self.calls.append(path)
        if self._should_fail(path):
            raise PermissionError(13, "Permission denied", path)
        return self._inner.exists(path)


class RecordingPackageResolver:
    """PackageResolver answering from a fixed mapping."""

    def __init__(
        self,
        answers: dict[str, str] | None = None,
        errors: dict[str, OSError] | None = None,
    ) -> None:
        self.answers = answers or {}
        self.errors = errors or {}
        self.calls: list[tuple[str, str, tuple[str, ...]]] = []

    def resolve(self, specifier: str, base_directory: str, extensions: Sequence[str]) -> str:
        self.calls.append((specifier, base_directory, tuple(extensions)))
        if specifier in self.errors:
            raise self.errors[specifier]
        if specifier in self.answers:
            return self.answers[specifier]
        raise PackageNotFoundError(specifier, base_directory)


def _write(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Provide a stylesheet project.

    Layout::

        proj/
          index.scss
          second.scss
          _second.scss
          _partial.scss
          ext.sass
          both.scss
          both.css
          a.scss  b.scss  c.scss
          nested/dir/_bar.scss
          nested/dir/entry.scss
          sub/second.scss
          node_modules/test/package.json   (main: custom.scss)
          node_modules/test/custom.scss
          node_modules/test/file.scss
          node_modules/indexed/index.scss
        other/
          shared.scss
        proj/shared.scss
    """
    root = tmp_path / "proj"
    _write(root / "index.scss", '@import "second";\n')
    _write(root / "second.scss", ".second { color: red; }\n")
    _write(root / "_second.scss", ".second-partial { color: blue; }\n")
    _write(root / "_partial.scss", ".partial {}\n")
    _write(root / "ext.sass", ".ext\n  color: red\n")
    _write(root / "both.scss")
    _write(root / "both.css")
    _write(root / "a.scss", '@import "b";\n')
    _write(root / "b.scss", '@import "a";\n')
    _write(root / "c.scss")
    _write(root / "shared.scss")
    _write(root / "nested" / "dir" / "_bar.scss")
    _write(root / "nested" / "dir" / "entry.scss")
    _write(root / "sub" / "second.scss")

    package = root / "node_modules" / "test"
    _write(package / "package.json", json.dumps({"name": "test", "main": "custom.scss"}))
    _write(package / "custom.scss", ".custom {}\n")
    _write(package / "file.scss", ".file {}\n")
    _write(root / "node_modules" / "indexed" / "index.scss")

    _write(tmp_path / "other" / "shared.scss")
    return root


@pytest.fixture
def other_dir(project: Path) -> Path:
    """Directory outside the project holding its own shared.scss."""
    return project.parent / "other"


@pytest.fixture
def counting_probe() -> CountingProbe:
    return CountingProbe()
