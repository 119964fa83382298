"""node_modules strategies.

``NodeModuleStrategy`` hands the specifier to a PackageResolver, first with
the default extension appended (so ``pkg/file`` finds ``pkg/file.scss``
before a ``pkg/file`` directory), then as written.

``TildeStrategy`` handles the webpack-style ``~pkg/file`` form by stripping
the tilde and delegating to ``NodeModuleStrategy``.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..exceptions import PackageNotFoundError
from ..logging import log_debug
from ..package_resolver import NodePackageResolver, PackageResolver
from ..paths import extend_path
from ..types import StrategyKind, StrategyResult
from .base import BaseStrategy


class NodeModuleStrategy(BaseStrategy):
    """Resolve a specifier as a package in node_modules."""

    def __init__(self, package_resolver: PackageResolver | None = None) -> None:
        self._package_resolver = package_resolver or NodePackageResolver()

    @property
    def kind(self) -> StrategyKind:
        return StrategyKind.NODE

    def attempt(
        self,
        base_directory: str,
        specifier: str,
        extensions: Sequence[str],
    ) -> StrategyResult:
        log_debug(f"Resolving file from node_modules: {specifier}")

        lookups = [specifier]
        if extensions:
            extended = extend_path(specifier, extensions[0])
            if extended != specifier:
                lookups.insert(0, extended)

        error: OSError | None = None
        for lookup in lookups:
            try:
                path = self._package_resolver.resolve(lookup, base_directory, extensions)
            except PackageNotFoundError:
                continue
            except OSError as e:
                log_debug(f"Package lookup failed: {e}", {"specifier": lookup})
                error = error or e
                continue
            return StrategyResult.found(path)

        if error is not None:
            return StrategyResult.failed(error)
        return StrategyResult.not_found()


class TildeStrategy(BaseStrategy):
    """Resolve ``~``-prefixed specifiers through node_modules."""

    PREFIX = "~"

    def __init__(self, node: NodeModuleStrategy | None = None) -> None:
        self._node = node or NodeModuleStrategy()

    @property
    def kind(self) -> StrategyKind:
        return StrategyKind.TILDE

    def can_attempt(self, specifier: str) -> bool:
        return specifier.startswith(self.PREFIX)

    def attempt(
        self,
        base_directory: str,
        specifier: str,
        extensions: Sequence[str],
    ) -> StrategyResult:
        if not self.can_attempt(specifier):
            return StrategyResult.not_found()

        log_debug(f"Resolving file with ~ to node_modules: {specifier}")
        return self._node.attempt(base_directory, specifier[len(self.PREFIX) :], extensions)
