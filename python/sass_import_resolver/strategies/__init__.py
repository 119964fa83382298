"""Built-in resolution strategies.

- LocalStrategy (``local``): ``base/specifier`` + extension
- PartialStrategy (``partial``): ``base/dir/_name`` + extension
- TildeStrategy (``tilde``): ``~pkg/file`` through node_modules
- NodeModuleStrategy (``node``): package lookup in node_modules

``build_strategies`` turns a configured resolver order into strategy
instances sharing one file probe and one package resolver.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..package_resolver import NodePackageResolver, PackageResolver
from ..probe import FileProbe, OsFileProbe
from ..types import StrategyKind
from .base import BaseStrategy
from .local import LocalStrategy
from .node_module import NodeModuleStrategy, TildeStrategy
from .partial import PartialStrategy


def build_strategy(
    kind: StrategyKind,
    probe: FileProbe | None = None,
    package_resolver: PackageResolver | None = None,
) -> BaseStrategy:
    """Create the strategy for one StrategyKind.

    Args:
        kind: Strategy variant.
        probe: File probe for the local strategies.
        package_resolver: Package resolver for the node_modules strategies.

    Returns:
        The strategy instance.
    """
    probe = probe or OsFileProbe()
    if kind is StrategyKind.LOCAL:
        return LocalStrategy(probe)
    if kind is StrategyKind.PARTIAL:
        return PartialStrategy(LocalStrategy(probe))
    if kind is StrategyKind.TILDE:
        return TildeStrategy(NodeModuleStrategy(package_resolver or NodePackageResolver(probe)))
    if kind is StrategyKind.NODE:
        return NodeModuleStrategy(package_resolver or NodePackageResolver(probe))
    raise ValueError(f"Unknown strategy kind: {kind!r}")


def build_strategies(
    kinds: Iterable[StrategyKind],
    probe: FileProbe | None = None,
    package_resolver: PackageResolver | None = None,
) -> list[BaseStrategy]:
    """Create strategies for a resolver order, preserving order."""
    probe = probe or OsFileProbe()
    package_resolver = package_resolver or NodePackageResolver(probe)
    return [build_strategy(kind, probe, package_resolver) for kind in kinds]


__all__ = [
    "BaseStrategy",
    "LocalStrategy",
    "NodeModuleStrategy",
    "PartialStrategy",
    "TildeStrategy",
    "build_strategies",
    "build_strategy",
]
