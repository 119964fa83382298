"""Resolver Chain - ordered import resolution.

The ResolverChain turns a specifier into a file by walking a resolution
plan: the cross product of the configured strategy order and the search
contexts of one request, strategy-major (every context for the first
strategy, then every context for the second, and so on).

Resolution Contract:
1. Entries run strictly in plan order, one at a time
2. The first entry that finds a file wins; later entries are not tried
3. A failed entry (I/O error) is remembered and the walk continues
4. Exhausted with a failure -> failed result; otherwise not-found
5. An entry whose strategy does not apply (``can_attempt`` is False)
   counts as not-found

Usage:
    chain = ResolverChain.from_kinds([StrategyKind.LOCAL, StrategyKind.PARTIAL])
    plan = chain.plan([SearchContext("/proj/styles"), SearchContext("/proj")])
    result = chain.run("variables", plan, [".scss", ".css"])
    if result.is_found:
        print(result.path, result.entry.strategy_name)
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Any

from .logging import log_debug
from .strategies import build_strategies
from .types import (
    DEFAULT_RESOLVER_ORDER,
    ResolverEntry,
    SearchContext,
    StrategyKind,
    StrategyResult,
)

if TYPE_CHECKING:
    from .package_resolver import PackageResolver
    from .probe import FileProbe
    from .strategies.base import BaseStrategy


class ResolverChain:
    """Ordered chain of resolution strategies.

    Attributes:
        strategies: Strategies in configured order.
    """

    def __init__(self, strategies: Iterable[BaseStrategy] = ()) -> None:
        """Initialize a chain with strategies in the given order."""
        self._strategies: list[BaseStrategy] = list(strategies)
        self._lock = threading.RLock()

    @classmethod
    def from_kinds(
        cls,
        kinds: Iterable[StrategyKind],
        probe: FileProbe | None = None,
        package_resolver: PackageResolver | None = None,
    ) -> ResolverChain:
        """Create a chain for a configured resolver order."""
        return cls(build_strategies(kinds, probe, package_resolver))

    @classmethod
    def default(
        cls,
        probe: FileProbe | None = None,
        package_resolver: PackageResolver | None = None,
    ) -> ResolverChain:
        """Create a chain with local, partial, tilde and node, in that order."""
        return cls.from_kinds(DEFAULT_RESOLVER_ORDER, probe, package_resolver)

    def add_strategy(self, strategy: BaseStrategy) -> ResolverChain:
        """Append a strategy to the end of the chain.

        Returns:
            Self for method chaining.
        """
        with self._lock:
            self._strategies.append(strategy)
        return self

    @property
    def strategies(self) -> list[BaseStrategy]:
        return list(self._strategies)

    @property
    def strategy_names(self) -> list[str]:
        """Names of strategies in chain order."""
        return [s.name for s in self._strategies]

    def __len__(self) -> int:
        """Return number of strategies in chain."""
        return len(self._strategies)

    def plan(self, contexts: Sequence[SearchContext]) -> list[ResolverEntry]:
        """Build the strategy-major cross product of strategies and contexts.

        Args:
            contexts: Search contexts in priority order.

        Returns:
            Ordered resolution plan.
        """
        with self._lock:
            strategies = list(self._strategies)
        return [
            ResolverEntry(strategy=strategy, context=context)
            for strategy in strategies
            for context in contexts
        ]

    def steps(
        self,
        specifier: str,
        plan: Iterable[ResolverEntry],
        extensions: Sequence[str],
    ) -> Iterator[StrategyResult]:
        """Attempt plan entries in order, yielding each tagged result.

        Stops after the first found result.
        """
        for entry in plan:
            log_debug(
                f"Lookup {specifier} [{entry.strategy_name}, {entry.base_directory}]",
            )
            if entry.strategy.can_attempt(specifier):
                result = entry.strategy.attempt(entry.base_directory, specifier, extensions)
            else:
                result = StrategyResult.not_found()

            yield result.with_entry(entry)
            if result.is_found:
                return

    def run(
        self,
        specifier: str,
        plan: Iterable[ResolverEntry],
        extensions: Sequence[str],
    ) -> StrategyResult:
        """Run the plan until a strategy finds the file.

        Args:
            specifier: Import name as written.
            plan: Ordered resolution plan.
            extensions: Allowed extensions in priority order.

        Returns:
            The first found result; otherwise the first failed result if
            any entry failed; otherwise not-found.
        """
        failure: StrategyResult | None = None
        for result in self.steps(specifier, plan, extensions):
            if result.is_found:
                strategy_name = result.entry.strategy_name if result.entry else None
                log_debug(f"ResolverChain: Resolved '{specifier}' via '{strategy_name}'")
                return result
            if result.is_failed and failure is None:
                failure = result

        if failure is not None:
            log_debug(f"ResolverChain: Lookup of '{specifier}' failed: {failure.error}")
            return failure

        log_debug(f"ResolverChain: No strategy could resolve '{specifier}'")
        return StrategyResult.not_found()

    def chain_info(self) -> list[dict[str, Any]]:
        """Get chain info for debugging."""
        return [
            {"name": strategy.name, "position": index, "class": type(strategy).__name__}
            for index, strategy in enumerate(self._strategies)
        ]


__all__ = ["ResolverChain"]
