"""Local file strategy.

Probes ``base_directory/specifier`` once per configured extension, in
order. The first existing file wins, so earlier extensions take priority
when several candidates exist.

Example:
    >>> strategy = LocalStrategy()
    >>> strategy.attempt("/proj", "second", [".scss", ".css"])
    StrategyResult(outcome=<StrategyOutcome.FOUND: 'found'>, path='/proj/second.scss', ...)
"""

from __future__ import annotations

import os
from collections.abc import Sequence

from ..logging import log_debug, log_trace
from ..paths import extend_path
from ..probe import FileProbe, OsFileProbe
from ..types import StrategyKind, StrategyResult
from .base import BaseStrategy


class LocalStrategy(BaseStrategy):
    """Resolve a specifier relative to a search directory."""

    def __init__(self, probe: FileProbe | None = None) -> None:
        self._probe = probe or OsFileProbe()

    @property
    def kind(self) -> StrategyKind:
        return StrategyKind.LOCAL

    @property
    def probe(self) -> FileProbe:
        return self._probe

    def candidates(
        self,
        base_directory: str,
        specifier: str,
        extensions: Sequence[str],
    ) -> list[str]:
        """Candidate paths in probe order, without duplicates.

        A specifier that already has an extension yields a single,
        unmodified candidate. Only the specifier is extended, so a base
        directory such as ``normalize.css/`` never suppresses the extension.
        """
        paths = []
        for ext in extensions:
            joined = os.path.join(base_directory, extend_path(specifier, ext))
            paths.append(os.path.normpath(os.path.abspath(joined)))
        return list(dict.fromkeys(paths))

    def attempt(
        self,
        base_directory: str,
        specifier: str,
        extensions: Sequence[str],
    ) -> StrategyResult:
        log_debug(f"Resolving file locally: {specifier}", {"base_directory": base_directory})

        error: OSError | None = None
        for path in self.candidates(base_directory, specifier, extensions):
            log_trace("Probing file", {"path": path})
            try:
                if self._probe.exists(path):
                    return StrategyResult.found(path)
            except OSError as e:
                log_debug(f"Probe failed: {e}", {"path": path})
                error = error or e

        if error is not None:
            return StrategyResult.failed(error)
        return StrategyResult.not_found()
