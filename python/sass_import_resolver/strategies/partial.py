"""Partial file strategy.

Sass partials live on disk with a leading underscore but are imported
without it: ``@import "foo/bar"`` loads ``foo/_bar.scss``.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..logging import log_debug
from ..paths import partial_name
from ..types import StrategyKind, StrategyResult
from .base import BaseStrategy
from .local import LocalStrategy


class PartialStrategy(BaseStrategy):
    """Resolve the underscore-prefixed partial through a LocalStrategy."""

    def __init__(self, local: LocalStrategy | None = None) -> None:
        self._local = local or LocalStrategy()

    @property
    def kind(self) -> StrategyKind:
        return StrategyKind.PARTIAL

    def attempt(
        self,
        base_directory: str,
        specifier: str,
        extensions: Sequence[str],
    ) -> StrategyResult:
        partial = partial_name(specifier)
        log_debug(f"Resolving file as partial with prepended underscore: {partial}")
        return self._local.attempt(base_directory, partial, extensions)
