"""Abstract base class for import resolution strategies.

This module defines the contract that all strategies must implement.
Strategies are run by the ResolverChain, once per search context, in the
configured order until one finds the file.

Resolution Contract:
1. kind / name - Identifier used in configuration and logging
2. can_attempt() - Structural check; False means "not applicable" and
   counts as not-found without touching the filesystem
3. attempt() - Probe for the file; never raises for a simple miss,
   I/O failures are returned as a failed result

Example Implementation:
    class VendorStrategy(BaseStrategy):
        kind = StrategyKind.LOCAL

        def attempt(self, base_directory, specifier, extensions):
            return self.local.attempt(os.path.join(base_directory, "vendor"),
                                      specifier, extensions)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..types import StrategyKind, StrategyResult


class BaseStrategy(ABC):
    """Abstract base class for resolution strategies."""

    @property
    @abstractmethod
    def kind(self) -> StrategyKind:
        """Strategy variant this implementation provides."""
        ...

    @property
    def name(self) -> str:
        """Configuration name of this strategy (for logging/debugging)."""
        return self.kind.value

    def can_attempt(self, specifier: str) -> bool:
        """Quick structural check (called before attempt).

        Args:
            specifier: Import name as written.

        Returns:
            True if this strategy applies to the specifier at all.
        """
        return True

    @abstractmethod
    def attempt(
        self,
        base_directory: str,
        specifier: str,
        extensions: Sequence[str],
    ) -> StrategyResult:
        """Try to resolve ``specifier`` against ``base_directory``.

        Args:
            base_directory: Search directory.
            specifier: Import name as written.
            extensions: Allowed extensions in priority order.

        Returns:
            Found, not-found or failed result.
        """
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"
