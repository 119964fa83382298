"""Data types for sass-import-resolver.

Transient resolution values (requests, search contexts, plan entries and
strategy results) are plain dataclasses. Values that cross the boundary to
the host preprocessor or to event subscribers are Pydantic v2 models.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from .strategies.base import BaseStrategy


class StrategyKind(str, Enum):
    """The closed set of resolution strategies.

    Values are the names accepted in the ``resolvers`` configuration.
    """

    LOCAL = "local"
    """Probe ``base_directory/specifier`` with each configured extension."""

    PARTIAL = "partial"
    """Probe the underscore-prefixed partial file (``foo/_bar.scss``)."""

    TILDE = "tilde"
    """Resolve ``~package/file`` through node_modules."""

    NODE = "node"
    """Resolve the specifier as a node_modules package."""


DEFAULT_RESOLVER_ORDER: tuple[StrategyKind, ...] = (
    StrategyKind.LOCAL,
    StrategyKind.PARTIAL,
    StrategyKind.TILDE,
    StrategyKind.NODE,
)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".scss", ".css")


class StrategyOutcome(str, Enum):
    """Outcome of one strategy attempt."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class SearchContext:
    """One candidate directory a specifier is probed against."""

    base_directory: str


@dataclass(frozen=True)
class ResolverEntry:
    """One step of a resolution plan: a strategy paired with a context."""

    strategy: BaseStrategy
    context: SearchContext

    @property
    def base_directory(self) -> str:
        return self.context.base_directory

    @property
    def strategy_name(self) -> str:
        return self.strategy.name


@dataclass(frozen=True)
class StrategyResult:
    """Tagged result of a strategy attempt or a full chain run.

    Exactly one of the following holds:
    - FOUND: ``path`` is the absolute path of the resolved file.
    - NOT_FOUND: nothing matched and nothing failed.
    - FAILED: an I/O error occurred; ``error`` holds the cause.

    When produced by the chain, ``entry`` names the plan step that
    produced the result.

    Example:
        >>> StrategyResult.found("/proj/second.scss").is_found
        True
        >>> StrategyResult.not_found().path is None
        True
    """

    outcome: StrategyOutcome
    path: str | None = None
    error: BaseException | None = None
    entry: ResolverEntry | None = None

    @classmethod
    def found(cls, path: str) -> StrategyResult:
        return cls(outcome=StrategyOutcome.FOUND, path=path)

    @classmethod
    def not_found(cls) -> StrategyResult:
        return cls(outcome=StrategyOutcome.NOT_FOUND)

    @classmethod
    def failed(cls, error: BaseException) -> StrategyResult:
        return cls(outcome=StrategyOutcome.FAILED, error=error)

    @property
    def is_found(self) -> bool:
        return self.outcome is StrategyOutcome.FOUND

    @property
    def is_failed(self) -> bool:
        return self.outcome is StrategyOutcome.FAILED

    def with_entry(self, entry: ResolverEntry) -> StrategyResult:
        """Return a copy tagged with the plan entry that produced it."""
        return replace(self, entry=entry)


@dataclass(frozen=True)
class ResolvedFile:
    """A specifier resolved to a real file on disk."""

    path: str


@dataclass(frozen=True)
class ImportRequest:
    """A single import issued by the host preprocessor.

    Attributes:
        specifier: The import name exactly as written (pre extension inference).
        referrer: Path of the file that issued the import.
        include_paths: Extra search directories supplied by the calling context.
    """

    specifier: str
    referrer: str
    include_paths: tuple[str, ...] = field(default_factory=tuple)


class ImportResult(BaseModel):
    """Result delivered to the host preprocessor.

    ``file`` is the absolute path the preprocessor should load. When a
    circular import was neutralized, ``file`` points at the empty stand-in
    stylesheet and ``circular`` is True.

    Example:
        >>> result = ImportResult(file="/proj/second.scss")
        >>> result.to_importer_value()
        {'file': '/proj/second.scss'}
    """

    file: str = Field(description="Absolute path of the file to import.")
    circular: bool = Field(
        default=False,
        description="Whether the file is the circular-import stand-in.",
    )

    model_config = {"frozen": True}

    def to_importer_value(self) -> dict[str, str]:
        """Return the value handed to a Sass importer callback."""
        return {"file": self.file}


class ImportEvent(BaseModel):
    """Payload published to import event subscribers."""

    specifier: str = Field(description="Import name as written by the referrer.")
    referrer: str = Field(description="File that issued the import.")
    file: str | None = Field(
        default=None,
        description="Resolved file; for circular imports, the file that closed the cycle.",
    )
    strategy: str | None = Field(
        default=None,
        description="Strategy that produced the resolution.",
    )
    base_directory: str | None = Field(
        default=None,
        description="Search directory the resolution was found in.",
    )
    error: str | None = Field(
        default=None,
        description="Error message for failed resolutions.",
    )


class LogContext(BaseModel):
    """Context fields for structured logging.

    Example:
        >>> context = LogContext(specifier="variables", strategy="partial")
        >>> log_debug("Lookup", context)
    """

    specifier: str | None = Field(
        default=None,
        description="Import name being resolved.",
    )
    referrer: str | None = Field(
        default=None,
        description="File that issued the import.",
    )
    strategy: str | None = Field(
        default=None,
        description="Strategy name.",
    )
    base_directory: str | None = Field(
        default=None,
        description="Search directory.",
    )
    path: str | None = Field(
        default=None,
        description="File path involved in the message.",
    )


__all__ = [
    "DEFAULT_EXTENSIONS",
    "DEFAULT_RESOLVER_ORDER",
    "ImportEvent",
    "ImportRequest",
    "ImportResult",
    "LogContext",
    "ResolvedFile",
    "ResolverEntry",
    "SearchContext",
    "StrategyKind",
    "StrategyOutcome",
    "StrategyResult",
]
