"""Importer - the entry point the stylesheet preprocessor calls.

An Importer owns its configuration, resolver chain, resolution cache,
dependency graph and event emitter. Each call resolves one ``@import``:

1. Cache hit on the raw specifier -> reuse it (still checked for
   circularity against the referrer)
2. Search contexts: per-call include paths, the referrer's directory,
   then the configured paths
3. Plan: configured strategy order x contexts, strategy-major
4. Run the chain
5. Found -> stand-in file if circular, otherwise record the edge, cache
   and deliver
6. Failed -> ImportResolutionError; not found -> None so the host can
   fall back to its own resolution

Whole resolutions are serialized with a re-entrant lock, so the cache and
graph stay consistent when the host calls from several threads.

Example:
    >>> importer = Importer(paths=["/proj"], resolvers=["local", "partial"])
    >>> importer.resolve("second", "/proj/index.scss")
    ImportResult(file='/proj/second.scss', circular=False)

    >>> # Sass callback protocol
    >>> importer("second", "/proj/index.scss", print)
    {'file': '/proj/second.scss'}
"""

from __future__ import annotations

import os
import threading
from collections.abc import Callable, Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any, NoReturn

from .cache import ResolutionCache
from .config import ImporterConfig
from .dependencies import DependencyGraph
from .events import EventNames, ImportEvents
from .exceptions import ImportResolutionError
from .logging import log_debug, log_error, log_info
from .package_resolver import PackageResolver
from .probe import FileProbe, OsFileProbe
from .resolver_chain import ResolverChain
from .types import (
    ImportEvent,
    ImportRequest,
    ImportResult,
    LogContext,
    ResolvedFile,
    ResolverEntry,
    SearchContext,
    StrategyResult,
)

# Empty stylesheet substituted for circular imports.
CIRCULAR_STANDIN = str(Path(__file__).resolve().with_name("circular.scss"))

ImporterCallback = Callable[[Any], Any]
BoundImporter = Callable[[str, str, ImporterCallback], None]


class Importer:
    """Resolve stylesheet imports to files on disk.

    Args:
        config: Validated configuration. Mutually exclusive with ``options``.
        file_probe: Existence probe for local strategies.
        package_resolver: node_modules resolver for node strategies.
        **options: ``paths``, ``extensions`` and ``resolvers`` when no
            ``config`` is given.

    Raises:
        ConfigurationError: If the options are invalid.
    """

    def __init__(
        self,
        config: ImporterConfig | None = None,
        *,
        file_probe: FileProbe | None = None,
        package_resolver: PackageResolver | None = None,
        **options: Any,
    ) -> None:
        if config is not None and options:
            raise TypeError("Pass either an ImporterConfig or keyword options, not both")

        self._config = config or ImporterConfig.from_options(options)
        self._probe = file_probe or OsFileProbe()
        self._chain = ResolverChain.from_kinds(
            self._config.resolvers, self._probe, package_resolver
        )
        self._cache = ResolutionCache()
        self._dependencies = DependencyGraph()
        self._events = ImportEvents()
        self._lock = threading.RLock()

    @property
    def config(self) -> ImporterConfig:
        return self._config

    @property
    def chain(self) -> ResolverChain:
        return self._chain

    @property
    def cache(self) -> ResolutionCache:
        return self._cache

    @property
    def dependencies(self) -> DependencyGraph:
        return self._dependencies

    @property
    def events(self) -> ImportEvents:
        return self._events

    def reset(self) -> None:
        """Forget every cached resolution and recorded dependency."""
        with self._lock:
            self._cache.clear()
            self._dependencies.clear()

    def search_contexts(self, request: ImportRequest) -> list[SearchContext]:
        """Search contexts for a request, in priority order."""
        directories = [
            *request.include_paths,
            os.path.dirname(request.referrer),
            *self._config.paths,
        ]
        return [SearchContext(base_directory=directory) for directory in directories]

    def plan(
        self,
        specifier: str,
        referrer: str,
        include_paths: Iterable[str] | None = None,
    ) -> list[ResolverEntry]:
        """Build the resolution plan for one import."""
        request = _request(specifier, referrer, include_paths)
        return self._chain.plan(self.search_contexts(request))

    def resolve(
        self,
        specifier: str,
        referrer: str,
        include_paths: Iterable[str] | None = None,
    ) -> ImportResult | None:
        """Resolve one import.

        Args:
            specifier: Import name as written.
            referrer: File that issued the import.
            include_paths: Extra search directories from the calling context.

        Returns:
            The file to load, or None if no strategy matched.

        Raises:
            ImportResolutionError: If nothing matched and a strategy failed.
        """
        request = _request(specifier, referrer, include_paths)

        with self._lock:
            cached = self._cache.get(specifier)
            if cached is not None:
                return self._deliver_cached(request, cached)

            log_debug(f"Resolving: {specifier}", LogContext(specifier=specifier, referrer=referrer))
            plan = self._chain.plan(self.search_contexts(request))
            result = self._chain.run(specifier, plan, self._config.extensions)

            if result.is_found:
                return self._deliver_found(request, result)
            if result.is_failed:
                self._fail(request, result)

            log_debug(f"No resolver matched {specifier}, deferring to host")
            self._events.publish(
                EventNames.IMPORT_NOT_FOUND,
                ImportEvent(specifier=specifier, referrer=referrer),
            )
            return None

    def explain(
        self,
        specifier: str,
        referrer: str,
        include_paths: Iterable[str] | None = None,
    ) -> list[dict[str, Any]]:
        """Run the plan for diagnostics without touching cache or graph.

        Returns:
            One dict per attempted entry with strategy, base directory,
            outcome, path and error.
        """
        request = _request(specifier, referrer, include_paths)
        plan = self._chain.plan(self.search_contexts(request))
        return [
            {
                "strategy": step.entry.strategy_name if step.entry else None,
                "base_directory": step.entry.base_directory if step.entry else None,
                "outcome": step.outcome.value,
                "path": step.path,
                "error": str(step.error) if step.error else None,
            }
            for step in self._chain.steps(specifier, plan, self._config.extensions)
        ]

    def __call__(
        self,
        url: str,
        prev: str,
        done: ImporterCallback,
        include_paths: Iterable[str] | None = None,
    ) -> None:
        """Sass importer callback protocol.

        Calls ``done`` with ``{"file": path}`` or with None when the import
        is left to the host. Fatal failures propagate as exceptions.
        """
        result = self.resolve(url, prev, include_paths)
        done(result.to_importer_value() if result is not None else None)

    def bind(self, context: Any) -> BoundImporter:
        """Bind the Sass callback to a calling context.

        ``context.options["includePaths"]`` (or ``include_paths``) is read at
        call time and supplies per-call include paths. Both a list and an
        ``os.pathsep``-separated string are accepted. ``context`` may be an
        object with an ``options`` attribute or a mapping with an
        ``"options"`` key.
        """

        def resolve(url: str, prev: str, done: ImporterCallback) -> None:
            self(url, prev, done, include_paths=_context_include_paths(context))

        return resolve

    def _deliver_cached(self, request: ImportRequest, cached: ResolvedFile) -> ImportResult:
        if self._dependencies.is_circular(request.referrer, cached.path):
            return self._deliver_standin(request, cached.path)

        log_debug(f"Resolving from cache: {request.specifier}", {"path": cached.path})
        self._events.publish(
            EventNames.IMPORT_CACHED,
            ImportEvent(specifier=request.specifier, referrer=request.referrer, file=cached.path),
        )
        return ImportResult(file=cached.path)

    def _deliver_found(self, request: ImportRequest, result: StrategyResult) -> ImportResult:
        path = result.path or ""
        if self._dependencies.is_circular(request.referrer, path):
            return self._deliver_standin(request, path)

        self._dependencies.add(request.referrer, path)
        self._cache.set(request.specifier, ResolvedFile(path=path))
        self._events.publish(
            EventNames.IMPORT_RESOLVED,
            ImportEvent(
                specifier=request.specifier,
                referrer=request.referrer,
                file=path,
                strategy=result.entry.strategy_name if result.entry else None,
                base_directory=result.entry.base_directory if result.entry else None,
            ),
        )
        return ImportResult(file=path)

    def _deliver_standin(self, request: ImportRequest, path: str) -> ImportResult:
        log_info(
            "Found circular dependency, mocking empty file",
            LogContext(specifier=request.specifier, referrer=request.referrer, path=path),
        )
        self._events.publish(
            EventNames.IMPORT_CIRCULAR,
            ImportEvent(specifier=request.specifier, referrer=request.referrer, file=path),
        )
        return ImportResult(file=CIRCULAR_STANDIN, circular=True)

    def _fail(self, request: ImportRequest, result: StrategyResult) -> NoReturn:
        error = ImportResolutionError(request.specifier, request.referrer)
        log_error(
            str(error),
            {"error_type": type(result.error).__name__, "error_message": str(result.error)},
        )
        self._events.publish(
            EventNames.IMPORT_FAILED,
            ImportEvent(
                specifier=request.specifier,
                referrer=request.referrer,
                error=str(result.error),
            ),
        )
        raise error from result.error


def create_importer(**options: Any) -> Importer:
    """Create an Importer from keyword options.

    Example:
        >>> imports = create_importer(extensions=["sass"])
        >>> imports.config.extensions
        ['.sass']
    """
    return Importer(**options)


_default_importer: Importer | None = None
_default_lock = threading.Lock()


def default_importer() -> Importer:
    """Return the shared default-configured Importer, creating it on first use."""
    global _default_importer
    with _default_lock:
        if _default_importer is None:
            _default_importer = Importer()
        return _default_importer


def _request(
    specifier: str,
    referrer: str,
    include_paths: Iterable[str] | None,
) -> ImportRequest:
    return ImportRequest(
        specifier=specifier,
        referrer=referrer,
        include_paths=tuple(os.fspath(p) for p in include_paths or ()),
    )


def _context_include_paths(context: Any) -> Sequence[str]:
    if isinstance(context, Mapping):
        options = context.get("options")
    else:
        options = getattr(context, "options", None)
    if not isinstance(options, Mapping):
        return ()

    value = options.get("includePaths") or options.get("include_paths")
    if not value:
        return ()
    if isinstance(value, str):
        return [p for p in value.split(os.pathsep) if p]
    return [os.fspath(p) for p in value]


__all__ = ["CIRCULAR_STANDIN", "Importer", "create_importer", "default_importer"]
