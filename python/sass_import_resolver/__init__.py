"""
sass-import-resolver

Resolve Sass ``@import`` specifiers to files on disk: relative files,
underscore-prefixed partials, ``~package`` references and node_modules
packages, with a per-importer cache and a circular import guard.

Example:
    >>> from sass_import_resolver import Importer
    >>> importer = Importer(paths=["/proj/styles"])
    >>> importer.resolve("variables", "/proj/styles/main.scss")
    ImportResult(file='/proj/styles/_variables.scss', circular=False)

    >>> # Bind to a Sass calling context carrying includePaths
    >>> resolve = importer.bind(context)
    >>> resolve("bootstrap", "/proj/styles/main.scss", done)

    >>> # Structured logging
    >>> from sass_import_resolver import configure_logging
    >>> configure_logging("debug")
"""

from __future__ import annotations

from sass_import_resolver.cache import ResolutionCache
from sass_import_resolver.config import CONFIG_ENV_VAR, ImporterConfig, load_config
from sass_import_resolver.dependencies import DependencyGraph
from sass_import_resolver.events import EventNames, ImportEvents
from sass_import_resolver.exceptions import (
    ConfigurationError,
    ImportResolutionError,
    ImportResolverError,
    PackageNotFoundError,
)
from sass_import_resolver.importer import (
    CIRCULAR_STANDIN,
    Importer,
    create_importer,
    default_importer,
)
from sass_import_resolver.logging import (
    configure_logging,
    log_debug,
    log_error,
    log_info,
    log_trace,
    log_warn,
)
from sass_import_resolver.package_resolver import NodePackageResolver, PackageResolver
from sass_import_resolver.paths import extend_path, normalize_extension, partial_name
from sass_import_resolver.probe import FileProbe, OsFileProbe
from sass_import_resolver.resolver_chain import ResolverChain
from sass_import_resolver.strategies import (
    BaseStrategy,
    LocalStrategy,
    NodeModuleStrategy,
    PartialStrategy,
    TildeStrategy,
    build_strategies,
    build_strategy,
)
from sass_import_resolver.types import (
    DEFAULT_EXTENSIONS,
    DEFAULT_RESOLVER_ORDER,
    ImportEvent,
    ImportRequest,
    ImportResult,
    LogContext,
    ResolvedFile,
    ResolverEntry,
    SearchContext,
    StrategyKind,
    StrategyOutcome,
    StrategyResult,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Importer
    "CIRCULAR_STANDIN",
    "Importer",
    "create_importer",
    "default_importer",
    # Configuration
    "CONFIG_ENV_VAR",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_RESOLVER_ORDER",
    "ImporterConfig",
    "load_config",
    # Resolution
    "ResolverChain",
    "BaseStrategy",
    "LocalStrategy",
    "PartialStrategy",
    "TildeStrategy",
    "NodeModuleStrategy",
    "build_strategies",
    "build_strategy",
    "DependencyGraph",
    "ResolutionCache",
    # Capabilities
    "FileProbe",
    "OsFileProbe",
    "PackageResolver",
    "NodePackageResolver",
    # Path helpers
    "extend_path",
    "normalize_extension",
    "partial_name",
    # Types
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
    # Events
    "EventNames",
    "ImportEvents",
    # Exceptions
    "ImportResolverError",
    "ImportResolutionError",
    "ConfigurationError",
    "PackageNotFoundError",
    # Logging
    "configure_logging",
    "log_error",
    "log_warn",
    "log_info",
    "log_debug",
    "log_trace",
]
