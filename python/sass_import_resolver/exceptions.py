"""Custom exceptions for sass-import-resolver.

This module provides a hierarchy of exceptions for error handling
in the import resolver. A plain miss is never an exception: the
importer returns ``None`` so the host preprocessor can fall back to
its own resolution.
"""

from __future__ import annotations


class ImportResolverError(Exception):
    """Base exception for all sass-import-resolver errors.

    Example:
        >>> try:
        ...     importer.resolve("theme", "/proj/index.scss")
        ... except ImportResolverError as e:
        ...     print(f"Resolver error: {e}")
    """

    pass


class ImportResolutionError(ImportResolverError):
    """Raised when every resolver ran, none matched, and at least one failed.

    The underlying I/O failure (for example a permission error reported
    by the file probe) is chained as ``__cause__``.

    Attributes:
        specifier: The import name as written by the referrer.
        referrer: The file that issued the import.

    Example:
        >>> try:
        ...     importer.resolve("locked", "/proj/index.scss")
        ... except ImportResolutionError as e:
        ...     print(e.specifier, e.referrer, e.__cause__)
    """

    def __init__(self, specifier: str, referrer: str) -> None:
        super().__init__(f"Could not find file: {specifier} from parent {referrer}")
        self.specifier = specifier
        self.referrer = referrer


class ConfigurationError(ImportResolverError):
    """Raised when importer configuration is invalid.

    Common causes:
    - Empty extension list
    - Configuration file missing, unreadable or not valid YAML
    - Unknown configuration keys
    """

    pass


class PackageNotFoundError(ImportResolverError):
    """Raised by a package resolver when a specifier has no match.

    This is the "simple miss" signal of the package resolution capability;
    the node module strategy turns it into a not-found result and it never
    escapes the importer.

    Attributes:
        specifier: The package specifier that was looked up.
        base_directory: Directory the lookup started from.
    """

    def __init__(self, specifier: str, base_directory: str) -> None:
        super().__init__(f"Cannot find module '{specifier}' from '{base_directory}'")
        self.specifier = specifier
        self.base_directory = base_directory


__all__ = [
    "ImportResolverError",
    "ImportResolutionError",
    "ConfigurationError",
    "PackageNotFoundError",
]
