"""Specifier path helpers.

Pure string functions, no filesystem access.
"""

from __future__ import annotations

import os


def normalize_extension(ext: str) -> str:
    """Prefix an extension with a dot if it lacks one.

    Example:
        >>> normalize_extension("sass")
        '.sass'
        >>> normalize_extension(".css")
        '.css'
    """
    if not ext.startswith("."):
        return "." + ext
    return ext


def extend_path(path: str, default_extension: str) -> str:
    """Append ``default_extension`` unless ``path`` already has an extension.

    A path whose basename has any extension, or which already contains the
    default extension, is returned unchanged.

    Example:
        >>> extend_path("foo/bar", "scss")
        'foo/bar.scss'
        >>> extend_path("foo/bar.css", ".scss")
        'foo/bar.css'
    """
    ext = normalize_extension(default_extension)
    if os.path.splitext(path)[1] or ext in path:
        return path
    return path + ext


def partial_name(specifier: str) -> str:
    """Rewrite a specifier to its underscore-prefixed partial form.

    Example:
        >>> partial_name("foo/bar")
        'foo/_bar'
        >>> partial_name("variables")
        '_variables'
    """
    return os.path.join(os.path.dirname(specifier), "_" + os.path.basename(specifier))


__all__ = ["extend_path", "normalize_extension", "partial_name"]
