"""File existence probe.

The probe is the only place the local strategies touch the filesystem.
Implementations return False for a simple absence and raise ``OSError``
for anything else, so the resolver chain can tell a miss from a failure.
"""

from __future__ import annotations

import os
import stat
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileProbe(Protocol):
    """Capability answering whether a regular file exists at a path."""

    def exists(self, path: str) -> bool:
        """Return True if ``path`` is an existing regular file.

        Raises:
            OSError: For failures other than the file being absent.
        """
        ...


class OsFileProbe:
    """FileProbe backed by ``os.stat``.

    Missing files and missing parent directories count as absent. Other
    errors (permission denied, too many symlink levels) propagate.

    Example:
        >>> OsFileProbe().exists("/definitely/not/here.scss")
        False
    """

    def exists(self, path: str) -> bool:
        try:
            st = os.stat(path)
        except (FileNotFoundError, NotADirectoryError):
            return False
        return stat.S_ISREG(st.st_mode)


__all__ = ["FileProbe", "OsFileProbe"]
