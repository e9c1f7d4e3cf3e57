"""Filesystem access layer.

All tree operations go through the ``FileSystem`` protocol so traversal and
deletion can run against the real disk or an in-memory fake. The local
implementation is a thin wrapper over ``os`` and ``pathlib``.
"""

import os
from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    """Minimal filesystem interface used by the tree operations.

    Paths are plain strings. Every call observes the filesystem at call
    time; nothing is cached.
    """

    def exists(self, path: str) -> bool:
        """Return True if anything exists at ``path``."""
        ...

    def is_dir(self, path: str) -> bool:
        """Return True if ``path`` is a directory. Links to directories count."""
        ...

    def is_link(self, path: str) -> bool:
        """Return True if ``path`` is a symbolic link."""
        ...

    def size(self, path: str) -> int:
        """Return the byte length of the file at ``path``."""
        ...

    def list_dir(self, path: str) -> list[str] | None:
        """Return child paths of a directory, or None if no listing is available."""
        ...

    def remove_file(self, path: str) -> None:
        """Delete a single file. Raises OSError on failure."""
        ...

    def remove_dir(self, path: str) -> None:
        """Delete an empty directory. Raises OSError on failure."""
        ...

    def resolve(self, path: str) -> str:
        """Return the canonical path. Raises OSError if it cannot be computed."""
        ...

    def absolute(self, path: str) -> str:
        """Return the absolute (non-canonical) path."""
        ...


class LocalFileSystem:
    """FileSystem implementation backed by the host operating system."""

    def exists(self, path: str) -> bool:
        return os.path.lexists(path)

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def is_link(self, path: str) -> bool:
        return os.path.islink(path)

    def size(self, path: str) -> int:
        try:
            return os.path.getsize(path)
        except OSError:
            # Vanished or unreadable entries report zero
            return 0

    def list_dir(self, path: str) -> list[str] | None:
        """List a directory, releasing the handle before returning.

        Args:
            path: Directory to list.

        Returns:
            Child paths in platform listing order, or None if the
            directory cannot be listed.
        """
        try:
            with os.scandir(path) as it:
                return [entry.path for entry in it]
        except OSError:
            return None

    def remove_file(self, path: str) -> None:
        os.unlink(path)

    def remove_dir(self, path: str) -> None:
        os.rmdir(path)

    def resolve(self, path: str) -> str:
        return str(Path(path).resolve(strict=False))

    def absolute(self, path: str) -> str:
        return os.path.abspath(path)


_default_fs: FileSystem = LocalFileSystem()


def get_default_fs() -> FileSystem:
    """Return the process-wide LocalFileSystem instance."""
    return _default_fs
