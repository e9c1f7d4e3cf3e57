"""Enumeration of all files beneath a path.

Directories, and links to directories, are descended into but never
emitted. The walk uses an explicit stack so tree depth is not bounded by
the recursion limit; results come out depth-first in directory-listing
order. A directory reached twice through links is walked once.
"""

import logging
from collections.abc import Iterator

from filetree.tree.backend import FileSystem, get_default_fs
from filetree.tree.models import StrPath, TreeEntry, inspect_entry, require_path
from filetree.tree.resolver import canonical_path

logger = logging.getLogger(__name__)


def iter_files(root: StrPath, fs: FileSystem | None = None) -> Iterator[TreeEntry]:
    """Iterate over every non-directory entry under ``root``.

    A missing root yields nothing; a file root yields itself. A directory
    whose listing is unavailable contributes nothing.

    Args:
        root: File or directory to walk.
        fs: Filesystem to use. Defaults to the local filesystem.

    Returns:
        Iterator of TreeEntry for each file, in depth-first listing order.

    Raises:
        TypeError: If root is None.
    """
    return _walk_files(require_path(root, "root"), fs or get_default_fs())


def _walk_files(root: str, fs: FileSystem) -> Iterator[TreeEntry]:
    visited: set[str] = set()
    stack = [root]
    while stack:
        entry = inspect_entry(stack.pop(), fs)
        if entry.is_file:
            yield entry
        elif entry.is_dir:
            if entry.children is None:
                logger.debug("No listing available for %s", entry.path)
                continue
            key = canonical_path(entry.path, fs)
            if key in visited:
                logger.debug("Skipping %s, already walked as %s", entry.path, key)
                continue
            visited.add(key)
            # Reversed so the first listed child is visited first
            stack.extend(reversed(entry.children))


def list_all_files(root: StrPath, fs: FileSystem | None = None) -> list[str]:
    """Return the paths of all files under ``root``.

    Args:
        root: File or directory to walk.
        fs: Filesystem to use. Defaults to the local filesystem.

    Returns:
        File paths as produced by the directory listing (not resolved).

    Raises:
        TypeError: If root is None.
    """
    return [entry.path for entry in iter_files(root, fs)]


def list_all_file_paths(root: StrPath, fs: FileSystem | None = None) -> list[str]:
    """Return the canonical paths of all files under ``root``.

    Each path falls back to its absolute form if it cannot be
    canonicalized.

    Raises:
        TypeError: If root is None.
    """
    fs = fs or get_default_fs()
    return [canonical_path(path, fs) for path in list_all_files(root, fs)]
