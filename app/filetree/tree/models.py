"""File tree domain models.

Defines the tagged entry variant produced while walking a tree, the
deletion policies, and the detailed deletion report.
"""

import os
from dataclasses import dataclass, field
from enum import Enum

from filetree.tree.backend import FileSystem

StrPath = str | os.PathLike[str]


class EntryKind(str, Enum):
    """Kind of a filesystem entry observed at call time.

    Attributes:
        FILE: Anything that is not a directory (regular file, dangling link, ...).
        DIRECTORY: A directory, or a link to one when links are followed.
        MISSING: Nothing exists at the path.
    """

    FILE = "file"
    DIRECTORY = "directory"
    MISSING = "missing"


class DeletionPolicy(str, Enum):
    """Deletion policy applied by the TreeOperator.

    Attributes:
        ALL_FILES: Delete every file in the tree; directories are kept.
        ALL_EMPTY_FILES: Delete every zero-byte file in the tree.
        FILES: Delete the direct child files only.
        EMPTY_FILES: Delete the direct zero-byte child files only.
        DIRECTORY: Delete the whole tree including the root directory.
    """

    ALL_FILES = "all_files"
    ALL_EMPTY_FILES = "all_empty_files"
    FILES = "files"
    EMPTY_FILES = "empty_files"
    DIRECTORY = "directory"

    @property
    def recursive(self) -> bool:
        """True if the policy descends into subdirectories."""
        return self in (
            DeletionPolicy.ALL_FILES,
            DeletionPolicy.ALL_EMPTY_FILES,
            DeletionPolicy.DIRECTORY,
        )

    @property
    def empty_only(self) -> bool:
        """True if the policy only deletes zero-byte files."""
        return self in (DeletionPolicy.ALL_EMPTY_FILES, DeletionPolicy.EMPTY_FILES)


@dataclass(frozen=True, slots=True)
class TreeEntry:
    """A single path resolved to its kind once.

    Attributes:
        path: Path as given by the caller or by the directory listing.
        kind: File, directory or missing.
        size: Byte length for files, None otherwise.
        children: Child paths for directories; None when the listing
            failed or the entry is not a directory.
    """

    path: str
    kind: EntryKind
    size: int | None = None
    children: tuple[str, ...] | None = None

    @property
    def is_file(self) -> bool:
        return self.kind == EntryKind.FILE

    @property
    def is_dir(self) -> bool:
        return self.kind == EntryKind.DIRECTORY


@dataclass(frozen=True, slots=True)
class DeletionFailure:
    """A single entry that could not be deleted.

    Attributes:
        path: Path whose removal failed.
        error: Error message reported by the filesystem.
    """

    path: str
    error: str


@dataclass(frozen=True, slots=True)
class DeletionReport:
    """Detailed outcome of one deletion call.

    ``success`` is the logical AND over every attempted removal; the
    ``failed`` tuple names the entries that made it false.

    Attributes:
        root: Root path the policy was applied to.
        policy: Policy that was applied.
        deleted: Paths removed (or that would be removed in dry-run).
        failed: Removals that raised an error.
        dry_run: Whether the filesystem was left untouched.
    """

    root: str
    policy: DeletionPolicy
    deleted: tuple[str, ...] = field(default_factory=tuple)
    failed: tuple[DeletionFailure, ...] = field(default_factory=tuple)
    dry_run: bool = False

    @property
    def success(self) -> bool:
        """Aggregated result: True unless any removal failed."""
        return not self.failed

    def __bool__(self) -> bool:
        return self.success


def require_path(path: StrPath | None, name: str = "path") -> str:
    """Validate a path argument and convert it to a string.

    Args:
        path: Caller-supplied path or path-like object.
        name: Argument name used in the error message.

    Returns:
        The path as a string.

    Raises:
        TypeError: If path is None or not path-like.
    """
    if path is None:
        msg = f"{name} cannot be None"
        raise TypeError(msg)
    return os.fspath(path)


def inspect_entry(
    path: str, fs: FileSystem, *, expand: bool = True, follow_links: bool = True
) -> TreeEntry:
    """Resolve a path into a TreeEntry by querying the filesystem once.

    Args:
        path: Path to inspect.
        fs: Filesystem to query.
        expand: If False, directories are not listed and get no children.
        follow_links: If False, a link to a directory is reported as a file
            so it is unlinked rather than descended into.

    Returns:
        TreeEntry with kind, size and children populated as applicable.
    """
    if not fs.exists(path):
        return TreeEntry(path=path, kind=EntryKind.MISSING)
    if fs.is_dir(path) and (follow_links or not fs.is_link(path)):
        if not expand:
            return TreeEntry(path=path, kind=EntryKind.DIRECTORY)
        listing = fs.list_dir(path)
        children = tuple(listing) if listing is not None else None
        return TreeEntry(path=path, kind=EntryKind.DIRECTORY, children=children)
    return TreeEntry(path=path, kind=EntryKind.FILE, size=fs.size(path))
