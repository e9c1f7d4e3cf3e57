"""File tree deletion operator.

Applies one of the deletion policies to a path. Every policy walks the
tree with an explicit stack and attempts every eligible entry even after
a failure; the outcome is the logical AND of all attempts. The file
policies descend through links to directories, walking each directory
once; whole-tree removal unlinks such links instead. Dry-run mode reports
what would be deleted without touching the filesystem.
"""

import logging

from filetree.tree.backend import FileSystem, get_default_fs
from filetree.tree.models import (
    DeletionFailure,
    DeletionPolicy,
    DeletionReport,
    StrPath,
    TreeEntry,
    inspect_entry,
    require_path,
)
from filetree.tree.resolver import canonical_path

logger = logging.getLogger(__name__)


class _Collector:
    """Accumulates removal outcomes for a single run."""

    def __init__(self, fs: FileSystem, dry_run: bool) -> None:
        self._fs = fs
        self._dry_run = dry_run
        self.deleted: list[str] = []
        self.failed: list[DeletionFailure] = []

    def remove(self, entry: TreeEntry) -> None:
        if self._dry_run:
            logger.info("Dry-run: would delete %s", entry.path)
            self.deleted.append(entry.path)
            return

        try:
            if entry.is_dir:
                self._fs.remove_dir(entry.path)
            else:
                self._fs.remove_file(entry.path)
        except OSError as e:
            logger.warning("Failed to delete %s: %s", entry.path, e)
            self.failed.append(DeletionFailure(path=entry.path, error=str(e) or type(e).__name__))
            return

        logger.debug("Deleted %s", entry.path)
        self.deleted.append(entry.path)


class TreeOperator:
    """Deletes files and directories beneath a path according to a policy.

    Attributes:
        _fs: Filesystem the operator acts on.
        _dry_run: If True, simulate deletions without modifying the filesystem.
    """

    def __init__(self, fs: FileSystem | None = None, dry_run: bool = False) -> None:
        """Initialize the TreeOperator.

        Args:
            fs: Filesystem to operate on. Defaults to the local filesystem.
            dry_run: If True, report what would be deleted without deleting.
        """
        self._fs = fs or get_default_fs()
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        return self._dry_run

    def run(self, path: StrPath, policy: DeletionPolicy | str) -> DeletionReport:
        """Apply a deletion policy to ``path`` and return a detailed report.

        A nonexistent path is a successful no-op. A file path is treated
        as a one-element tree.

        Args:
            path: File or directory to operate on.
            policy: Policy, or its string value.

        Returns:
            DeletionReport listing removed and failed entries.

        Raises:
            TypeError: If path is None.
            ValueError: If policy is not a known DeletionPolicy value.
        """
        root = require_path(path)
        policy = DeletionPolicy(policy)
        collector = _Collector(self._fs, self._dry_run)

        # A link given as the root of a whole-tree removal is unlinked only
        entry = inspect_entry(
            root, self._fs, follow_links=policy != DeletionPolicy.DIRECTORY
        )
        if entry.is_file:
            if self._eligible(entry, policy):
                collector.remove(entry)
        elif entry.is_dir:
            if policy == DeletionPolicy.DIRECTORY:
                self._remove_tree(entry, collector)
            elif policy.recursive:
                self._prune_tree(entry, policy, collector)
            else:
                self._prune_children(entry, policy, collector)
        else:
            logger.debug("Nothing to delete, %s does not exist", root)

        report = DeletionReport(
            root=root,
            policy=policy,
            deleted=tuple(collector.deleted),
            failed=tuple(collector.failed),
            dry_run=self._dry_run,
        )
        logger.info(
            "%s on %s: %d deleted, %d failed",
            policy.value,
            root,
            len(report.deleted),
            len(report.failed),
        )
        return report

    def delete_all_files(self, path: StrPath) -> bool:
        """Delete every file under ``path``, keeping all directories."""
        return self.run(path, DeletionPolicy.ALL_FILES).success

    def delete_all_empty_files(self, path: StrPath) -> bool:
        """Delete every zero-byte file under ``path``, keeping all directories."""
        return self.run(path, DeletionPolicy.ALL_EMPTY_FILES).success

    def delete_files(self, path: StrPath) -> bool:
        """Delete the files directly inside ``path``; subdirectories are untouched."""
        return self.run(path, DeletionPolicy.FILES).success

    def delete_empty_files(self, path: StrPath) -> bool:
        """Delete the zero-byte files directly inside ``path``."""
        return self.run(path, DeletionPolicy.EMPTY_FILES).success

    def delete_dir(self, path: StrPath) -> bool:
        """Delete ``path`` and everything beneath it."""
        return self.run(path, DeletionPolicy.DIRECTORY).success

    @staticmethod
    def _eligible(entry: TreeEntry, policy: DeletionPolicy) -> bool:
        if policy.empty_only:
            return entry.size == 0
        return True

    def _prune_children(
        self, root: TreeEntry, policy: DeletionPolicy, collector: _Collector
    ) -> None:
        """Shallow policies: only direct child files are considered."""
        for child_path in root.children or ():
            child = inspect_entry(child_path, self._fs, expand=False)
            if child.is_file and self._eligible(child, policy):
                collector.remove(child)

    def _prune_tree(
        self, root: TreeEntry, policy: DeletionPolicy, collector: _Collector
    ) -> None:
        """Deep file policies: every file in the tree, directories kept."""
        visited = {canonical_path(root.path, self._fs)}
        stack = list(reversed(root.children or ()))
        while stack:
            entry = inspect_entry(stack.pop(), self._fs)
            if entry.is_dir:
                key = canonical_path(entry.path, self._fs)
                if key in visited:
                    logger.debug("Skipping %s, already walked as %s", entry.path, key)
                    continue
                visited.add(key)
                stack.extend(reversed(entry.children or ()))
            elif entry.is_file and self._eligible(entry, policy):
                collector.remove(entry)

    def _remove_tree(self, root: TreeEntry, collector: _Collector) -> None:
        """Post-order removal: a directory is removed after all its children."""
        # Strings are paths still to visit; a TreeEntry is a directory whose
        # children have all been attempted
        stack: list[str | TreeEntry] = [root, *reversed(root.children or ())]
        while stack:
            item = stack.pop()
            if isinstance(item, TreeEntry):
                collector.remove(item)
                continue
            entry = inspect_entry(item, self._fs, follow_links=False)
            if entry.is_dir:
                stack.append(entry)
                stack.extend(reversed(entry.children or ()))
            elif entry.is_file:
                collector.remove(entry)


def delete_all_files(path: StrPath, fs: FileSystem | None = None) -> bool:
    """Delete every file under ``path``. See TreeOperator.delete_all_files."""
    return TreeOperator(fs).delete_all_files(path)


def delete_all_empty_files(path: StrPath, fs: FileSystem | None = None) -> bool:
    """Delete every zero-byte file under ``path``."""
    return TreeOperator(fs).delete_all_empty_files(path)


def delete_files(path: StrPath, fs: FileSystem | None = None) -> bool:
    """Delete the direct child files of ``path``."""
    return TreeOperator(fs).delete_files(path)


def delete_empty_files(path: StrPath, fs: FileSystem | None = None) -> bool:
    """Delete the direct zero-byte child files of ``path``."""
    return TreeOperator(fs).delete_empty_files(path)


def delete_dir(path: StrPath, fs: FileSystem | None = None) -> bool:
    """Delete ``path`` and everything beneath it."""
    return TreeOperator(fs).delete_dir(path)
