"""File tree enumeration, filtering, deletion and name sanitization.

This module exposes the filesystem access layer, the tree entry models,
traversal and type classification helpers, the deletion operator and
the filename sanitizer.
"""

from filetree.tree.backend import FileSystem, LocalFileSystem, get_default_fs
from filetree.tree.classifier import file_type, files_by_type, filter_by_type, resolved_file_type
from filetree.tree.models import (
    DeletionFailure,
    DeletionPolicy,
    DeletionReport,
    EntryKind,
    TreeEntry,
    inspect_entry,
)
from filetree.tree.operator import (
    TreeOperator,
    delete_all_empty_files,
    delete_all_files,
    delete_dir,
    delete_empty_files,
    delete_files,
)
from filetree.tree.resolver import canonical_path
from filetree.tree.sanitize import ILLEGAL_FILENAME_PATTERN, to_legal_name
from filetree.tree.traversal import iter_files, list_all_file_paths, list_all_files

__all__ = [
    "ILLEGAL_FILENAME_PATTERN",
    "DeletionFailure",
    "DeletionPolicy",
    "DeletionReport",
    "EntryKind",
    "FileSystem",
    "LocalFileSystem",
    "TreeEntry",
    "TreeOperator",
    "canonical_path",
    "delete_all_empty_files",
    "delete_all_files",
    "delete_dir",
    "delete_empty_files",
    "delete_files",
    "file_type",
    "files_by_type",
    "filter_by_type",
    "get_default_fs",
    "inspect_entry",
    "iter_files",
    "list_all_file_paths",
    "list_all_files",
    "resolved_file_type",
    "to_legal_name",
]
