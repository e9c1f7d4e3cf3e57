"""File type derivation and filtering by extension."""

from collections.abc import Iterable

from filetree.tree.backend import FileSystem, get_default_fs
from filetree.tree.models import StrPath, require_path
from filetree.tree.resolver import canonical_path
from filetree.tree.traversal import list_all_files


def file_type(path: StrPath) -> str:
    """Return the text after the last ``.`` in ``path``.

    ``archive.tar.gz`` has the type ``gz``. A path without any ``.`` is
    returned unchanged, so ``README`` has the type ``README``. The search
    covers the whole string, so a dot in a parent directory name counts.

    Raises:
        TypeError: If path is None.
    """
    path_str = require_path(path)
    return path_str[path_str.rfind(".") + 1 :]


def resolved_file_type(path: StrPath, fs: FileSystem | None = None) -> str:
    """Return the type of a file computed on its canonical path.

    Falls back to the absolute path when canonicalization fails.
    """
    return file_type(canonical_path(path, fs))


def filter_by_type(
    file_type_name: str | None,
    files: Iterable[StrPath],
    fs: FileSystem | None = None,
) -> list[str]:
    """Return the files whose type matches ``file_type_name`` case-insensitively.

    Directories in ``files`` are skipped. An empty or None type matches
    nothing.

    Args:
        file_type_name: Requested extension, e.g. ``"txt"``.
        files: Candidate paths.
        fs: Filesystem to use. Defaults to the local filesystem.

    Returns:
        Matching paths, in input order.

    Raises:
        TypeError: If files is None.
    """
    if files is None:
        msg = "files cannot be None"
        raise TypeError(msg)
    if not file_type_name:
        return []

    fs = fs or get_default_fs()
    wanted = file_type_name.lower()
    matches: list[str] = []
    for item in files:
        path = require_path(item)
        if fs.is_dir(path):
            continue
        if resolved_file_type(path, fs).lower() == wanted:
            matches.append(path)
    return matches


def files_by_type(
    file_type_name: str | None,
    root: StrPath,
    fs: FileSystem | None = None,
) -> list[str]:
    """Walk ``root`` and return the files of the requested type."""
    fs = fs or get_default_fs()
    return filter_by_type(file_type_name, list_all_files(root, fs), fs)
