"""Path canonicalization with absolute-path fallback."""

import logging

from filetree.tree.backend import FileSystem, get_default_fs
from filetree.tree.models import StrPath, require_path

logger = logging.getLogger(__name__)


def canonical_path(path: StrPath, fs: FileSystem | None = None) -> str:
    """Return the canonical form of ``path``.

    If the platform cannot canonicalize the path, the plain absolute
    path is returned instead. The failure is never surfaced.

    Args:
        path: Path to resolve.
        fs: Filesystem to use. Defaults to the local filesystem.

    Returns:
        Canonical (symlink-resolved, normalized) absolute path, or the
        absolute path if canonicalization failed.

    Raises:
        TypeError: If path is None.
    """
    path_str = require_path(path)
    fs = fs or get_default_fs()
    try:
        return fs.resolve(path_str)
    except (OSError, RuntimeError) as e:
        # RuntimeError covers symlink loops on older interpreters
        logger.debug("Cannot canonicalize %s, using absolute path: %s", path_str, e)
        return fs.absolute(path_str)
