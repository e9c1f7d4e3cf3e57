"""Shared types and utilities for CLI commands."""

from enum import Enum

from filetree.tree.models import DeletionPolicy


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def select_policy(*, empty: bool, shallow: bool, whole_dir: bool) -> DeletionPolicy:
    """Map the clean command flags to a deletion policy.

    Args:
        empty: Only delete zero-byte files.
        shallow: Only consider direct children.
        whole_dir: Remove the directory and everything beneath it.

    Returns:
        The matching DeletionPolicy.

    Raises:
        ValueError: If whole_dir is combined with empty or shallow.
    """
    if whole_dir:
        if empty or shallow:
            msg = "--dir cannot be combined with --empty or --shallow"
            raise ValueError(msg)
        return DeletionPolicy.DIRECTORY
    if shallow:
        return DeletionPolicy.EMPTY_FILES if empty else DeletionPolicy.FILES
    return DeletionPolicy.ALL_EMPTY_FILES if empty else DeletionPolicy.ALL_FILES
