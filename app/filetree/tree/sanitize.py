"""Filename sanitization."""

import re

ILLEGAL_FILENAME_PATTERN = re.compile(r'[{/\\:*?"<>|}]')

DEFAULT_REPLACEMENT = "_"


def contains_illegal_chars(name: str) -> bool:
    """Return True if ``name`` contains any illegal filename character."""
    return ILLEGAL_FILENAME_PATTERN.search(name) is not None


def to_legal_name(name: str, replacement: str = DEFAULT_REPLACEMENT) -> str:
    """Replace every illegal filename character in ``name``.

    The illegal set is ``/ \\ : * ? " < > | { }``. The replacement is
    inserted literally. No length limit or collision check is applied.

    Args:
        name: Candidate filename.
        replacement: Text substituted for each illegal character.

    Returns:
        The sanitized name.

    Raises:
        TypeError: If name or replacement is None.
    """
    if name is None:
        msg = "name cannot be None"
        raise TypeError(msg)
    if replacement is None:
        msg = "replacement cannot be None"
        raise TypeError(msg)
    return ILLEGAL_FILENAME_PATTERN.sub(lambda _match: replacement, name)
