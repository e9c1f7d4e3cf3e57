"""CLI commands for filetree.

This package contains all subcommand implementations.
"""

from filetree.cli.commands import config, files, name

__all__ = ["config", "files", "name"]
