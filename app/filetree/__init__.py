"""filetree - enumerate, filter, prune and sanitize file trees."""

__version__ = "0.1.0"
