"""Core infrastructure: XDG paths, configuration and console theme."""
