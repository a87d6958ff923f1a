"""Ensure files end with a trailing newline, as a library and a command."""

__version__ = "0.1.0"