"""Command-line interface for note-status."""

from notestatus.interfaces.cli.app import app, main

__all__ = ["app", "main"]
