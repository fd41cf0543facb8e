"""note-status - workflow status tracking in note front matter."""

__version__ = "0.1.0"
