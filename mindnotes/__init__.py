"""MindNotes: in-memory note and category store with derived views."""

__version__ = "0.1.0"
