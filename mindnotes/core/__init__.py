"""Core entity stores for MindNotes."""

from mindnotes.core.category_store import CategoryStore
from mindnotes.core.note_store import NoteStore

__all__ = [
    "CategoryStore",
    "NoteStore",
]
