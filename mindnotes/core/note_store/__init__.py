"""Note collection store."""

from mindnotes.core.note_store.note_store import NoteStore

__all__ = ["NoteStore"]
