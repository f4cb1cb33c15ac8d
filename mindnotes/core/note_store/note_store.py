"""
Note store - owner of the Note collection.

Holds an immutable tuple of Notes, newest first. Every mutation replaces the
tuple and the affected Note snapshot, so readers never observe partial
updates and callers can keep old snapshots safely.

Operations are total: a missing id is a silent no-op.
"""

import random
from collections import Counter
from collections.abc import Callable, Iterable
from datetime import date
from typing import Any

from mindnotes.models.category import DEFAULT_CATEGORY_ID
from mindnotes.models.note import COLOR_OPTIONS, ColorOption, Note
from mindnotes.utils.clock import Clock, system_clock
from mindnotes.utils.id_generator import generate_note_id
from mindnotes.utils.logger import get_logger

logger = get_logger(__name__)


class NoteStore:
    """
    In-memory Note collection with raw CRUD and pin toggling.

    This store knows nothing about categories or selection. Keeping
    category counters and the selection set in sync is the coordinator's
    job.
    """

    def __init__(
        self,
        clock: Clock = system_clock,
        rng: random.Random | None = None,
        id_factory: Callable[[], str] = generate_note_id,
        default_category: str = DEFAULT_CATEGORY_ID,
        palette: tuple[ColorOption, ...] = COLOR_OPTIONS,
    ):
        """
        Initialize NoteStore.

        Args:
            clock: Time source for created_at / updated_at
            rng: Random source for palette selection
            id_factory: Generator for new note IDs
            default_category: Category assigned to new notes
            palette: Color options new notes draw from
        """
        self.clock = clock
        self.rng = rng or random.Random()
        self.id_factory = id_factory
        self.default_category = default_category
        self.palette = palette
        self._notes: tuple[Note, ...] = ()

    # ═══════════════════════════════════════════════════════════
    # READS
    # ═══════════════════════════════════════════════════════════

    @property
    def notes(self) -> tuple[Note, ...]:
        """Current snapshot of every note, newest first."""
        return self._notes

    def __len__(self) -> int:
        return len(self._notes)

    def __contains__(self, note_id: object) -> bool:
        return any(note.id == note_id for note in self._notes)

    def get_note(self, note_id: str) -> Note | None:
        for note in self._notes:
            if note.id == note_id:
                return note
        return None

    def ids(self) -> list[str]:
        """Note IDs in collection order."""
        return [note.id for note in self._notes]

    def count_by_category(self) -> dict[str, int]:
        """True membership count per category id, derived from the notes."""
        return dict(Counter(note.category for note in self._notes))

    def notes_created_on(self, day: date) -> list[Note]:
        """Notes whose created_at falls on the given calendar day."""
        return [note for note in self._notes if note.created_at.date() == day]

    # ═══════════════════════════════════════════════════════════
    # WRITES
    # ═══════════════════════════════════════════════════════════

    def load(self, notes: Iterable[Note]) -> None:
        """
        Replace the whole collection.

        Duplicate IDs are dropped, keeping the first occurrence.
        """
        seen: set[str] = set()
        unique: list[Note] = []
        for note in notes:
            if note.id in seen:
                logger.warning(f"Dropping duplicate note id on load: {note.id}")
                continue
            seen.add(note.id)
            unique.append(note)
        self._notes = tuple(unique)
        logger.debug(f"Loaded {len(self._notes)} notes")

    def add_note(self) -> Note:
        """
        Create an empty note at the head of the collection.

        Returns:
            The created note, so callers can chain a counter increment
        """
        note_id = self.id_factory()
        while note_id in self:
            note_id = self.id_factory()

        option = self.rng.choice(self.palette)
        now = self.clock()
        note = Note(
            id=note_id,
            category=self.default_category,
            is_pinned=False,
            color=option.color,
            text_color=option.text_color,
            border_color=option.border_color,
            created_at=now,
            updated_at=now,
        )
        self._notes = (note, *self._notes)
        logger.debug(f"Note added: {note.id}", extra={"note_id": note.id, "palette": option.label})
        return note

    def update_note(self, note_id: str, updates: dict[str, Any]) -> Note | None:
        """
        Merge editable fields into a note and refresh updated_at.

        Args:
            note_id: Note to update
            updates: Partial field mapping

        Returns:
            Updated note, or None if no note has that id
        """
        return self._replace(note_id, lambda note: note.with_updates(updates, self.clock()))

    def toggle_pin(self, note_id: str) -> Note | None:
        """Flip is_pinned and refresh updated_at. None if not found."""
        return self._replace(
            note_id,
            lambda note: note.with_updates({"is_pinned": not note.is_pinned}, self.clock()),
        )

    def delete_note(self, note_id: str) -> Note | None:
        """
        Remove a note.

        Returns:
            The removed note, or None if no note has that id
        """
        removed = self.get_note(note_id)
        if removed is None:
            logger.debug(f"Delete skipped, note not found: {note_id}")
            return None
        self._notes = tuple(note for note in self._notes if note.id != note_id)
        logger.debug(f"Note deleted: {note_id}")
        return removed

    def delete_selected_notes(self, selected_ids: Iterable[str]) -> list[Note]:
        """
        Remove every note whose id is in selected_ids in one step.

        Returns:
            The removed notes in collection order
        """
        targets = set(selected_ids)
        removed = [note for note in self._notes if note.id in targets]
        if removed:
            self._notes = tuple(note for note in self._notes if note.id not in targets)
        logger.debug(f"Bulk delete removed {len(removed)} of {len(targets)} selected notes")
        return removed

    def _replace(self, note_id: str, change: Callable[[Note], Note]) -> Note | None:
        for index, note in enumerate(self._notes):
            if note.id == note_id:
                updated = change(note)
                self._notes = self._notes[:index] + (updated,) + self._notes[index + 1 :]
                logger.debug(f"Note updated: {note_id}")
                return updated
        logger.debug(f"Update skipped, note not found: {note_id}")
        return None
