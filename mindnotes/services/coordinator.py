"""
Notebook coordinator - the single choke point for cross-entity writes.

Category counters are maintained incrementally, so every path that changes
which category a note belongs to must adjust the counters in the same call.
Callers go through this class instead of touching the stores directly.

Key responsibilities:
- Create / recategorize / delete notes with counter updates
- Prune deleted ids from the selection
- Apply the configured category delete policy
- Detect and repair counter drift
"""

from collections import Counter
from typing import Any

from mindnotes.config import CategoryDeletePolicy
from mindnotes.core.category_store import CategoryStore
from mindnotes.core.note_store import NoteStore
from mindnotes.models.category import DEFAULT_CATEGORY_ID, DEFAULT_SWATCH, Category
from mindnotes.models.note import Note
from mindnotes.services.selection_manager import SelectionManager
from mindnotes.utils.exceptions import InvariantDriftError
from mindnotes.utils.logger import get_logger

logger = get_logger(__name__)


class NotebookCoordinator:
    """
    Keeps notes, category counters and the selection consistent.

    Invariant: for every category X, X.note_count equals the number of
    notes whose category is X, provided all writes go through here.
    """

    def __init__(
        self,
        note_store: NoteStore,
        category_store: CategoryStore,
        selection: SelectionManager | None = None,
        delete_policy: CategoryDeletePolicy = CategoryDeletePolicy.REASSIGN,
        default_category: str = DEFAULT_CATEGORY_ID,
    ):
        """
        Initialize NotebookCoordinator.

        Args:
            note_store: Owner of the note collection
            category_store: Owner of the category collection
            selection: Multi-select state (a fresh one if omitted)
            delete_policy: What deleting a referenced category does
            default_category: Non-deletable fallback category
        """
        self.notes = note_store
        self.categories = category_store
        self.selection = selection or SelectionManager()
        self.delete_policy = CategoryDeletePolicy(delete_policy)
        self.default_category = default_category

    # ═══════════════════════════════════════════════════════════
    # NOTE OPERATIONS
    # ═══════════════════════════════════════════════════════════

    def create_note(self) -> Note:
        note = self.notes.add_note()
        self.categories.increment_note_count(note.category)
        logger.info(f"Created note {note.id} in {note.category}")
        return note

    def update_note(self, note_id: str, updates: dict[str, Any]) -> Note | None:
        """
        Merge fields into a note, moving one count if its category changes.

        Returns:
            Updated note, or None if not found
        """
        before = self.notes.get_note(note_id)
        if before is None:
            return None
        after = self.notes.update_note(note_id, updates)
        if after is not None and after.category != before.category:
            self.categories.move_note_between_categories(before.category, after.category)
            logger.debug(f"Note {note_id} moved {before.category} -> {after.category}")
        return after

    def recategorize(self, note_id: str, category_id: str) -> Note | None:
        return self.update_note(note_id, {"category": category_id})

    def toggle_pin(self, note_id: str) -> Note | None:
        return self.notes.toggle_pin(note_id)

    def delete_note(self, note_id: str) -> Note | None:
        """
        Delete one note, decrement its category and unselect it.

        Returns:
            The removed note, or None if not found
        """
        removed = self.notes.delete_note(note_id)
        self.selection.discard([note_id])
        if removed is None:
            return None
        self.categories.decrement_note_count(removed.category)
        logger.info(f"Deleted note {note_id} from {removed.category}")
        return removed

    def delete_selected_notes(self) -> list[Note]:
        """
        Delete every selected note, then clear the selection and leave select mode.

        One batched decrement is applied per affected category, equal in
        net effect to one decrement per note.
        """
        selected = self.selection.selected_ids
        removed = self.notes.delete_selected_notes(selected)
        for category_id, amount in Counter(note.category for note in removed).items():
            self.categories.decrement_note_count(category_id, amount)
        self.selection.exit_select_mode()
        logger.info(f"Bulk deleted {len(removed)} notes")
        return removed

    # ═══════════════════════════════════════════════════════════
    # CATEGORY OPERATIONS
    # ═══════════════════════════════════════════════════════════

    def add_category(self, name: str, color: str = DEFAULT_SWATCH) -> Category:
        return self.categories.add_category(name, color)

    def update_category(self, category_id: str, updates: dict[str, Any]) -> Category | None:
        return self.categories.update_category(category_id, updates)

    def delete_category(self, category_id: str) -> bool:
        """
        Delete a category according to the configured policy.

        REASSIGN moves referencing notes to the default category, FORBID
        refuses while any note references the category, ORPHAN deletes and
        leaves dangling references. The default category is never deleted.

        Returns:
            True if the category was removed
        """
        if category_id == self.default_category:
            logger.warning(f"Refusing to delete default category {category_id}")
            return False
        if category_id not in self.categories:
            return False

        members = [note for note in self.notes.notes if note.category == category_id]

        if members and self.delete_policy == CategoryDeletePolicy.FORBID:
            logger.warning(
                f"Refusing to delete category {category_id}: {len(members)} notes reference it"
            )
            return False

        if members and self.delete_policy == CategoryDeletePolicy.REASSIGN:
            for note in members:
                self.update_note(note.id, {"category": self.default_category})
            logger.info(
                f"Reassigned {len(members)} notes from {category_id} to {self.default_category}"
            )

        self.categories.delete_category(category_id)
        logger.info(f"Deleted category {category_id} (policy={self.delete_policy.value})")
        return True

    def category_for(self, note_id: str) -> Category | None:
        """
        Resolve a note's category, falling back to the default category
        when the reference dangles.
        """
        note = self.notes.get_note(note_id)
        if note is None:
            return None
        return self.categories.get_category(note.category) or self.categories.get_category(
            self.default_category
        )

    # Counter primitives, exposed for the command table.

    def increment_note_count(self, category_id: str, amount: int = 1) -> None:
        self.categories.increment_note_count(category_id, amount)

    def decrement_note_count(self, category_id: str, amount: int = 1) -> None:
        self.categories.decrement_note_count(category_id, amount)

    def move_note_between_categories(
        self, from_id: str | None, to_id: str | None, amount: int = 1
    ) -> None:
        self.categories.move_note_between_categories(from_id, to_id, amount)

    # ═══════════════════════════════════════════════════════════
    # SELECTION
    # ═══════════════════════════════════════════════════════════

    def select_all(self) -> None:
        self.selection.select_all(self.notes.ids())

    def prune_selection(self) -> set[str]:
        return self.selection.prune(self.notes.ids())

    # ═══════════════════════════════════════════════════════════
    # CONSISTENCY
    # ═══════════════════════════════════════════════════════════

    def count_drift(self) -> dict[str, tuple[int, int]]:
        """
        Categories whose stored counter differs from true membership.

        Returns:
            category_id -> (stored, actual)
        """
        actual = self.notes.count_by_category()
        return {
            category.id: (category.note_count, actual.get(category.id, 0))
            for category in self.categories.categories
            if category.note_count != actual.get(category.id, 0)
        }

    def reconcile_counts(self) -> dict[str, int]:
        """
        Overwrite every counter with the true membership count.

        Returns:
            The counts written, keyed by category id
        """
        drift = self.count_drift()
        if drift:
            logger.warning(f"Repairing counter drift in {len(drift)} categories: {drift}")
        actual = self.notes.count_by_category()
        counts = {category_id: actual.get(category_id, 0) for category_id in self.categories.ids()}
        self.categories.recompute_all_counts(counts)
        return counts

    def assert_consistent(self) -> None:
        """
        Raise InvariantDriftError if counters drift or the selection holds
        ids that no longer exist.
        """
        drift = self.count_drift()
        if drift:
            raise InvariantDriftError("Category counters out of sync", context={"drift": drift})
        stale = self.selection.selected_ids.difference(self.notes.ids())
        if stale:
            raise InvariantDriftError(
                "Selection references deleted notes", context={"stale_ids": sorted(stale)}
            )
