"""
Selection manager - transient multi-select state over note IDs.

It has no visibility into the note store. Removing deleted IDs from the
selection is done by the coordinator through ``discard`` / ``prune``.
"""

from collections.abc import Iterable

from mindnotes.models.selection import SelectionState
from mindnotes.utils.logger import get_logger

logger = get_logger(__name__)


class SelectionManager:
    """Tracks select mode and the set of selected note IDs."""

    def __init__(self):
        self.select_mode = False
        self._selected: set[str] = set()

    @property
    def selected_ids(self) -> frozenset[str]:
        return frozenset(self._selected)

    @property
    def state(self) -> SelectionState:
        """Immutable snapshot of the current selection."""
        return SelectionState(select_mode=self.select_mode, selected_ids=frozenset(self._selected))

    def __len__(self) -> int:
        return len(self._selected)

    def is_selected(self, note_id: str) -> bool:
        return note_id in self._selected

    def toggle_select_mode(self) -> bool:
        """Flip select mode. Turning it off clears the selection."""
        self.select_mode = not self.select_mode
        if not self.select_mode:
            self._selected.clear()
        logger.debug(f"Select mode {'on' if self.select_mode else 'off'}")
        return self.select_mode

    def exit_select_mode(self) -> None:
        self.select_mode = False
        self._selected.clear()

    def toggle_selection(self, note_id: str) -> bool:
        """
        Add the id if absent, remove it if present.

        Returns:
            True if the id is selected afterwards
        """
        if note_id in self._selected:
            self._selected.discard(note_id)
            return False
        self._selected.add(note_id)
        return True

    def select_all(self, all_ids: Iterable[str]) -> None:
        self._selected = set(all_ids)

    def deselect_all(self) -> None:
        self._selected.clear()

    def discard(self, note_ids: Iterable[str]) -> None:
        """Drop the given ids from the selection if present."""
        self._selected.difference_update(note_ids)

    def prune(self, valid_ids: Iterable[str]) -> set[str]:
        """
        Keep only ids that still exist.

        Returns:
            The stale ids that were removed
        """
        stale = self._selected.difference(valid_ids)
        if stale:
            self._selected.difference_update(stale)
            logger.debug(f"Pruned {len(stale)} stale selected ids")
        return stale
