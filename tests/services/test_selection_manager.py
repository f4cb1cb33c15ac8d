"""
Tests for SelectionManager.
"""

import pytest

from mindnotes.models.selection import SelectionState
from mindnotes.services.selection_manager import SelectionManager


@pytest.mark.unit
class TestSelectionManager:
    """Tests for select mode and selection set transitions."""

    def test_initial_state(self, selection):
        assert selection.state == SelectionState()
        assert len(selection) == 0

    def test_mode_off_clears_selection(self, selection):
        """Test toggling select mode off empties the selection."""
        selection.toggle_select_mode()
        selection.toggle_selection("5")
        assert selection.is_selected("5")

        selection.toggle_select_mode()

        assert selection.select_mode is False
        assert selection.selected_ids == frozenset()

    def test_toggle_selection_adds_and_removes(self, selection):
        assert selection.toggle_selection("a") is True
        assert selection.toggle_selection("a") is False
        assert not selection.is_selected("a")

    def test_stale_ids_allowed_and_prunable(self, selection):
        """Test unknown ids can be selected and later pruned."""
        selection.toggle_selection("ghost")
        selection.toggle_selection("real")

        stale = selection.prune(["real"])

        assert stale == {"ghost"}
        assert selection.selected_ids == frozenset({"real"})

    def test_select_all_and_deselect_all(self, selection):
        selection.select_all(["a", "b", "c"])
        assert len(selection) == 3

        selection.deselect_all()
        assert len(selection) == 0

    def test_discard(self, selection):
        selection.select_all(["a", "b"])
        selection.discard(["a", "zzz"])
        assert selection.selected_ids == frozenset({"b"})

    def test_state_snapshot_is_detached(self):
        """Test the snapshot does not follow later changes."""
        manager = SelectionManager()
        manager.toggle_selection("a")
        snapshot = manager.state

        manager.toggle_selection("b")

        assert snapshot.selected_ids == frozenset({"a"})

    def test_exit_select_mode(self, selection):
        selection.toggle_select_mode()
        selection.select_all(["a"])

        selection.exit_select_mode()

        assert selection.state == SelectionState(select_mode=False, selected_ids=frozenset())
