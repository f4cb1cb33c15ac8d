"""
Randomized operation sequences against the coordinator.

After every step: note ids are unique, counters are non-negative, counters
match membership and the selection holds no deleted ids.
"""

import random

import pytest

CATEGORY_IDS = ["personal", "work", "ideas"]


def random_step(coordinator, rng: random.Random) -> None:
    note_ids = coordinator.notes.ids()
    op = rng.choice(
        ["create", "create", "recategorize", "update", "delete", "select", "bulk", "pin", "mode"]
    )
    if op == "create":
        coordinator.create_note()
    elif op == "recategorize" and note_ids:
        coordinator.recategorize(rng.choice(note_ids), rng.choice(CATEGORY_IDS))
    elif op == "update" and note_ids:
        coordinator.update_note(rng.choice(note_ids), {"title": f"t{rng.random():.3f}"})
    elif op == "delete":
        coordinator.delete_note(rng.choice(note_ids + ["missing"]))
    elif op == "select" and note_ids:
        coordinator.selection.toggle_selection(rng.choice(note_ids))
    elif op == "bulk":
        coordinator.delete_selected_notes()
    elif op == "pin" and note_ids:
        coordinator.toggle_pin(rng.choice(note_ids))
    elif op == "mode":
        coordinator.selection.toggle_select_mode()


@pytest.mark.unit
@pytest.mark.parametrize("seed", range(10))
def test_random_sequences_preserve_invariants(coordinator, seed):
    """Test invariants hold across interleaved operations."""
    rng = random.Random(seed)

    for _ in range(200):
        random_step(coordinator, rng)

        ids = coordinator.notes.ids()
        assert len(ids) == len(set(ids))
        assert all(c.note_count >= 0 for c in coordinator.categories.categories)
        assert sum(c.note_count for c in coordinator.categories.categories) == len(ids)
        coordinator.assert_consistent()
