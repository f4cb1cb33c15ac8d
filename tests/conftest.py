"""
Shared test fixtures for all test modules.

Every fixture is function scoped and fully deterministic: a ticking clock,
a seeded random source and counter-based ids.
"""

import itertools
import random

import pytest

from mindnotes.config import CategoryDeletePolicy
from mindnotes.core.category_store import CategoryStore
from mindnotes.core.note_store import NoteStore
from mindnotes.models.category import Category
from mindnotes.services.commands import CommandDispatcher
from mindnotes.services.coordinator import NotebookCoordinator
from mindnotes.services.selection_manager import SelectionManager
from mindnotes.utils.clock import TickingClock


def make_id_factory(prefix: str):
    counter = itertools.count(1)
    return lambda: f"{prefix}{next(counter)}"


@pytest.fixture
def clock():
    """Clock that advances one second per reading."""
    return TickingClock()


@pytest.fixture
def note_store(clock):
    """Empty note store with deterministic ids and palette choice."""
    return NoteStore(clock=clock, rng=random.Random(42), id_factory=make_id_factory("n"))


@pytest.fixture
def category_store():
    """Category store holding personal, work and ideas, all at zero."""
    store = CategoryStore(id_factory=make_id_factory("c"))
    store.load(
        [
            Category(id="personal", name="Personal", color="bg-blue-500"),
            Category(id="work", name="Work", color="bg-green-500"),
            Category(id="ideas", name="Ideas", color="bg-purple-500"),
        ]
    )
    return store


@pytest.fixture
def selection():
    return SelectionManager()


@pytest.fixture
def coordinator(note_store, category_store, selection):
    """Coordinator with the default reassign policy."""
    return NotebookCoordinator(note_store, category_store, selection)


@pytest.fixture
def make_coordinator(clock):
    """Factory for coordinators with a chosen category delete policy."""

    def _make(policy: CategoryDeletePolicy) -> NotebookCoordinator:
        categories = CategoryStore(id_factory=make_id_factory("c"))
        categories.load(
            [
                Category(id="personal", name="Personal"),
                Category(id="work", name="Work"),
            ]
        )
        notes = NoteStore(clock=clock, rng=random.Random(7), id_factory=make_id_factory("n"))
        return NotebookCoordinator(notes, categories, SelectionManager(), delete_policy=policy)

    return _make


@pytest.fixture
def dispatcher(coordinator):
    return CommandDispatcher(coordinator)
