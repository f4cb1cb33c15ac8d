"""
Demo data and notebook assembly.

``build_notebook`` wires stores, coordinator and dispatcher from a Config.
``seed_demo_data`` loads the sample notebook shipped with the application.
"""

import random
from datetime import timedelta

from mindnotes.config import Config
from mindnotes.core.category_store import CategoryStore
from mindnotes.core.note_store import NoteStore
from mindnotes.models.category import SEED_CATEGORIES
from mindnotes.models.note import COLOR_OPTIONS, Note
from mindnotes.services.commands import CommandDispatcher
from mindnotes.services.coordinator import NotebookCoordinator
from mindnotes.services.selection_manager import SelectionManager
from mindnotes.utils.clock import Clock, system_clock
from mindnotes.utils.logger import get_logger

logger = get_logger(__name__)

# (title, content, category, pinned, palette index, age in days)
DEMO_NOTES = (
    (
        "Welcome to Mind Notes",
        "Quick notes, simple notes, memo pad! This is your digital notebook...",
        "personal",
        True,
        0,
        0,
    ),
    (
        "Meeting Agenda",
        "Quarterly targets discussion, team expansion plans, budget review...",
        "work",
        False,
        1,
        1,
    ),
    (
        "Feature Ideas",
        "Voice notes, calendar integration, PDF export, sticky widgets...",
        "ideas",
        False,
        2,
        2,
    ),
    (
        "Shopping Checklist",
        "✓ Milk, bread, eggs\n• Fresh fruits\n• Coffee beans",
        "personal",
        False,
        3,
        3,
    ),
    (
        "Reading List",
        'Must read books:\n• "Atomic Habits"\n• "The Psychology of Money"\n...',
        "personal",
        True,
        4,
        4,
    ),
    ("Voice Memo Ideas", "Test voice recording feature...", "ideas", False, 5, 5),
)


def demo_notes(clock: Clock = system_clock) -> list[Note]:
    """Build the sample notes, newest first, relative to the clock's current time."""
    now = clock()
    notes = []
    for index, (title, content, category, pinned, palette, age_days) in enumerate(DEMO_NOTES, 1):
        option = COLOR_OPTIONS[palette]
        stamp = now - timedelta(days=age_days)
        notes.append(
            Note(
                id=str(index),
                title=title,
                content=content,
                category=category,
                is_pinned=pinned,
                color=option.color,
                text_color=option.text_color,
                border_color=option.border_color,
                created_at=stamp,
                updated_at=stamp,
            )
        )
    return notes


def seed_demo_data(coordinator: NotebookCoordinator) -> None:
    """
    Replace the notebook contents with the sample categories and notes.

    Counters are derived from the loaded notes so the seeded state starts
    consistent.
    """
    coordinator.categories.load(SEED_CATEGORIES)
    coordinator.notes.load(demo_notes(coordinator.notes.clock))
    coordinator.selection.exit_select_mode()
    coordinator.reconcile_counts()
    logger.info(
        f"Seeded {len(coordinator.notes)} notes in {len(coordinator.categories)} categories"
    )


def build_notebook(config: Config | None = None, clock: Clock = system_clock) -> CommandDispatcher:
    """
    Assemble a ready-to-use notebook from configuration.

    The default category always exists afterwards, so new notes have a
    counter to land in.

    Args:
        config: Configuration (defaults if omitted)
        clock: Time source for the note store

    Returns:
        Command dispatcher over a fresh coordinator
    """
    config = config or Config()
    store_config = config.store

    note_store = NoteStore(
        clock=clock,
        rng=random.Random(store_config.random_seed),
        default_category=store_config.default_category,
    )
    category_store = CategoryStore()
    coordinator = NotebookCoordinator(
        note_store,
        category_store,
        SelectionManager(),
        delete_policy=store_config.category_delete_policy,
        default_category=store_config.default_category,
    )

    if store_config.seed_demo_data:
        seed_demo_data(coordinator)
    else:
        category_store.load(
            [c for c in SEED_CATEGORIES if c.id == store_config.default_category]
        )

    if store_config.default_category not in category_store:
        category_store.load(
            [
                *category_store.categories,
                SEED_CATEGORIES[0].model_copy(update={"id": store_config.default_category}),
            ]
        )
        coordinator.reconcile_counts()

    logger.info(f"Notebook ready (delete policy={store_config.category_delete_policy.value})")
    return CommandDispatcher(coordinator)
