"""
View projector - computes the visible note list.

Pure functions over store snapshots: no caching, no hidden state, inputs are
never mutated. Callers re-run the projection after every state change.

Pipeline:
search filter -> category filter -> pinned filter -> stable sort
(pinned first, then the chosen key)
"""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import date

from mindnotes.models.category import Category
from mindnotes.models.note import Note
from mindnotes.models.view import ALL_CATEGORIES, FilterBy, SortBy, SortOrder, ViewSettings


def _sort_key(note: Note, sort_by: SortBy):
    if sort_by == SortBy.CREATED_AT:
        return note.created_at
    if sort_by == SortBy.TITLE:
        return note.title.lower()
    if sort_by == SortBy.CATEGORY:
        return note.category
    return note.updated_at


def project(
    notes: Sequence[Note],
    categories: Sequence[Category],
    search_query: str = "",
    selected_category_id: str = ALL_CATEGORIES,
    *,
    filter_by: FilterBy = FilterBy.ALL,
    sort_by: SortBy = SortBy.UPDATED_AT,
    sort_order: SortOrder = SortOrder.DESC,
) -> list[Note]:
    """
    Filter and sort notes for display.

    Args:
        notes: Note snapshot in raw store order
        categories: Category snapshot (part of the view inputs; filtering is
            by id so dangling category references still match)
        search_query: Case-insensitive substring matched on title or content
        selected_category_id: Category id, or "all"
        filter_by: PINNED keeps pinned notes only; ALL and CATEGORY keep
            everything, the category restriction coming from selected_category_id
        sort_by: Key ordering notes inside the pinned/unpinned partitions
        sort_order: Direction of sort_by

    Returns:
        New list; pinned notes first, ties keep their input order
    """
    visible = [
        note
        for note in notes
        if note.matches(search_query)
        and (selected_category_id == ALL_CATEGORIES or note.category == selected_category_id)
        and (filter_by != FilterBy.PINNED or note.is_pinned)
    ]

    # Two stable passes: secondary key first, then the pinned partition.
    visible.sort(key=lambda note: _sort_key(note, sort_by), reverse=sort_order == SortOrder.DESC)
    visible.sort(key=lambda note: not note.is_pinned)
    return visible


def project_view(
    notes: Sequence[Note], categories: Sequence[Category], settings: ViewSettings
) -> list[Note]:
    """Run ``project`` with every parameter taken from a ViewSettings snapshot."""
    return project(
        notes,
        categories,
        settings.search_query,
        settings.selected_category,
        filter_by=settings.filter_by,
        sort_by=settings.sort_by,
        sort_order=settings.sort_order,
    )


def group_by_day(notes: Iterable[Note]) -> dict[date, list[Note]]:
    """Group notes by the calendar day they were created, keeping input order."""
    grouped: dict[date, list[Note]] = defaultdict(list)
    for note in notes:
        grouped[note.created_at.date()].append(note)
    return dict(grouped)
