"""
Data models for MindNotes.

Core models:
- Note, ColorOption: user notes and their fixed palette
- Category: grouping bucket with a maintained note counter
- ViewSettings and its enums: projector inputs
- SelectionState: multi-select snapshot
"""

from mindnotes.models.category import (
    CATEGORY_SWATCHES,
    DEFAULT_CATEGORY_ID,
    DEFAULT_SWATCH,
    SEED_CATEGORIES,
    Category,
)
from mindnotes.models.note import COLOR_OPTIONS, ColorOption, Note
from mindnotes.models.selection import SelectionState
from mindnotes.models.view import (
    ALL_CATEGORIES,
    FilterBy,
    SortBy,
    SortOrder,
    ViewMode,
    ViewSettings,
)

__all__ = [
    # Notes
    "Note",
    "ColorOption",
    "COLOR_OPTIONS",
    # Categories
    "Category",
    "CATEGORY_SWATCHES",
    "DEFAULT_CATEGORY_ID",
    "DEFAULT_SWATCH",
    "SEED_CATEGORIES",
    # View
    "ALL_CATEGORIES",
    "FilterBy",
    "SortBy",
    "SortOrder",
    "ViewMode",
    "ViewSettings",
    # Selection
    "SelectionState",
]
