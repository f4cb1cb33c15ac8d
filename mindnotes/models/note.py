"""
Note model and the fixed note color palette.

Notes are immutable snapshots: every mutation produces a new Note through
``model_copy`` so earlier snapshots held by callers never change underneath
them.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from mindnotes.models.category import DEFAULT_CATEGORY_ID


class ColorOption(BaseModel):
    """One entry of the note palette: background, text and border classes."""

    model_config = {"frozen": True}

    color: str = Field(..., description="Background gradient class")
    text_color: str = Field(..., description="Text color class")
    border_color: str = Field(..., description="Border color class")
    label: str = Field(..., description="Human readable palette name")


COLOR_OPTIONS: tuple[ColorOption, ...] = (
    ColorOption(
        color="from-blue-400 to-blue-600",
        text_color="text-gray-800",
        border_color="border-blue-300",
        label="Blue",
    ),
    ColorOption(
        color="from-green-400 to-emerald-600",
        text_color="text-gray-800",
        border_color="border-emerald-800",
        label="Green",
    ),
    ColorOption(
        color="from-purple-400 to-indigo-600",
        text_color="text-gray-800",
        border_color="border-blue-300",
        label="Blue",
    ),
    ColorOption(
        color="from-orange-400 to-pink-500",
        text_color="text-gray-800",
        border_color="border-orange-300",
        label="Orange",
    ),
    ColorOption(
        color="from-pink-400 to-rose-500",
        text_color="text-gray-800",
        border_color="border-purple-300",
        label="Purple",
    ),
    ColorOption(
        color="from-gray-700 to-gray-900",
        text_color="text-gray-100",
        border_color="border-gray-600",
        label="Dark",
    ),
)

# Fields a caller may change through update_note. id and created_at are fixed.
EDITABLE_FIELDS = frozenset(
    {"title", "content", "category", "is_pinned", "color", "text_color", "border_color"}
)


class Note(BaseModel):
    """
    A user-authored text record.

    ``category`` references a Category id but is not validated against the
    category collection, so dangling references are representable.
    """

    model_config = {"frozen": True}

    # Core identity
    id: str = Field(..., description="Unique note ID (note_xxx)")

    # Content
    title: str = Field(default="", description="Note title")
    content: str = Field(default="", description="Note body")
    category: str = Field(default=DEFAULT_CATEGORY_ID, description="Owning category ID")
    is_pinned: bool = Field(default=False, description="Pinned notes sort first")

    # Palette (replaced as a set)
    color: str = Field(default=COLOR_OPTIONS[0].color)
    text_color: str = Field(default=COLOR_OPTIONS[0].text_color)
    border_color: str = Field(default=COLOR_OPTIONS[0].border_color)

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.now, description="Creation timestamp")
    updated_at: datetime = Field(default_factory=datetime.now, description="Last update timestamp")

    @property
    def palette(self) -> tuple[str, str, str]:
        """Current (color, text_color, border_color) tuple."""
        return (self.color, self.text_color, self.border_color)

    def matches(self, query: str) -> bool:
        """
        Case-insensitive substring search over title and content.

        An empty query matches every note.
        """
        if not query:
            return True
        needle = query.lower()
        return needle in self.title.lower() or needle in self.content.lower()

    def with_updates(self, updates: dict[str, Any], updated_at: datetime) -> "Note":
        """
        Return a copy with editable fields merged and ``updated_at`` refreshed.

        A ``palette`` key holding a ColorOption replaces all three color
        fields at once. Unknown or read-only keys are ignored.
        """
        changes = {key: value for key, value in updates.items() if key in EDITABLE_FIELDS}
        palette = updates.get("palette")
        if isinstance(palette, ColorOption):
            changes.update(
                color=palette.color,
                text_color=palette.text_color,
                border_color=palette.border_color,
            )
        changes["updated_at"] = updated_at
        return self.model_copy(update=changes)
