"""
View parameters consumed by the view projector.
"""

from enum import Enum

from pydantic import BaseModel, Field

ALL_CATEGORIES = "all"


class ViewMode(str, Enum):
    """How the presentation layer lays out notes."""

    GRID = "grid"
    LIST = "list"
    CALENDAR = "calendar"


class SortBy(str, Enum):
    """Secondary sort key applied within the pinned/unpinned partitions."""

    UPDATED_AT = "updated_at"
    CREATED_AT = "created_at"
    TITLE = "title"
    CATEGORY = "category"


class SortOrder(str, Enum):
    """Direction of the secondary sort key."""

    ASC = "asc"
    DESC = "desc"


class FilterBy(str, Enum):
    """
    Coarse note filter.

    CATEGORY adds nothing on its own: the category restriction always comes
    from ViewSettings.selected_category, which is applied under every
    FilterBy value ("all" disables it).
    """

    ALL = "all"
    PINNED = "pinned"
    CATEGORY = "category"


class ViewSettings(BaseModel):
    """Snapshot of every input the projector needs besides the entities."""

    model_config = {"frozen": True}

    search_query: str = Field(default="", description="Case-insensitive search text")
    selected_category: str = Field(default=ALL_CATEGORIES, description="Category filter")
    view_mode: ViewMode = Field(default=ViewMode.GRID)
    sort_by: SortBy = Field(default=SortBy.UPDATED_AT)
    sort_order: SortOrder = Field(default=SortOrder.DESC)
    filter_by: FilterBy = Field(default=FilterBy.ALL)
