"""
Category model and the fixed category swatch palette.
"""

from pydantic import BaseModel, Field

DEFAULT_CATEGORY_ID = "personal"
DEFAULT_SWATCH = "bg-blue-500"

# swatch class -> display name
CATEGORY_SWATCHES: dict[str, str] = {
    "bg-red-500": "Red",
    "bg-orange-500": "Orange",
    "bg-yellow-500": "Yellow",
    "bg-green-500": "Green",
    "bg-blue-500": "Blue",
    "bg-indigo-500": "Indigo",
    "bg-purple-500": "Purple",
    "bg-pink-500": "Pink",
    "bg-gray-500": "Gray",
}

EDITABLE_FIELDS = frozenset({"name", "color"})


class Category(BaseModel):
    """
    Named, colored grouping bucket for Notes.

    ``note_count`` is a maintained counter, not a recomputation. It is kept
    in sync by the coordinator on every membership change.
    """

    model_config = {"frozen": True}

    id: str = Field(..., description="Unique category ID")
    name: str = Field(..., description="Display name")
    color: str = Field(default=DEFAULT_SWATCH, description="Swatch class")
    note_count: int = Field(default=0, ge=0, description="Maintained membership counter")

    @property
    def is_default(self) -> bool:
        """True for the non-deletable default category."""
        return self.id == DEFAULT_CATEGORY_ID


SEED_CATEGORIES: tuple[Category, ...] = (
    Category(id=DEFAULT_CATEGORY_ID, name="Personal", color="bg-blue-500"),
    Category(id="work", name="Work", color="bg-green-500"),
    Category(id="ideas", name="Ideas", color="bg-purple-500"),
    Category(id="projects", name="Projects", color="bg-orange-500"),
    Category(id="health", name="Health", color="bg-red-500"),
    Category(id="finance", name="Finance", color="bg-yellow-500"),
)
