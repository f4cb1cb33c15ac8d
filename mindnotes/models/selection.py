"""Selection snapshot model."""

from pydantic import BaseModel, Field


class SelectionState(BaseModel):
    """Immutable view of the multi-select state."""

    model_config = {"frozen": True}

    select_mode: bool = Field(default=False, description="Whether bulk select mode is on")
    selected_ids: frozenset[str] = Field(default_factory=frozenset, description="Selected note IDs")
