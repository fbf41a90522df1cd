"""Event data model."""

from pydantic import BaseModel, Field


class Event(BaseModel):
    """A named heat, scoped to a competition."""

    id: int = Field(..., alias="EventID")
    name: str = Field(..., alias="EventName")
    is_championship: bool = Field(False, alias="IsChamp")
    competition_id: int | None = Field(None, alias="CompID")

    class Config:
        """Pydantic configuration."""

        populate_by_name = True
