"""Point value and result data models."""

from typing import Optional

from pydantic import BaseModel, Field


class PointValue(BaseModel):
    """Points awarded for a placement within a group of a given size."""

    group_size: int = Field(..., alias="GroupSize")
    placement: int = Field(..., alias="Placement")
    points: int = Field(..., alias="Points")

    class Config:
        """Pydantic configuration."""

        populate_by_name = True


class Result(BaseModel):
    """One skater's outcome in one event."""

    id: Optional[int] = Field(None, alias="ResultID")
    event_id: Optional[int] = Field(None, alias="EventID")
    skater_id: Optional[int] = Field(None, alias="SkaterID")
    points: int = Field(0, alias="Points")
    group: Optional[str] = Field(None, alias="Group")

    class Config:
        """Pydantic configuration."""

        populate_by_name = True

    def to_row(self) -> dict:
        """Column-keyed row for insertion (store assigns ResultID)."""
        return self.model_dump(by_alias=True, exclude={"id"})
