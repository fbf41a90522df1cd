"""Skater data model."""

from pydantic import BaseModel, Field


class Skater(BaseModel):
    """A competitor, identified by first and last name."""

    id: int = Field(..., alias="SkaterID")
    first_name: str = Field("", alias="FirstName")
    last_name: str = Field("", alias="LastName")

    class Config:
        """Pydantic configuration."""

        populate_by_name = True

    @property
    def display_name(self) -> str:
        """Name as shown in the skater picker ("First Last")."""
        return f"{self.first_name} {self.last_name}"
