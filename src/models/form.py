"""Result entry form model."""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class ResultForm(BaseModel):
    """Raw values of the result entry form.

    Every field is kept as entered (a string) so a failed submission can be
    shown back to the operator unchanged. The group label is upper-cased on
    the way in.
    """

    skater_name: str = Field("", alias="skaterName")
    event_name: str = Field("", alias="eventName")
    placement: str = ""
    group_size: str = Field("", alias="groupSize")
    group: str = ""
    # Set when the skater was picked from the option list
    skater_id: Optional[int] = Field(None, alias="skaterId")

    class Config:
        """Pydantic configuration."""

        populate_by_name = True
        validate_assignment = True

    @field_validator("skater_name", "event_name", "placement", "group_size", "group", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    @field_validator("group")
    @classmethod
    def _upper_group(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def empty(cls) -> "ResultForm":
        """The cleared form."""
        return cls()
