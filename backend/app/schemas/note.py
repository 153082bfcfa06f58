"""Customer note schemas."""

from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from backend.app.schemas.user import UserSummary
from backend.app.services.notes import extract_note_text


class NoteCreate(BaseModel):
    """Note text must be a plain string; nested objects are rejected."""

    note: str
    next_follow_up_date: Optional[date] = None
    next_follow_up_action: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("next_follow_up_date", mode="before")
    @classmethod
    def _blank_date(cls, value: Any) -> Any:
        return None if value == "" else value


class NoteUpdate(NoteCreate):
    """Schema for editing a note."""


class NoteRead(BaseModel):
    id: int
    customer_id: int
    # Declared before ``note`` so its validator can see it
    legacy: bool = Field(default=False, exclude=True)
    note: str
    next_follow_up_date: Optional[date] = None
    added_by: Optional[UserSummary] = None
    added_at: datetime
    edited_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("note", mode="before")
    @classmethod
    def _flatten_legacy_note(cls, value: Any, info: ValidationInfo) -> Any:
        if info.data.get("legacy"):
            return extract_note_text(value)
        return value
