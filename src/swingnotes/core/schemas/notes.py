"""
Note management schemas.

These schemas define the API contracts for note CRUD operations and search.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_core import PydanticCustomError

from ..models.note import TEXT_MAX_LENGTH, TITLE_MAX_LENGTH

NO_UPDATE_FIELDS_MESSAGE = "No valid fields provided for update (title or text)."


class NoteCreate(BaseModel):
    """Note creation request schema."""

    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH, description="Note title")
    text: str = Field(min_length=1, max_length=TEXT_MAX_LENGTH, description="Note text")

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={"example": {"title": "Groceries", "text": "milk, eggs"}},
    )


class NoteUpdate(BaseModel):
    """Note update request schema. Only the supplied fields change."""

    title: Optional[str] = Field(
        default=None, min_length=1, max_length=TITLE_MAX_LENGTH, description="Note title"
    )
    text: Optional[str] = Field(
        default=None, min_length=1, max_length=TEXT_MAX_LENGTH, description="Note text"
    )

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={"example": {"title": "Shopping"}},
    )

    @model_validator(mode="after")
    def require_one_field(self) -> "NoteUpdate":
        if self.title is None and self.text is None:
            raise PydanticCustomError("no_update_fields", NO_UPDATE_FIELDS_MESSAGE)
        return self


class NoteResponse(BaseModel):
    """Note response schema."""

    id: uuid.UUID = Field(description="Note unique identifier")
    owner_id: uuid.UUID = Field(description="Note owner ID")
    title: str = Field(description="Note title")
    text: str = Field(description="Note text")
    created_at: datetime = Field(description="Creation timestamp")
    modified_at: datetime = Field(description="Last modification timestamp")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "1a2b3c4d-5e6f-7890-abcd-ef0123456789",
                "owner_id": "a1b2c3d4-e5f6-7890-1234-567890abcdef",
                "title": "Groceries",
                "text": "milk, eggs",
                "created_at": "2025-05-15T10:00:00Z",
                "modified_at": "2025-05-15T11:30:00Z",
            }
        },
    )
