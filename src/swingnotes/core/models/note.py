# Note model for user content
import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel, utcnow
from .types import GUID, UTCDateTime

if TYPE_CHECKING:
    from .user import User

TITLE_MAX_LENGTH = 50
TEXT_MAX_LENGTH = 300


class Note(BaseModel):
    """Short private note: a title and a bit of text."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    text: Mapped[str] = mapped_column(String(TEXT_MAX_LENGTH), nullable=False)

    # owner reference, never reassigned after insert
    owner_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    modified_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
    )

    owner: Mapped["User"] = relationship(
        "User",
        back_populates="notes",
        lazy="raise",
        doc="User who created and owns this note",
    )

    __table_args__ = (
        Index("idx_notes_owner_modified", "owner_id", "modified_at"),
        CheckConstraint(
            f"length(title) >= 1 AND length(title) <= {TITLE_MAX_LENGTH}",
            name="ck_notes_title_len",
        ),
        CheckConstraint(
            f"length(text) >= 1 AND length(text) <= {TEXT_MAX_LENGTH}",
            name="ck_notes_text_len",
        ),
    )

    def __repr__(self) -> str:
        # Keep reprs short in logs
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', owner_id={self.owner_id})>"
