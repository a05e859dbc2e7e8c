"""
User model for authentication.
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import CheckConstraint, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel

if TYPE_CHECKING:
    from .note import Note


class User(BaseModel):
    """User account model with username/password auth."""

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(50), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    # notes go away with their owner; the FK cascade does the work
    notes: Mapped[List["Note"]] = relationship(
        "Note",
        back_populates="owner",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="raise",
    )

    __table_args__ = (
        UniqueConstraint("username", name="uq_users_username"),
        # Enforce length bounds at DB level (SQLite compatible)
        CheckConstraint(
            "length(username) >= 3 AND length(username) <= 50", name="ck_users_username_len"
        ),
    )

    def __repr__(self) -> str:
        return f"<User(username='{self.username}')>"
