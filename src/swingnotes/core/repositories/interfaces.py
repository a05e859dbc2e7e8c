"""
Persistence contracts consumed by the services.

Every note operation that selects or mutates a row takes the owner id as well
as the note id, so a note belonging to someone else looks exactly like a
missing one.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional
from uuid import UUID

from ..models.note import Note
from ..models.user import User


class UsernameTakenError(Exception):
    """The unique username constraint rejected an insert."""


class OwnerNotFoundError(Exception):
    """A note was written for a user id that no longer exists."""


@dataclass(frozen=True)
class NoteChanges:
    """Partial note update. ``None`` means leave the column alone."""

    title: Optional[str] = None
    text: Optional[str] = None

    def as_dict(self) -> Dict[str, str]:
        return {
            key: value
            for key, value in (("title", self.title), ("text", self.text))
            if value is not None
        }

    def is_empty(self) -> bool:
        return not self.as_dict()


class IUserRepository(ABC):
    """User storage."""

    @abstractmethod
    async def create_user(self, username: str, password_hash: str) -> User:
        """Insert a user; raises UsernameTakenError on a duplicate username."""

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID."""

    @abstractmethod
    async def delete_user(self, user_id: UUID) -> bool:
        """Delete a user and, through the FK cascade, their notes."""


class INoteRepository(ABC):
    """Owner-scoped note storage."""

    @abstractmethod
    async def create_note(self, owner_id: UUID, title: str, text: str) -> Note:
        """Insert a note; raises OwnerNotFoundError if the owner is gone."""

    @abstractmethod
    async def list_by_owner(self, owner_id: UUID) -> List[Note]:
        """All notes of an owner, most recently modified first."""

    @abstractmethod
    async def get_by_id_and_owner(self, note_id: UUID, owner_id: UUID) -> Optional[Note]:
        """Get note by ID if owned by owner_id."""

    @abstractmethod
    async def update_note(
        self, note_id: UUID, owner_id: UUID, changes: NoteChanges
    ) -> Optional[Note]:
        """Apply the supplied fields and bump modified_at; None if no such owned note."""

    @abstractmethod
    async def delete_note(self, note_id: UUID, owner_id: UUID) -> bool:
        """Delete note if owned by owner_id."""

    @abstractmethod
    async def search_by_title(self, owner_id: UUID, term: str) -> List[Note]:
        """Case-insensitive substring match on title, most recently modified first."""
