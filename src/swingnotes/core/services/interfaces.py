"""
Service interfaces for the Swing Notes application.

Payloads arrive as the raw mappings the client sent; each service validates
them itself before touching storage. Caller ids always come from the request
authenticator, never from a payload.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional, Union
from uuid import UUID

from ..schemas.auth import AuthResponse
from ..schemas.notes import NoteResponse

NoteId = Union[UUID, str, None]


class IAuthService(ABC):
    """Auth service for user management."""

    @abstractmethod
    async def register(self, payload: Optional[Mapping[str, Any]]) -> AuthResponse:
        """Register new user and return a token for it."""
        pass

    @abstractmethod
    async def login(self, payload: Optional[Mapping[str, Any]]) -> AuthResponse:
        """Check credentials and return a fresh token."""
        pass

    @abstractmethod
    async def delete_account(self, caller_id: UUID) -> None:
        """Delete the caller's account and all of their notes."""
        pass


class INoteService(ABC):
    """Note service for CRUD operations."""

    @abstractmethod
    async def create_note(
        self, caller_id: UUID, payload: Optional[Mapping[str, Any]]
    ) -> NoteResponse:
        """Create new note."""
        pass

    @abstractmethod
    async def list_notes(self, caller_id: UUID) -> List[NoteResponse]:
        """List caller notes, most recently modified first."""
        pass

    @abstractmethod
    async def get_note(self, caller_id: UUID, note_id: NoteId) -> NoteResponse:
        """Get one of the caller's notes."""
        pass

    @abstractmethod
    async def update_note(
        self, caller_id: UUID, note_id: NoteId, payload: Optional[Mapping[str, Any]]
    ) -> NoteResponse:
        """Update existing note."""
        pass

    @abstractmethod
    async def delete_note(self, caller_id: UUID, note_id: NoteId) -> None:
        """Delete note."""
        pass

    @abstractmethod
    async def search_notes(self, caller_id: UUID, term: Optional[str]) -> List[NoteResponse]:
        """Search caller notes by title."""
        pass
