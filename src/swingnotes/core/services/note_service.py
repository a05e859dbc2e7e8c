"""Note service implementation."""

import logging
from typing import Any, List, Mapping, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import AppError
from ..repositories.interfaces import INoteRepository, NoteChanges, OwnerNotFoundError
from ..repositories.note_repository import NoteRepository
from ..schemas.notes import NoteCreate, NoteResponse, NoteUpdate
from ..validation import validate
from .interfaces import INoteService, NoteId

logger = logging.getLogger(__name__)

NOTE_ID_REQUIRED = "Note ID is required."
SEARCH_TERM_REQUIRED = "Search query (q) is required."
NOTE_NOT_FOUND = "Note not found."
UPDATE_NOT_FOUND = "Note not found or you do not have permission to update it."
DELETE_NOT_FOUND = "Note not found or you do not have permission to delete it."
OWNER_NOT_FOUND = "User not found."


def _parse_note_id(note_id: NoteId) -> Optional[UUID]:
    """Return the UUID, or None when it can't name any note.

    A missing id is a client error; a malformed one is treated like an id
    that matches nothing.
    """
    if note_id is None or (isinstance(note_id, str) and not note_id.strip()):
        raise AppError.bad_request(NOTE_ID_REQUIRED)
    if isinstance(note_id, UUID):
        return note_id
    try:
        return UUID(str(note_id).strip())
    except ValueError:
        return None


class NoteService(INoteService):
    """Note service implementation.

    Every lookup passes the caller id down to the repository, so notes of
    other users are never loaded, let alone compared.
    """

    def __init__(self, session: Optional[AsyncSession], note_repo: Optional[INoteRepository] = None):
        self.session = session
        self.note_repo = note_repo or NoteRepository(session)

    async def create_note(
        self, caller_id: UUID, payload: Optional[Mapping[str, Any]]
    ) -> NoteResponse:
        """Create new note."""
        request: NoteCreate = validate("note-create", payload)

        try:
            note = await self.note_repo.create_note(caller_id, request.title, request.text)
        except OwnerNotFoundError:
            raise AppError.not_found(OWNER_NOT_FOUND) from None

        logger.debug(f"User {caller_id} created note {note.id}")
        return NoteResponse.model_validate(note)

    async def list_notes(self, caller_id: UUID) -> List[NoteResponse]:
        """List user notes."""
        notes = await self.note_repo.list_by_owner(caller_id)
        return [NoteResponse.model_validate(note) for note in notes]

    async def get_note(self, caller_id: UUID, note_id: NoteId) -> NoteResponse:
        """Get note by ID (404 for notes of other users, same as missing ones)."""
        parsed_id = _parse_note_id(note_id)
        note = None
        if parsed_id is not None:
            note = await self.note_repo.get_by_id_and_owner(parsed_id, caller_id)
        if not note:
            raise AppError.not_found(NOTE_NOT_FOUND)
        return NoteResponse.model_validate(note)

    async def update_note(
        self, caller_id: UUID, note_id: NoteId, payload: Optional[Mapping[str, Any]]
    ) -> NoteResponse:
        """Update existing note."""
        parsed_id = _parse_note_id(note_id)
        request: NoteUpdate = validate("note-update", payload)

        note = None
        if parsed_id is not None:
            changes = NoteChanges(title=request.title, text=request.text)
            note = await self.note_repo.update_note(parsed_id, caller_id, changes)
        if not note:
            raise AppError.not_found(UPDATE_NOT_FOUND)

        logger.debug(f"User {caller_id} updated note {note.id}")
        return NoteResponse.model_validate(note)

    async def delete_note(self, caller_id: UUID, note_id: NoteId) -> None:
        """Delete note."""
        parsed_id = _parse_note_id(note_id)
        deleted = False
        if parsed_id is not None:
            deleted = await self.note_repo.delete_note(parsed_id, caller_id)
        if not deleted:
            raise AppError.not_found(DELETE_NOT_FOUND)

        logger.debug(f"User {caller_id} deleted note {parsed_id}")

    async def search_notes(self, caller_id: UUID, term: Optional[str]) -> List[NoteResponse]:
        """Search user notes by title. No matches is an empty list."""
        if term is None or not term.strip():
            raise AppError.bad_request(SEARCH_TERM_REQUIRED)

        notes = await self.note_repo.search_by_title(caller_id, term)
        return [NoteResponse.model_validate(note) for note in notes]
