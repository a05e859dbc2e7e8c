"""Note repository for database operations."""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, delete, desc, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.base import utcnow
from ..models.note import Note
from .base import storage_guard
from .interfaces import INoteRepository, NoteChanges, OwnerNotFoundError

logger = logging.getLogger(__name__)

LIKE_ESCAPE = "\\"


def _like_pattern(term: str) -> str:
    """Wrap ``term`` for a substring LIKE, treating % and _ literally."""
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


class NoteRepository(INoteRepository):
    """Repository for note database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _owned(self, note_id: UUID, owner_id: UUID):
        return and_(Note.id == note_id, Note.owner_id == owner_id)

    async def create_note(self, owner_id: UUID, title: str, text: str) -> Note:
        """Create new note."""
        async with storage_guard(self.session, "Could not create note."):
            now = utcnow()
            note = Note(
                owner_id=owner_id, title=title, text=text, created_at=now, modified_at=now
            )
            self.session.add(note)
            try:
                await self.session.commit()
            except IntegrityError as e:
                # FK violation: the owner was deleted after the token was issued
                await self.session.rollback()
                raise OwnerNotFoundError(str(owner_id)) from e
            await self.session.refresh(note)
            return note

    async def list_by_owner(self, owner_id: UUID) -> List[Note]:
        """List all notes of a user, newest modification first."""
        async with storage_guard(self.session, "Could not retrieve notes."):
            stmt = (
                select(Note)
                .where(Note.owner_id == owner_id)
                .order_by(desc(Note.modified_at), desc(Note.created_at))
            )
            result = await self.session.execute(stmt)
            return list(result.scalars())

    async def get_by_id_and_owner(self, note_id: UUID, owner_id: UUID) -> Optional[Note]:
        """Get note by ID if owned by user."""
        async with storage_guard(self.session, "Could not retrieve note by ID."):
            stmt = select(Note).where(self._owned(note_id, owner_id))
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()

    async def update_note(
        self, note_id: UUID, owner_id: UUID, changes: NoteChanges
    ) -> Optional[Note]:
        """Update note if owned by user.

        One UPDATE ... WHERE id AND owner_id, so the ownership check and the
        write cannot be separated by another request.
        """
        values = changes.as_dict()
        if not values:
            return None

        async with storage_guard(self.session, "Could not update note."):
            stmt = (
                update(Note)
                .where(self._owned(note_id, owner_id))
                .values(**values, modified_at=utcnow())
                .returning(Note)
                .execution_options(populate_existing=True)
            )
            result = await self.session.execute(stmt)
            note = result.scalar_one_or_none()
            await self.session.commit()
            return note

    async def delete_note(self, note_id: UUID, owner_id: UUID) -> bool:
        """Delete note if owned by user."""
        async with storage_guard(self.session, "Could not delete note."):
            stmt = delete(Note).where(self._owned(note_id, owner_id))
            result = await self.session.execute(stmt)
            await self.session.commit()
            deleted = result.rowcount > 0
            if not deleted:
                logger.debug(f"Note {note_id} not found or not owned by user {owner_id}")
            return deleted

    async def search_by_title(self, owner_id: UUID, term: str) -> List[Note]:
        """Search the user's notes by title (case-insensitive, partial match)."""
        async with storage_guard(self.session, "Could not search notes."):
            stmt = (
                select(Note)
                .where(
                    Note.owner_id == owner_id,
                    Note.title.ilike(_like_pattern(term), escape=LIKE_ESCAPE),
                )
                .order_by(desc(Note.modified_at), desc(Note.created_at))
            )
            result = await self.session.execute(stmt)
            return list(result.scalars())
