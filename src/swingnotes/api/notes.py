"""Notes API endpoints."""

from typing import Any, List, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import ApiResponse, ErrorResponse
from ..core.schemas.notes import NoteResponse
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id

router = APIRouter(
    prefix="/notes",
    tags=["notes"],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)


@router.get("", response_model=ApiResponse[List[NoteResponse]])
async def list_notes(
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """List the caller's notes, most recently modified first."""
    notes = await NoteService(session).list_notes(current_user_id)
    return ApiResponse[List[NoteResponse]](message="Notes retrieved successfully!", data=notes)


@router.post("", response_model=ApiResponse[NoteResponse], status_code=status.HTTP_201_CREATED)
async def create_note(
    payload: Any = Body(None),
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note."""
    note = await NoteService(session).create_note(current_user_id, payload)
    return ApiResponse[NoteResponse](message="Note created successfully!", data=note)


@router.get("/search", response_model=ApiResponse[List[NoteResponse]])
async def search_notes(
    q: Optional[str] = Query(None, description="Case-insensitive title substring"),
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Search the caller's notes by title."""
    notes = await NoteService(session).search_notes(current_user_id, q)
    message = (
        "Notes found successfully!" if notes else "No notes found matching your search criteria."
    )
    return ApiResponse[List[NoteResponse]](message=message, data=notes)


@router.get("/{note_id}", response_model=ApiResponse[NoteResponse])
async def get_note(
    note_id: str,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a specific note."""
    note = await NoteService(session).get_note(current_user_id, note_id)
    return ApiResponse[NoteResponse](message="Note retrieved successfully!", data=note)


@router.put("", response_model=ApiResponse[NoteResponse])
async def update_note(
    id: Optional[str] = Query(None, description="Note id"),
    payload: Any = Body(None),
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Update a note's title and/or text."""
    note = await NoteService(session).update_note(current_user_id, id, payload)
    return ApiResponse[NoteResponse](message="Note updated successfully!", data=note)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(
    id: Optional[str] = Query(None, description="Note id"),
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a note."""
    await NoteService(session).delete_note(current_user_id, id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
