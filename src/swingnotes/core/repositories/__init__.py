"""Repository layer for data access."""

from .interfaces import (
    INoteRepository,
    IUserRepository,
    NoteChanges,
    OwnerNotFoundError,
    UsernameTakenError,
)
from .note_repository import NoteRepository
from .user_repository import UserRepository

__all__ = [
    "IUserRepository",
    "INoteRepository",
    "NoteChanges",
    "UsernameTakenError",
    "OwnerNotFoundError",
    "UserRepository",
    "NoteRepository",
]
