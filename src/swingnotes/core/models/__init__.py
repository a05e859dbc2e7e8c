"""
Database models for the Swing Notes application.

Models included:
    - User: account with username/password authentication
    - Note: title/text note owned by exactly one user
"""

from .base import BaseModel
from .note import Note
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Note",
]
