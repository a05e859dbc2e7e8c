"""Middleware for authentication and other cross-cutting concerns."""

from .auth import JWTBearer, authenticate, get_current_user_id

__all__ = ["authenticate", "get_current_user_id", "JWTBearer"]
