"""Security utilities."""

from .jwt import (
    ExpiredTokenError,
    InvalidTokenError,
    TokenError,
    TokenPayload,
    create_access_token,
    decode_access_token,
    get_user_id_from_token,
)
from .password import hash_password, needs_update, verify_dummy_password, verify_password

__all__ = [
    "hash_password",
    "verify_password",
    "verify_dummy_password",
    "needs_update",
    "create_access_token",
    "decode_access_token",
    "get_user_id_from_token",
    "TokenPayload",
    "TokenError",
    "InvalidTokenError",
    "ExpiredTokenError",
]
