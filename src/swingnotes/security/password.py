"""Password hashing utilities."""

import logging

from passlib.context import CryptContext
from passlib.exc import UnknownHashError

from ..core.errors import AppError

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10

# Password hashing context
# Use bcrypt_sha256 to avoid bcrypt's 72-byte truncation issue on long passwords
# This pre-hashes with SHA-256 before applying bcrypt.
pwd_context = CryptContext(
    schemes=["bcrypt_sha256"],
    deprecated="auto",
    bcrypt_sha256__rounds=BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    """Hash a password.

    Raises AppError(INTERNAL) if the backend fails; a broken hasher is a
    server fault, not something the caller can fix.
    """
    try:
        return pwd_context.hash(password)
    except (ValueError, TypeError, RuntimeError) as e:
        logger.error(f"Password hashing failed: {e}")
        raise AppError.internal("Could not hash password.") from e


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (UnknownHashError, ValueError):
        # stored value isn't a hash we recognise
        logger.warning("Stored password hash could not be parsed")
        return False


def needs_update(hashed_password: str) -> bool:
    """Check if password hash needs updating."""
    return pwd_context.needs_update(hashed_password)


def verify_dummy_password() -> bool:
    """Spend one verification's worth of time for a user that doesn't exist.

    Always False.
    """
    pwd_context.dummy_verify()
    return False
