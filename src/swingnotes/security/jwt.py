"""JWT token utilities.

Tokens are stateless: nothing is stored server side, so a token stays valid
until its ``exp`` claim passes. The only claims issued are ``sub`` (user id),
``iat`` and ``exp``.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Union
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt

DEFAULT_ALGORITHM = "HS256"


class TokenError(Exception):
    """Base class for token verification failures."""


class InvalidTokenError(TokenError):
    """Malformed token, bad signature, wrong algorithm or unusable subject."""


class ExpiredTokenError(TokenError):
    """Signature checks out but the token is past its ``exp``."""


@dataclass(frozen=True)
class TokenPayload:
    """Verified token contents."""

    subject: UUID
    issued_at: datetime
    expires_at: datetime


def create_access_token(
    subject: Union[UUID, str],
    secret_key: str,
    expires_delta: timedelta,
    algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """Create a signed access token for ``subject``."""
    now = datetime.now(timezone.utc)
    to_encode: Dict[str, Any] = {
        "sub": str(subject),
        "iat": int(now.timestamp()),
        "exp": int((now + expires_delta).timestamp()),
    }
    return jwt.encode(to_encode, secret_key, algorithm=algorithm)


def decode_access_token(
    token: str, secret_key: str, algorithm: str = DEFAULT_ALGORITHM
) -> TokenPayload:
    """Verify signature and expiry, then return the payload.

    Raises ExpiredTokenError or InvalidTokenError.
    """
    if not token:
        raise InvalidTokenError("empty token")

    try:
        payload = jwt.decode(
            token,
            secret_key,
            algorithms=[algorithm],
            options={"require_exp": True, "require_sub": True, "leeway": 0},
        )
    except ExpiredSignatureError as e:
        raise ExpiredTokenError(str(e)) from e
    except JWTError as e:
        raise InvalidTokenError(str(e)) from e

    try:
        subject = UUID(payload["sub"])
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidTokenError("subject is not a user id") from e

    exp = payload["exp"]
    iat = payload.get("iat", exp)
    return TokenPayload(
        subject=subject,
        issued_at=datetime.fromtimestamp(iat, tz=timezone.utc),
        expires_at=datetime.fromtimestamp(exp, tz=timezone.utc),
    )


def get_user_id_from_token(
    token: str, secret_key: str, algorithm: str = DEFAULT_ALGORITHM
) -> UUID:
    """Extract user ID from token (raises TokenError subclasses)."""
    return decode_access_token(token, secret_key, algorithm).subject
