"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from redditclone.config import AuthSettings


class TokenUser(BaseModel):
    """User claim carried in the token."""

    id: str = Field(min_length=1)
    username: str = Field(min_length=1)


class TokenPayload(BaseModel):
    """JWT token payload."""

    user: TokenUser
    iat: int
    exp: int


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str,
    username: str,
    settings: AuthSettings,
    now: Optional[datetime] = None,
) -> str:
    """Create a JWT token for the user.

    Args:
        user_id: User ID
        username: Username
        settings: Authentication settings
        now: Issuance time, defaults to the current time

    Returns:
        Encoded JWT token
    """
    issued = now or datetime.now(timezone.utc)
    expiry = issued + timedelta(seconds=settings.token_ttl_seconds)

    payload = {
        "user": {"id": user_id, "username": username},
        "iat": int(issued.timestamp()),
        "exp": int(expiry.timestamp()),
    }

    token = jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    return token


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Only the configured HMAC algorithm is accepted, so tokens signed with
    another algorithm (including "none") are rejected.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid, expired or lacks a username
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "iat"]},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("token has expired")
    except (jwt.InvalidTokenError, PydanticValidationError, TypeError):
        raise JWTError("invalid token")
