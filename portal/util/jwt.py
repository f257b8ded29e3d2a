"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from pydantic import BaseModel

from portal.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload.

    ``purpose`` separates session tokens from single-use tokens such as
    password reset; a token is only accepted for the purpose it was minted
    for. ``pwd`` binds a reset token to the password hash it was issued
    against.
    """

    sub: str
    email: str
    purpose: str
    role: str | None = None
    pwd: str | None = None
    iat: datetime
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    claims: dict[str, Any], purpose: str, expires_in: timedelta, settings: AuthSettings
) -> str:
    """Create a signed JWT.

    Args:
        claims: Identity claims (must include ``sub`` and ``email``)
        purpose: What the token may be redeemed for
        expires_in: Validity window
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    issued_at = datetime.now(timezone.utc)

    payload = {
        **claims,
        "purpose": purpose,
        "iat": issued_at,
        "exp": issued_at + expires_in,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, purpose: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        purpose: Purpose the caller expects
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid, expired, or minted for another purpose
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp", "iat"]},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    if payload.get("purpose") != purpose:
        raise JWTError("Token purpose mismatch")

    try:
        return TokenPayload(**payload)
    except ValueError:
        raise JWTError("Malformed token payload")
