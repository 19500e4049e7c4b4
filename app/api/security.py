"""
Password hashing and bearer-token handling.
"""

import logging
from datetime import datetime, timedelta, timezone

from fastapi import HTTPException, status
from jose import ExpiredSignatureError, JWTError, jwt
from werkzeug.security import check_password_hash, generate_password_hash

from app.api.config import get_access_token_minutes, get_jwt_secret

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


class CredentialsException(HTTPException):
    """401 with the bearer challenge header."""

    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return check_password_hash(password_hash, password)


def create_access_token(user_id: int, expires_minutes: int | None = None) -> str:
    """
    Issue a signed access token for a user.

    Args:
        user_id: Subject of the token
        expires_minutes: Lifetime override (defaults to ACCESS_TOKEN_MINUTES)

    Returns:
        Encoded JWT
    """
    minutes = expires_minutes if expires_minutes is not None else get_access_token_minutes()
    expire = datetime.now(timezone.utc) + timedelta(minutes=minutes)
    claims = {"sub": str(user_id), "exp": expire}
    return jwt.encode(claims, get_jwt_secret(), algorithm=ALGORITHM)


def decode_access_token(token: str) -> int:
    """
    Validate a token and return the user id it was issued for.

    Raises:
        CredentialsException: If the token is expired, malformed or has no subject
    """
    try:
        payload = jwt.decode(token, get_jwt_secret(), algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        raise CredentialsException("Token has expired")
    except JWTError as e:
        logger.debug(f"Rejected token: {e}")
        raise CredentialsException("Invalid token")

    subject = payload.get("sub")
    try:
        return int(subject)
    except (TypeError, ValueError):
        raise CredentialsException("Invalid token subject")
