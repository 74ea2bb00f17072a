"""
Password hashing and access token helpers.

Passwords are hashed with pwdlib's recommended hasher (Argon2). Access
tokens are HS256 JWTs whose ``sub`` claim is the user id.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from pwdlib import PasswordHash
from pydantic import BaseModel

from marketplace.server.core.config import JWTConfig, settings


class TokenData(BaseModel):
    sub: str
    iat: int
    exp: int


class InvalidTokenError(Exception):
    """Raised when an access token cannot be decoded or has expired."""


def _get_password_hasher() -> PasswordHash:
    if not hasattr(_get_password_hasher, "cached_instance"):
        _get_password_hasher.cached_instance = PasswordHash.recommended()
    return _get_password_hasher.cached_instance


def hash_password(password: str) -> str:
    """Hash a password using Argon2.

    Args:
        password: Plain text password to hash

    Returns:
        Hashed password string that can be safely stored in a database
    """
    return _get_password_hasher().hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return _get_password_hasher().verify(plain_password, hashed_password)


def create_access_token(subject: str, jwt_config: Optional[JWTConfig] = None) -> str:
    """Issue a signed access token for ``subject``.

    Args:
        subject: Value of the ``sub`` claim (the user id)
        jwt_config: Signing configuration; defaults to the application settings

    Returns:
        Encoded JWT
    """
    cfg = jwt_config or settings.jwt
    now = datetime.now(timezone.utc)
    payload: Dict[str, Any] = {
        "sub": subject,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(seconds=cfg.expires_in)).timestamp()),
    }
    return jwt.encode(payload, cfg.secret, algorithm=cfg.algorithm)


def decode_access_token(token: str, jwt_config: Optional[JWTConfig] = None) -> TokenData:
    """Decode and validate an access token.

    Raises:
        InvalidTokenError: If the token is malformed, badly signed or expired
    """
    cfg = jwt_config or settings.jwt
    try:
        payload = jwt.decode(token, cfg.secret, algorithms=[cfg.algorithm])
        return TokenData(**payload)
    except jwt.ExpiredSignatureError as exc:
        raise InvalidTokenError("Token has expired") from exc
    except (jwt.InvalidTokenError, ValueError) as exc:
        raise InvalidTokenError("Invalid token") from exc
