"""
Password hashing and access-token primitives.

Thin wrappers around bcrypt and PyJWT so the rest of the code base never
touches either library directly.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
import jwt

from storefront.config import BCRYPT_ROUNDS, JWT_ALGORITHM, JWT_EXPIRES_MINUTES, JWT_SECRET
from storefront.services.errors import AuthenticationError

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Salted one-way bcrypt hash, returned as text for storage."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(password: str, stored_hash: Optional[str]) -> bool:
    if not password or not stored_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), stored_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        logger.warning("Stored password is not a valid bcrypt hash")
        return False


def token_lifetime() -> timedelta:
    return timedelta(minutes=JWT_EXPIRES_MINUTES)


def create_access_token(claims: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    payload = dict(claims)
    payload["exp"] = datetime.now(timezone.utc) + (expires_delta or token_lifetime())
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_access_token(token: Optional[str]) -> Dict[str, Any]:
    """
    Verify signature and expiry and return the embedded claims.

    Raises:
        AuthenticationError: token missing, malformed, expired or badly signed
    """
    if not token:
        raise AuthenticationError("Token not provided")
    try:
        return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token has expired")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Rejected access token: {e}")
        raise AuthenticationError("Invalid token")
