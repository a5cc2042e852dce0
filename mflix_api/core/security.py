# Password hashing and JWT issuance
# mflix_api/core/security.py

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError

from mflix_api.core.config import settings
from mflix_api.core.errors import UnauthorizedError

logger = logging.getLogger(__name__)

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


# --- Passwords ---

def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """Hashes a plaintext password with bcrypt and returns the hash as text."""
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

def verify_password(password: str, password_hash: str) -> bool:
    """Checks a plaintext password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        logger.warning("Password verification failed: malformed stored hash.")
        return False


# --- Tokens ---

def _secret_for(token_type: str) -> str:
    if token_type == REFRESH_TOKEN_TYPE:
        return settings.REFRESH_SECRET.get_secret_value()
    return settings.JWT_SECRET.get_secret_value()

def _lifetime_for(token_type: str) -> timedelta:
    if token_type == REFRESH_TOKEN_TYPE:
        return timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)
    return timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

def token_max_age(token_type: str) -> int:
    """Token lifetime in seconds, used for the matching cookie's Max-Age."""
    return int(_lifetime_for(token_type).total_seconds())

def create_token(username: str, token_type: str) -> str:
    """
    Signs a time-limited JWT for a user.

    Args:
        username: Stored in the 'sub' claim.
        token_type: ACCESS_TOKEN_TYPE or REFRESH_TOKEN_TYPE; selects secret and lifetime.

    Returns:
        The encoded token.
    """
    issued_at = datetime.now(timezone.utc)
    payload = {
        "sub": username,
        "type": token_type,
        "iat": issued_at,
        "exp": issued_at + _lifetime_for(token_type),
    }
    return jwt.encode(payload, _secret_for(token_type), algorithm=settings.JWT_ALGORITHM)

def create_access_token(username: str) -> str:
    return create_token(username, ACCESS_TOKEN_TYPE)

def create_refresh_token(username: str) -> str:
    return create_token(username, REFRESH_TOKEN_TYPE)

def decode_token(token: str, token_type: str = ACCESS_TOKEN_TYPE) -> Dict[str, Any]:
    """
    Verifies a token issued by create_token and returns its payload.

    Raises:
        UnauthorizedError: If the token is expired, badly signed or of another type.
    """
    try:
        payload = jwt.decode(
            token,
            _secret_for(token_type),
            algorithms=[settings.JWT_ALGORITHM],
            options={"verify_signature": True, "verify_exp": True},
        )
    except ExpiredSignatureError:
        logger.warning("Token verification failed: token expired.")
        raise UnauthorizedError("Token has expired")
    except JWTError as e:
        logger.warning(f"Token verification failed: invalid token - {e}")
        raise UnauthorizedError("Invalid token", str(e))

    if payload.get("type") != token_type:
        logger.warning(f"Token verification failed: expected {token_type} token, got {payload.get('type')}.")
        raise UnauthorizedError("Invalid token", "Unexpected token type")
    return payload
