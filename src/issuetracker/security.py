"""Password hashing and JWT access tokens"""

import base64
import binascii
import hashlib
import hmac
import os
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from .config import Config
from .exceptions import AuthenticationError

PBKDF2_ALGORITHM = "pbkdf2_sha256"
PBKDF2_ITERATIONS = 390000
SALT_BYTES = 16


def _b64(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


def hash_password(password: str, iterations: Optional[int] = None) -> str:
    """Salted PBKDF2 hash as ``pbkdf2_sha256$<iterations>$<salt>$<hash>``"""
    iterations = iterations or PBKDF2_ITERATIONS
    salt = os.urandom(SALT_BYTES)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return f"{PBKDF2_ALGORITHM}${iterations}${_b64(salt)}${_b64(digest)}"


def verify_password(password: str, encoded: str) -> bool:
    try:
        algorithm, iterations, salt, expected = encoded.split("$")
        iterations = int(iterations)
        salt = base64.b64decode(salt, validate=True)
    except (ValueError, binascii.Error):
        return False
    if algorithm != PBKDF2_ALGORITHM or iterations < 1:
        return False

    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return hmac.compare_digest(_b64(digest), expected)


def create_access_token(user_id: str, email: str, config: Config) -> str:
    """Signed token carrying the user id (``sub``) and email"""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "email": email,
        "iat": now,
        "exp": now + timedelta(days=config.jwt_expires_days),
    }
    return jwt.encode(payload, config.jwt_secret, algorithm=config.jwt_algorithm)


def decode_access_token(token: str, config: Config) -> Dict[str, Any]:
    """Verify signature and expiry; raises AuthenticationError otherwise"""
    try:
        payload = jwt.decode(
            token,
            config.jwt_secret,
            algorithms=[config.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.PyJWTError as e:
        raise AuthenticationError("Invalid or expired token") from e
    return payload
