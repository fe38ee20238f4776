"""Tests for password hashing and access tokens"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from issuetracker.exceptions import AuthenticationError
from issuetracker.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_hash_and_verify():
    encoded = hash_password("secret123")

    assert encoded.startswith("pbkdf2_sha256$1000$")
    assert "secret123" not in encoded
    assert verify_password("secret123", encoded)
    assert not verify_password("secret124", encoded)


def test_hash_is_salted():
    assert hash_password("secret123") != hash_password("secret123")


def test_explicit_iterations_recorded():
    encoded = hash_password("secret123", iterations=2000)

    assert encoded.split("$")[1] == "2000"
    assert verify_password("secret123", encoded)


@pytest.mark.parametrize("encoded", [
    "",
    "plain",
    "md5$1$abc$def",
    "pbkdf2_sha256$many$c2FsdA==$ZGlnZXN0",
    "pbkdf2_sha256$1000$not base64!$ZGlnZXN0",
    "pbkdf2_sha256$0$c2FsdA==$ZGlnZXN0",
])
def test_verify_rejects_malformed_hashes(encoded):
    assert verify_password("secret123", encoded) is False


def test_token_round_trip(config):
    token = create_access_token("user-1", "alice@example.com", config)

    payload = decode_access_token(token, config)
    assert payload["sub"] == "user-1"
    assert payload["email"] == "alice@example.com"
    assert payload["exp"] - payload["iat"] == timedelta(days=7).total_seconds()


def test_expired_token_rejected(config):
    past = datetime.now(timezone.utc) - timedelta(days=1)
    token = jwt.encode({"sub": "user-1", "exp": past}, config.jwt_secret, algorithm="HS256")

    with pytest.raises(AuthenticationError) as exc_info:
        decode_access_token(token, config)
    assert exc_info.value.message == "Invalid or expired token"


def test_tampered_token_rejected(config):
    token = create_access_token("user-1", "alice@example.com", config)
    header, payload, signature = token.split(".")
    tampered = ".".join([header, payload, signature[::-1]])

    with pytest.raises(AuthenticationError):
        decode_access_token(tampered, config)


def test_token_without_subject_rejected(config):
    future = datetime.now(timezone.utc) + timedelta(days=1)
    token = jwt.encode({"exp": future}, config.jwt_secret, algorithm="HS256")

    with pytest.raises(AuthenticationError):
        decode_access_token(token, config)
