"""Unit tests for password hashing and JWT handling."""
import os
from datetime import datetime, timedelta, timezone

import pytest
from fastapi import HTTPException
from jose import jwt

os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

from observatory.auth import (
    PasswordHasher,
    create_access_token,
    decode_token,
    get_password_hash,
    token_subject,
    verify_password,
)
from observatory.config import get_settings

settings = get_settings()


class TestPasswordHashing:
    """Test password hashing and verification."""

    def test_password_hash_and_verify(self):
        password = "MySecurePassword123!"
        hashed = get_password_hash(password)

        assert hashed != password
        assert verify_password(password, hashed) is True
        assert verify_password("WrongPassword", hashed) is False

    def test_same_password_different_hashes(self):
        """The salt makes every hash unique."""
        password = "TestPassword123"
        hash1 = get_password_hash(password)
        hash2 = get_password_hash(password)

        assert hash1 != hash2
        assert verify_password(password, hash1) is True
        assert verify_password(password, hash2) is True

    def test_fixed_work_factor(self):
        hasher = PasswordHasher(rounds=1234)

        assert hasher.hash("secret").startswith("$pbkdf2-sha256$1234$")

    @pytest.mark.parametrize("stored", [None, "", "not-a-hash"])
    def test_verify_rejects_missing_or_unknown_hash(self, stored):
        assert PasswordHasher(rounds=1000).verify("secret", stored) is False


class TestJWTTokens:
    """Test JWT token creation and decoding."""

    def test_create_access_token(self):
        token = create_access_token({"sub": "user-1", "role": "admin"})

        decoded = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        assert decoded["sub"] == "user-1"
        assert decoded["role"] == "admin"
        assert "exp" in decoded

    def test_create_token_with_custom_expiry(self):
        token = create_access_token({"sub": "user-1"}, timedelta(minutes=30))

        decoded = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        assert decoded["exp"] > datetime.now(timezone.utc).timestamp()

    def test_decode_token_valid(self):
        token = create_access_token({"sub": "user-1", "role": "guest"})

        decoded = decode_token(token)
        assert decoded["sub"] == "user-1"
        assert decoded["role"] == "guest"

    def test_decode_token_invalid(self):
        with pytest.raises(HTTPException) as exc_info:
            decode_token("invalid.token.here")

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Invalid token"

    def test_decode_token_expired(self):
        token = create_access_token({"sub": "user-1"}, timedelta(hours=-1))

        with pytest.raises(HTTPException) as exc_info:
            decode_token(token)

        assert exc_info.value.status_code == 401

    def test_token_records_issue_time(self):
        decoded = decode_token(create_access_token({"sub": "user-1"}, timedelta(minutes=5)))

        assert decoded["exp"] - decoded["iat"] == 300


class TestTokenSubject:
    """Test reading the user id from an Authorization header."""

    def test_bearer_header(self):
        token = create_access_token({"sub": "user-1"})

        assert token_subject(f"Bearer {token}") == "user-1"
        assert token_subject(f"bearer {token}") == "user-1"

    @pytest.mark.parametrize("header", [None, "", "Bearer", "Basic abc", "Bearer invalid.token.here"])
    def test_missing_or_invalid_header(self, header):
        assert token_subject(header) is None

    def test_expired_token(self):
        token = create_access_token({"sub": "user-1"}, timedelta(hours=-1))

        assert token_subject(f"Bearer {token}") is None
