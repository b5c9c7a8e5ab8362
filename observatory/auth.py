"""Password hashing and JWT handling."""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi import HTTPException, status
from jose import JWTError, jwt
from passlib.context import CryptContext

from .config import get_settings

settings = get_settings()


class PasswordHasher:
    """One-way password hashing with a fixed PBKDF2 work factor."""

    def __init__(self, rounds: int = settings.password_hash_rounds) -> None:
        self.rounds = rounds
        self._context = CryptContext(
            schemes=["pbkdf2_sha256"],
            deprecated="auto",
            pbkdf2_sha256__default_rounds=rounds,
        )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, hashed_password: Optional[str]) -> bool:
        if not hashed_password:
            return False
        try:
            return self._context.verify(password, hashed_password)
        except ValueError:
            # stored value is not a recognised hash
            return False


pwd_hasher = PasswordHasher()


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    return pwd_hasher.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_hasher.hash(password)


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """Sign ``data`` (``sub`` is the user id) with issue and expiry times."""

    issued_at = datetime.now(timezone.utc)
    to_encode = {
        **data,
        "iat": issued_at,
        "exp": issued_at + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes)),
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Dict[str, Any]:
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token") from exc


def token_subject(authorization: Optional[str]) -> Optional[str]:
    """User id from a ``Bearer`` header, or ``None`` when it is absent or invalid."""

    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]).get("sub")
    except JWTError:
        return None
