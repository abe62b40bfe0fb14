"""Authentication service for JWT, password handling and principals."""

import logging
import secrets
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from puckmind.config import get_settings
from puckmind.errors import Unauthorized
from puckmind.models.enums import Position
from puckmind.models.user import User
from puckmind.stores.base import Store

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


@dataclass(frozen=True)
class Principal:
    """The authenticated user performing a request."""

    id: int
    email: str
    name: str | None

    @classmethod
    def from_user(cls, user: User) -> "Principal":
        return cls(id=user.id, email=user.email, name=user.name)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: int, email: str) -> str:
    """Create a JWT access token."""
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": str(user_id),
        "email": email,
        "exp": expire,
    }
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return encoded_jwt


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        return payload
    except JWTError:
        return None


def authenticate_user(store: Store, email: str, password: str) -> User | None:
    """Authenticate a user by email and password."""
    user = store.get_user_by_email(email)
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def create_user(store: Store, fields: dict[str, Any]) -> User:
    """Create a new user from validated signup fields."""
    values = dict(fields)
    values["password_hash"] = get_password_hash(values.pop("password"))
    user = store.add_user(values)
    logger.info(f"Created user {user.id} ({user.email})")
    return user


class AuthProvider:
    """Resolves the principal for a request or raises Unauthorized."""

    def authenticate(self, token: str | None, store: Store) -> Principal:
        raise NotImplementedError


class JWTAuthProvider(AuthProvider):
    """Bearer-token authentication; any missing or bad credential is a 401."""

    def authenticate(self, token: str | None, store: Store) -> Principal:
        if not token:
            raise Unauthorized()

        payload = decode_access_token(token)
        if payload is None or payload.get("sub") is None:
            raise Unauthorized()

        try:
            user_id = int(payload["sub"])
        except (TypeError, ValueError):
            raise Unauthorized() from None

        user = store.get_user(user_id)
        if user is None:
            raise Unauthorized()

        return Principal.from_user(user)


class AlwaysDevPrincipal(AuthProvider):
    """Treats every request as the configured development user.

    The user is created in the store on first use with an unguessable
    password, so it cannot be logged into.
    """

    def __init__(self, email: str, name: str):
        self.email = email
        self.name = name

    def authenticate(self, token: str | None, store: Store) -> Principal:
        user = store.get_user_by_email(self.email)
        if user is None:
            user = store.add_user(
                {
                    "email": self.email,
                    "password_hash": get_password_hash(secrets.token_urlsafe(32)),
                    "name": self.name,
                    "team": "Development",
                    "position": Position.CENTER.value,
                }
            )
            logger.info(f"Created development user {user.id} ({user.email})")
        return Principal.from_user(user)
