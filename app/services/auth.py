"""Authentication service: bcrypt passwords, stateless JWT bearer tokens."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone, timedelta

import bcrypt
import jwt
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import crud
from app.errors import AuthError

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
BEARER_PREFIX = "bearer "


@dataclass
class AdminIdentity:
    id: int
    username: str


def hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Stored hash is not a bcrypt hash
        return False


def create_access_token(
    identity: AdminIdentity,
    secret: str,
    ttl_minutes: int = 120,
    now: datetime | None = None,
) -> str:
    issued = now or datetime.now(timezone.utc)
    payload = {
        "sub": str(identity.id),
        "username": identity.username,
        "iat": issued,
        "exp": issued + timedelta(minutes=ttl_minutes),
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str, secret: str) -> AdminIdentity:
    """Verify signature and expiry. Raises AuthError('Invalid token')."""
    try:
        claims = jwt.decode(
            token, secret,
            algorithms=[JWT_ALGORITHM],
            options={"require": ["sub", "exp"]},
        )
        return AdminIdentity(id=int(claims["sub"]), username=str(claims.get("username", "")))
    except (jwt.InvalidTokenError, ValueError) as e:
        raise AuthError("Invalid token") from e


def extract_bearer(authorization: str | None) -> str:
    """Pull the token out of an 'Authorization: Bearer <token>' header."""
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        raise AuthError("Missing token")
    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise AuthError("Missing token")
    return token


async def authenticate(db: AsyncSession, username: str, password: str) -> AdminIdentity:
    """Check admin credentials. Login failures are reported as HTTP 400.

    Unknown usernames and wrong passwords produce different messages, which
    reveals whether an account exists.
    """
    if not username or not password:
        raise AuthError("Username and password are required", status_code=400)

    admin = await crud.get_admin_by_username(db, username)
    if not admin:
        logger.warning("Login failed: unknown username %r", username)
        raise AuthError("Invalid username", status_code=400)

    if not verify_password(password, admin.password_hash):
        logger.warning("Login failed: incorrect password for %r", username)
        raise AuthError("Incorrect password", status_code=400)

    return AdminIdentity(id=admin.id, username=admin.username)
