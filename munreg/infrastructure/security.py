"""Security Primitives — password hashing and bearer token encoding.

Invariants:
    - Passwords hashed with bcrypt (salted per hash); plain text never persisted
    - Access tokens are signed JWTs with sub=user id and type="access"
    - Every decode failure surfaces as AuthenticationError (401), never a 500

Design Decisions:
    - Secret, algorithm and lifetime read from Settings, passed in explicitly so
      the functions stay testable without environment setup
"""

import time
from typing import Any

import bcrypt
import jwt

from munreg.core.errors import AuthenticationError


def hash_password(plain_password: str) -> str:
    return bcrypt.hashpw(
        plain_password.encode("utf-8"), bcrypt.gensalt(),
    ).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    if not plain_password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"), password_hash.encode("utf-8"),
        )
    except ValueError:
        return False


def build_access_token(
    *, user_id: int, email: str, secret: str, algorithm: str, expire_minutes: int,
) -> str:
    issued_at = int(time.time())
    payload = {
        "sub": str(user_id),
        "email": email,
        "type": "access",
        "iat": issued_at,
        "exp": issued_at + expire_minutes * 60,
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_access_token(token: str, *, secret: str, algorithm: str) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthenticationError("You are not logged in")
    try:
        payload = jwt.decode(raw, secret, algorithms=[algorithm])
    except jwt.ExpiredSignatureError as exc:
        raise AuthenticationError("Your session has expired") from exc
    except jwt.InvalidTokenError as exc:
        raise AuthenticationError("Invalid access token") from exc
    if payload.get("type") != "access" or not str(payload.get("sub", "")).isdigit():
        raise AuthenticationError("Invalid access token")
    return payload
