from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any

from jose import jwt

from faculty_portal.core.config import get_settings


class UserRole(str, Enum):
    admin = "admin"
    faculty = "faculty"


@dataclass(frozen=True)
class CurrentUser:
    """Identity resolved for one request: who is calling and in which role."""

    email: str
    role: UserRole
    display_name: str | None = None


def create_access_token(
    subject: str,
    *,
    role: str,
    expires_delta: timedelta | None = None,
    extra_claims: dict[str, Any] | None = None,
) -> str:
    """Issue a signed bearer token carrying the user's email and role.

    Production tokens come from the external identity provider; this helper
    exists for tooling and tests that need to mint compatible tokens.
    """
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    claims: dict[str, Any] = {"sub": subject, "role": role, "exp": expire}
    if extra_claims:
        claims.update(extra_claims)
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict[str, Any]:
    settings = get_settings()
    return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
