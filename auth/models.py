"""Value types shared by the authentication modules.

``User`` is re-exported from the database package for the store adapter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel

from database.models import User  # noqa: F401

__all__ = ["Identity", "SessionUser", "SessionView", "StoredUser", "User"]


@dataclass(frozen=True)
class StoredUser:
    id: Any
    email: str
    password_hash: str
    name: Optional[str] = None


@dataclass(frozen=True)
class Identity:
    """The minimal verified principal returned by a successful sign-in."""

    id: str
    email: str
    name: Optional[str] = None


class SessionUser(BaseModel):
    id: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None


class SessionView(BaseModel):
    """Client-visible session, rebuilt from the token on every read."""

    user: Optional[SessionUser] = None
    expires: str
