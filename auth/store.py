"""
User store adapters.

The verifier only needs ``find_by_email``; anything exposing that coroutine
can stand in for the SQL store.
"""

from __future__ import annotations

from typing import Optional, Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from auth.models import StoredUser, User


class UserStore(Protocol):
    async def find_by_email(self, email: str) -> Optional[StoredUser]:
        ...


class SqlUserStore:
    """Read-only lookups against the ``users`` table.

    Every call opens its own session so a lookup always reflects the
    current row.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def find_by_email(self, email: str) -> Optional[StoredUser]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(User).where(User.email == email)
            )
            user = result.scalar_one_or_none()

        if user is None:
            return None
        return StoredUser(
            id=user.user_id,
            email=user.email,
            password_hash=user.password_hash,
            name=user.display_name,
        )
