import os
import uuid

os.environ.setdefault("AUTH_SECRET", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test-auth.db")

from typing import Dict, Optional

import pytest

from auth.models import StoredUser
from auth.password import hash_password


class FakeUserStore:
    """In-memory stand-in for ``SqlUserStore`` that counts lookups."""

    def __init__(self, users=()):
        self._users: Dict[str, StoredUser] = {u.email: u for u in users}
        self.lookups = 0

    async def find_by_email(self, email: str) -> Optional[StoredUser]:
        self.lookups += 1
        return self._users.get(email)


@pytest.fixture(scope="session")
def stored_user() -> StoredUser:
    return StoredUser(
        id=uuid.UUID("6f1c2a52-93a4-4c47-9b1e-0d5a3f2e7b10"),
        email="a@b.com",
        password_hash=hash_password("correct", rounds=4),
        name="Ada",
    )


@pytest.fixture()
def user_store(stored_user) -> FakeUserStore:
    return FakeUserStore([stored_user])
