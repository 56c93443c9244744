#!/usr/bin/env python3
"""
Insert a user row with a bcrypt password hash.

The auth service only ever reads the ``users`` table; this script is how
operators provision accounts. Run from the project root:

    python -m scripts.create_user
"""

from __future__ import annotations

import asyncio
from getpass import getpass

from sqlalchemy import select

from auth.password import hash_password
from database.models import Base, User
from database.session import async_session_factory, engine


async def create_user(email: str, password: str, display_name: str = "") -> User:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_factory() as session:
        result = await session.execute(select(User).where(User.email == email))
        if result.scalar_one_or_none() is not None:
            raise SystemExit(f"User already exists: {email}")

        user = User(
            email=email,
            display_name=display_name or None,
            password_hash=hash_password(password),
        )
        session.add(user)
        await session.commit()
        return user


def main() -> None:
    email = input("Email: ").strip()
    if not email:
        raise SystemExit("Email is required")
    display_name = input("Display name (optional): ").strip()

    pw1 = getpass("Password: ")
    pw2 = getpass("Repeat password: ")
    if pw1 != pw2:
        raise SystemExit("Passwords do not match")
    if not pw1:
        raise SystemExit("Password is required")

    user = asyncio.run(create_user(email, pw1, display_name))
    print(f"OK -> {user.user_id} ({user.email})")


if __name__ == "__main__":
    main()
