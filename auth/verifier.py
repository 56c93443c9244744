"""
Credential verification for the email/password provider.
"""

from __future__ import annotations

import logging
from typing import Optional

from auth.errors import (
    AuthError,
    InvalidPassword,
    LookupFailure,
    MissingCredentials,
    UserNotFound,
)
from auth.models import Identity
from auth.password import verify_password
from auth.store import UserStore

logger = logging.getLogger(__name__)


class CredentialsVerifier:
    """Checks an email/password pair against the user store.

    Each call performs one fresh lookup; nothing is cached between calls.
    """

    id = "credentials"
    name = "Credentials"
    fields = {
        "email": {"label": "Email", "type": "text"},
        "password": {"label": "Password", "type": "password"},
    }

    def __init__(self, store: UserStore):
        self._store = store

    async def verify(self, email: Optional[str], password: Optional[str]) -> Identity:
        """
        Return the ``Identity`` for a valid credential.

        Raises ``MissingCredentials``, ``UserNotFound``, ``InvalidPassword``
        or ``LookupFailure``.
        """
        if not email or not password:
            raise MissingCredentials("Missing email or password")

        try:
            user = await self._store.find_by_email(email)
        except Exception as exc:
            logger.error("Auth error: user lookup failed: %s", exc)
            raise LookupFailure("User lookup failed") from exc

        try:
            if user is None:
                raise UserNotFound("No user found with this email")
            if not verify_password(password, user.password_hash):
                raise InvalidPassword("Invalid password")
        except AuthError as exc:
            logger.warning("Auth error for %s: %s", email, exc)
            raise

        return Identity(id=str(user.id), email=user.email, name=user.name)
