"""
Token enrichment hooks.

``on_issue`` runs when a token is built; ``on_read`` runs every time the
session view is produced from a token. Both are pure and never raise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from auth.models import Identity, SessionView

Token = Dict[str, Any]

IssueHook = Callable[[Token, Optional[Identity]], Token]
ReadHook = Callable[[SessionView, Token], SessionView]


def on_issue(token: Token, identity: Optional[Identity] = None) -> Token:
    """Store the user id on the token right after sign-in."""
    if identity is None:
        return token
    return {**token, "id": identity.id}


def on_read(session: SessionView, token: Token) -> SessionView:
    """Expose the token's user id as ``session.user.id``."""
    if session.user is None:
        return session
    user = session.user.model_copy(update={"id": token.get("id")})
    return session.model_copy(update={"user": user})


@dataclass(frozen=True)
class AuthCallbacks:
    on_issue: IssueHook = on_issue
    on_read: ReadHook = on_read
