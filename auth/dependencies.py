"""
FastAPI dependencies for authentication.

Provides ``get_session`` and ``get_current_user_id``, used by protected
routes. Both read the ``AuthHandler`` stored on ``app.state.auth``.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, HTTPException, Request, status

from auth.models import SessionView


async def get_session(request: Request) -> Optional[SessionView]:
    """Session view for the current request, or ``None`` when signed out."""
    return request.app.state.auth.read_session(request)


async def get_current_user_id(
    session: Optional[SessionView] = Depends(get_session),
) -> str:
    """
    Return the authenticated user's id.

    Raises ``HTTPException(401)`` when there is no valid session.
    """
    if session is None or session.user is None or not session.user.id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return session.user.id
