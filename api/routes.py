"""
REST API routes that require a signed-in user.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends

from auth.dependencies import get_current_user_id, get_session
from auth.models import SessionView

router = APIRouter()


@router.get("/me")
async def whoami(
    user_id: str = Depends(get_current_user_id),
    session: Optional[SessionView] = Depends(get_session),
) -> Dict[str, Any]:
    """Return the signed-in user as seen by client code."""
    return {
        "user_id": user_id,
        "email": session.user.email if session and session.user else None,
        "expires": session.expires if session else None,
    }
