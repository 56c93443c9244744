"""
Auth API routes — one catch-all path for GET and POST.

Route prefix: /api/auth
"""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import Response

from auth.handler import AuthHandler


def build_auth_router(handler: AuthHandler) -> APIRouter:
    router = APIRouter(tags=["auth"])

    @router.api_route("/{action:path}", methods=["GET", "POST"])
    async def auth_endpoint(action: str, request: Request) -> Response:
        return await handler.handle(request, action)

    return router
