"""
Global middleware.

Auth responses carry session state, so they are marked ``no-store`` and
logged by action name. Cookies and query strings are never logged.
"""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)


def register_middleware(app: FastAPI, auth_prefix: str = "/api/auth") -> None:
    """Attach any app-level middleware."""
    auth_prefix = auth_prefix.rstrip("/") + "/"

    @app.middleware("http")
    async def request_timer(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"

        path = request.url.path
        if path.startswith(auth_prefix):
            response.headers["Cache-Control"] = "no-store"
            logger.info(
                "auth %s %s -> %d (%.3fs)",
                request.method,
                path[len(auth_prefix):],
                response.status_code,
                elapsed,
            )
        else:
            logger.debug("%s %s -> %d (%.3fs)", request.method, path, response.status_code, elapsed)
        return response
