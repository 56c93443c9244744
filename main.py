"""
Credential session auth service — application entry point.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware import register_middleware
from api.routes import router as api_router
from auth.handler import AuthHandler
from auth.options import build_auth_options
from auth.routes import build_auth_router
from auth.store import SqlUserStore, UserStore
from auth.verifier import CredentialsVerifier
from config.settings import Settings, config

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("sqlalchemy.engine", "asyncio", "multipart"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def create_app(settings: Settings = config, store: Optional[UserStore] = None) -> FastAPI:
    if store is None:
        from database.session import async_session_factory

        store = SqlUserStore(async_session_factory)

    options = build_auth_options(settings, CredentialsVerifier(store))
    handler = AuthHandler(options)

    app = FastAPI(
        title="Credential Session Auth",
        version="1.0.0",
        description="Email/password sign-in with signed session cookies.",
    )
    app.state.auth = handler

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middleware(app, handler.base_path)

    # Routes
    app.include_router(build_auth_router(handler), prefix=handler.base_path)
    app.include_router(api_router, prefix="/api/v1")

    logger.info(
        "Auth ready: session max age %ds, sign-in page %s",
        options.session.max_age,
        options.pages.sign_in,
    )
    return app


if __name__ == "__main__":
    uvicorn.run(
        create_app(),
        host=config.host,
        port=config.port,
        log_level="debug" if config.debug else "info",
    )
