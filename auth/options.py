"""
Immutable auth configuration, built once at start-up.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from auth.callbacks import AuthCallbacks
from auth.verifier import CredentialsVerifier
from config.settings import Settings


@dataclass(frozen=True)
class AuthPages:
    sign_in: str = "/login"
    error: str = "/login"


@dataclass(frozen=True)
class SessionOptions:
    strategy: str = "jwt"
    max_age: int = 30 * 24 * 60 * 60


@dataclass(frozen=True)
class AuthOptions:
    providers: Tuple[CredentialsVerifier, ...]
    secret: str
    callbacks: AuthCallbacks = field(default_factory=AuthCallbacks)
    pages: AuthPages = field(default_factory=AuthPages)
    session: SessionOptions = field(default_factory=SessionOptions)
    cookie_name: str = "session-token"
    secure_cookies: bool = False


def build_auth_options(settings: Settings, verifier: CredentialsVerifier) -> AuthOptions:
    return AuthOptions(
        providers=(verifier,),
        secret=settings.auth_secret,
        pages=AuthPages(sign_in=settings.sign_in_page, error=settings.error_page),
        session=SessionOptions(max_age=settings.session_max_age),
        cookie_name=settings.session_cookie_name,
        secure_cookies=settings.secure_cookies,
    )
