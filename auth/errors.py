"""
Exceptions raised by the authentication layer.
"""

from __future__ import annotations


class AuthError(Exception):
    """Base class for every failed sign-in attempt.

    ``code`` is the only value ever shown to clients; the message stays in
    server-side logs.
    """

    code = "CredentialsSignin"


class MissingCredentials(AuthError):
    """Email or password was absent or empty."""


class UserNotFound(AuthError):
    """No stored user has the submitted email."""


class InvalidPassword(AuthError):
    """The password does not match the stored hash."""


class LookupFailure(AuthError):
    """The user store could not be queried."""


class AuthConfigError(RuntimeError):
    """Raised at start-up when the auth options are unusable."""


class TokenError(ValueError):
    """Raised when a session token is malformed, forged or expired."""
