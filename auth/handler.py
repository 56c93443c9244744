"""
Auth request handler.

Serves the actions behind the catch-all auth route:

  GET  signin                 redirect to the custom sign-in page
  POST callback/credentials   verify credentials and issue the session cookie
  GET  session                return the session view (``{}`` when signed out)
  POST signout                clear the session cookie
  GET  providers              list the configured providers
  GET  error                  redirect to the custom error page
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple
from urllib.parse import urlencode

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse, RedirectResponse, Response

from auth.errors import AuthConfigError, AuthError, TokenError
from auth.jwt import decode_token, encode_token
from auth.models import Identity, SessionUser, SessionView
from auth.options import AuthOptions
from auth.verifier import CredentialsVerifier

logger = logging.getLogger(__name__)

Action = Callable[[Request], Awaitable[Response]]


class AuthHandler:
    def __init__(self, options: AuthOptions, base_path: str = "/api/auth"):
        if not options.secret:
            raise AuthConfigError("AUTH_SECRET is not set")
        if options.session.strategy != "jwt":
            raise AuthConfigError(
                f"Unsupported session strategy: {options.session.strategy!r}"
            )
        self.options = options
        self.base_path = base_path.rstrip("/")
        self._providers = {p.id: p for p in options.providers}
        self._actions: Dict[Tuple[str, str], Action] = {
            ("GET", "signin"): self._signin_page,
            ("GET", "session"): self._session,
            ("GET", "providers"): self._list_providers,
            ("GET", "error"): self._error_page,
            ("POST", "signout"): self._signout,
        }
        for provider in options.providers:
            self._actions[("POST", f"callback/{provider.id}")] = (
                lambda request, provider=provider: self._credentials_callback(request, provider)
            )

    async def handle(self, request: Request, action: str) -> Response:
        route = self._actions.get((request.method, action.strip("/")))
        if route is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown auth action: {request.method} {action}",
            )
        return await route(request)

    # ── Session ────────────────────────────────────────────────────────

    def issue_token(self, identity: Identity) -> str:
        claims = {"sub": identity.id, "email": identity.email, "name": identity.name}
        claims = self.options.callbacks.on_issue(claims, identity)
        return encode_token(claims, self.options.secret, self.options.session.max_age)

    def read_session(self, request: Request) -> Optional[SessionView]:
        """Rebuild the session view from the request's cookie, if any."""
        token = request.cookies.get(self.options.cookie_name)
        if not token:
            return None
        try:
            claims = decode_token(token, self.options.secret)
        except TokenError as exc:
            logger.debug("Ignoring session cookie: %s", exc)
            return None

        callbacks = self.options.callbacks
        claims = callbacks.on_issue(claims, None)
        session = SessionView(
            user=SessionUser(email=claims.get("email"), name=claims.get("name")),
            expires=datetime.fromtimestamp(claims["exp"], tz=timezone.utc).isoformat(),
        )
        return callbacks.on_read(session, claims)

    # ── Actions ────────────────────────────────────────────────────────

    async def _credentials_callback(self, request: Request, provider: CredentialsVerifier) -> Response:
        body = await self._read_body(request)
        callback_url = self._safe_redirect(request, _text(body, "callbackUrl"))
        as_json = _wants_json(body)

        try:
            identity = await provider.verify(_text(body, "email"), _text(body, "password"))
        except AuthError as exc:
            logger.info("Sign-in rejected (%s)", type(exc).__name__)
            url = self._error_url(exc.code)
            if as_json:
                return JSONResponse(
                    {"url": url, "ok": False, "error": exc.code},
                    status_code=status.HTTP_401_UNAUTHORIZED,
                )
            return RedirectResponse(url, status_code=status.HTTP_302_FOUND)

        response = self._redirect(callback_url, as_json)
        response.set_cookie(
            self.options.cookie_name,
            self.issue_token(identity),
            max_age=self.options.session.max_age,
            path="/",
            httponly=True,
            samesite="lax",
            secure=self.options.secure_cookies,
        )
        logger.info("Signed in user %s", identity.id)
        return response

    async def _session(self, request: Request) -> Response:
        session = self.read_session(request)
        if session is None:
            return JSONResponse({})
        return JSONResponse(session.model_dump())

    async def _signout(self, request: Request) -> Response:
        body = await self._read_body(request)
        response = self._redirect(
            self._safe_redirect(request, _text(body, "callbackUrl")),
            _wants_json(body),
        )
        response.delete_cookie(
            self.options.cookie_name,
            path="/",
            httponly=True,
            samesite="lax",
            secure=self.options.secure_cookies,
        )
        return response

    async def _signin_page(self, request: Request) -> Response:
        url = self.options.pages.sign_in
        callback_url = request.query_params.get("callbackUrl")
        if callback_url:
            url = _with_query(url, callbackUrl=callback_url)
        return RedirectResponse(url, status_code=status.HTTP_302_FOUND)

    async def _error_page(self, request: Request) -> Response:
        code = request.query_params.get("error", "Default")
        return RedirectResponse(self._error_url(code), status_code=status.HTTP_302_FOUND)

    async def _list_providers(self, request: Request) -> Response:
        return JSONResponse({
            p.id: {
                "id": p.id,
                "name": p.name,
                "type": "credentials",
                "credentials": p.fields,
                "signinUrl": f"{self.base_path}/signin",
                "callbackUrl": f"{self.base_path}/callback/{p.id}",
            }
            for p in self._providers.values()
        })

    # ── Helpers ────────────────────────────────────────────────────────

    def _error_url(self, code: str) -> str:
        return _with_query(self.options.pages.error, error=code)

    @staticmethod
    def _redirect(url: str, as_json: bool) -> Response:
        if as_json:
            return JSONResponse({"url": url, "ok": True, "error": None})
        return RedirectResponse(url, status_code=status.HTTP_302_FOUND)

    @staticmethod
    def _safe_redirect(request: Request, url: Optional[str]) -> str:
        """Only same-origin targets are honoured; anything else goes home."""
        if not url:
            return "/"
        if url.startswith("/") and not url.startswith("//"):
            return url
        origin = str(request.base_url)
        if url.startswith(origin):
            return url
        return "/"

    @staticmethod
    async def _read_body(request: Request) -> Dict[str, Any]:
        content_type = request.headers.get("content-type", "")
        if content_type.startswith("application/json"):
            try:
                data = await request.json()
            except ValueError:
                return {}
            return data if isinstance(data, dict) else {}
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}


def _wants_json(body: Dict[str, Any]) -> bool:
    flag = body.get("json")
    return flag is True or str(flag).lower() == "true"


def _text(body: Dict[str, Any], key: str) -> Optional[str]:
    value = body.get(key)
    return value if isinstance(value, str) else None


def _with_query(url: str, **params: str) -> str:
    """Append ``params`` to ``url``, which may already carry a query string."""
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode(params)}"
