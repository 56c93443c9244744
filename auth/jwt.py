"""
JWT-style session token creation and verification.

Tokens are base64-encoded JSON claims signed with HMAC-SHA256. The secret
and lifetime come from the auth options, not from module globals.
"""

from __future__ import annotations

import hashlib
import hmac
import json
import time
from base64 import urlsafe_b64decode, urlsafe_b64encode
from typing import Any, Dict, Optional

from auth.errors import TokenError


def _sign(secret: str, raw: bytes) -> str:
    return hmac.new(secret.encode(), raw, hashlib.sha256).hexdigest()


def encode_token(
    claims: Dict[str, Any],
    secret: str,
    max_age: int,
    now: Optional[float] = None,
) -> str:
    """Sign ``claims`` after stamping ``iat`` and ``exp``."""
    issued_at = int(now if now is not None else time.time())
    payload = {**claims, "iat": issued_at, "exp": issued_at + max_age}
    raw = json.dumps(payload, separators=(",", ":"), sort_keys=True).encode()
    # Unpadded so the value never needs quoting in a cookie.
    body = urlsafe_b64encode(raw).decode().rstrip("=")
    return body + "." + _sign(secret, raw)


def decode_token(
    token: str,
    secret: str,
    now: Optional[float] = None,
) -> Dict[str, Any]:
    """
    Verify ``token`` and return its claims.

    Raises ``TokenError`` on bad format, bad signature or expiry.
    """
    parts = (token or "").split(".", 1)
    if len(parts) != 2:
        raise TokenError("bad format")
    try:
        encoded = parts[0].encode()
        raw = urlsafe_b64decode(encoded + b"=" * (-len(encoded) % 4))
    except ValueError as exc:
        raise TokenError("bad encoding") from exc
    if not hmac.compare_digest(parts[1].encode(), _sign(secret, raw).encode()):
        raise TokenError("bad signature")
    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise TokenError("bad payload") from exc
    if not isinstance(payload, dict):
        raise TokenError("bad payload")
    current = now if now is not None else time.time()
    if payload.get("exp", 0) < current:
        raise TokenError("token expired")
    return payload
