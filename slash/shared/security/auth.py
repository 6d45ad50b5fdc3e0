"""
Bearer token authentication.

Access tokens are compact HS256 JWTs whose ``sub`` claim is the user id.
The transport resolves the caller here; use cases receive the id as an
explicit argument.
"""

import base64
import hashlib
import hmac
import json
import time
from typing import Any, Optional

from fastapi import Header, HTTPException, status

from slash.core.config import settings

BEARER_PREFIX = "bearer "


class InvalidTokenError(ValueError):
    """Raised when an access token is malformed, forged or expired."""


def _b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64url_decode(data: str) -> bytes:
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(signing_input: str, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), signing_input.encode("utf-8"), hashlib.sha256).digest()


def issue_access_token(
    user_id: int,
    secret: Optional[str] = None,
    expires_in: Optional[int] = None,
) -> str:
    """Issue a signed access token for a user.

    Args:
        user_id: Identity placed in the ``sub`` claim.
        secret: Signing key; defaults to ``settings.auth_secret``.
        expires_in: Lifetime in seconds; defaults to
            ``settings.access_token_expire_seconds``.
    """
    secret = secret or settings.auth_secret
    lifetime = expires_in if expires_in is not None else settings.access_token_expire_seconds
    header = {"alg": "HS256", "typ": "JWT"}
    claims = {"sub": str(user_id), "exp": int(time.time()) + lifetime}
    signing_input = ".".join(
        [
            _b64url(json.dumps(header, separators=(",", ":"), sort_keys=True).encode()),
            _b64url(json.dumps(claims, separators=(",", ":"), sort_keys=True).encode()),
        ]
    )
    return signing_input + "." + _b64url(_sign(signing_input, secret))


def decode_access_token(token: str, secret: Optional[str] = None) -> dict[str, Any]:
    """Verify a token's signature and expiry and return its claims.

    Raises:
        InvalidTokenError: If the token cannot be trusted.
    """
    secret = secret or settings.auth_secret
    try:
        header_b64, payload_b64, sig_b64 = token.split(".")
    except ValueError as exc:
        raise InvalidTokenError("malformed token") from exc

    expected = _sign(header_b64 + "." + payload_b64, secret)
    try:
        actual = _b64url_decode(sig_b64)
        claims = json.loads(_b64url_decode(payload_b64))
    except (ValueError, TypeError) as exc:
        raise InvalidTokenError("malformed token") from exc
    if not hmac.compare_digest(expected, actual):
        raise InvalidTokenError("invalid signature")
    if not isinstance(claims, dict):
        raise InvalidTokenError("malformed claims")
    exp = claims.get("exp")
    if not isinstance(exp, int) or isinstance(exp, bool):
        raise InvalidTokenError("malformed exp claim")
    if exp < int(time.time()):
        raise InvalidTokenError("token expired")
    return claims


def get_caller_id(authorization: Optional[str] = Header(default=None)) -> int:
    """FastAPI dependency resolving the authenticated caller's user id.

    Raises:
        HTTPException: 401 when the bearer token is missing or invalid.
    """
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    token = authorization[len(BEARER_PREFIX):].strip()
    try:
        claims = decode_access_token(token)
        return int(claims["sub"])
    except (InvalidTokenError, KeyError, TypeError, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc
