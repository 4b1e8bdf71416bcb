"""Capability checks and form nonces for the admin surface."""

from __future__ import annotations

import hmac
import logging
from functools import wraps
from typing import Any, Callable, TypeVar, cast

from flask import current_app, request
from itsdangerous import BadSignature, URLSafeTimedSerializer

from .http import problem_response

logger = logging.getLogger(__name__)

MANAGE_OPTIONS = "manage_options"
ADMIN_CAPABILITIES = frozenset({MANAGE_OPTIONS})
NONCE_LIFETIME_SECONDS = 60 * 60 * 24
_NONCE_SALT = "translation-exclusions-nonce"

F = TypeVar("F", bound=Callable[..., Any])


def _presented_token() -> str | None:
    auth = request.authorization
    if auth is None:
        return None
    if auth.type == "bearer":
        return auth.token
    if auth.type == "basic":
        return auth.password
    return None


def has_capability(capability: str) -> bool:
    """Return ``True`` when the current request holds ``capability``.

    The admin token grants the capabilities in ``ADMIN_CAPABILITIES``;
    anything else is refused, as is every request when no token is configured.
    """

    if capability not in ADMIN_CAPABILITIES:
        return False
    expected = current_app.config.get("ADMIN_TOKEN")
    presented = _presented_token()
    if not expected or not presented:
        return False
    return hmac.compare_digest(presented.encode("utf-8"), str(expected).encode("utf-8"))


def require_capability(capability: str) -> Callable[[F], F]:
    """Reject requests lacking ``capability`` with a 401 problem response."""

    def decorator(view: F) -> F:
        @wraps(view)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            if not has_capability(capability):
                logger.info("Rejected %s %s: missing %s", request.method, request.path, capability)
                return problem_response(
                    "unauthorized",
                    status=401,
                    message="Administrator credentials are required",
                    headers={"WWW-Authenticate": 'Basic realm="admin"'},
                ).to_response()
            return view(*args, **kwargs)

        return cast(F, wrapper)

    return decorator


def _serializer() -> URLSafeTimedSerializer:
    return URLSafeTimedSerializer(current_app.secret_key, salt=_NONCE_SALT)


def create_nonce(action: str) -> str:
    """Return a signed, time-limited token bound to ``action``."""

    return _serializer().dumps(action)


def verify_nonce(token: str | None, action: str, *, max_age: int = NONCE_LIFETIME_SECONDS) -> bool:
    if not token:
        return False
    try:
        signed_action = _serializer().loads(token, max_age=max_age)
    except BadSignature:
        return False
    return signed_action == action


__all__ = [
    "ADMIN_CAPABILITIES",
    "MANAGE_OPTIONS",
    "NONCE_LIFETIME_SECONDS",
    "create_nonce",
    "has_capability",
    "require_capability",
    "verify_nonce",
]
