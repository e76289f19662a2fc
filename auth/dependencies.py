"""
auth/dependencies.py -- FastAPI Depends() helpers for authentication.

The only credential accepted is an Authorization header of the form
"Bearer <jwt>". The header is split on whitespace and the second part is
verified as a signed token.

try_get_current_user() is the soft variant (returns None on failure).
get_current_user() wraps it and raises HTTP 401 if unauthenticated.

An absent header, a malformed header, a bad signature, an expired token, and
a token for a user that no longer exists all mean "no identity". None of them
raise past this module.

Layer rule: no imports from api/, web/, or kittens/.
  auth/dependencies.py may import from fastapi (for HTTPException/Request)
  because this module is part of the FastAPI dependency injection system.
"""

from __future__ import annotations

from fastapi import HTTPException, Request

from auth.models import User
from auth.tokens import decode_access_token


def bearer_token(header: str | None) -> str | None:
    """Extract the token from an Authorization header value.

    Returns None unless the header has exactly two whitespace-separated parts
    and the first one is "Bearer" (case-insensitive).
    """
    if not header:
        return None
    parts = header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]


def try_get_current_user(request: Request) -> User | None:
    """Attempt to authenticate the request via the Bearer header.

    Returns the authenticated User on success, None on any failure.
    Never raises -- callers that need a hard 401 should use get_current_user().
    """
    token = bearer_token(request.headers.get("Authorization"))
    if token is None:
        return None

    payload = decode_access_token(token)
    if payload is None:
        return None

    user_store = request.app.state.user_store
    return user_store.get_by_id(payload["user_id"])


def get_current_user(request: Request) -> User:
    """Require authentication. Raises HTTP 401 if the request is not authenticated.

    Use as a FastAPI dependency:
        @router.get("/protected")
        def route(user: User = Depends(get_current_user)): ...
    """
    user = try_get_current_user(request)
    if user is None:
        raise HTTPException(
            status_code=401,
            detail={"code": "unauthorized", "message": "Authentication required."},
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
