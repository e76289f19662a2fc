"""
api/routes/auth.py -- Registration and login endpoints.

Routes:
  POST /register  -- create an account; returns a signed token
  POST /login     -- password login; returns a signed token

Both routes are public and both return {"message": "success", "token": ...}.

Security:
  Both routes are rate-limited per client IP (LOGIN_RATE_LIMIT / REGISTER_RATE_LIMIT).
  authenticate_user() provides timing equalization -- use it, never inline.
  Cache-Control: no-store on every response that carries a token.
  Wrong username and wrong password return the same 401 body.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from api.limiter import limiter
from api.models import CredentialsRequest, ErrorDetail, ErrorResponse, TokenResponse
from auth.models import User
from auth.store import UserStore
from auth.tokens import authenticate_user, create_access_token, hash_password
from core.config import get_settings

logger = logging.getLogger("cyberkittens.api.auth")

_settings = get_settings()

router = APIRouter()


def _token_response(status_code: int, token: str) -> JSONResponse:
    resp = JSONResponse(status_code=status_code, content=TokenResponse(token=token).model_dump())
    resp.headers["Cache-Control"] = "no-store"
    return resp


@limiter.limit(_settings.register_rate_limit)
@router.post("/register", response_model=TokenResponse, status_code=201)
def register(request: Request, body: CredentialsRequest) -> JSONResponse:
    """Create a user with a bcrypt-hashed password and return a signed token.

    A taken username is reported as 409. The unique constraint in the store
    is the only uniqueness check, so two concurrent registrations for the same
    name cannot both succeed.
    """
    user_store: UserStore = request.app.state.user_store
    user = User(username=body.username, hashed_password=hash_password(body.password))
    try:
        user_id = user_store.create_user(user)
    except IntegrityError:
        return JSONResponse(
            status_code=409,
            content=ErrorResponse(
                error=ErrorDetail(code="conflict", message="A user with that username already exists.")
            ).model_dump(),
        )

    logger.info("Registered user %r (id=%d)", body.username, user_id)
    return _token_response(201, create_access_token(user_id, body.username))


@limiter.limit(_settings.login_rate_limit)
@router.post("/login", response_model=TokenResponse)
def login(request: Request, body: CredentialsRequest) -> JSONResponse:
    """Authenticate with username and password and return a signed token.

    Returns the same generic error for wrong username and wrong password
    ("bad_credentials") to avoid leaking username existence information.
    """
    user_store: UserStore = request.app.state.user_store
    user = authenticate_user(user_store, body.username, body.password)
    if user is None:
        logger.info("Failed login for %r", body.username)
        resp = JSONResponse(
            status_code=401,
            content=ErrorResponse(
                error=ErrorDetail(code="bad_credentials", message="Invalid username or password.")
            ).model_dump(),
        )
        resp.headers["Cache-Control"] = "no-store"
        return resp

    return _token_response(200, create_access_token(user.id, user.username))
