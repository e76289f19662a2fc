"""
tests/conftest.py -- Shared test fixtures for Cyber Kittens integration tests.

This module provides:
  - make_test_db_url(): a unique named shared-memory SQLite URL
  - _patch_lifespan(): wires test stores into app.state, bypassing real startup
  - api_client: TestClient plus a registered user's JWT for API tests
  - other_user: a second account in the same database, for ownership tests

Design: Named shared-memory SQLite URIs (not plain :memory:) are required
because TestClient runs sync route handlers in a thread pool, and because the
user and kitten stores each open their own engine. Plain :memory: DBs are
per-connection; the named URI shares one in-memory instance across every
connection in the process.

Environment must be set before any app import: DEBUG so get_settings()
auto-generates JWT_SECRET, RATE_LIMIT_ENABLED so repeated logins in one module
are not throttled, BCRYPT_ROUNDS to keep hashing fast.
"""

from __future__ import annotations

import os
import uuid
from collections.abc import Generator
from contextlib import asynccontextmanager

os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient

from asgi import app
from auth.models import User
from auth.store import UserStore
from auth.tokens import create_access_token, hash_password
from kittens.store import KittenStore


def make_test_db_url(name: str) -> str:
    """Return a shared-memory SQLite URL unique to this call."""
    return f"sqlite:///file:test_{name}_{uuid.uuid4().hex}?mode=memory&cache=shared&uri=true"


def _patch_lifespan(user_store: UserStore, kitten_store: KittenStore):
    """Return an async context manager that replaces the real lifespan."""

    @asynccontextmanager
    async def test_lifespan(app):
        app.state.user_store = user_store
        app.state.kitten_store = kitten_store
        yield

    return test_lifespan


@pytest.fixture(scope="module")
def api_client(request) -> Generator[tuple[TestClient, str, int], None, None]:
    """Yield (client, token, user_id) for API integration tests.

    The TestClient uses the real FastAPI app with a patched lifespan so tests
    hit real route handlers against an isolated database per test module.
    The user "alice" (password "alicepass123") exists before the client starts.
    """
    db_url = make_test_db_url(request.module.__name__.rsplit(".", 1)[-1])
    user_store = UserStore(db_url)
    kitten_store = KittenStore(db_url)

    uid = user_store.create_user(User(username="alice", hashed_password=hash_password("alicepass123")))
    token = create_access_token(user_id=uid, username="alice", expire_seconds=3600)

    app.router.lifespan_context = _patch_lifespan(user_store, kitten_store)

    with TestClient(app, raise_server_exceptions=True) as client:
        yield client, token, uid

    kitten_store.close()
    user_store.close()


@pytest.fixture(scope="module")
def other_user(api_client: tuple[TestClient, str, int]) -> tuple[str, int]:
    """Create "bob" in the api_client database and return (token, user_id)."""
    client, _token, _uid = api_client
    user_store: UserStore = client.app.state.user_store
    uid = user_store.create_user(User(username="bob", hashed_password=hash_password("bobpass123")))
    return create_access_token(user_id=uid, username="bob", expire_seconds=3600), uid
