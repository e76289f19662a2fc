"""Unit tests for auth/tokens.py and the Bearer header parser in auth/dependencies.py."""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from auth.dependencies import bearer_token
from auth.models import User
from auth.store import UserStore
from auth.tokens import (
    authenticate_user,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from conftest import make_test_db_url
from core.config import get_settings


class TestPasswords:
    def test_hash_verifies(self) -> None:
        hashed = hash_password("s3cret-meow")
        assert hashed != "s3cret-meow"
        assert verify_password("s3cret-meow", hashed)
        assert not verify_password("s3cret-woof", hashed)

    def test_hash_is_salted(self) -> None:
        assert hash_password("same") != hash_password("same")

    def test_uses_configured_cost_factor(self) -> None:
        rounds = get_settings().bcrypt_rounds
        assert hash_password("x").startswith(f"$2b${rounds:02d}$")

    def test_malformed_hash_is_false(self) -> None:
        assert verify_password("anything", "not-a-bcrypt-hash") is False


class TestAccessTokens:
    def test_claims(self) -> None:
        payload = decode_access_token(create_access_token(7, "tabby"))
        assert payload["user_id"] == 7
        assert payload["sub"] == "tabby"
        assert "exp" in payload

    def test_expired_is_none(self) -> None:
        assert decode_access_token(create_access_token(7, "tabby", expire_seconds=-5)) is None

    def test_garbage_is_none(self) -> None:
        assert decode_access_token("garbage") is None
        assert decode_access_token("") is None

    def test_missing_user_id_claim_is_none(self) -> None:
        token = jwt.encode(
            {"sub": "tabby", "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
            get_settings().jwt_secret,
            algorithm="HS256",
        )
        assert decode_access_token(token) is None

    def test_none_algorithm_rejected(self) -> None:
        """An unsigned token must not be accepted."""
        header = "eyJhbGciOiJub25lIiwidHlwIjoiSldUIn0"  # {"alg":"none","typ":"JWT"}
        body = "eyJzdWIiOiJ0YWJieSIsInVzZXJfaWQiOjF9"  # {"sub":"tabby","user_id":1}
        assert decode_access_token(f"{header}.{body}.") is None


class TestAuthenticateUser:
    @pytest.fixture
    def user_store(self):
        store = UserStore(make_test_db_url("tokens"))
        store.create_user(User(username="tabby", hashed_password=hash_password("purrpurr")))
        yield store
        store.close()

    def test_success(self, user_store: UserStore) -> None:
        user = authenticate_user(user_store, "tabby", "purrpurr")
        assert user is not None
        assert user.username == "tabby"

    def test_wrong_password(self, user_store: UserStore) -> None:
        assert authenticate_user(user_store, "tabby", "hiss") is None

    def test_unknown_user(self, user_store: UserStore) -> None:
        assert authenticate_user(user_store, "nobody", "purrpurr") is None


class TestBearerHeader:
    @pytest.mark.parametrize(
        "header,expected",
        [
            ("Bearer abc.def.ghi", "abc.def.ghi"),
            ("bearer abc", "abc"),
            ("Bearer   abc", "abc"),
            (None, None),
            ("", None),
            ("abc.def.ghi", None),
            ("Basic dXNlcjpwdw==", None),
            ("Bearer a b", None),
        ],
    )
    def test_parse(self, header, expected) -> None:
        assert bearer_token(header) == expected
