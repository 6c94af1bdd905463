"""Tests for token handling and sign-in."""

from datetime import timedelta
from unittest.mock import AsyncMock

import pytest
from jose import jwt

from app.core.exceptions import AuthenticationError
from app.core.security import (
    create_access_token,
    get_password_hash,
    get_token_user_id,
    verify_password,
    verify_token,
)
from app.models.user import Session
from app.repositories import user_repository
from tests.factories import make_user


class TestTokens:
    def test_token_round_trips_user_id(self):
        payload = verify_token(create_access_token(42))

        assert get_token_user_id(payload) == 42

    def test_tokens_are_unique(self):
        assert create_access_token(1) != create_access_token(1)

    def test_expired_token_is_rejected(self):
        token = create_access_token(1, expires_delta=timedelta(seconds=-1))

        with pytest.raises(AuthenticationError):
            verify_token(token)

    def test_token_signed_with_other_key_is_rejected(self):
        token = jwt.encode({"sub": "1", "userId": 1}, "some-other-secret", algorithm="HS256")

        with pytest.raises(AuthenticationError):
            verify_token(token)

    @pytest.mark.parametrize("payload", [{}, {"userId": "abc"}, {"userId": 0}, {"sub": "-1"}])
    def test_bad_user_claim_is_rejected(self, payload):
        with pytest.raises(AuthenticationError):
            get_token_user_id(payload)


def test_password_hash_verifies():
    hashed = get_password_hash("Test@1234")

    assert hashed != "Test@1234"
    assert verify_password("Test@1234", hashed)
    assert not verify_password("wrong", hashed)


class TestSignIn:
    @pytest.fixture
    def user(self):
        return make_user(user_id=7, email="guest@hotelbooking.dev", password=get_password_hash("Test@1234"))

    def test_valid_credentials_open_session(self, unauthenticated_client, monkeypatch, user):
        create_session = AsyncMock(
            side_effect=lambda db, user_id, token: Session(user_id=user_id, token=token)
        )
        monkeypatch.setattr(user_repository, "find_by_email", AsyncMock(return_value=user))
        monkeypatch.setattr(user_repository, "create_session", create_session)

        response = unauthenticated_client.post(
            "/auth/sign-in", json={"email": "guest@hotelbooking.dev", "password": "Test@1234"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["user"] == {"id": 7, "email": "guest@hotelbooking.dev"}
        assert get_token_user_id(verify_token(body["token"])) == 7
        create_session.assert_awaited_once()
        assert create_session.await_args.args[1:] == (7, body["token"])

    def test_wrong_password_is_unauthorized(self, unauthenticated_client, monkeypatch, user):
        create_session = AsyncMock()
        monkeypatch.setattr(user_repository, "find_by_email", AsyncMock(return_value=user))
        monkeypatch.setattr(user_repository, "create_session", create_session)

        response = unauthenticated_client.post(
            "/auth/sign-in", json={"email": "guest@hotelbooking.dev", "password": "nope"}
        )

        assert response.status_code == 401
        create_session.assert_not_awaited()

    def test_unknown_email_is_unauthorized(self, unauthenticated_client, monkeypatch):
        monkeypatch.setattr(user_repository, "find_by_email", AsyncMock(return_value=None))

        response = unauthenticated_client.post(
            "/auth/sign-in", json={"email": "nobody@hotelbooking.dev", "password": "Test@1234"}
        )

        assert response.status_code == 401


def test_health(unauthenticated_client):
    response = unauthenticated_client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
