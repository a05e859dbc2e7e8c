"""Unit tests for middleware auth (swingnotes/middleware/auth.py)."""

import uuid
from datetime import timedelta
from typing import Optional

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from swingnotes.api.error_handlers import register_error_handlers
from swingnotes.core.errors import AppError, ErrorKind
from swingnotes.middleware.auth import (
    EXPIRED_TOKEN,
    INVALID_TOKEN,
    NOT_LOGGED_IN,
    authenticate,
    get_current_user_id,
)
from swingnotes.security import create_access_token


def build_app(settings) -> FastAPI:
    app = FastAPI()
    app.state.settings = settings
    register_error_handlers(app)

    @app.get("/me")
    async def me(user_id=Depends(get_current_user_id)):
        return {"user_id": str(user_id)}

    return app


def _make_bearer(token: Optional[str]) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"} if token is not None else {}


def _token(settings, minutes=60, secret=None):
    return create_access_token(
        uuid.uuid4(), secret or settings.secret_key, timedelta(minutes=minutes)
    )


class TestAuthenticate:
    def test_valid_token(self, test_settings):
        uid = uuid.uuid4()
        token = create_access_token(uid, test_settings.secret_key, timedelta(minutes=5))
        assert authenticate(token, test_settings) == uid

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_missing_token(self, test_settings, raw):
        with pytest.raises(AppError) as exc_info:
            authenticate(raw, test_settings)
        assert exc_info.value.kind is ErrorKind.UNAUTHORIZED
        assert exc_info.value.message == NOT_LOGGED_IN

    def test_expired_token(self, test_settings):
        with pytest.raises(AppError) as exc_info:
            authenticate(_token(test_settings, minutes=-1), test_settings)
        assert exc_info.value.message == EXPIRED_TOKEN

    def test_foreign_token(self, test_settings):
        with pytest.raises(AppError) as exc_info:
            authenticate(_token(test_settings, secret="someone-else"), test_settings)
        assert exc_info.value.message == INVALID_TOKEN


def test_dependency_accepts_valid_token(test_settings):
    uid = uuid.uuid4()
    token = create_access_token(uid, test_settings.secret_key, timedelta(minutes=5))

    resp = TestClient(build_app(test_settings)).get("/me", headers=_make_bearer(token))
    assert resp.status_code == 200
    assert resp.json() == {"user_id": str(uid)}


@pytest.mark.parametrize(
    "headers, message",
    [
        ({}, NOT_LOGGED_IN),
        ({"Authorization": "Basic abc"}, NOT_LOGGED_IN),
        ({"Authorization": "Bearer"}, NOT_LOGGED_IN),
        ({"Authorization": "Bearer not.a.jwt"}, INVALID_TOKEN),
    ],
)
def test_dependency_rejections(test_settings, headers, message):
    resp = TestClient(build_app(test_settings)).get("/me", headers=headers)
    assert resp.status_code == 401
    assert resp.json() == {"status": "fail", "message": message}


def test_dependency_expired_token(test_settings):
    token = _token(test_settings, minutes=-1)
    resp = TestClient(build_app(test_settings)).get("/me", headers=_make_bearer(token))
    assert resp.status_code == 401
    assert resp.json()["message"] == EXPIRED_TOKEN
