"""
Tests for session token signing.
"""
import pytest
from beanie import PydanticObjectId
from fastapi.testclient import TestClient
from jose import jwt

from auth.auth_handler import create_access_token
from config import settings
from main import app
from models.user import Role
from schemas.user import UserPublic


def make_user(role=Role.ADMIN):
    return UserPublic(
        id=PydanticObjectId(),
        firstName="Ada",
        lastName="Lovelace",
        email="ada@example.com",
        phone="03001234567",
        nic="4210112345671",
        dob="10/12/1990",
        gender="Female",
        role=role,
    )


def test_token_carries_user_id_and_role():
    user = make_user()

    claims = jwt.decode(create_access_token(user), settings.jwt_secret_key, algorithms=["HS256"])

    assert claims["sub"] == str(user.id)
    assert claims["role"] == "Admin"
    assert "exp" in claims


@pytest.mark.parametrize("secret", [None, ""])
def test_token_is_not_signed_without_secret(monkeypatch, secret):
    monkeypatch.setattr(settings, "jwt_secret_key", secret)

    with pytest.raises(RuntimeError, match="JWT_SECRET_KEY is not set"):
        create_access_token(make_user())


def test_app_does_not_start_without_secret(monkeypatch):
    monkeypatch.setattr(settings, "jwt_secret_key", None)

    with pytest.raises(RuntimeError, match="JWT_SECRET_KEY is not set"):
        with TestClient(app):
            pass
