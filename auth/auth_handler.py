from datetime import datetime, timedelta, timezone

from fastapi.responses import JSONResponse
from jose import jwt

from config import settings
from models.user import Role
from schemas.user import UserPublic


def token_cookie_name(role: Role) -> str:
    return f"{role.value.lower()}Token"


def require_secret_key() -> str:
    if not settings.jwt_secret_key:
        raise RuntimeError("JWT_SECRET_KEY is not set; refusing to sign session tokens")
    return settings.jwt_secret_key


def create_access_token(user: UserPublic) -> str:
    secret_key = require_secret_key()
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.jwt_expires_minutes)
    to_encode = {"sub": str(user.id), "role": user.role.value, "exp": expire}
    return jwt.encode(to_encode, secret_key, algorithm=settings.jwt_algorithm)


def issue_token(user: UserPublic, message: str, status_code: int) -> JSONResponse:
    """
    Sign a session token for ``user`` and return the response carrying it,
    both as the ``{role}Token`` cookie and in the JSON body.
    """
    token = create_access_token(user)
    response = JSONResponse(
        status_code=status_code,
        content={
            "success": True,
            "message": message,
            "user": user.to_response(),
            "token": token,
        },
    )
    response.set_cookie(
        key=token_cookie_name(user.role),
        value=token,
        expires=datetime.now(timezone.utc) + timedelta(days=settings.cookie_expire_days),
        httponly=True,
        secure=settings.cookie_secure,
    )
    return response


def clear_token_cookie(role: Role) -> JSONResponse:
    response = JSONResponse(
        status_code=201,
        content={
            "success": True,
            "message": f"{role.value} Logged Out Successfully.",
        },
    )
    response.set_cookie(
        key=token_cookie_name(role),
        value="",
        max_age=0,
        expires=datetime.now(timezone.utc),
        httponly=True,
        secure=settings.cookie_secure,
    )
    return response
