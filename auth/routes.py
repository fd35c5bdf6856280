from fastapi import APIRouter, Depends

from auth.auth_handler import clear_token_cookie
from auth.service import login_user, register_user
from models.user import Role
from schemas.user import UserLogin, UserRegister
from user.store import UserStore, get_user_store

router = APIRouter()


@router.post("/patient/register", status_code=201)
async def register_patient(
    user: UserRegister, store: UserStore = Depends(get_user_store)
):
    return await register_user(Role.PATIENT, user.model_dump(), store)


@router.post("/login")
async def login(user: UserLogin, store: UserStore = Depends(get_user_store)):
    return await login_user(user.model_dump(), store)


@router.get("/patient/logout", status_code=201)
async def logout_patient():
    return clear_token_cookie(Role.PATIENT)
