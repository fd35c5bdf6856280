from fastapi import APIRouter, Depends

from auth.auth_handler import clear_token_cookie
from auth.service import register_user
from models.user import Role
from schemas.user import UserRegister
from user.store import UserStore, get_user_store

router = APIRouter(prefix="/admin")


@router.post("/addnew", status_code=201)
async def register_admin(
    admin: UserRegister, store: UserStore = Depends(get_user_store)
):
    return await register_user(Role.ADMIN, admin.model_dump(), store)


# Logout for the dashboard admin
@router.get("/logout", status_code=201)
async def logout_admin():
    return clear_token_cookie(Role.ADMIN)
