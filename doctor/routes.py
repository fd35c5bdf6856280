from fastapi import APIRouter, Depends, File, Form, UploadFile
from typing import Optional

from auth.auth_handler import clear_token_cookie
from auth.service import register_user
from models.user import Role
from user.store import UserStore, get_user_store

router = APIRouter(prefix="/doctor")


@router.post("/addnew", status_code=201)
async def register_doctor(
    firstName: Optional[str] = Form(None),
    lastName: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    nic: Optional[str] = Form(None),
    dob: Optional[str] = Form(None),
    gender: Optional[str] = Form(None),
    doctorDepartment: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    docAvatar: Optional[UploadFile] = File(None),
    store: UserStore = Depends(get_user_store),
):
    values = {
        "firstName": firstName,
        "lastName": lastName,
        "email": email,
        "phone": phone,
        "nic": nic,
        "dob": dob,
        "gender": gender,
        "doctorDepartment": doctorDepartment,
        "password": password,
    }
    return await register_user(Role.DOCTOR, values, store, avatar=docAvatar)


@router.get("/logout", status_code=201)
async def logout_doctor():
    return clear_token_cookie(Role.DOCTOR)
