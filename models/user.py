from beanie import Document, Indexed, Insert, before_event
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel
from enum import Enum
from typing import Optional

from auth.password import hash_password, verify_password


class Role(str, Enum):
    PATIENT = "Patient"
    ADMIN = "Admin"
    DOCTOR = "Doctor"


class Avatar(BaseModel):
    public_id: str
    url: str


class User(Document):
    firstName: str
    lastName: str
    email: Indexed(str, unique=True)
    phone: Indexed(str, unique=True)
    nic: str
    dob: str  # dd/mm/yyyy
    gender: str
    password: str
    role: Role
    doctorDepartment: Optional[str] = None
    docAvatar: Optional[Avatar] = None

    class Settings:
        name = "users"

    @before_event(Insert)
    async def hash_password_on_insert(self):
        self.password = await run_in_threadpool(hash_password, self.password)

    async def compare_password(self, candidate: str) -> bool:
        return await run_in_threadpool(verify_password, candidate, self.password)
