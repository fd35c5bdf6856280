from pydantic import BaseModel, ConfigDict, Field
from beanie import PydanticObjectId
from typing import Optional

from models.user import Avatar, Role


class UserRegister(BaseModel):
    # Presence is checked by utils.validators, not here.
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    nic: Optional[str] = None
    dob: Optional[str] = None
    gender: Optional[str] = None
    password: Optional[str] = None


class UserLogin(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    confirmPassword: Optional[str] = None
    role: Optional[str] = None


class UserPublic(BaseModel):
    """Read projection of a user: every stored field except the password."""

    id: PydanticObjectId = Field(alias="_id")
    firstName: str
    lastName: str
    email: str
    phone: str
    nic: str
    dob: str
    gender: str
    role: Role
    doctorDepartment: Optional[str] = None
    docAvatar: Optional[Avatar] = None

    model_config = ConfigDict(populate_by_name=True)

    def to_response(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
