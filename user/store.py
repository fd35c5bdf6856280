from typing import List, Optional

from beanie import PydanticObjectId
from beanie.operators import Or
from pymongo.errors import DuplicateKeyError
import logging

from exceptions import ConflictError
from models.user import Role, User
from schemas.user import UserPublic

logger = logging.getLogger(__name__)


class UserStore:
    """Persistence operations on the ``users`` collection."""

    async def find_by_email_or_phone(self, email: str, phone: str) -> Optional[User]:
        return await User.find_one(Or(User.email == email, User.phone == phone))

    async def find_by_email(self, email: str) -> Optional[User]:
        # Full document, password hash included, for credential checks.
        return await User.find_one(User.email == email)

    async def create(self, **fields) -> User:
        user = User(**fields)
        try:
            await user.insert()
        except DuplicateKeyError:
            # Lost the race against a concurrent registration.
            logger.warning(f"Unique index rejected {fields.get('email')}")
            raise ConflictError(f"{user.role.value} already Registered!")
        return user

    async def find_public_by_id(self, user_id: PydanticObjectId) -> Optional[UserPublic]:
        return await User.find_one(User.id == user_id).project(UserPublic)

    async def find_public_by_email(self, email: str) -> Optional[UserPublic]:
        return await User.find_one(User.email == email).project(UserPublic)

    async def list_by_role(self, role: Role) -> List[UserPublic]:
        return await User.find(User.role == role).project(UserPublic).to_list()


def get_user_store() -> UserStore:
    return UserStore()
