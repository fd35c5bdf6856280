"""
Registration and login workflows shared by the patient, admin and doctor routes.
"""
from typing import Any, Mapping, NamedTuple, Optional, Tuple
import logging

from fastapi import UploadFile
from fastapi.responses import JSONResponse

from auth.auth_handler import issue_token
from exceptions import AuthenticationError, ConflictError, RoleMismatchError, ValidationError
from models.user import Role
from user.store import UserStore
from utils.media import check_avatar, discard_avatar, upload_avatar
from utils.validators import FieldRule, validate_fields

logger = logging.getLogger(__name__)


class RegistrationPolicy(NamedTuple):
    fields: Tuple[Tuple[str, FieldRule], ...]
    requires_avatar: bool = False


PERSON_FIELDS = (
    ("firstName", FieldRule.REQUIRED),
    ("lastName", FieldRule.REQUIRED),
    ("email", FieldRule.EMAIL),
    ("phone", FieldRule.REQUIRED),
    ("nic", FieldRule.REQUIRED),
    ("dob", FieldRule.DATE),
    ("gender", FieldRule.REQUIRED),
)

REGISTRATION_POLICIES = {
    Role.PATIENT: RegistrationPolicy(PERSON_FIELDS + (("password", FieldRule.REQUIRED),)),
    Role.ADMIN: RegistrationPolicy(PERSON_FIELDS + (("password", FieldRule.REQUIRED),)),
    Role.DOCTOR: RegistrationPolicy(
        PERSON_FIELDS
        + (
            ("doctorDepartment", FieldRule.REQUIRED),
            ("password", FieldRule.REQUIRED),
        ),
        requires_avatar=True,
    ),
}


async def register_user(
    role: Role,
    values: Mapping[str, Any],
    store: UserStore,
    avatar: Optional[UploadFile] = None,
) -> JSONResponse:
    """
    Validate, de-duplicate and persist a new user with ``role``, then sign
    them in.

    The duplicate lookup only gives an early, readable error. Two concurrent
    registrations can both pass it; the unique indexes on ``email`` and
    ``phone`` reject the second insert, which ``UserStore.create`` reports as
    the same ``ConflictError``.
    """
    policy = REGISTRATION_POLICIES[role]
    if policy.requires_avatar:
        check_avatar(avatar)

    validate_fields(values, policy.fields)

    existing = await store.find_by_email_or_phone(values["email"], values["phone"])
    if existing:
        logger.warning(f"Duplicate {role.value} registration for {values['email']}")
        raise ConflictError(f"{role.value} already Registered!")

    fields = {name: values[name] for name, _ in policy.fields}
    if policy.requires_avatar:
        fields["docAvatar"] = await upload_avatar(avatar)

    try:
        user = await store.create(**fields, role=role)
    except ConflictError:
        if policy.requires_avatar:
            await discard_avatar(fields["docAvatar"])
        raise
    payload = await store.find_public_by_id(user.id)
    logger.info(f"{role.value} registered: {payload.id}")
    return issue_token(payload, f"{role.value} Registered!", 201)


async def login_user(values: Mapping[str, Any], store: UserStore) -> JSONResponse:
    email = values.get("email")
    password = values.get("password")
    confirm_password = values.get("confirmPassword")
    role = values.get("role")

    if not email or not password or not confirm_password or not role:
        raise ValidationError("Please fill all the fields")

    if password != confirm_password:
        raise ValidationError("Password and confirm password does not match")

    user = await store.find_by_email(email)
    if not user:
        logger.warning(f"Login attempt for unknown email {email}")
        raise AuthenticationError("Invalid email")

    if not await user.compare_password(password):
        logger.warning(f"Wrong password for {email}")
        raise AuthenticationError("Invalid password")

    if role != user.role.value:
        raise RoleMismatchError("User with this role is not found")

    payload = await store.find_public_by_email(email)
    logger.info(f"{user.role.value} logged in: {payload.id}")
    return issue_token(payload, "User logged in successfully!", 200)
