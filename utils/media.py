from typing import Optional

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool
import cloudinary
import cloudinary.uploader
import logging

from config import settings
from exceptions import AppError, UnsupportedMediaError, ValidationError
from models.user import Avatar

logger = logging.getLogger(__name__)

ALLOWED_AVATAR_TYPES = ("image/png", "image/jpeg", "image/webp")


def check_avatar(avatar: Optional[UploadFile]) -> UploadFile:
    if avatar is None:
        raise ValidationError("Doctor Avatar Required!")
    if avatar.content_type not in ALLOWED_AVATAR_TYPES:
        raise UnsupportedMediaError("File Format Not Supported!")
    return avatar


def _configure():
    cloudinary.config(
        cloud_name=settings.cloudinary_cloud_name,
        api_key=settings.cloudinary_api_key,
        api_secret=settings.cloudinary_api_secret,
    )


def _upload(file) -> dict:
    _configure()
    return cloudinary.uploader.upload(file, folder="doctor_avatars")


def _destroy(public_id: str) -> dict:
    _configure()
    return cloudinary.uploader.destroy(public_id)


async def upload_avatar(avatar: UploadFile) -> Avatar:
    try:
        result = await run_in_threadpool(_upload, avatar.file)
    except Exception as e:
        logger.error(f"Cloudinary upload failed: {str(e)}")
        raise AppError("Failed to upload doctor avatar", 500)
    return Avatar(public_id=result["public_id"], url=result["secure_url"])


async def discard_avatar(avatar: Avatar) -> None:
    """Delete an uploaded avatar whose user record was never created."""
    try:
        await run_in_threadpool(_destroy, avatar.public_id)
    except Exception as e:
        # The caller is already failing the request; leave a trace of the orphan.
        logger.error(f"Orphaned Cloudinary asset {avatar.public_id}: {str(e)}")
