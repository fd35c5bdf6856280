import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


class Settings(BaseModel):
    mongodb_uri: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    mongodb_db: str = os.getenv("MONGODB_DB", "hospital_db")

    jwt_secret_key: Optional[str] = os.getenv("JWT_SECRET_KEY")
    jwt_algorithm: str = "HS256"
    jwt_expires_minutes: int = int(os.getenv("JWT_EXPIRES_MINUTES", 60 * 24 * 7))

    cookie_expire_days: int = int(os.getenv("COOKIE_EXPIRE", 7))
    cookie_secure: bool = os.getenv("COOKIE_SECURE", "false").lower() == "true"

    cloudinary_cloud_name: str = os.getenv("CLOUDINARY_CLOUD_NAME", "")
    cloudinary_api_key: str = os.getenv("CLOUDINARY_API_KEY", "")
    cloudinary_api_secret: str = os.getenv("CLOUDINARY_API_SECRET", "")

    allowed_origins: List[str] = [
        origin
        for origin in (os.getenv("FRONTEND_URL"), os.getenv("DASHBOARD_URL"))
        if origin
    ]


settings = Settings()
