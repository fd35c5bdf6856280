from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from config import settings
import database
from exceptions import register_exception_handlers
from auth.auth_handler import require_secret_key
from auth.routes import router as auth_router
from admin.routes import router as admin_router
from doctor.routes import router as doctor_router
from user.routes import router as user_router

logging.basicConfig(level=logging.INFO)

app = FastAPI()

# Cookies carry the session token, so origins must be listed explicitly.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.on_event("startup")
async def startup():
    require_secret_key()
    await database.connect_to_mongo()

# All Routes Endpoint Setup
app.include_router(auth_router, prefix="/api/v1/user", tags=["auth"])
app.include_router(admin_router, prefix="/api/v1/user", tags=["admin"])
app.include_router(doctor_router, prefix="/api/v1/user", tags=["doctor"])
app.include_router(user_router, prefix="/api/v1/user", tags=["user"])
