from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie
import logging

from config import settings
from models.user import User

logger = logging.getLogger(__name__)


def get_client():
    return AsyncIOMotorClient(settings.mongodb_uri)


async def connect_to_mongo(client=None):
    client = client or get_client()
    await init_beanie(database=client[settings.mongodb_db], document_models=[User])
    logger.info(f"Successfully connected to MongoDB database {settings.mongodb_db}")
