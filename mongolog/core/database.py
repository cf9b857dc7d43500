from typing import Optional
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError
from loguru import logger

from .config import MongoSettings


class MongoManager:
    """
    Owns the MongoDB client that log collections are taken from.

    The sink only ever receives a collection handle; opening and closing the
    connection stays here, with the application.
    """
    def __init__(self):
        self.client: Optional[MongoClient] = None
        self.db: Optional[Database] = None
        self._settings: Optional[MongoSettings] = None

    def init(self, settings: MongoSettings):
        connection_url = f"mongodb://{settings.host}:{settings.port}"
        try:
            self.client = MongoClient(
                connection_url,
                serverSelectionTimeoutMS=settings.server_selection_timeout_ms,
            )
            self.db = self.client[settings.database_name]
            self._settings = settings
            logger.info(f"Connected to MongoDB: {connection_url}/{settings.database_name}")
        except PyMongoError as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise

    def get_collection(self, collection_name: Optional[str] = None) -> Collection:
        if self.db is None:
            raise RuntimeError("Database not initialized. Call init() first.")
        return self.db[collection_name or self._settings.collection_name]

    def close(self):
        if self.client is not None:
            self.client.close()
            logger.info("MongoDB connection closed.")
        self.client = None
        self.db = None


db_manager = MongoManager()
