from typing import Optional

import structlog
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import ConnectionFailure, PyMongoError

from moodtracker.config import settings

logger = structlog.get_logger()

_client: Optional[MongoClient] = None
_db: Optional[Database] = None


def connect() -> Database:
    global _client, _db
    try:
        client = MongoClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=settings.mongo_timeout_ms,
            tz_aware=True,
        )
        client.admin.command("ping")
    except PyMongoError as e:
        logger.error("mongo_connect_failed", db=settings.db_name, error=str(e))
        raise ConnectionFailure(f"Cannot connect to MongoDB: {e}") from e

    _client = client
    _db = client[settings.db_name]
    logger.info("mongo_connected", db=settings.db_name)
    return _db


def get_database() -> Database:
    if _db is None:
        return connect()
    return _db


def close() -> None:
    global _client, _db
    if _client is not None:
        _client.close()
    _client = None
    _db = None


def get_mood_collection() -> Collection:
    return get_database()["mood_entries"]


def get_user_collection() -> Collection:
    return get_database()["users"]
