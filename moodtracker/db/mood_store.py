"""MongoDB access for mood entries."""

from datetime import datetime, timezone
from typing import List, Optional

import structlog
from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection

from moodtracker.db.database import get_mood_collection

logger = structlog.get_logger()


class MoodStore:
    """Insert and read a user's mood entries. Documents are returned as plain dicts."""

    def __init__(self, collection: Collection):
        self.collection = collection

    def add(self, user_id: str, mood: str, notes: Optional[str] = None,
            timestamp: Optional[datetime] = None) -> dict:
        doc = {
            "user_id": user_id,
            "mood": mood,
            "notes": notes,
            "timestamp": timestamp or datetime.now(timezone.utc),
        }
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.info("mood_logged", user_id=user_id, mood=mood)
        return doc

    def latest(self, user_id: str) -> Optional[dict]:
        return self.collection.find_one(
            {"user_id": user_id},
            sort=[("timestamp", DESCENDING)],
        )

    def since(self, user_id: str, since: datetime, until: Optional[datetime] = None) -> List[dict]:
        """Entries in ``[since, until)``, oldest first. No upper bound when ``until`` is None."""
        time_range = {"$gte": since}
        if until is not None:
            time_range["$lt"] = until
        cursor = self.collection.find({
            "user_id": user_id,
            "timestamp": time_range,
        }).sort("timestamp", ASCENDING)
        return list(cursor)


def get_mood_store() -> MoodStore:
    return MoodStore(get_mood_collection())
