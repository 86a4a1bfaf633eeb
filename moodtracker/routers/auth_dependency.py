from datetime import datetime, timezone
from fastapi import Header, HTTPException, status
from typing import Annotated

from moodtracker.db.database import get_user_collection


def get_current_user_id(x_user_id: Annotated[str, Header()]):

    x_user_id = x_user_id.strip()
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing X-User-ID header"
        )

    user_collection = get_user_collection()

    # First request from a new id creates the user document
    user_collection.find_one_and_update(
        {"_id": x_user_id},
        {"$setOnInsert": {"_id": x_user_id, "name": None, "created_at": datetime.now(timezone.utc)}},
        upsert=True,
    )

    return x_user_id
