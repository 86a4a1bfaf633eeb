from fastapi import APIRouter, Depends, Query, HTTPException, status
from datetime import datetime, timedelta, date, timezone
from typing import Optional

import structlog
from pymongo.errors import PyMongoError

from moodtracker.config import settings
from moodtracker.db.mood_store import MoodStore, get_mood_store
from moodtracker.models.mood import MoodLogRequest, MoodEntryEnvelope, MoodListEnvelope
from moodtracker.models.trend import TrendEnvelope
from moodtracker.routers.auth_dependency import get_current_user_id
from moodtracker.services.trend_service import summarize

logger = structlog.get_logger()

router = APIRouter(
    prefix="/mood",
    tags=["Mood"],
    dependencies=[Depends(get_current_user_id)]
)

MAX_RANGE_HOURS = 24 * 30

# query_end is midnight after end_date, and the window start must stay >= date.min
MIN_END_DATE = date.fromordinal(settings.trend_window_days)
MAX_END_DATE = date.max - timedelta(days=1)


def _store_error(action: str, user_id: str, e: Exception) -> HTTPException:
    logger.error("mongo_error", action=action, user_id=user_id, error=str(e))
    return HTTPException(status_code=500, detail=f"Failed to {action}")


@router.post("/today", response_model=MoodEntryEnvelope, status_code=status.HTTP_201_CREATED)
def log_mood(
    request: MoodLogRequest,
    user_id: str = Depends(get_current_user_id),
    store: MoodStore = Depends(get_mood_store),
):
    try:
        doc = store.add(user_id, request.mood, request.notes)
    except PyMongoError as e:
        raise _store_error("save mood", user_id, e)
    return MoodEntryEnvelope(data=doc)


@router.get("/today", response_model=MoodEntryEnvelope)
def get_current_mood(
    user_id: str = Depends(get_current_user_id),
    store: MoodStore = Depends(get_mood_store),
):
    try:
        doc = store.latest(user_id)
    except PyMongoError as e:
        raise _store_error("load current mood", user_id, e)
    return MoodEntryEnvelope(data=doc)


@router.get("/range", response_model=MoodListEnvelope)
def get_mood_range(
    limit: int = Query(settings.range_default_hours, ge=1, le=MAX_RANGE_HOURS, description="Trailing hours"),
    user_id: str = Depends(get_current_user_id),
    store: MoodStore = Depends(get_mood_store),
):
    since = datetime.now(timezone.utc) - timedelta(hours=limit)
    try:
        docs = store.since(user_id, since)
    except PyMongoError as e:
        raise _store_error("load mood history", user_id, e)
    return MoodListEnvelope(data=docs)


@router.get("/trend", response_model=TrendEnvelope)
def get_mood_trend(
    end_date: Optional[date] = Query(
        None, ge=MIN_END_DATE, le=MAX_END_DATE, description="Last day of the window (UTC), defaults to today"
    ),
    user_id: str = Depends(get_current_user_id),
    store: MoodStore = Depends(get_mood_store),
):
    window_days = settings.trend_window_days
    if end_date is None:
        end_date = datetime.now(timezone.utc).date()

    # Whole UTC days from the first day of the window through end_date
    query_start = datetime.combine(
        end_date - timedelta(days=window_days - 1), datetime.min.time(), tzinfo=timezone.utc
    )
    query_end = query_start + timedelta(days=window_days)

    try:
        docs = store.since(user_id, query_start, query_end)
    except PyMongoError as e:
        raise _store_error("load mood trend", user_id, e)

    return TrendEnvelope(data=summarize(docs, end_date, window_days))
