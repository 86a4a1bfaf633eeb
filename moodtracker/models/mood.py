from typing import Annotated, Any, Literal, Optional
from pydantic import BaseModel, BeforeValidator, Field, ConfigDict, PlainSerializer, WithJsonSchema, field_validator
from datetime import datetime
from bson import ObjectId

from moodtracker.services import mood_scale

MoodLabel = Literal["happy", "calm", "sad", "angry", "neutral"]


def _to_object_id(v: Any) -> Any:
    if isinstance(v, ObjectId):
        return v
    if not ObjectId.is_valid(v):
        raise ValueError("Invalid objectid")
    return ObjectId(v)


# Mongo _id, accepted as ObjectId or its hex string, sent to clients as a string
PyObjectId = Annotated[
    ObjectId,
    BeforeValidator(_to_object_id),
    PlainSerializer(str, return_type=str, when_used="json-unless-none"),
    WithJsonSchema({"type": "string"}),
]


# Input for POST /mood/today
class MoodLogRequest(BaseModel):
    mood: MoodLabel
    notes: Optional[str] = None

    @field_validator("mood", mode="before")
    @classmethod
    def lowercase_mood(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("notes")
    @classmethod
    def blank_notes_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None


# A stored mood entry, as read back from MongoDB
class MoodEntry(BaseModel):
    id: Optional[PyObjectId] = Field(default=None, alias="_id")
    user_id: str
    mood: str
    timestamp: datetime
    notes: Optional[str] = None

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    # Older or hand-edited documents may hold any label; reads never fail on it
    @field_validator("mood", mode="before")
    @classmethod
    def canonical_mood(cls, v: Any) -> str:
        return mood_scale.normalize_mood(v)


class MoodEntryEnvelope(BaseModel):
    success: bool = True
    data: Optional[MoodEntry] = None


class MoodListEnvelope(BaseModel):
    success: bool = True
    data: list[MoodEntry] = []
