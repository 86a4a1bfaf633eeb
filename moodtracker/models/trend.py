from pydantic import BaseModel
from typing import List, Optional


class DayBucket(BaseModel):
    date_key: str  # YYYY-MM-DD (UTC)
    day: str  # "Mon"
    label: str  # "Jan 4"
    scores: List[int] = []
    average: float = 0.0  # 0 = no data, otherwise 1 (Angry) -> 5 (Happy)
    mood_label: str = ""  # tooltip text for the rounded average, empty when no data


class MoodCountStat(BaseModel):
    mood: str
    count: int
    percentage: float


class TrendSummary(BaseModel):
    # 1. Line chart, always one bucket per day, oldest first
    window: List[DayBucket]

    # 2. Mood distribution inside the window
    mood_counts: List[MoodCountStat]
    total_entries: int

    # 3. Activity
    active_days: int
    week_average: Optional[float] = None
    current_streak: int


class TrendEnvelope(BaseModel):
    success: bool = True
    data: TrendSummary
