"""Fixed ordinal scale between mood labels and chart scores."""

import math
from types import MappingProxyType
from typing import Any

MOOD_LABELS = ("happy", "calm", "neutral", "sad", "angry")

NEUTRAL_MOOD = "neutral"
NEUTRAL_SCORE = 3

MOOD_SCORES = MappingProxyType({
    "happy": 5,
    "calm": 4,
    "neutral": 3,
    "sad": 2,
    "angry": 1,
})

SCORE_LABELS = MappingProxyType({
    5: "Happy",
    4: "Calm",
    3: "Neutral",
    2: "Sad",
    1: "Angry",
})


def normalize_mood(mood: Any) -> str:
    """Return the canonical label for ``mood``, or ``neutral`` if unknown."""
    if isinstance(mood, str):
        key = mood.strip().lower()
        if key in MOOD_SCORES:
            return key
    return NEUTRAL_MOOD


def score_of(mood: Any) -> int:
    """Score in [1, 5] for a mood label. Never raises."""
    return MOOD_SCORES[normalize_mood(mood)]


def label_of_score(value: float) -> str:
    # Chart tooltip text; 0 is the empty-day sentinel
    rounded = math.floor(value + 0.5)
    if rounded == 0:
        return ""
    return SCORE_LABELS.get(rounded, "Neutral")
