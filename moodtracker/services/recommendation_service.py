"""Static mood -> content profile table behind the music, movie and activity cards."""

from types import MappingProxyType
from typing import Any, List

from moodtracker.models.recommendation import RecommendationProfile
from moodtracker.services.mood_scale import MOOD_LABELS, normalize_mood

PROFILES = MappingProxyType({
    "happy": RecommendationProfile(
        mood="happy",
        label="Happy",
        music_descriptor="Happy Vibes",
        movie_genre="Comedy",
        activity_descriptor="Share the energy: call a friend or go for a walk outside",
        theme_color="#4CAF50",
    ),
    "calm": RecommendationProfile(
        mood="calm",
        label="Calm",
        music_descriptor="Calm Acoustic",
        movie_genre="Animation",
        activity_descriptor="Read a book or try a short guided meditation",
        theme_color="#F4B942",
    ),
    "sad": RecommendationProfile(
        mood="sad",
        label="Sad",
        music_descriptor="Melancholic Mood",
        movie_genre="Drama",
        activity_descriptor="Write in your journal or take a gentle walk",
        theme_color="#5B7FA3",
    ),
    "angry": RecommendationProfile(
        mood="angry",
        label="Angry",
        music_descriptor="Intense Energy",
        movie_genre="Action",
        activity_descriptor="Burn it off with a workout or some deep breathing",
        theme_color="#D32F2F",
    ),
    "neutral": RecommendationProfile(
        mood="neutral",
        label="Neutral",
        music_descriptor="Chill Vibes",
        movie_genre="Documentary",
        activity_descriptor="Try something new: a podcast, a recipe, or a stretch",
        theme_color="#9E9E9E",
    ),
})


def select_profile(mood: Any) -> RecommendationProfile:
    """Profile for ``mood``; unknown or missing moods get the neutral profile."""
    return PROFILES[normalize_mood(mood)]


def all_profiles() -> List[RecommendationProfile]:
    return [PROFILES[mood] for mood in MOOD_LABELS]
