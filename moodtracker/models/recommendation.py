from pydantic import BaseModel, ConfigDict
from typing import List


class RecommendationProfile(BaseModel):
    mood: str
    label: str
    music_descriptor: str
    movie_genre: str
    activity_descriptor: str
    theme_color: str

    model_config = ConfigDict(frozen=True)


class RecommendationEnvelope(BaseModel):
    success: bool = True
    data: RecommendationProfile


class RecommendationListEnvelope(BaseModel):
    success: bool = True
    data: List[RecommendationProfile]
