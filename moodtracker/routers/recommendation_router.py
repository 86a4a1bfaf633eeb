from fastapi import APIRouter, Depends, Query
from typing import Optional

from moodtracker.models.recommendation import RecommendationEnvelope, RecommendationListEnvelope
from moodtracker.routers.auth_dependency import get_current_user_id
from moodtracker.services.recommendation_service import all_profiles, select_profile

router = APIRouter(
    prefix="/recommendations",
    tags=["Recommendations"],
    dependencies=[Depends(get_current_user_id)]
)


@router.get("", response_model=RecommendationEnvelope)
async def get_recommendation(
    mood: Optional[str] = Query(None, description="Mood label, unknown values fall back to neutral"),
):
    return RecommendationEnvelope(data=select_profile(mood))


@router.get("/all", response_model=RecommendationListEnvelope)
async def get_all_recommendations():
    return RecommendationListEnvelope(data=all_profiles())
