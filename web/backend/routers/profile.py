#!/usr/bin/env python3
"""
Profile endpoints - quiz stages, stored profile and recommendations.
"""

import logging
from fastapi import APIRouter, Depends

from core.scorer import RecommendationService
from database.repositories import CareerProfileRepository
from ..dependencies import get_profile_repository, get_recommendation_service, get_user_id
from ..services.profile_service import ProfileService
from ..models.requests import StartRequest, AnswersRequest, PreferencesRequest
from ..models.responses import (
    StageResponse,
    PreferencesResponse,
    ProfileResponse,
    RecommendationsResponse,
    DeleteProfileResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["profile"])


def get_profile_service(
    repo: CareerProfileRepository = Depends(get_profile_repository),
    recommender: RecommendationService = Depends(get_recommendation_service)
) -> ProfileService:
    return ProfileService(repo, recommender)


@router.post("/profile/start", response_model=StageResponse)
def start_quiz(
    request: StartRequest,
    user_id: str = Depends(get_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """Store the optional display name and move on to the Holland quiz."""
    return service.start(user_id, request.name)


@router.post("/profile/holland", response_model=StageResponse)
def submit_holland(
    request: AnswersRequest,
    user_id: str = Depends(get_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """
    Score the Holland Code quiz.

    Every question must be answered on the 1-5 scale.
    """
    return service.submit_holland(user_id, request.answers)


@router.post("/profile/big-five", response_model=StageResponse)
def submit_big_five(
    request: AnswersRequest,
    user_id: str = Depends(get_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """
    Score the Big Five quiz.

    Reverse-keyed items are flipped before summing.
    """
    return service.submit_big_five(user_id, request.answers)


@router.post("/profile/preferences", response_model=PreferencesResponse)
def submit_preferences(
    request: PreferencesRequest,
    user_id: str = Depends(get_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """
    Store industry and activity preferences and return the first recommendations.

    Requires both quizzes to be completed.
    """
    return service.submit_preferences(
        user_id,
        industries=request.industries,
        other_industry=request.other_industry,
        activities=request.activities
    )


@router.get("/profile", response_model=ProfileResponse)
def get_profile(
    user_id: str = Depends(get_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """
    Get the stored profile and the step to resume at.

    Recommendations are included once the profile is complete.
    """
    return service.get_profile(user_id)


@router.delete("/profile", response_model=DeleteProfileResponse)
def delete_profile(
    user_id: str = Depends(get_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """Clear the stored profile so the quizzes can be retaken."""
    return service.reset(user_id)


@router.get("/recommendations", response_model=RecommendationsResponse)
def get_recommendations(
    user_id: str = Depends(get_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """
    Get the top-ranked jobs for a completed profile.

    Scores are recomputed from the stored stage outputs on every call.
    """
    return service.get_recommendations(user_id)
