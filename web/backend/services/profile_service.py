#!/usr/bin/env python3
"""
Profile service - runs the quiz stages and stores their outputs.

Each stage is a pure transformation (answers -> trait vector,
raw form -> preferences, profile -> ranking). Only the stage outputs are
stored; recommendations are recomputed on every read.

A failed save never blocks a stage: the computed output is still returned,
flagged with saved=False.
"""

import logging
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError

from core.catalog import (
    HOLLAND_QUESTIONS, BIG_FIVE_QUESTIONS, unanswered_questions, invalid_answers,
)
from core.pipeline import ProfileSnapshot, QuizStep, determine_step, holland_code
from core.scorer import RecommendationService, ScoredJob, InputRequiredError
from core.scorer.preferences import build_preferences
from core.scorer.traits import calculate_holland_scores, calculate_big_five_scores
from database.repositories import CareerProfileRepository
from ..exceptions import (
    InputRequiredException,
    QuizIncompleteException,
    ProfileNotFoundException,
    PersistenceException,
)
from ..models.responses import (
    JobRecommendation,
    StageResponse,
    PreferencesResponse,
    RecommendationsResponse,
    ProfileResponse,
    DeleteProfileResponse,
)

logger = logging.getLogger(__name__)

QUIZ_INCOMPLETE_MESSAGE = "Please answer all questions before submitting."
PROFILE_INCOMPLETE_MESSAGE = "Please complete both quizzes before entering your preferences."


def to_recommendation(
    scored: ScoredJob,
    enhanced_descriptions: Optional[Mapping[str, str]] = None
) -> JobRecommendation:
    job = scored.job
    return JobRecommendation(
        job_id=scored.job_id,
        title=job.title,
        description=job.description,
        enhanced_description=(enhanced_descriptions or {}).get(str(scored.job_id)),
        industry=job.industry,
        keywords=list(job.keywords),
        holland_fit=scored.holland_fit,
        big_five_fit=scored.big_five_fit,
        industry_fit=scored.industry_fit,
        activity_fit=scored.activity_fit,
        total_fit=scored.total_fit,
    )


def _check_answers(questions: Sequence, answers: Mapping[str, int]) -> None:
    missing = unanswered_questions(questions, answers)
    if missing:
        raise QuizIncompleteException(
            f"{QUIZ_INCOMPLETE_MESSAGE} Unanswered: {', '.join(missing)}"
        )
    out_of_range = invalid_answers(questions, answers)
    if out_of_range:
        raise QuizIncompleteException(
            f"Answers must be between 1 and 5. Invalid: {', '.join(out_of_range)}"
        )


class ProfileService:
    """Service for quiz stages and recommendations of one user."""

    def __init__(
        self,
        repo: CareerProfileRepository,
        recommender: RecommendationService
    ):
        self.repo = repo
        self.recommender = recommender

    # ------------------------------------------------------------------
    # Storage helpers
    # ------------------------------------------------------------------

    def _save(self, user_id: str, action: Callable[[], object]) -> bool:
        """Run a write and commit it; report failure instead of raising."""
        try:
            action()
            self.repo.commit()
            return True
        except SQLAlchemyError as e:
            logger.warning(f"Failed to save career profile for user {user_id}: {e}")
            self.repo.rollback()
            return False

    def load_snapshot(self, user_id: str) -> Optional[ProfileSnapshot]:
        try:
            return self.repo.get_snapshot(user_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to load career profile for user {user_id}: {e}")
            raise PersistenceException(
                "There was an issue loading your previous career profile."
            ) from e

    def require_snapshot(self, user_id: str) -> ProfileSnapshot:
        snapshot = self.load_snapshot(user_id)
        if snapshot is None:
            raise ProfileNotFoundException(f"No career profile found for user {user_id}")
        return snapshot

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def start(self, user_id: str, name: Optional[str]) -> StageResponse:
        clean_name = (name or '').strip()
        saved = self._save(user_id, lambda: self.repo.save_profile(user_id, name=clean_name))
        return StageResponse(success=True, step=QuizStep.HOLLAND.value, saved=saved)

    def submit_holland(self, user_id: str, answers: Mapping[str, int]) -> StageResponse:
        _check_answers(HOLLAND_QUESTIONS, answers)
        scores = calculate_holland_scores(HOLLAND_QUESTIONS, answers)

        saved = self._save(
            user_id, lambda: self.repo.save_profile(user_id, holland_scores=scores.to_dict())
        )
        logger.info(f"Holland quiz completed for user {user_id}: {holland_code(scores)}")

        return StageResponse(
            success=True,
            step=QuizStep.BIG_FIVE.value,
            saved=saved,
            holland_scores=scores.to_dict(),
        )

    def submit_big_five(self, user_id: str, answers: Mapping[str, int]) -> StageResponse:
        _check_answers(BIG_FIVE_QUESTIONS, answers)
        scores = calculate_big_five_scores(BIG_FIVE_QUESTIONS, answers)

        saved = self._save(
            user_id, lambda: self.repo.save_profile(user_id, big_five_scores=scores.to_dict())
        )
        logger.info(f"Big Five quiz completed for user {user_id}")

        return StageResponse(
            success=True,
            step=QuizStep.PREFERENCES.value,
            saved=saved,
            big_five_scores=scores.to_dict(),
        )

    def submit_preferences(
        self,
        user_id: str,
        industries: List[str],
        other_industry: Optional[str],
        activities: List[str]
    ) -> PreferencesResponse:
        try:
            preferences = build_preferences(industries, other_industry, activities)
        except (InputRequiredError, ValueError) as e:
            raise InputRequiredException(str(e)) from e

        snapshot = self.require_snapshot(user_id)
        if snapshot.holland is None or snapshot.big_five is None:
            raise QuizIncompleteException(PROFILE_INCOMPLETE_MESSAGE)

        saved = self._save(
            user_id,
            lambda: self.repo.save_profile(
                user_id,
                industries=list(preferences.industries),
                activities=list(preferences.activities),
            )
        )

        ranked = self.recommender.recommend(snapshot.holland, snapshot.big_five, preferences)

        return PreferencesResponse(
            success=True,
            step=QuizStep.RESULTS.value,
            saved=saved,
            industries=list(preferences.industries),
            activities=list(preferences.activities),
            holland_code=holland_code(snapshot.holland),
            recommendations=[
                to_recommendation(s, snapshot.enhanced_job_descriptions) for s in ranked
            ],
        )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def _recommend(self, snapshot: ProfileSnapshot) -> List[JobRecommendation]:
        if not snapshot.is_complete:
            return []
        ranked = self.recommender.recommend(snapshot.holland, snapshot.big_five, snapshot.preferences)
        return [to_recommendation(s, snapshot.enhanced_job_descriptions) for s in ranked]

    def get_profile(self, user_id: str) -> ProfileResponse:
        snapshot = self.load_snapshot(user_id)
        if snapshot is None:
            return ProfileResponse(success=True, user_id=user_id, step=QuizStep.START.value)

        step = determine_step(snapshot)
        return ProfileResponse(
            success=True,
            user_id=user_id,
            name=snapshot.name,
            step=step.value,
            holland_scores=snapshot.holland.to_dict() if snapshot.holland else None,
            big_five_scores=snapshot.big_five.to_dict() if snapshot.big_five else None,
            holland_code=holland_code(snapshot.holland) if snapshot.holland else None,
            industries=snapshot.industries,
            activities=snapshot.activities,
            career_advice=snapshot.career_advice,
            recommendations=self._recommend(snapshot),
        )

    def get_recommendations(self, user_id: str) -> RecommendationsResponse:
        snapshot = self.require_snapshot(user_id)
        if not snapshot.is_complete:
            raise QuizIncompleteException(
                "Please complete both quizzes and your preferences to see recommendations."
            )

        recommendations = self._recommend(snapshot)
        return RecommendationsResponse(
            success=True,
            holland_code=holland_code(snapshot.holland),
            count=len(recommendations),
            recommendations=recommendations,
        )

    def reset(self, user_id: str) -> DeleteProfileResponse:
        """Clear stored outputs so the quizzes can be retaken."""
        deleted: Dict[str, bool] = {'value': False}

        def _delete():
            deleted['value'] = self.repo.delete_profile(user_id)

        saved = self._save(user_id, _delete)
        if not saved:
            raise PersistenceException("Your career profile could not be cleared. Please try again.")

        return DeleteProfileResponse(success=True, deleted=deleted['value'], step=QuizStep.START.value)
