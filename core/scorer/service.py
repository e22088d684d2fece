#!/usr/bin/env python3
"""
Recommendation Service - Rank the job catalog against one user profile.

total_fit = 0.3 * holland_fit + 0.3 * big_five_fit + 0.2 * industry_fit + 0.2 * activity_fit

Jobs are sorted by total_fit (highest first); ties keep catalog order.
Only the top TOP_K jobs are returned. The catalog is never mutated.
"""

from typing import List, Optional, Sequence
import logging

from core.scorer.models import (
    HollandVector, BigFiveVector, JobProfile, Preferences, ScoredJob,
)
from core.scorer.fit_score import calculate_job_fit

logger = logging.getLogger(__name__)

HOLLAND_WEIGHT = 0.3
BIG_FIVE_WEIGHT = 0.3
INDUSTRY_WEIGHT = 0.2
ACTIVITY_WEIGHT = 0.2

TOP_K = 5


def combine_fit_scores(
    holland_fit: float,
    big_five_fit: float,
    industry_fit: float,
    activity_fit: float
) -> float:
    return (
        holland_fit * HOLLAND_WEIGHT
        + big_five_fit * BIG_FIVE_WEIGHT
        + industry_fit * INDUSTRY_WEIGHT
        + activity_fit * ACTIVITY_WEIGHT
    )


class RecommendationService:
    """
    Scores every catalog job for a complete user profile and keeps the best TOP_K.

    Holds only the immutable catalog; every call produces fresh ScoredJob values.
    """

    def __init__(self, catalog: Sequence[JobProfile]):
        self.catalog = tuple(catalog)

    def score_job(
        self,
        job_id: int,
        job: JobProfile,
        holland: HollandVector,
        big_five: BigFiveVector,
        preferences: Preferences
    ) -> ScoredJob:
        """Score a single job; independent of every other job in the catalog."""
        fit = calculate_job_fit(holland, big_five, preferences, job)
        total_fit = combine_fit_scores(
            fit.holland_fit, fit.big_five_fit, fit.industry_fit, fit.activity_fit
        )

        return ScoredJob(
            job_id=job_id,
            job=job,
            holland_fit=fit.holland_fit,
            big_five_fit=fit.big_five_fit,
            industry_fit=fit.industry_fit,
            activity_fit=fit.activity_fit,
            total_fit=total_fit
        )

    def score_all(
        self,
        holland: HollandVector,
        big_five: BigFiveVector,
        preferences: Preferences
    ) -> List[ScoredJob]:
        """Score every catalog job, sorted by total_fit (stable, highest first)."""
        scored = [
            self.score_job(job_id, job, holland, big_five, preferences)
            for job_id, job in enumerate(self.catalog)
        ]
        scored.sort(key=lambda s: s.total_fit, reverse=True)
        return scored

    def recommend(
        self,
        holland: Optional[HollandVector],
        big_five: Optional[BigFiveVector],
        preferences: Optional[Preferences]
    ) -> List[ScoredJob]:
        """
        Return the top TOP_K jobs for a complete profile.

        An incomplete profile (any input missing) yields an empty list,
        as does an empty catalog.
        """
        if holland is None or big_five is None or preferences is None:
            logger.debug("Profile incomplete; skipping recommendations")
            return []

        ranked = self.score_all(holland, big_five, preferences)[:TOP_K]

        if ranked:
            logger.info(
                "Ranked %d jobs, returning top %d (best: %s %.3f)",
                len(self.catalog), len(ranked), ranked[0].title, ranked[0].total_fit
            )
        return ranked
