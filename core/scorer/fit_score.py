#!/usr/bin/env python3
"""
Fit Score - Per-job sub-scores between a user profile and one job profile.

Sub-scores (each in [0,1]):
- holland_fit / big_five_fit: 1 / (1 + euclidean distance) between trait vectors
- industry_fit: binary, job industry label contains a preferred industry
- activity_fit: share of user activities that overlap a job keyword

Matching rules:
- Industry containment is one-directional (job label contains preference).
- Activity containment is symmetric (keyword in activity or activity in keyword).
"""

from __future__ import annotations

from typing import Sequence, Iterable
import logging

import numpy as np

from core.scorer.models import (
    HollandVector, BigFiveVector, JobProfile, Preferences, FitScores,
)

logger = logging.getLogger(__name__)


def euclidean_distance(user_values: Sequence[float], job_values: Sequence[float]) -> float:
    user_arr = np.asarray(user_values, dtype=float)
    job_arr = np.asarray(job_values, dtype=float)
    if user_arr.shape != job_arr.shape:
        raise ValueError(f"Vector size mismatch: {user_arr.shape} vs {job_arr.shape}")
    return float(np.linalg.norm(user_arr - job_arr))


def trait_similarity(user_vector, job_vector) -> float:
    """
    Convert the distance between two trait vectors of the same variant into a similarity.

    Returns 1.0 for identical vectors and tends to 0 as the distance grows.
    """
    distance = euclidean_distance(user_vector.values(), job_vector.values())
    return 1.0 / (1.0 + distance)


def calculate_industry_fit(job_industry: str, preferred_industries: Iterable[str]) -> float:
    if not job_industry:
        return 0.0
    label = job_industry.lower()
    for preferred in preferred_industries or ():
        if preferred.lower() in label:
            return 1.0
    return 0.0


def _activity_matches(activity: str, keywords: Sequence[str]) -> bool:
    return any(kw in activity or activity in kw for kw in keywords)


def calculate_activity_fit(activities: Sequence[str], keywords: Sequence[str]) -> float:
    if not activities or not keywords:
        return 0.0

    activities_lower = [a.lower() for a in activities]
    keywords_lower = [kw.lower() for kw in keywords]

    matches = sum(1 for act in activities_lower if _activity_matches(act, keywords_lower))
    return matches / len(activities_lower)


def calculate_job_fit(
    holland: HollandVector,
    big_five: BigFiveVector,
    preferences: Preferences,
    job: JobProfile
) -> FitScores:
    """Compute the four independent sub-scores for one job."""
    scores = FitScores(
        holland_fit=trait_similarity(holland, job.holland),
        big_five_fit=trait_similarity(big_five, job.big_five),
        industry_fit=calculate_industry_fit(job.industry, preferences.industries),
        activity_fit=calculate_activity_fit(preferences.activities, job.keywords),
    )

    logger.debug(
        "Fit for %s: holland=%.4f big_five=%.4f industry=%.1f activity=%.3f",
        job.title, scores.holland_fit, scores.big_five_fit,
        scores.industry_fit, scores.activity_fit
    )
    return scores
