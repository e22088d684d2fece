#!/usr/bin/env python3
"""
Scoring Module - Recommendation scoring engine.

Public API:
- RecommendationService: Ranks the job catalog for one user profile
- ScoredJob: Dataclass for scored job results

The scoring pipeline is split into focused, single-responsibility modules:

- models.py: Data structures (trait vectors, questions, job profiles, ScoredJob)
- traits.py: Questionnaire answers -> Holland / Big Five vectors
- preferences.py: Industry and activity normalization and validation
- fit_score.py: Per-job sub-scores (trait similarity, industry, activity)
- service.py: RecommendationService weighting and ranking
"""

from core.scorer.models import (
    HollandVector, BigFiveVector, Preferences, JobProfile, ScoredJob,
)
from core.scorer.exceptions import ScoringInputError, InputRequiredError
from core.scorer.service import RecommendationService

__all__ = [
    'RecommendationService', 'ScoredJob',
    'HollandVector', 'BigFiveVector', 'Preferences', 'JobProfile',
    'ScoringInputError', 'InputRequiredError',
]
