#!/usr/bin/env python3
"""
Quiz Pipeline - Explicit stage model for a user's progress.

Stages run strictly forward:

    start -> holland -> big_five -> preferences -> results

Only stage outputs are stored (trait vectors, preferences, advice). The
current step is always derived from what has been stored, never tracked
separately.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple
import logging

from core.scorer.models import HollandVector, BigFiveVector, Preferences, HOLLAND_TYPES

logger = logging.getLogger(__name__)


class QuizStep(str, Enum):
    START = 'start'
    HOLLAND = 'holland'
    BIG_FIVE = 'big_five'
    PREFERENCES = 'preferences'
    RESULTS = 'results'


@dataclass
class ProfileSnapshot:
    """Stored stage outputs for one user."""
    user_id: str
    name: str = ''
    holland: Optional[HollandVector] = None
    big_five: Optional[BigFiveVector] = None
    industries: List[str] = field(default_factory=list)
    activities: List[str] = field(default_factory=list)
    career_advice: str = ''
    enhanced_job_descriptions: Dict[str, str] = field(default_factory=dict)

    @property
    def preferences(self) -> Optional[Preferences]:
        if not self.industries and not self.activities:
            return None
        return Preferences(industries=tuple(self.industries), activities=tuple(self.activities))

    @property
    def is_complete(self) -> bool:
        return determine_step(self) == QuizStep.RESULTS


def determine_step(profile: Optional[ProfileSnapshot]) -> QuizStep:
    """Derive the step a user should resume at from their stored outputs."""
    if profile is None:
        return QuizStep.START

    if profile.holland and profile.big_five and profile.industries and profile.activities:
        return QuizStep.RESULTS
    if profile.holland and profile.big_five:
        return QuizStep.PREFERENCES
    if profile.holland:
        return QuizStep.BIG_FIVE
    return QuizStep.START


def holland_code(vector: HollandVector, length: int = 3) -> str:
    """
    Top letters of a Holland vector, highest score first.

    Ties keep RIASEC order.
    """
    ranked: List[Tuple[str, int]] = sorted(
        ((t, vector[t]) for t in HOLLAND_TYPES),
        key=lambda item: item[1],
        reverse=True
    )
    return ''.join(t for t, _ in ranked[:length])
