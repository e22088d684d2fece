#!/usr/bin/env python3
"""
Trait Scoring - Reduce questionnaire answers to trait vectors.

A missing answer contributes 0 to its dimension; completeness is checked
by the answer-collection layer before these functions are called.
"""

from typing import Dict, Iterable, Mapping
import logging

from core.scorer.models import (
    HOLLAND_TYPES, BIG_FIVE_TRAITS,
    HollandQuestion, BigFiveQuestion,
    HollandVector, BigFiveVector,
)

logger = logging.getLogger(__name__)

REVERSE_SCORE_BASE = 6


def calculate_holland_scores(
    questions: Iterable[HollandQuestion],
    answers: Mapping[str, int]
) -> HollandVector:
    """Sum answer values per RIASEC type."""
    scores: Dict[str, int] = {t: 0 for t in HOLLAND_TYPES}
    for question in questions:
        scores[question.type] += answers.get(question.id, 0) or 0

    logger.debug("Holland scores: %s", scores)
    return HollandVector(**scores)


def calculate_big_five_scores(
    questions: Iterable[BigFiveQuestion],
    answers: Mapping[str, int]
) -> BigFiveVector:
    """
    Sum answer values per OCEAN trait.

    Reverse-coded items contribute (6 - answer) instead of the raw answer.
    """
    scores: Dict[str, int] = {t: 0 for t in BIG_FIVE_TRAITS}
    for question in questions:
        value = answers.get(question.id, 0) or 0
        scores[question.trait] += (REVERSE_SCORE_BASE - value) if question.reverse else value

    logger.debug("Big Five scores: %s", scores)
    return BigFiveVector(**scores)
