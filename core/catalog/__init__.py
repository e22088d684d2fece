"""Catalog Module - Static questionnaires and job profiles."""
from core.catalog.questions import (
    HOLLAND_QUESTIONS, BIG_FIVE_QUESTIONS, HOLLAND_QUIZ, BIG_FIVE_QUIZ,
    SCALE_LABELS, scale_label, unanswered_questions, invalid_answers,
)
from core.catalog.jobs import JOB_PROFILES, TOP_INDUSTRIES, get_job

__all__ = [
    'HOLLAND_QUESTIONS', 'BIG_FIVE_QUESTIONS', 'HOLLAND_QUIZ', 'BIG_FIVE_QUIZ',
    'SCALE_LABELS', 'scale_label', 'unanswered_questions', 'invalid_answers',
    'JOB_PROFILES', 'TOP_INDUSTRIES', 'get_job',
]
