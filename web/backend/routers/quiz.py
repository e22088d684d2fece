#!/usr/bin/env python3
"""
Quiz endpoints - questionnaires and the industry checklist.
"""

from fastapi import APIRouter

from core.catalog import (
    HOLLAND_QUESTIONS,
    BIG_FIVE_QUESTIONS,
    HOLLAND_QUIZ,
    BIG_FIVE_QUIZ,
    SCALE_LABELS,
    TOP_INDUSTRIES,
)
from core.scorer.models import HOLLAND_TYPE_NAMES, BIG_FIVE_TRAIT_NAMES
from ..models.responses import QuestionItem, QuestionnaireResponse, IndustriesResponse

router = APIRouter(prefix="/api/v1/quiz", tags=["quiz"])


@router.get("/holland", response_model=QuestionnaireResponse)
def get_holland_questions():
    """Holland Code questions with the interest scale."""
    return QuestionnaireResponse(
        quiz_type=HOLLAND_QUIZ,
        questions=[
            QuestionItem(
                id=q.id, text=q.text, dimension=q.type,
                dimension_name=HOLLAND_TYPE_NAMES[q.type]
            )
            for q in HOLLAND_QUESTIONS
        ],
        scale_labels=SCALE_LABELS[HOLLAND_QUIZ],
    )


@router.get("/big-five", response_model=QuestionnaireResponse)
def get_big_five_questions():
    """Big Five questions with the agreement scale."""
    return QuestionnaireResponse(
        quiz_type=BIG_FIVE_QUIZ,
        questions=[
            QuestionItem(
                id=q.id, text=q.text, dimension=q.trait,
                dimension_name=BIG_FIVE_TRAIT_NAMES[q.trait], reverse=q.reverse
            )
            for q in BIG_FIVE_QUESTIONS
        ],
        scale_labels=SCALE_LABELS[BIG_FIVE_QUIZ],
    )


@router.get("/industries", response_model=IndustriesResponse)
def get_industries():
    return IndustriesResponse(industries=list(TOP_INDUSTRIES))
