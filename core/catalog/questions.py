#!/usr/bin/env python3
"""
Questionnaires - Holland Code (RIASEC) and Big Five (OCEAN) items.

Answers use a 1-5 scale. Big Five items flagged `reverse` are negatively
phrased and are inverted during scoring.
"""

from typing import Dict, List, Mapping, Sequence, Union

from core.scorer.models import HollandQuestion, BigFiveQuestion

MIN_ANSWER = 1
MAX_ANSWER = 5

HOLLAND_QUIZ = 'holland'
BIG_FIVE_QUIZ = 'big_five'

HOLLAND_QUESTIONS = (
    HollandQuestion('h1', 'I enjoy building or repairing things with my hands.', 'R'),
    HollandQuestion('h2', 'I like to analyze data and solve complex problems.', 'I'),
    HollandQuestion('h3', 'I prefer activities that involve artistic expression, like writing or painting.', 'A'),
    HollandQuestion('h4', 'I enjoy helping, teaching, or counseling others.', 'S'),
    HollandQuestion('h5', 'I like to lead, persuade, or manage people.', 'E'),
    HollandQuestion('h6', 'I am good at organizing information and paying attention to details.', 'C'),
    HollandQuestion('h7', 'I am interested in how machines work and enjoy hands-on tasks.', 'R'),
    HollandQuestion('h8', 'I enjoy conducting research and exploring new theories.', 'I'),
    HollandQuestion('h9', 'I like to express my originality and creativity.', 'A'),
    HollandQuestion('h10', 'I feel a strong desire to serve the community and support others.', 'S'),
    HollandQuestion('h11', 'I am comfortable taking risks and initiating projects.', 'E'),
    HollandQuestion('h12', 'I value precision and enjoy working with numbers and records.', 'C'),
)

BIG_FIVE_QUESTIONS = (
    # Openness
    BigFiveQuestion('b1', 'I have a vivid imagination.', 'O'),
    BigFiveQuestion('b2', 'I am interested in abstract ideas.', 'O'),
    BigFiveQuestion('b3', 'I avoid philosophical discussions.', 'O', reverse=True),
    # Conscientiousness
    BigFiveQuestion('b4', 'I am always prepared.', 'C'),
    BigFiveQuestion('b5', 'I pay attention to details.', 'C'),
    BigFiveQuestion('b6', 'I often forget to put things back in their proper place.', 'C', reverse=True),
    # Extraversion
    BigFiveQuestion('b7', 'I am the life of the party.', 'E'),
    BigFiveQuestion('b8', 'I talk to a lot of different people at parties.', 'E'),
    BigFiveQuestion('b9', 'I tend to be quiet around strangers.', 'E', reverse=True),
    # Agreeableness
    BigFiveQuestion('b10', "I feel others' emotions.", 'A'),
    BigFiveQuestion('b11', 'I make people feel at ease.', 'A'),
    BigFiveQuestion('b12', 'I tend to find fault with others.', 'A', reverse=True),
    # Neuroticism
    BigFiveQuestion('b13', 'I get stressed out easily.', 'N'),
    BigFiveQuestion('b14', 'I worry about things.', 'N'),
    BigFiveQuestion('b15', 'I am relaxed most of the time.', 'N', reverse=True),
)

SCALE_LABELS: Dict[str, Dict[int, str]] = {
    HOLLAND_QUIZ: {
        1: 'Strongly Dislike',
        2: 'Slightly Dislike',
        3: 'Neutral',
        4: 'Slightly Like',
        5: 'Strongly Like',
    },
    BIG_FIVE_QUIZ: {
        1: 'Very Inaccurate',
        2: 'Somewhat Inaccurate',
        3: 'Neutral',
        4: 'Somewhat Accurate',
        5: 'Very Accurate',
    },
}

Question = Union[HollandQuestion, BigFiveQuestion]


def scale_label(score: int, quiz_type: str) -> str:
    return SCALE_LABELS.get(quiz_type, {}).get(score, '')


def unanswered_questions(questions: Sequence[Question], answers: Mapping[str, int]) -> List[str]:
    """Ids of questions without an answer, in questionnaire order."""
    return [q.id for q in questions if q.id not in answers]


def invalid_answers(questions: Sequence[Question], answers: Mapping[str, int]) -> List[str]:
    """Ids of answered questions whose value is outside the 1-5 scale."""
    return [
        q.id for q in questions
        if q.id in answers and not (MIN_ANSWER <= answers[q.id] <= MAX_ANSWER)
    ]
