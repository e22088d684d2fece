"""
Prompt builders for the two text enrichments.

Neither enrichment feeds back into scoring; both are display-only.
"""
from typing import Iterable, Optional

from core.scorer.models import HollandVector, BigFiveVector

CAREER_COACH_SYSTEM_PROMPT = (
    "You are a supportive career coach. Give practical, encouraging guidance "
    "in plain language. Do not invent facts about the user."
)

TRAIT_LEGEND = (
    "Holland Code types are R (Realistic), I (Investigative), A (Artistic), "
    "S (Social), E (Enterprising), C (Conventional). "
    "Big Five traits are O (Openness), C (Conscientiousness), E (Extraversion), "
    "A (Agreeableness), N (Neuroticism)."
)

ADVICE_FALLBACK = "Could not generate personalized career advice at this time."
DESCRIPTION_FALLBACK = "Could not generate enhanced description."


def _format_vector(vector) -> str:
    return ', '.join(f"{key}: {value}" for key, value in vector.to_dict().items())


def build_career_advice_prompt(
    holland: HollandVector,
    big_five: BigFiveVector,
    industries: Optional[Iterable[str]] = None,
    activities: Optional[Iterable[str]] = None
) -> str:
    industries = list(industries or [])
    activities = list(activities or [])

    industries_sentence = f"Preferred Industries: {', '.join(industries)}." if industries else ''
    activities_sentence = f"Preferred Activities: {', '.join(activities)}." if activities else ''

    return (
        f"Given the user's Holland Code scores ({_format_vector(holland)}), "
        f"Big Five personality scores ({_format_vector(big_five)}), "
        f"{industries_sentence} {activities_sentence} "
        "provide personalized career advice. Focus on strengths and general career directions, "
        "integrating insights from all provided information. Keep it concise and encouraging. "
        f"{TRAIT_LEGEND}"
    )


def build_job_description_prompt(job_title: str) -> str:
    return (
        f"Provide a more detailed and engaging job description for a \"{job_title}\". "
        "Include typical responsibilities, required skills, and potential work environments. "
        "Keep it professional and concise."
    )
