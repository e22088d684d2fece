#!/usr/bin/env python3
"""
Enrichment service - LLM-generated career advice and job descriptions.

Generated text is display-only and never feeds back into scoring.
"""

import logging
from typing import Optional

import openai
from sqlalchemy.exc import SQLAlchemyError

from core.catalog import get_job
from core.llm import TextGenerationProvider
from core.llm.prompts import (
    CAREER_COACH_SYSTEM_PROMPT,
    ADVICE_FALLBACK,
    DESCRIPTION_FALLBACK,
    build_career_advice_prompt,
    build_job_description_prompt,
)
from database.repositories import CareerProfileRepository
from ..exceptions import (
    JobNotFoundException,
    ProfileNotFoundException,
    QuizIncompleteException,
    TextGenerationException,
    PersistenceException,
)
from ..models.responses import AdviceResponse, EnhancedDescriptionResponse

logger = logging.getLogger(__name__)


class EnrichmentService:
    """Service for generating and storing LLM text for one user."""

    def __init__(self, repo: CareerProfileRepository, provider: TextGenerationProvider):
        self.repo = repo
        self.provider = provider

    def _generate(self, prompt: str, fallback: str) -> Optional[str]:
        """
        Call the provider once (retries happen inside the provider).

        Returns:
            Generated text, or None when the provider returned no content.

        Raises:
            TextGenerationException: If the provider call failed.
        """
        try:
            return self.provider.generate_text(prompt, system_prompt=CAREER_COACH_SYSTEM_PROMPT)
        except openai.OpenAIError as e:
            logger.error(f"Text generation failed: {e}")
            raise TextGenerationException(fallback) from e

    def _store(self, user_id: str, action) -> bool:
        try:
            action()
            self.repo.commit()
            return True
        except SQLAlchemyError as e:
            logger.warning(f"Failed to store generated text for user {user_id}: {e}")
            self.repo.rollback()
            return False

    def generate_advice(self, user_id: str) -> AdviceResponse:
        try:
            snapshot = self.repo.get_snapshot(user_id)
        except SQLAlchemyError as e:
            raise PersistenceException(
                "There was an issue loading your previous career profile."
            ) from e

        if snapshot is None:
            raise ProfileNotFoundException(f"No career profile found for user {user_id}")
        if snapshot.holland is None or snapshot.big_five is None:
            raise QuizIncompleteException("Please complete both quizzes before requesting advice.")

        prompt = build_career_advice_prompt(
            snapshot.holland,
            snapshot.big_five,
            snapshot.industries,
            snapshot.activities,
        )
        advice = self._generate(prompt, ADVICE_FALLBACK)
        if advice is None:
            return AdviceResponse(success=False, advice=ADVICE_FALLBACK, saved=False)

        saved = self._store(user_id, lambda: self.repo.save_profile(user_id, career_advice=advice))
        logger.info(f"Generated career advice for user {user_id}")
        return AdviceResponse(success=True, advice=advice, saved=saved)

    def enhance_job_description(self, user_id: str, job_id: int) -> EnhancedDescriptionResponse:
        try:
            job = get_job(job_id)
        except IndexError as e:
            raise JobNotFoundException(f"No job with id {job_id}") from e

        description = self._generate(build_job_description_prompt(job.title), DESCRIPTION_FALLBACK)
        if description is None:
            return EnhancedDescriptionResponse(
                success=False,
                job_id=job_id,
                title=job.title,
                description=DESCRIPTION_FALLBACK,
                saved=False,
            )

        saved = self._store(
            user_id,
            lambda: self.repo.save_enhanced_description(user_id, job_id, description)
        )
        return EnhancedDescriptionResponse(
            success=True,
            job_id=job_id,
            title=job.title,
            description=description,
            saved=saved,
        )
