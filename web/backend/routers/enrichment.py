#!/usr/bin/env python3
"""
Enrichment endpoints - generated career advice and job descriptions.
"""

from fastapi import APIRouter, Depends, Path

from core.llm import TextGenerationProvider
from database.repositories import CareerProfileRepository
from ..dependencies import get_profile_repository, get_text_provider, get_user_id
from ..services.enrichment_service import EnrichmentService
from ..models.responses import AdviceResponse, EnhancedDescriptionResponse

router = APIRouter(prefix="/api/v1", tags=["enrichment"])


def get_enrichment_service(
    repo: CareerProfileRepository = Depends(get_profile_repository),
    provider: TextGenerationProvider = Depends(get_text_provider)
) -> EnrichmentService:
    return EnrichmentService(repo, provider)


@router.post("/advice", response_model=AdviceResponse)
def generate_advice(
    user_id: str = Depends(get_user_id),
    service: EnrichmentService = Depends(get_enrichment_service)
):
    """
    Generate personalized career advice from the stored profile.

    The advice is stored with the profile when generation succeeds.
    """
    return service.generate_advice(user_id)


@router.post("/jobs/{job_id}/enhance", response_model=EnhancedDescriptionResponse)
def enhance_job_description(
    job_id: int = Path(..., ge=0, description="Catalog index of the job"),
    user_id: str = Depends(get_user_id),
    service: EnrichmentService = Depends(get_enrichment_service)
):
    """Generate a longer description for a catalog job."""
    return service.enhance_job_description(user_id, job_id)
