#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict


class SessionResponse(BaseModel):
    """Response carrying a newly issued anonymous user id."""
    success: bool
    user_id: str


class QuestionItem(BaseModel):
    """One questionnaire item."""
    id: str
    text: str
    dimension: str
    dimension_name: str = ''
    reverse: bool = False


class QuestionnaireResponse(BaseModel):
    """A full questionnaire with its answer scale."""
    quiz_type: str
    questions: List[QuestionItem]
    scale_labels: Dict[int, str]


class IndustriesResponse(BaseModel):
    """Industries offered as checkboxes."""
    industries: List[str]


class JobRecommendation(BaseModel):
    """One ranked job with its fit breakdown."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "job_id": 0,
                "title": "Software Developer",
                "description": "Designs, develops, and maintains software applications.",
                "enhanced_description": None,
                "industry": "Technology",
                "keywords": ["coding", "programming"],
                "holland_fit": 0.2,
                "big_five_fit": 0.09,
                "industry_fit": 1.0,
                "activity_fit": 0.5,
                "total_fit": 0.387
            }
        }
    )

    job_id: int
    title: str
    description: str
    enhanced_description: Optional[str] = None
    industry: str
    keywords: List[str]

    holland_fit: float = Field(ge=0, le=1)
    big_five_fit: float = Field(ge=0, le=1)
    industry_fit: float = Field(ge=0, le=1)
    activity_fit: float = Field(ge=0, le=1)
    total_fit: float = Field(ge=0, le=1)


class StageResponse(BaseModel):
    """Response after completing a quiz stage."""
    success: bool
    step: str
    saved: bool = True
    holland_scores: Optional[Dict[str, int]] = None
    big_five_scores: Optional[Dict[str, int]] = None


class PreferencesResponse(BaseModel):
    """Response after submitting preferences; includes the first recommendations."""
    success: bool
    step: str
    saved: bool = True
    industries: List[str]
    activities: List[str]
    holland_code: Optional[str] = None
    recommendations: List[JobRecommendation] = Field(default_factory=list)


class RecommendationsResponse(BaseModel):
    """Ranked recommendations for a completed profile."""
    success: bool
    holland_code: Optional[str] = None
    count: int
    recommendations: List[JobRecommendation]


class ProfileResponse(BaseModel):
    """Stored profile plus the step to resume at."""
    success: bool
    user_id: str
    name: str = ''
    step: str
    holland_scores: Optional[Dict[str, int]] = None
    big_five_scores: Optional[Dict[str, int]] = None
    holland_code: Optional[str] = None
    industries: List[str] = Field(default_factory=list)
    activities: List[str] = Field(default_factory=list)
    career_advice: str = ''
    recommendations: List[JobRecommendation] = Field(default_factory=list)


class AdviceResponse(BaseModel):
    """Generated career advice."""
    success: bool
    advice: str
    saved: bool = True


class EnhancedDescriptionResponse(BaseModel):
    """Generated long-form job description."""
    success: bool
    job_id: int
    title: str
    description: str
    saved: bool = True


class DeleteProfileResponse(BaseModel):
    """Response after clearing a profile for a retake."""
    success: bool
    deleted: bool
    step: str
