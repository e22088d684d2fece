#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class StartRequest(BaseModel):
    """Request to start the quiz."""
    name: Optional[str] = Field(default='', max_length=200, description="Optional display name")


class AnswersRequest(BaseModel):
    """Questionnaire answers keyed by question id."""
    answers: Dict[str, int] = Field(
        ...,
        description="Mapping of question id to answer (1-5)",
        json_schema_extra={"example": {"h1": 4, "h2": 5, "h3": 2}}
    )


class PreferencesRequest(BaseModel):
    """Raw preference form input."""
    industries: List[str] = Field(default_factory=list, description="Selected industries")
    other_industry: Optional[str] = Field(default='', description="Manually entered industry")
    activities: List[str] = Field(
        default_factory=list,
        max_length=3,
        description="Up to 3 preferred activities; blank entries are ignored"
    )
