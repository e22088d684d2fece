#!/usr/bin/env python3
"""
Preference Normalization - Clean industry selections and activity strings.

Checkbox selections are deduplicated in selection order and blank ones dropped.
The manually entered industry is appended as-is, so it may repeat a selection.
"""

from typing import Iterable, Optional
import logging

from core.scorer.models import Preferences
from core.scorer.exceptions import InputRequiredError

logger = logging.getLogger(__name__)

MAX_ACTIVITIES = 3

INDUSTRY_REQUIRED_MESSAGE = "Please select at least one preferred industry or enter one manually."
ACTIVITY_REQUIRED_MESSAGE = "Please enter at least one preferred activity."


def normalize_preferences(
    selected_industries: Optional[Iterable[str]],
    other_industry: Optional[str] = None,
    activities: Optional[Iterable[str]] = None
) -> Preferences:
    """
    Build a Preferences value from raw form input.

    Args:
        selected_industries: Checkbox selections, in selection order
        other_industry: Optional free-text industry
        activities: Up to MAX_ACTIVITIES free-text activity strings

    Returns:
        Preferences with the manual industry appended and blank entries dropped
    """
    industries = list(dict.fromkeys(
        i for i in (selected_industries or []) if i and i.strip()
    ))
    manual = (other_industry or '').strip()
    if manual:
        industries.append(manual)

    raw_activities = list(activities or [])
    if len(raw_activities) > MAX_ACTIVITIES:
        raise ValueError(
            f"At most {MAX_ACTIVITIES} activities are accepted, got {len(raw_activities)}"
        )

    kept_activities = [a for a in raw_activities if a and a.strip()]

    return Preferences(industries=tuple(industries), activities=tuple(kept_activities))


def validate_preferences(preferences: Preferences) -> None:
    """
    Check the two required-input rules.

    Raises:
        InputRequiredError: When no industry or no activity was supplied
    """
    if not preferences.industries:
        raise InputRequiredError(INDUSTRY_REQUIRED_MESSAGE)
    if not preferences.activities:
        raise InputRequiredError(ACTIVITY_REQUIRED_MESSAGE)


def build_preferences(
    selected_industries: Optional[Iterable[str]],
    other_industry: Optional[str] = None,
    activities: Optional[Iterable[str]] = None
) -> Preferences:
    """Normalize and validate in one step, as the preferences form does on submit."""
    preferences = normalize_preferences(selected_industries, other_industry, activities)
    validate_preferences(preferences)
    logger.info(
        "Accepted preferences: %d industries, %d activities",
        len(preferences.industries), len(preferences.activities)
    )
    return preferences
