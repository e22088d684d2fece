#!/usr/bin/env python3
"""
Unit tests for CareerProfile repository operations.

Tests the CareerProfileRepository methods:
- save_profile() merge semantics
- get_snapshot()
- save_enhanced_description()
- delete_profile()

Runs against an in-memory SQLite database.
"""

import pytest

from core.pipeline import QuizStep, determine_step
from core.scorer.models import HollandVector
from database.models import CareerProfile
from database.repositories import CareerProfileRepository

pytestmark = pytest.mark.db

USER_ID = "0b7f6f3e-3c1f-4a55-9a36-8f2a3c1d9e10"


@pytest.fixture
def repo(db_session):
    return CareerProfileRepository(db_session, app_id="test-app")


class TestSaveProfile:

    def test_creates_profile_on_first_save(self, repo):
        repo.save_profile(USER_ID, name="Jane")
        repo.commit()

        profile = repo.get_profile(USER_ID)
        assert profile is not None
        assert profile.name == "Jane"
        assert profile.app_id == "test-app"

    def test_later_saves_merge_fields(self, repo):
        repo.save_profile(USER_ID, name="Jane")
        repo.save_profile(USER_ID, holland_scores={"R": 2, "I": 9, "A": 4, "S": 6, "E": 3, "C": 5})
        repo.commit()

        snapshot = repo.get_snapshot(USER_ID)
        assert snapshot.name == "Jane"
        assert snapshot.holland == HollandVector(R=2, I=9, A=4, S=6, E=3, C=5)
        assert snapshot.big_five is None
        assert determine_step(snapshot) == QuizStep.BIG_FIVE

    def test_unknown_field_rejected(self, repo):
        with pytest.raises(ValueError):
            repo.save_profile(USER_ID, favourite_colour="blue")

    def test_profiles_are_scoped_by_app_id(self, repo, db_session):
        repo.save_profile(USER_ID, name="Jane")
        repo.commit()

        other = CareerProfileRepository(db_session, app_id="other-app")
        assert other.get_profile(USER_ID) is None

    def test_preferences_round_trip_as_lists(self, repo):
        repo.save_profile(USER_ID, industries=["Finance", "Aerospace"], activities=["data"])
        repo.commit()

        snapshot = repo.get_snapshot(USER_ID)
        assert snapshot.industries == ["Finance", "Aerospace"]
        assert snapshot.activities == ["data"]


class TestGetSnapshot:

    def test_missing_profile(self, repo):
        assert repo.get_snapshot(USER_ID) is None

    def test_defaults_for_empty_row(self, repo):
        repo.save_profile(USER_ID)
        repo.commit()

        snapshot = repo.get_snapshot(USER_ID)
        assert snapshot.name == ""
        assert snapshot.industries == []
        assert snapshot.career_advice == ""
        assert snapshot.enhanced_job_descriptions == {}
        assert determine_step(snapshot) == QuizStep.START


class TestEnhancedDescriptions:

    def test_descriptions_keyed_by_job_id(self, repo):
        repo.save_enhanced_description(USER_ID, 5, "Electricians keep the lights on.")
        repo.save_enhanced_description(USER_ID, 0, "Developers write software.")
        repo.commit()

        snapshot = repo.get_snapshot(USER_ID)
        assert snapshot.enhanced_job_descriptions == {
            "5": "Electricians keep the lights on.",
            "0": "Developers write software.",
        }

    def test_regenerating_replaces_text(self, repo, session_factory):
        repo.save_enhanced_description(USER_ID, 5, "first")
        repo.commit()
        repo.save_enhanced_description(USER_ID, 5, "second")
        repo.commit()

        fresh = CareerProfileRepository(session_factory(), app_id="test-app")
        assert fresh.get_snapshot(USER_ID).enhanced_job_descriptions == {"5": "second"}


class TestDeleteProfile:

    def test_delete_existing(self, repo, db_session):
        repo.save_profile(USER_ID, name="Jane")
        repo.commit()

        assert repo.delete_profile(USER_ID) is True
        repo.commit()
        assert db_session.query(CareerProfile).count() == 0

    def test_delete_missing(self, repo):
        assert repo.delete_profile(USER_ID) is False
