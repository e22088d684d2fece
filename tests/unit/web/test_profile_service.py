#!/usr/bin/env python3
"""
Unit tests for ProfileService storage failure handling.

A failed save must not block a stage; a failed load surfaces as
PersistenceException.
"""

import unittest
from unittest.mock import Mock

from sqlalchemy.exc import OperationalError

from core.catalog import HOLLAND_QUESTIONS, BIG_FIVE_QUESTIONS, JOB_PROFILES
from core.pipeline import ProfileSnapshot
from core.scorer import RecommendationService, HollandVector, BigFiveVector
from web.backend.exceptions import (
    PersistenceException,
    ProfileNotFoundException,
    QuizIncompleteException,
)
from web.backend.services.profile_service import ProfileService

USER_ID = "9c4d2a61-3b7e-4f0d-a2d1-54e1b7a8c930"


def _db_error():
    return OperationalError("UPDATE career_profile", {}, Exception("database is locked"))


class TestProfileServiceStorage(unittest.TestCase):

    def setUp(self):
        self.repo = Mock()
        self.service = ProfileService(self.repo, RecommendationService(JOB_PROFILES))

    def test_holland_stage_survives_save_failure(self):
        self.repo.save_profile.side_effect = _db_error()

        result = self.service.submit_holland(USER_ID, {q.id: 3 for q in HOLLAND_QUESTIONS})

        self.assertTrue(result.success)
        self.assertFalse(result.saved)
        self.assertEqual(result.step, "big_five")
        self.assertEqual(result.holland_scores["R"], 6)
        self.repo.rollback.assert_called_once()
        self.repo.commit.assert_not_called()

    def test_commit_failure_reported(self):
        self.repo.commit.side_effect = _db_error()

        result = self.service.submit_big_five(USER_ID, {q.id: 3 for q in BIG_FIVE_QUESTIONS})

        self.assertFalse(result.saved)
        self.repo.rollback.assert_called_once()

    def test_successful_save(self):
        result = self.service.start(USER_ID, "  Ana ")

        self.assertTrue(result.saved)
        self.repo.save_profile.assert_called_once_with(USER_ID, name="Ana")
        self.repo.commit.assert_called_once()

    def test_preferences_survive_save_failure(self):
        self.repo.get_snapshot.return_value = ProfileSnapshot(
            user_id=USER_ID,
            holland=HollandVector(R=2, I=2, A=2, S=2, E=2, C=2),
            big_five=BigFiveVector(O=7, C=7, E=7, A=7, N=7),
        )
        self.repo.save_profile.side_effect = _db_error()

        result = self.service.submit_preferences(USER_ID, ["Healthcare"], None, ["helping"])

        self.assertFalse(result.saved)
        self.assertEqual(len(result.recommendations), 5)
        self.assertEqual(result.step, "results")

    def test_load_failure_raises_persistence_error(self):
        self.repo.get_snapshot.side_effect = _db_error()

        with self.assertRaises(PersistenceException):
            self.service.get_profile(USER_ID)

    def test_missing_profile_for_recommendations(self):
        self.repo.get_snapshot.return_value = None

        with self.assertRaises(ProfileNotFoundException):
            self.service.get_recommendations(USER_ID)

    def test_recommendations_need_every_stage(self):
        self.repo.get_snapshot.return_value = ProfileSnapshot(
            user_id=USER_ID,
            holland=HollandVector(R=2, I=2, A=2, S=2, E=2, C=2),
            big_five=BigFiveVector(O=7, C=7, E=7, A=7, N=7),
            industries=["Technology"],
        )

        with self.assertRaises(QuizIncompleteException):
            self.service.get_recommendations(USER_ID)

    def test_incomplete_answers_not_stored(self):
        with self.assertRaises(QuizIncompleteException):
            self.service.submit_holland(USER_ID, {"h1": 3})

        self.repo.save_profile.assert_not_called()

    def test_reset_failure_raises(self):
        self.repo.delete_profile.side_effect = _db_error()

        with self.assertRaises(PersistenceException):
            self.service.reset(USER_ID)


if __name__ == '__main__':
    unittest.main()
