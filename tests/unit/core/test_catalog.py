#!/usr/bin/env python3
"""
Unit tests for the static questionnaires and job catalog.
"""

import unittest

from core.catalog import (
    HOLLAND_QUESTIONS,
    BIG_FIVE_QUESTIONS,
    HOLLAND_QUIZ,
    BIG_FIVE_QUIZ,
    JOB_PROFILES,
    TOP_INDUSTRIES,
    get_job,
    scale_label,
    unanswered_questions,
    invalid_answers,
)
from core.scorer.models import HOLLAND_TYPES, BIG_FIVE_TRAITS


class TestQuestionnaires(unittest.TestCase):

    def test_two_holland_questions_per_type(self):
        for t in HOLLAND_TYPES:
            self.assertEqual(sum(1 for q in HOLLAND_QUESTIONS if q.type == t), 2)

    def test_three_big_five_questions_per_trait_one_reversed(self):
        for trait in BIG_FIVE_TRAITS:
            items = [q for q in BIG_FIVE_QUESTIONS if q.trait == trait]
            self.assertEqual(len(items), 3)
            self.assertEqual(sum(1 for q in items if q.reverse), 1)

    def test_question_ids_unique(self):
        ids = [q.id for q in HOLLAND_QUESTIONS + BIG_FIVE_QUESTIONS]
        self.assertEqual(len(ids), len(set(ids)))

    def test_scale_labels(self):
        self.assertEqual(scale_label(1, HOLLAND_QUIZ), 'Strongly Dislike')
        self.assertEqual(scale_label(5, BIG_FIVE_QUIZ), 'Very Accurate')
        self.assertEqual(scale_label(7, HOLLAND_QUIZ), '')
        self.assertEqual(scale_label(3, 'unknown'), '')


class TestAnswerChecks(unittest.TestCase):

    def test_unanswered_in_questionnaire_order(self):
        answers = {q.id: 3 for q in HOLLAND_QUESTIONS}
        del answers['h2']
        del answers['h11']
        self.assertEqual(unanswered_questions(HOLLAND_QUESTIONS, answers), ['h2', 'h11'])

    def test_complete_answers(self):
        answers = {q.id: 3 for q in BIG_FIVE_QUESTIONS}
        self.assertEqual(unanswered_questions(BIG_FIVE_QUESTIONS, answers), [])
        self.assertEqual(invalid_answers(BIG_FIVE_QUESTIONS, answers), [])

    def test_out_of_range_answers(self):
        answers = {q.id: 3 for q in HOLLAND_QUESTIONS}
        answers['h1'] = 0
        answers['h6'] = 6
        self.assertEqual(invalid_answers(HOLLAND_QUESTIONS, answers), ['h1', 'h6'])

    def test_unknown_answer_ids_are_ignored(self):
        answers = {q.id: 3 for q in HOLLAND_QUESTIONS}
        answers['zzz'] = 99
        self.assertEqual(invalid_answers(HOLLAND_QUESTIONS, answers), [])


class TestJobCatalog(unittest.TestCase):

    def test_catalog_size(self):
        self.assertEqual(len(JOB_PROFILES), 10)
        self.assertEqual(len(TOP_INDUSTRIES), 10)

    def test_get_job(self):
        self.assertEqual(get_job(5).title, 'Electrician')

    def test_get_job_unknown(self):
        with self.assertRaises(IndexError):
            get_job(len(JOB_PROFILES))
        with self.assertRaises(IndexError):
            get_job(-1)

    def test_every_job_has_keywords_and_industry(self):
        for job in JOB_PROFILES:
            self.assertTrue(job.keywords)
            self.assertTrue(job.industry)


if __name__ == '__main__':
    unittest.main()
