"""Unit tests for QuestionPool."""

import pytest

from romedy_quiz.core.services.question_pool import QuestionPool
from tests.conftest import make_questions


class TestQuestionPool:

    def test_load_rejects_empty_pool(self):
        pool = QuestionPool()
        with pytest.raises(ValueError):
            pool.load([])

    def test_distinct_answers_keep_first_seen_order(self):
        pool = QuestionPool()
        pool.load(make_questions(["B", "A", "B", "C", "A"]))
        assert pool.distinct_answers() == ("B", "A", "C")

    def test_sample_without_replacement(self, large_pool, rng):
        pool = QuestionPool()
        pool.load(large_pool)
        picked = pool.sample(25, rng)
        assert len(picked) == 25
        assert len({id(q) for q in picked}) == 25
        assert all(q in large_pool for q in picked)

    def test_sample_saturates_at_pool_size(self, five_questions, rng):
        pool = QuestionPool()
        pool.load(five_questions)
        picked = pool.sample(25, rng)
        assert sorted(q.text for q in picked) == sorted(q.text for q in five_questions)

    @pytest.mark.parametrize("length", [0, -3])
    def test_sample_rejects_non_positive_length(self, five_questions, rng, length):
        pool = QuestionPool()
        pool.load(five_questions)
        with pytest.raises(ValueError):
            pool.sample(length, rng)
