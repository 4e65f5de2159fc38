"""Service holding the read-only pool of quiz questions."""

from __future__ import annotations

import random

from romedy_quiz.core.models import Question


class QuestionPool:
    """Stores the full question pool and samples quizzes from it."""

    def __init__(self) -> None:
        self._questions: tuple[Question, ...] = ()
        self._distinct_answers: tuple[str, ...] = ()

    def load(self, questions: list[Question]) -> None:
        """Replace the pool with a new list of questions."""
        if not questions:
            raise ValueError("Question pool must contain at least one question.")
        if any(not question.answer for question in questions):
            raise ValueError("Every question must have a non-empty answer.")

        self._questions = tuple(questions)
        # dict keeps first-seen order so option generation is stable for a fixed seed
        self._distinct_answers = tuple(dict.fromkeys(q.answer for q in questions))

    def size(self) -> int:
        return len(self._questions)

    def is_empty(self) -> bool:
        return not self._questions

    def distinct_answers(self) -> tuple[str, ...]:
        return self._distinct_answers

    def sample(self, length: int, rng: random.Random) -> list[Question]:
        """Pick ``length`` questions without replacement, capped at the pool size."""
        if length <= 0:
            raise ValueError("Quiz length must be a positive integer.")
        count = min(length, len(self._questions))
        return rng.sample(self._questions, count)
