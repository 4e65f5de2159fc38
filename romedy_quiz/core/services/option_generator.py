"""Builds the shuffled answer options shown for a question."""

from __future__ import annotations

from collections.abc import Iterable
import logging
import random

from romedy_quiz.constants.quiz_constants import DISTRACTOR_COUNT
from romedy_quiz.core.models import Question

logger = logging.getLogger(__name__)


def build_options(
    question: Question,
    pool_answers: Iterable[str],
    rng: random.Random,
    distractor_count: int = DISTRACTOR_COUNT,
) -> list[str]:
    """Return the correct answer plus up to ``distractor_count`` distinct wrong ones.

    Distractors are drawn from the distinct labels in the pool other than the
    question's own answer. When the pool has fewer labels than required the
    option list is simply shorter; it never contains duplicates.
    """
    universe = [answer for answer in dict.fromkeys(pool_answers) if answer != question.answer]
    rng.shuffle(universe)
    distractors = universe[:distractor_count]

    options = [question.answer, *distractors]
    rng.shuffle(options)

    if len(distractors) < distractor_count:
        logger.debug(
            "Only %d distractor(s) available for %r; showing %d options",
            len(distractors),
            question.answer,
            len(options),
        )
    return options
