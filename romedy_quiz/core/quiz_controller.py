"""Business logic driving a quiz play-through from setup to results."""

from __future__ import annotations

import logging
import random

from romedy_quiz.core.models import AnswerRound, Question, QuizPhase, QuizSession
from romedy_quiz.core.services.question_pool import QuestionPool
from romedy_quiz.core.services.question_presenter import QuestionPresenter

logger = logging.getLogger(__name__)


class QuizStateError(RuntimeError):
    """Raised when an action is not valid in the current quiz phase."""


class QuizController:
    """Facade over the question pool, the session state machine and the presenter.

    The session moves ``SETUP -> ACTIVE -> FINISHED`` and back to ``SETUP``
    on restart. Score and index are only ever changed here; the presenter
    reports correctness and the UI calls :meth:`record_answer` followed by
    :meth:`advance` for each round.
    """

    def __init__(self, questions: list[Question] | None = None) -> None:
        self._rng = random.Random()
        self._pool = QuestionPool()
        self._presenter = QuestionPresenter(self._rng)
        self._session = QuizSession()
        self._session_generation: int = 0
        self._shuffle_seed: int | None = None
        if questions is not None:
            self._pool.load(questions)

    # --- Pool ---

    def load_questions(self, questions: list[Question]) -> None:
        self._require_phase(QuizPhase.SETUP, "replace the question pool")
        self._pool.load(questions)
        logger.info("Question pool replaced (%d questions)", self._pool.size())

    def get_pool_size(self) -> int:
        return self._pool.size()

    def set_shuffle_seed(self, seed: int | None) -> None:
        """Fix the seed used at every quiz start, or None for fresh randomness."""
        self._shuffle_seed = seed
        self._rng.seed(seed)

    # --- Session state machine ---

    @property
    def session(self) -> QuizSession:
        return self._session

    @property
    def phase(self) -> QuizPhase:
        return self._session.phase

    @property
    def presenter(self) -> QuestionPresenter:
        return self._presenter

    def get_session_generation(self) -> int:
        return self._session_generation

    def is_current_session(self, generation: int) -> bool:
        return generation == self._session_generation

    def start(self, length: int) -> QuizSession:
        self._require_phase(QuizPhase.SETUP, "start a quiz")
        if self._pool.is_empty():
            raise QuizStateError("Cannot start a quiz without any questions loaded.")

        if self._shuffle_seed is not None:
            self._rng.seed(self._shuffle_seed)
        questions = self._pool.sample(length, self._rng)
        if len(questions) < length:
            logger.warning(
                "Requested %d questions but the pool only has %d; using all of them",
                length,
                len(questions),
            )

        self._session_generation += 1
        self._session = QuizSession(
            phase=QuizPhase.ACTIVE,
            requested_length=length,
            length=len(questions),
            questions=questions,
            current_index=0,
            score=0,
        )
        logger.info("Quiz started with %d questions", self._session.length)
        return self._session

    def record_answer(self, is_correct: bool) -> int:
        self._require_phase(QuizPhase.ACTIVE, "record an answer")
        if is_correct:
            self._session.score += 1
        return self._session.score

    def advance(self) -> QuizPhase:
        self._require_phase(QuizPhase.ACTIVE, "advance")
        if self._session.current_index < self._session.length - 1:
            self._session.current_index += 1
        else:
            self._session.phase = QuizPhase.FINISHED
            self._presenter.discard()
            logger.info(
                "Quiz finished: %d out of %d", self._session.score, self._session.length
            )
        return self._session.phase

    def restart(self) -> None:
        """Return to setup from any phase, discarding the session."""
        self._session_generation += 1
        self._session = QuizSession()
        self._presenter.discard()
        logger.info("Quiz reset to setup")

    # --- Rounds ---

    def get_current_question(self) -> Question | None:
        return self._session.current_question()

    def new_round(self) -> AnswerRound:
        """Build a fresh answer round for the current question."""
        question = self.get_current_question()
        if question is None:
            raise QuizStateError("There is no active question to present.")
        return self._presenter.begin_round(question, self._pool.distinct_answers())

    def get_final_percentage(self) -> float:
        if not self._session.length:
            return 0.0
        return (self._session.score / self._session.length) * 100

    def _require_phase(self, expected: QuizPhase, action: str) -> None:
        if self._session.phase != expected:
            raise QuizStateError(
                f"Cannot {action} while the quiz is {self._session.phase.name.lower()}."
            )
