"""Service managing the answer round for the question on screen."""

from __future__ import annotations

from collections.abc import Iterable
import random

from romedy_quiz.core.models import AnswerRound, OptionMarking, Question, RoundOutcome
from romedy_quiz.core.services.option_generator import build_options


class QuestionPresenter:
    """Tracks options, selection and resolution for a single question at a time.

    Every round gets a fresh ``round_id`` from a generation counter. Deferred
    work (the post-answer advance timer) captures the id and checks
    :meth:`is_current_round` before acting, so a round that has been replaced
    or discarded can never drive the quiz forward.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._round: AnswerRound | None = None
        self._round_generation: int = 0

    def begin_round(self, question: Question, pool_answers: Iterable[str]) -> AnswerRound:
        self._round_generation += 1
        self._round = AnswerRound(
            round_id=self._round_generation,
            question=question,
            options=build_options(question, pool_answers, self._rng),
        )
        return self._round

    def discard(self) -> None:
        """Drop the current round so pending callbacks see it as stale."""
        self._round_generation += 1
        self._round = None

    def get_round(self) -> AnswerRound | None:
        return self._round

    def is_current_round(self, round_id: int) -> bool:
        return self._round is not None and self._round.round_id == round_id

    def select(self, option: str) -> RoundOutcome | None:
        """Record the first selection of the round.

        Returns None when there is no round, the round is already resolved,
        or ``option`` is not one of the round's options.
        """
        current = self._round
        if current is None or current.resolved or option not in current.options:
            return None

        current.selected = option
        current.resolved = True
        return RoundOutcome(
            round_id=current.round_id,
            selected=option,
            correct=option == current.question.answer,
        )

    def marking_for(self, option: str) -> OptionMarking:
        current = self._round
        if current is None or not current.resolved:
            return OptionMarking.NONE
        if option == current.question.answer:
            return OptionMarking.CORRECT
        if option == current.selected:
            return OptionMarking.INCORRECT
        return OptionMarking.NONE
