"""Domain models for the quote quiz."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


@dataclass(frozen=True, slots=True)
class Question:
    """A quote and the title it comes from."""

    text: str
    answer: str


class QuizPhase(Enum):
    """Top-level lifecycle state of a play-through."""

    SETUP = auto()
    ACTIVE = auto()
    FINISHED = auto()


class OptionMarking(Enum):
    """Feedback marking derived for an option button."""

    NONE = ""
    CORRECT = "correct"
    INCORRECT = "incorrect"


@dataclass(slots=True)
class QuizSession:
    """Mutable state of one play-through, owned by the controller."""

    phase: QuizPhase = QuizPhase.SETUP
    requested_length: int = 0
    length: int = 0
    questions: list[Question] = field(default_factory=list)
    current_index: int = 0
    score: int = 0

    def current_question(self) -> Question | None:
        if self.phase != QuizPhase.ACTIVE or not self.questions:
            return None
        return self.questions[self.current_index]


@dataclass(slots=True)
class AnswerRound:
    """State of one displayed question, owned by the presenter."""

    round_id: int
    question: Question
    options: list[str]
    selected: str | None = None
    resolved: bool = False


@dataclass(frozen=True, slots=True)
class RoundOutcome:
    """Result of the first selection in a round."""

    round_id: int
    selected: str
    correct: bool
