"""Component for the quiz in progress."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from romedy_quiz.constants.quiz_constants import ANSWER_FEEDBACK_DELAY_MS
from romedy_quiz.constants.ui_constants import (
    PROGRESS_TEMPLATE,
    QUIT_BUTTON_TEXT,
    SCORE_TEMPLATE,
)
from romedy_quiz.core.models import QuizPhase
from romedy_quiz.core.quiz_controller import QuizController
from romedy_quiz.ui.components.question_panel import QuestionPanel


class QuizPanel(QWidget):
    """Shows progress and score around the current question.

    Correctness from the question panel is recorded on the controller
    immediately; the advance arrives later and is dropped if the session
    it was scheduled for has since been restarted.
    """

    def __init__(
        self,
        controller: QuizController,
        on_finished: Callable[[], None],
        on_quit: Callable[[], None],
        feedback_delay_ms: int = ANSWER_FEEDBACK_DELAY_MS,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.controller = controller
        self.on_finished = on_finished
        self.on_quit = on_quit
        self._session_generation: int | None = None

        self._build_ui(feedback_delay_ms)

    def _build_ui(self, feedback_delay_ms: int) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        status_row = QHBoxLayout()
        self.progress_label = QLabel("", self)
        status_row.addWidget(self.progress_label)
        status_row.addStretch()
        self.score_label = QLabel("", self)
        status_row.addWidget(self.score_label)
        layout.addLayout(status_row)

        self.question_panel = QuestionPanel(
            self.controller.presenter,
            feedback_delay_ms=feedback_delay_ms,
            parent=self,
        )
        self.question_panel.answered.connect(self._handle_answered)
        self.question_panel.advance_requested.connect(self._handle_advance_requested)
        layout.addWidget(self.question_panel, stretch=1)

        quit_row = QHBoxLayout()
        quit_row.addStretch()
        self.quit_button = QPushButton(QUIT_BUTTON_TEXT, self)
        self.quit_button.clicked.connect(self.on_quit)
        quit_row.addWidget(self.quit_button)
        layout.addLayout(quit_row)

    def begin_session(self) -> None:
        self._session_generation = self.controller.get_session_generation()
        self._show_current_question()

    def end_session(self) -> None:
        self.question_panel.cancel_pending_advance()
        self._session_generation = None

    def _show_current_question(self) -> None:
        answer_round = self.controller.new_round()
        self._update_status()
        self.question_panel.show_round(answer_round)

    def _update_status(self) -> None:
        session = self.controller.session
        self.progress_label.setText(
            PROGRESS_TEMPLATE.format(number=session.current_index + 1, total=session.length)
        )
        self.score_label.setText(SCORE_TEMPLATE.format(score=session.score))

    def _is_stale(self) -> bool:
        return (
            self._session_generation is None
            or not self.controller.is_current_session(self._session_generation)
            or self.controller.phase != QuizPhase.ACTIVE
        )

    def _handle_answered(self, is_correct: bool) -> None:
        if self._is_stale():
            return
        self.controller.record_answer(is_correct)
        self._update_status()

    def _handle_advance_requested(self) -> None:
        if self._is_stale():
            return
        phase = self.controller.advance()
        if phase == QuizPhase.FINISHED:
            self.end_session()
            self.on_finished()
            return
        self._show_current_question()

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        self.progress_label.setStyleSheet(style)
        self.score_label.setStyleSheet(style)
        self.quit_button.setStyleSheet(style)
        self.question_panel.apply_font_size(font_size)
