"""Component showing one quote and its answer buttons."""

from __future__ import annotations

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from romedy_quiz.constants.quiz_constants import ANSWER_FEEDBACK_DELAY_MS
from romedy_quiz.core.models import AnswerRound, OptionMarking
from romedy_quiz.core.quote_renderer import renderer
from romedy_quiz.core.services.question_presenter import QuestionPresenter
from romedy_quiz.styling.styles import Styles


class QuestionPanel(QWidget):
    """Displays an answer round and reports the outcome upward.

    ``answered`` fires synchronously with the correctness of the first
    selection. ``advance_requested`` fires once the feedback delay has
    elapsed, and only if the same round is still on screen.
    """

    answered = Signal(bool)
    advance_requested = Signal()

    def __init__(
        self,
        presenter: QuestionPresenter,
        feedback_delay_ms: int = ANSWER_FEEDBACK_DELAY_MS,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._presenter = presenter
        self._game_font_size: int = 14
        self._pending_round_id: int | None = None
        self.option_buttons: list[QPushButton] = []

        self._build_ui()
        self._configure_advance_timer(feedback_delay_ms)

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.quote_label = QLabel(self)
        self.quote_label.setTextFormat(Qt.RichText)
        self.quote_label.setWordWrap(True)
        self.quote_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.quote_label, stretch=1)

        self.options_layout = QVBoxLayout()
        layout.addLayout(self.options_layout)

    def _configure_advance_timer(self, delay_ms: int) -> None:
        self.advance_timer = QTimer(self)
        self.advance_timer.setSingleShot(True)
        self.advance_timer.setInterval(delay_ms)
        self.advance_timer.timeout.connect(self._handle_feedback_elapsed)

    def show_round(self, answer_round: AnswerRound) -> None:
        """Replace whatever was displayed with a fresh round."""
        self.cancel_pending_advance()
        self.quote_label.setText(
            renderer.render_quote(answer_round.question.text, self._game_font_size)
        )
        self._rebuild_option_buttons(answer_round.options)

    def cancel_pending_advance(self) -> None:
        self.advance_timer.stop()
        self._pending_round_id = None

    def has_pending_advance(self) -> bool:
        return self.advance_timer.isActive()

    def _rebuild_option_buttons(self, options: list[str]) -> None:
        while self.options_layout.count():
            item = self.options_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        self.option_buttons = []
        for option in options:
            # "&&" keeps a literal ampersand instead of creating a mnemonic shortcut
            button = QPushButton(option.replace("&", "&&"), self)
            button.setProperty("option", option)
            button.setProperty("marking", OptionMarking.NONE.value)
            button.setStyleSheet(Styles.get_option_button_style(self._game_font_size))
            button.clicked.connect(lambda _checked=False, text=option: self._handle_option_click(text))
            self.options_layout.addWidget(button)
            self.option_buttons.append(button)

    def _handle_option_click(self, option: str) -> None:
        outcome = self._presenter.select(option)
        if outcome is None:
            return

        self._refresh_feedback()
        self.answered.emit(outcome.correct)

        self._pending_round_id = outcome.round_id
        self.advance_timer.start()

    def _handle_feedback_elapsed(self) -> None:
        round_id = self._pending_round_id
        self._pending_round_id = None
        if round_id is None or not self._presenter.is_current_round(round_id):
            return
        self.advance_requested.emit()

    def _refresh_feedback(self) -> None:
        for button in self.option_buttons:
            marking = self._presenter.marking_for(button.property("option"))
            button.setProperty("marking", marking.value)
            button.setEnabled(False)
            # Re-polish so the dynamic property selector is re-evaluated
            button.style().unpolish(button)
            button.style().polish(button)

    def apply_font_size(self, font_size: int) -> None:
        self._game_font_size = font_size
        for button in self.option_buttons:
            button.setStyleSheet(Styles.get_option_button_style(font_size))
        current = self._presenter.get_round()
        if current is not None:
            self.quote_label.setText(renderer.render_quote(current.question.text, font_size))
