"""Component for the final score view."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from romedy_quiz.constants.ui_constants import (
    FINAL_PERCENT_TEMPLATE,
    FINAL_SCORE_TEMPLATE,
    RESTART_BUTTON_TEXT,
    RESULTS_HEADING,
)
from romedy_quiz.styling.styles import Styles


class ResultsPanel(QWidget):
    """UI component summarising a finished quiz."""

    def __init__(self, on_restart: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_restart = on_restart
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        self.heading_label = QLabel(RESULTS_HEADING, self)
        self.heading_label.setAlignment(Qt.AlignCenter)
        self.heading_label.setStyleSheet(Styles.get_heading_style())
        layout.addWidget(self.heading_label)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.score_label)

        self.percent_label = QLabel("", self)
        self.percent_label.setAlignment(Qt.AlignCenter)
        self.percent_label.setStyleSheet(Styles.get_secondary_label_style())
        layout.addWidget(self.percent_label)

        self.restart_button = QPushButton(RESTART_BUTTON_TEXT, self)
        self.restart_button.clicked.connect(self.on_restart)
        layout.addWidget(self.restart_button, alignment=Qt.AlignCenter)
        layout.addStretch()

    def show_result(self, score: int, total: int, percent: float) -> None:
        self.score_label.setText(FINAL_SCORE_TEMPLATE.format(score=score, total=total))
        self.percent_label.setText(FINAL_PERCENT_TEMPLATE.format(percent=percent))

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        self.score_label.setStyleSheet(style)
        self.restart_button.setStyleSheet(style)
