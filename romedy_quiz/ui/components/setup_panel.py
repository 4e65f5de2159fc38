"""Component for choosing the quiz length."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from romedy_quiz.constants.quiz_constants import QUIZ_LENGTH_CHOICES
from romedy_quiz.constants.ui_constants import (
    IMPORT_BUTTON_TEXT,
    LENGTH_BUTTON_TEMPLATE,
    POOL_SIZE_TEMPLATE,
    SELECT_LENGTH_LABEL,
    SETUP_DESCRIPTION,
    SETUP_HEADING,
)
from romedy_quiz.styling.styles import Styles


class SetupPanel(QWidget):
    """Landing view with one button per quiz length."""

    def __init__(
        self,
        on_start_quiz: Callable[[int], None],
        on_import: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_start_quiz = on_start_quiz
        self.on_import = on_import
        self.length_buttons: dict[int, QPushButton] = {}

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.heading_label = QLabel(SETUP_HEADING, self)
        self.heading_label.setAlignment(Qt.AlignCenter)
        self.heading_label.setStyleSheet(Styles.get_heading_style())
        layout.addWidget(self.heading_label)

        self.description_label = QLabel(SETUP_DESCRIPTION, self)
        self.description_label.setWordWrap(True)
        self.description_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.description_label)

        layout.addStretch()

        self.select_label = QLabel(SELECT_LENGTH_LABEL, self)
        self.select_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.select_label)

        button_row = QHBoxLayout()
        for count in QUIZ_LENGTH_CHOICES:
            button = QPushButton(LENGTH_BUTTON_TEMPLATE.format(count=count), self)
            button.clicked.connect(lambda _checked=False, length=count: self.on_start_quiz(length))
            button_row.addWidget(button)
            self.length_buttons[count] = button
        layout.addLayout(button_row)

        layout.addStretch()

        footer_row = QHBoxLayout()
        self.pool_label = QLabel(POOL_SIZE_TEMPLATE.format(count=0), self)
        self.pool_label.setStyleSheet(Styles.get_secondary_label_style())
        footer_row.addWidget(self.pool_label)
        footer_row.addStretch()
        self.import_button = QPushButton(IMPORT_BUTTON_TEXT, self)
        self.import_button.clicked.connect(self.on_import)
        footer_row.addWidget(self.import_button)
        layout.addLayout(footer_row)

    def set_pool_size(self, count: int) -> None:
        self.pool_label.setText(POOL_SIZE_TEMPLATE.format(count=count))

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        for button in self.length_buttons.values():
            button.setStyleSheet(style)
        self.description_label.setStyleSheet(style)
        self.select_label.setStyleSheet(style)
