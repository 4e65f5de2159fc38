"""Qt main window switching between setup, quiz and results views."""

from __future__ import annotations

from enum import Enum, auto
import logging
from pathlib import Path

from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from romedy_quiz.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from romedy_quiz.constants.quiz_constants import ANSWER_FEEDBACK_DELAY_MS
from romedy_quiz.constants.ui_constants import (
    IMPORT_DIALOG_TITLE,
    IMPORT_FILE_FILTER,
    WINDOW_TITLE,
)
from romedy_quiz.core.dataset_loader import DatasetLoadError, load_questions_from_file
from romedy_quiz.core.models import QuizPhase
from romedy_quiz.core.quiz_controller import QuizController, QuizStateError
from romedy_quiz.ui.components.quiz_panel import QuizPanel
from romedy_quiz.ui.components.results_panel import ResultsPanel
from romedy_quiz.ui.components.setup_panel import SetupPanel
from romedy_quiz.ui.dialog_helpers import confirm_quit_quiz, show_error, show_info
from romedy_quiz.ui.settings_dialog import SettingsDialog
from romedy_quiz.styling.styles import Styles

logger = logging.getLogger(__name__)


class QuizView(Enum):
    """Stacked page shown in the main window."""

    SETUP = auto()
    QUIZ = auto()
    RESULTS = auto()


_VIEW_FOR_PHASE = {
    QuizPhase.SETUP: QuizView.SETUP,
    QuizPhase.ACTIVE: QuizView.QUIZ,
    QuizPhase.FINISHED: QuizView.RESULTS,
}


class QuizMainWindow(QMainWindow):
    """Main Qt window following the controller's quiz phase."""

    def __init__(
        self,
        controller: QuizController,
        feedback_delay_ms: int = ANSWER_FEEDBACK_DELAY_MS,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.controller = controller
        self._feedback_delay_ms = feedback_delay_ms
        self._view = QuizView.SETUP

        self._ui_font_size: int = 10
        self._game_font_size: int = 14
        self._shuffle_seed: int | None = None
        self._last_import_dir: Path | None = None

        self._build_ui()
        self._apply_styles()
        self.controller.set_shuffle_seed(self._shuffle_seed)
        self.setup_panel.set_pool_size(self.controller.get_pool_size())

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_menu_buttons(root_layout)

        self.view_stack = QStackedWidget(self)

        self.setup_panel = SetupPanel(
            on_start_quiz=self._handle_start_quiz,
            on_import=self._handle_import_quotes,
            parent=self,
        )
        self.quiz_panel = QuizPanel(
            self.controller,
            on_finished=self._handle_quiz_finished,
            on_quit=self._handle_quit_quiz,
            feedback_delay_ms=self._feedback_delay_ms,
            parent=self,
        )
        self.results_panel = ResultsPanel(on_restart=self._handle_restart, parent=self)

        self.view_stack.addWidget(self.setup_panel)
        self.view_stack.addWidget(self.quiz_panel)
        self.view_stack.addWidget(self.results_panel)

        root_layout.addWidget(self.view_stack)

        self._set_view(QuizView.SETUP)

    def _build_menu_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.settings_button = QPushButton("Settings", self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        layout.addLayout(button_row)

    def current_view(self) -> QuizView:
        return self._view

    def _set_view(self, view: QuizView) -> None:
        self._view = view
        index_map = {
            QuizView.SETUP: 0,
            QuizView.QUIZ: 1,
            QuizView.RESULTS: 2,
        }
        self.view_stack.setCurrentIndex(index_map[view])
        self.settings_button.setEnabled(view != QuizView.QUIZ)

    def _sync_view_with_phase(self) -> None:
        self._set_view(_VIEW_FOR_PHASE[self.controller.phase])

    def _handle_start_quiz(self, length: int) -> None:
        try:
            self.controller.start(length)
        except (QuizStateError, ValueError) as exc:
            show_error(self, "Cannot start quiz", str(exc))
            return

        self.quiz_panel.begin_session()
        self._sync_view_with_phase()

    def _handle_quiz_finished(self) -> None:
        session = self.controller.session
        self.results_panel.show_result(
            session.score, session.length, self.controller.get_final_percentage()
        )
        self._sync_view_with_phase()

    def _handle_quit_quiz(self) -> None:
        if not confirm_quit_quiz(self):
            return
        self._handle_restart()

    def _handle_restart(self) -> None:
        self.quiz_panel.end_session()
        self.controller.restart()
        self._sync_view_with_phase()

    def _handle_import_quotes(self) -> None:
        start_dir = self._last_import_dir or Path.home()
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            IMPORT_DIALOG_TITLE,
            str(start_dir),
            IMPORT_FILE_FILTER,
        )
        if not file_path:
            return
        self.import_quotes(Path(file_path))

    def import_quotes(self, file_path: Path) -> bool:
        """Replace the question pool from a dataset file, keeping the old pool on failure."""
        try:
            dataset = load_questions_from_file(file_path)
        except DatasetLoadError as exc:
            show_error(self, "Import failed", str(exc))
            return False

        try:
            self.controller.load_questions(dataset.questions)
        except (QuizStateError, ValueError) as exc:
            show_error(self, "Quotes rejected", str(exc))
            return False

        self._last_import_dir = file_path.parent
        self.setup_panel.set_pool_size(self.controller.get_pool_size())
        show_info(
            self,
            "Quotes imported",
            f"Loaded {len(dataset.questions)} quotes from {file_path.name}.",
        )
        return True

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._ui_font_size,
            self._game_font_size,
            self._shuffle_seed,
        )
        if dialog.exec():
            self._ui_font_size = dialog.get_ui_font_size()
            self._game_font_size = dialog.get_game_font_size()
            self._shuffle_seed = dialog.get_shuffle_seed()

            self.controller.set_shuffle_seed(self._shuffle_seed)
            logger.info("Settings applied (shuffle seed: %s)", self._shuffle_seed)

            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style())

        ui_style = f"font-size: {self._ui_font_size}pt;"
        for button in (self.about_button, self.help_button, self.settings_button):
            button.setStyleSheet(ui_style)

        self.setup_panel.apply_font_size(self._game_font_size)
        self.quiz_panel.apply_font_size(self._game_font_size)
        self.results_panel.apply_font_size(self._game_font_size)

    def closeEvent(self, event) -> None:
        self.quiz_panel.end_session()
        super().closeEvent(event)
