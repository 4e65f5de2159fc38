"""Widget tests for the main window flow from setup to results."""

import pytest

from romedy_quiz.core.models import QuizPhase
from romedy_quiz.core.quiz_controller import QuizController
from romedy_quiz.ui import quiz_main_window
from romedy_quiz.ui.quiz_main_window import QuizMainWindow, QuizView

DELAY_MS = 20


@pytest.fixture
def dialogs(monkeypatch):
    shown = []
    monkeypatch.setattr(quiz_main_window, "show_info", lambda parent, title, message: shown.append(("info", title)))
    monkeypatch.setattr(quiz_main_window, "show_error", lambda parent, title, message: shown.append(("error", title)))
    monkeypatch.setattr(quiz_main_window, "confirm_quit_quiz", lambda parent: True)
    return shown


@pytest.fixture
def window(qtbot, five_questions, dialogs):
    controller = QuizController(five_questions)
    widget = QuizMainWindow(controller=controller, feedback_delay_ms=DELAY_MS)
    qtbot.addWidget(widget)
    return widget


def _answer_current(qtbot, window, correct=True):
    presenter = window.controller.presenter
    answer_round = presenter.get_round()
    target = answer_round.question.answer
    if not correct:
        target = next(option for option in answer_round.options if option != target)
    button = next(b for b in window.quiz_panel.question_panel.option_buttons if b.property("option") == target)
    with qtbot.waitSignal(window.quiz_panel.question_panel.advance_requested, timeout=1000):
        button.click()


class TestQuizMainWindow:

    def test_starts_in_setup_view(self, window):
        assert window.current_view() == QuizView.SETUP
        assert "5 quotes" in window.setup_panel.pool_label.text()

    def test_length_button_starts_quiz(self, window):
        window.setup_panel.length_buttons[5].click()
        assert window.current_view() == QuizView.QUIZ
        assert window.quiz_panel.progress_label.text() == "Question 1 of 5"
        assert window.quiz_panel.score_label.text() == "Current Score: 0"

    def test_short_pool_reports_effective_length(self, window):
        window.setup_panel.length_buttons[25].click()
        assert window.quiz_panel.progress_label.text() == "Question 1 of 5"

    def test_full_play_through_reaches_results(self, qtbot, window):
        window.setup_panel.length_buttons[5].click()
        for answer_correct in [True, True, False, True, True]:
            _answer_current(qtbot, window, correct=answer_correct)

        assert window.controller.phase == QuizPhase.FINISHED
        assert window.current_view() == QuizView.RESULTS
        assert window.results_panel.score_label.text() == "Your final score is: 4 out of 5"

        window.results_panel.restart_button.click()
        assert window.current_view() == QuizView.SETUP
        assert window.controller.phase == QuizPhase.SETUP

    def test_quit_during_feedback_drops_pending_advance(self, qtbot, window):
        window.setup_panel.length_buttons[5].click()
        answer_round = window.controller.presenter.get_round()
        button = next(
            b for b in window.quiz_panel.question_panel.option_buttons
            if b.property("option") == answer_round.question.answer
        )
        button.click()
        assert window.controller.session.score == 1

        window.quiz_panel.quit_button.click()
        window.setup_panel.length_buttons[5].click()

        qtbot.wait(DELAY_MS * 4)
        session = window.controller.session
        assert session.current_index == 0
        assert session.score == 0
        assert window.current_view() == QuizView.QUIZ

    def test_import_replaces_pool(self, window, dataset_file, dialogs):
        assert window.import_quotes(dataset_file)
        assert window.controller.get_pool_size() == 3
        assert "3 quotes" in window.setup_panel.pool_label.text()
        assert dialogs[-1] == ("info", "Quotes imported")

    def test_failed_import_keeps_pool(self, window, tmp_path, dialogs):
        bad = tmp_path / "bad.json"
        bad.write_text("{}", encoding="utf-8")
        assert not window.import_quotes(bad)
        assert window.controller.get_pool_size() == 5
        assert dialogs[-1] == ("error", "Import failed")

    def test_advance_from_previous_session_is_ignored(self, window):
        window.setup_panel.length_buttons[5].click()
        controller = window.controller

        # Session replaced behind the panel's back; its timer is not involved
        controller.restart()
        controller.start(5)
        window.quiz_panel.question_panel.advance_requested.emit()

        assert controller.session.current_index == 0
        assert controller.phase == QuizPhase.ACTIVE
