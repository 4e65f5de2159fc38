"""Widget tests for the question panel's feedback and advance timer."""

import random

import pytest

from romedy_quiz.core.models import Question
from romedy_quiz.core.services.question_presenter import QuestionPresenter
from romedy_quiz.ui.components.question_panel import QuestionPanel

POOL_ANSWERS = ["Notting Hill", "Clueless", "Friends", "Mean Girls"]
DELAY_MS = 30


@pytest.fixture
def presenter():
    return QuestionPresenter(random.Random(3))


@pytest.fixture
def panel(qtbot, presenter):
    widget = QuestionPanel(presenter, feedback_delay_ms=DELAY_MS)
    qtbot.addWidget(widget)
    return widget


def _button(panel, text):
    return next(button for button in panel.option_buttons if button.property("option") == text)


class TestQuestionPanel:

    def test_shows_one_button_per_option(self, panel, presenter):
        answer_round = presenter.begin_round(Question(text="As if!", answer="Clueless"), POOL_ANSWERS)
        panel.show_round(answer_round)
        assert [button.property("option") for button in panel.option_buttons] == answer_round.options
        assert all(button.isEnabled() for button in panel.option_buttons)
        assert "As if!" in panel.quote_label.text()

    def test_click_reports_then_advances(self, qtbot, panel, presenter):
        answer_round = presenter.begin_round(Question(text="q", answer="Clueless"), POOL_ANSWERS)
        panel.show_round(answer_round)

        with qtbot.waitSignal(panel.answered, timeout=1000) as blocker:
            _button(panel, "Clueless").click()
        assert blocker.args == [True]

        with qtbot.waitSignal(panel.advance_requested, timeout=1000):
            pass

    def test_wrong_answer_marks_buttons(self, qtbot, panel, presenter):
        answer_round = presenter.begin_round(Question(text="q", answer="Friends"), POOL_ANSWERS)
        panel.show_round(answer_round)
        wrong = next(option for option in answer_round.options if option != "Friends")

        with qtbot.waitSignal(panel.answered, timeout=1000) as blocker:
            _button(panel, wrong).click()

        assert blocker.args == [False]
        assert _button(panel, "Friends").property("marking") == "correct"
        assert _button(panel, wrong).property("marking") == "incorrect"
        assert not any(button.isEnabled() for button in panel.option_buttons)

    def test_double_click_reports_once(self, qtbot, panel, presenter):
        answer_round = presenter.begin_round(Question(text="q", answer="Friends"), POOL_ANSWERS)
        panel.show_round(answer_round)
        results = []
        panel.answered.connect(results.append)

        panel._handle_option_click("Friends")
        panel._handle_option_click("Friends")

        assert results == [True]

    def test_new_round_cancels_pending_advance(self, qtbot, panel, presenter):
        first = presenter.begin_round(Question(text="q1", answer="Friends"), POOL_ANSWERS)
        panel.show_round(first)
        _button(panel, "Friends").click()
        assert panel.has_pending_advance()

        second = presenter.begin_round(Question(text="q2", answer="Clueless"), POOL_ANSWERS)
        panel.show_round(second)

        assert not panel.has_pending_advance()
        with qtbot.assertNotEmitted(panel.advance_requested, wait=DELAY_MS * 4):
            pass

    def test_stale_timer_is_ignored_after_discard(self, qtbot, panel, presenter):
        answer_round = presenter.begin_round(Question(text="q", answer="Friends"), POOL_ANSWERS)
        panel.show_round(answer_round)
        _button(panel, "Friends").click()

        # The round goes away while the timer is still running
        presenter.discard()

        with qtbot.assertNotEmitted(panel.advance_requested, wait=DELAY_MS * 4):
            pass

    def test_ampersand_title_has_no_shortcut(self, qtbot, panel, presenter):
        answers = ["Sex &the City", "Friends", "Clueless"]
        answer_round = presenter.begin_round(Question(text="Toodles.", answer="Sex &the City"), answers)
        panel.show_round(answer_round)

        button = _button(panel, "Sex &the City")
        assert button.text() == "Sex &&the City"
        assert button.shortcut().isEmpty()

        with qtbot.waitSignal(panel.answered, timeout=1000) as blocker:
            button.click()
        assert blocker.args == [True]
        assert button.property("marking") == "correct"
