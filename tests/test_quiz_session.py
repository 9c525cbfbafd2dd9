"""Tests for the quiz runner state machine and its feedback window."""

from __future__ import annotations

import pytest

from conftest import make_quiz
from services.quiz_session import QuizPhase, QuizSession

DELAY = 1.2


@pytest.fixture
def session(clock) -> QuizSession:
    return QuizSession(feedback_delay=DELAY, clock=clock)


def _answer_and_wait(session: QuizSession, clock, index: int) -> None:
    assert session.answer(index) is True
    clock.advance(DELAY)
    assert session.tick() is True


class TestLoad:
    def test_starts_empty(self, session):
        assert session.phase is QuizPhase.EMPTY
        assert session.current_question is None
        assert session.score_percent == 0
        assert session.answer(0) is False

    def test_load_enters_in_progress(self, session):
        assert session.load(make_quiz([0, 1])) is True
        assert session.phase is QuizPhase.IN_PROGRESS
        assert session.cursor == 0
        assert session.selected is None
        assert session.score == 0
        assert session.finished is False

    def test_empty_quiz_is_noop(self, session):
        session.load(make_quiz([0]))
        assert session.load([]) is False
        assert session.size == 1


class TestAnswer:
    def test_correct_answer_scores(self, session):
        session.load(make_quiz([2]))
        assert session.answer(2) is True
        assert session.score == 1
        assert session.selected == 2
        assert session.phase is QuizPhase.ANSWERED
        assert session.is_correct_selection is True

    def test_wrong_answer_does_not_score(self, session):
        session.load(make_quiz([2]))
        session.answer(0)
        assert session.score == 0
        assert session.is_correct_selection is False

    def test_second_answer_rejected(self, session):
        session.load(make_quiz([1, 0]))
        session.answer(0)
        assert session.answer(1) is False
        assert session.selected == 0
        assert session.score == 0

    def test_second_correct_answer_cannot_add_score(self, session):
        session.load(make_quiz([1, 0]))
        session.answer(1)
        session.answer(1)
        assert session.score == 1

    @pytest.mark.parametrize("index", [-1, 4, 99])
    def test_out_of_range_answer_rejected(self, session, index):
        session.load(make_quiz([0]))
        assert session.answer(index) is False
        assert session.phase is QuizPhase.IN_PROGRESS


class TestFeedbackWindow:
    def test_no_advance_before_deadline(self, session, clock):
        session.load(make_quiz([0, 0]))
        session.answer(0)
        clock.advance(DELAY - 0.1)
        assert session.tick() is False
        assert session.cursor == 0
        assert session.feedback_remaining() == pytest.approx(0.1)

    def test_advance_after_deadline(self, session, clock):
        session.load(make_quiz([0, 0]))
        _answer_and_wait(session, clock, 0)
        assert session.cursor == 1
        assert session.selected is None
        assert session.phase is QuizPhase.IN_PROGRESS
        assert session.feedback_remaining() == 0.0

    def test_last_question_completes(self, session, clock):
        session.load(make_quiz([0]))
        session.answer(0)
        assert session.finished is False
        clock.advance(DELAY)
        session.tick()
        assert session.finished is True
        assert session.phase is QuizPhase.COMPLETE
        assert session.answer(0) is False

    def test_tick_without_answer_is_noop(self, session):
        session.load(make_quiz([0, 0]))
        assert session.tick() is False

    def test_reload_cancels_pending_window(self, session, clock):
        session.load(make_quiz([0, 0]))
        session.answer(0)
        window = session.feedback_window
        session.load(make_quiz([1, 1, 1]))
        assert window.cancelled is True
        clock.advance(DELAY * 2)
        assert session.tick() is False
        assert session.cursor == 0
        assert session.phase is QuizPhase.IN_PROGRESS

    def test_reset_cancels_pending_window(self, session, clock):
        session.load(make_quiz([0]))
        session.answer(0)
        session.reset()
        clock.advance(DELAY)
        assert session.tick() is False
        assert session.finished is False
        assert session.phase is QuizPhase.EMPTY

    def test_zero_delay_advances_on_next_tick(self, clock):
        session = QuizSession(feedback_delay=0, clock=clock)
        session.load(make_quiz([0, 0]))
        session.answer(0)
        assert session.tick() is True
        assert session.cursor == 1


class TestScoring:
    def test_two_question_scenario(self, session, clock):
        session.load(make_quiz([1, 0]))
        _answer_and_wait(session, clock, 1)
        assert session.cursor == 1
        assert session.score == 1
        _answer_and_wait(session, clock, 1)
        assert session.finished is True
        assert session.score == 1
        assert session.score_percent == 50

    def test_score_percent_seven_of_ten(self, session, clock):
        correct = [0] * 10
        session.load(make_quiz(correct))
        for i in range(10):
            _answer_and_wait(session, clock, 0 if i < 7 else 1)
        assert session.score == 7
        assert session.score_percent == 70

    def test_score_percent_rounds_half_up(self, session, clock):
        # 1/8 = 12.5% -> 13
        session.load(make_quiz([0] * 8))
        for i in range(8):
            _answer_and_wait(session, clock, 0 if i == 0 else 1)
        assert session.score_percent == 13

    def test_score_percent_two_thirds(self, session, clock):
        session.load(make_quiz([0, 0, 0]))
        for choice in (0, 0, 3):
            _answer_and_wait(session, clock, choice)
        assert session.score_percent == 67

    def test_progress_tracks_cursor(self, session, clock):
        session.load(make_quiz([0, 0, 0, 0]))
        assert session.progress == 0.25
        _answer_and_wait(session, clock, 0)
        assert session.progress == 0.5

    def test_reset_clears_everything(self, session, clock):
        session.load(make_quiz([0, 0]))
        _answer_and_wait(session, clock, 0)
        session.reset()
        assert session.phase is QuizPhase.EMPTY
        assert session.score == 0
        assert session.cursor == 0
        assert session.selected is None
        assert session.finished is False
