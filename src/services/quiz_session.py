"""
Quiz runner state: one answer per question, a timed feedback window, then
auto-advance until the last question completes the quiz.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence

from config import FEEDBACK_DELAY_S
from services.study_models import QuizQuestion

LOGGER = logging.getLogger("studybot.quiz")


class QuizPhase(str, Enum):
    EMPTY = "empty"
    IN_PROGRESS = "in_progress"
    ANSWERED = "answered"
    COMPLETE = "complete"


@dataclass
class FeedbackWindow:
    """Pending auto-advance for one answered question."""

    question_index: int
    deadline: float
    generation: int
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True

    def remaining(self, now: float) -> float:
        return max(0.0, self.deadline - now)


class QuizSession:
    """
    Runs a loaded quiz.

    The feedback window is resolved by ``tick()``; callers poll it (the UI
    sleeps for ``feedback_remaining()`` and reruns). Every ``load``/``reset``
    bumps the generation and cancels the open window, so a window opened for
    an earlier quiz can never advance the current one.
    """

    def __init__(
        self,
        feedback_delay: float = FEEDBACK_DELAY_S,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._feedback_delay = max(0.0, float(feedback_delay))
        self._clock = clock
        self._generation = 0
        self._questions: tuple[QuizQuestion, ...] = ()
        self._cursor = 0
        self._selected: int | None = None
        self._score = 0
        self._finished = False
        self._window: FeedbackWindow | None = None

    # ── read-only state ──────────────────────────────────────────

    @property
    def phase(self) -> QuizPhase:
        if not self._questions:
            return QuizPhase.EMPTY
        if self._finished:
            return QuizPhase.COMPLETE
        if self._selected is not None:
            return QuizPhase.ANSWERED
        return QuizPhase.IN_PROGRESS

    @property
    def questions(self) -> tuple[QuizQuestion, ...]:
        return self._questions

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def selected(self) -> int | None:
        return self._selected

    @property
    def score(self) -> int:
        return self._score

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def size(self) -> int:
        return len(self._questions)

    @property
    def feedback_window(self) -> FeedbackWindow | None:
        return self._window

    @property
    def current_question(self) -> QuizQuestion | None:
        if not self._questions or self._finished:
            return None
        return self._questions[self._cursor]

    @property
    def is_correct_selection(self) -> bool | None:
        """Whether the pending answer was right; None when nothing is selected."""
        question = self.current_question
        if question is None or self._selected is None:
            return None
        return question.is_correct(self._selected)

    @property
    def progress(self) -> float:
        if not self._questions:
            return 0.0
        return (self._cursor + 1) / len(self._questions)

    @property
    def score_percent(self) -> int:
        """Score as a whole percentage, rounding halves up."""
        total = len(self._questions)
        if total == 0:
            return 0
        return (200 * self._score + total) // (2 * total)

    # ── transitions ──────────────────────────────────────────────

    def _cancel_window(self) -> None:
        if self._window is not None:
            self._window.cancel()
            self._window = None

    def load(self, questions: Sequence[QuizQuestion]) -> bool:
        """Start a new quiz. An empty list leaves the session untouched."""
        items = tuple(questions)
        if not items:
            LOGGER.debug("ignoring empty quiz")
            return False
        self._cancel_window()
        self._generation += 1
        self._questions = items
        self._cursor = 0
        self._selected = None
        self._score = 0
        self._finished = False
        LOGGER.debug("loaded quiz of %s questions", len(items))
        return True

    def answer(self, index: int) -> bool:
        """
        Record the answer for the current question and open the feedback window.

        Returns:
            False when the answer is rejected: no quiz running, the question is
            already answered, or *index* is not one of its options.
        """
        if self.phase is not QuizPhase.IN_PROGRESS:
            return False
        question = self._questions[self._cursor]
        if not 0 <= index < len(question.options):
            return False
        self._selected = index
        if question.is_correct(index):
            self._score += 1
        self._window = FeedbackWindow(
            question_index=self._cursor,
            deadline=self._clock() + self._feedback_delay,
            generation=self._generation,
        )
        return True

    def feedback_remaining(self, now: float | None = None) -> float:
        if self._window is None or self._window.cancelled:
            return 0.0
        return self._window.remaining(self._clock() if now is None else now)

    def tick(self, now: float | None = None) -> bool:
        """
        Resolve the feedback window if it has elapsed.

        Returns:
            True if the quiz advanced to the next question or completed.
        """
        window = self._window
        if window is None:
            return False
        if window.cancelled or window.generation != self._generation or window.question_index != self._cursor:
            self._window = None
            return False
        if (self._clock() if now is None else now) < window.deadline:
            return False
        self._window = None
        if self._cursor < len(self._questions) - 1:
            self._cursor += 1
            self._selected = None
        else:
            self._finished = True
            LOGGER.info("quiz complete: %s/%s", self._score, len(self._questions))
        return True

    def reset(self) -> None:
        self._cancel_window()
        self._generation += 1
        self._questions = ()
        self._cursor = 0
        self._selected = None
        self._score = 0
        self._finished = False
