"""
Dashboard controller: owns the three study sessions, the active view, the
busy flag and the draft inputs, and forwards submissions to the content client.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Sequence

from services.chat_session import ChatSession
from services.content_client import GenerationError
from services.flashcard_session import FlashcardSession
from services.quiz_session import QuizSession
from services.study_models import Flashcard, QuizQuestion

LOGGER = logging.getLogger("studybot.dashboard")


class View(str, Enum):
    DASHBOARD = "dashboard"
    FLASHCARDS = "flashcards"
    QUIZ = "quiz"
    STUDY_BUDDY = "study-buddy"


class StudyContentSource(Protocol):
    def generate_flashcards(self, notes: str) -> Sequence[Flashcard]: ...

    def generate_quiz(self, source_text: str) -> Sequence[QuizQuestion]: ...

    def ask_question(self, question: str) -> str: ...


@dataclass(frozen=True)
class Notice:
    """Blocking failure notice for a generation request."""

    view: View
    detail: str


@dataclass(frozen=True)
class DashboardOverview:
    flashcard_position: int
    flashcard_count: int
    flashcard_progress: float
    quiz_position: int
    quiz_count: int
    quiz_progress: float
    questions_asked: int


class DashboardController:
    def __init__(
        self,
        client: StudyContentSource,
        flashcards: FlashcardSession | None = None,
        quiz: QuizSession | None = None,
        chat: ChatSession | None = None,
    ) -> None:
        self._client = client
        self.flashcards = flashcards or FlashcardSession()
        self.quiz = quiz or QuizSession()
        self.chat = chat or ChatSession(client)
        self._view = View.DASHBOARD
        self._busy = False
        self._notice: Notice | None = None
        self._drafts: dict[View, str] = {}
        self._input_epochs: dict[View, int] = {}

    @property
    def active_view(self) -> View:
        return self._view

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def notice(self) -> Notice | None:
        return self._notice

    def go_to(self, view: View) -> None:
        self._view = View(view)

    def dismiss_notice(self) -> None:
        self._notice = None

    # ── draft inputs ─────────────────────────────────────────────

    def draft(self, view: View) -> str:
        return self._drafts.get(view, "")

    def set_draft(self, view: View, text: str) -> None:
        self._drafts[view] = text or ""

    def input_epoch(self, view: View) -> int:
        """Bumped whenever a submission resolves; the UI keys its input widget on it."""
        return self._input_epochs.get(view, 0)

    def _clear_draft(self, view: View) -> None:
        self._drafts[view] = ""
        self._input_epochs[view] = self.input_epoch(view) + 1

    def can_submit(self, view: View) -> bool:
        return not self._busy and bool(self.draft(view).strip())

    def _resolve_text(self, view: View, text: str | None) -> str | None:
        if text is not None:
            self.set_draft(view, text)
        value = self.draft(view)
        if not value.strip():
            return None
        if self._busy:
            LOGGER.info("rejecting %s submission while a request is in flight", view.value)
            return None
        return value

    # ── submissions ──────────────────────────────────────────────

    def submit_flashcards(self, notes: str | None = None) -> bool:
        """
        Generate a new deck from *notes* (or the stored draft).

        Returns:
            True if a new deck was loaded and the flashcard view activated.
        """
        value = self._resolve_text(View.FLASHCARDS, notes)
        if value is None:
            return False
        self._busy = True
        try:
            deck = self._client.generate_flashcards(value)
            loaded = self.flashcards.load(deck)
            if not loaded:
                raise GenerationError("backend returned an empty deck")
        except GenerationError as e:
            LOGGER.warning("flashcard generation failed: %s", e)
            self._notice = Notice(View.FLASHCARDS, str(e))
            return False
        finally:
            self._busy = False
            self._clear_draft(View.FLASHCARDS)
        self._notice = None
        self._view = View.FLASHCARDS
        return True

    def submit_quiz(self, text: str | None = None) -> bool:
        """
        Generate a new quiz from *text* (or the stored draft).

        Returns:
            True if a new quiz was loaded and the quiz view activated.
        """
        value = self._resolve_text(View.QUIZ, text)
        if value is None:
            return False
        self._busy = True
        try:
            questions = self._client.generate_quiz(value)
            loaded = self.quiz.load(questions)
            if not loaded:
                raise GenerationError("backend returned an empty quiz")
        except GenerationError as e:
            LOGGER.warning("quiz generation failed: %s", e)
            self._notice = Notice(View.QUIZ, str(e))
            return False
        finally:
            self._busy = False
            self._clear_draft(View.QUIZ)
        self._notice = None
        self._view = View.QUIZ
        return True

    def ask(self, question: str | None = None) -> bool:
        """Send a study-buddy question. Failures land in the transcript, never in the notice."""
        value = self._resolve_text(View.STUDY_BUDDY, question)
        if value is None:
            return False
        self._busy = True
        try:
            self.chat.ask(value)
        finally:
            self._busy = False
            self._clear_draft(View.STUDY_BUDDY)
        return True

    # ── "Back to Dashboard" ──────────────────────────────────────

    def close_flashcards(self) -> None:
        self.flashcards.reset()
        self._view = View.DASHBOARD

    def close_quiz(self) -> None:
        self.quiz.reset()
        self._view = View.DASHBOARD

    def overview(self) -> DashboardOverview:
        return DashboardOverview(
            flashcard_position=self.flashcards.position,
            flashcard_count=self.flashcards.size,
            flashcard_progress=self.flashcards.progress,
            quiz_position=self.quiz.cursor + 1 if self.quiz.size else 0,
            quiz_count=self.quiz.size,
            quiz_progress=self.quiz.progress,
            questions_asked=self.chat.questions_asked,
        )
