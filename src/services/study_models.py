"""
Study content models: flashcards, quiz questions and chat turns.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Speaker(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Flashcard:
    front: str
    back: str

    @classmethod
    def from_payload(cls, item: Any) -> "Flashcard":
        """
        Build a card from one entry of the generation response.

        Raises:
            ValueError: If the entry is not an object or has an empty front.
        """
        if not isinstance(item, dict):
            raise ValueError("flashcard entry must be an object")
        front = str(item.get("front") or "").strip()
        back = str(item.get("back") or "").strip()
        if not front:
            raise ValueError("flashcard front is empty")
        return cls(front=front, back=back or "—")


@dataclass(frozen=True)
class QuizQuestion:
    question: str
    options: tuple[str, ...]
    correct_index: int
    explanation: str = ""

    def __post_init__(self) -> None:
        if len(self.options) < 2:
            raise ValueError("quiz question needs at least two options")
        if not 0 <= self.correct_index < len(self.options):
            raise ValueError(
                f"correct_index {self.correct_index} out of range for {len(self.options)} options"
            )

    def is_correct(self, index: int) -> bool:
        return index == self.correct_index

    @classmethod
    def from_payload(cls, item: Any) -> "QuizQuestion":
        """
        Build a question from one entry of the quiz response.

        The correct option arrives as ``correct``; ``correctIndex`` and
        ``correct_index`` are accepted as well.

        Raises:
            ValueError: If the entry is malformed or violates the option invariants.
        """
        if not isinstance(item, dict):
            raise ValueError("quiz entry must be an object")
        question = str(item.get("question") or "").strip()
        if not question:
            raise ValueError("quiz question text is empty")
        raw_options = item.get("options")
        if not isinstance(raw_options, list):
            raise ValueError("quiz options must be a list")
        raw_correct = item.get("correct", item.get("correctIndex", item.get("correct_index")))
        # bool is an int subclass; reject it explicitly
        if isinstance(raw_correct, bool) or not isinstance(raw_correct, int):
            raise ValueError("quiz correct index must be an integer")
        return cls(
            question=question,
            options=tuple(str(o) for o in raw_options),
            correct_index=raw_correct,
            explanation=str(item.get("explanation") or "").strip(),
        )


@dataclass(frozen=True)
class ChatTurn:
    speaker: Speaker
    content: str
