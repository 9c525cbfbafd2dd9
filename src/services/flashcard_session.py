"""Flashcard viewer state: deck, cursor and which face is showing."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Sequence

from services.study_models import Flashcard

LOGGER = logging.getLogger("studybot.flashcards")


class FlashcardPhase(str, Enum):
    EMPTY = "empty"
    ACTIVE = "active"


class FlashcardSession:
    """Navigates a loaded deck. Navigation clamps at both ends."""

    def __init__(self) -> None:
        self._deck: tuple[Flashcard, ...] = ()
        self._cursor = 0
        self._face_up = False

    @property
    def phase(self) -> FlashcardPhase:
        return FlashcardPhase.ACTIVE if self._deck else FlashcardPhase.EMPTY

    @property
    def deck(self) -> tuple[Flashcard, ...]:
        return self._deck

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def is_face_up(self) -> bool:
        return self._face_up

    @property
    def size(self) -> int:
        return len(self._deck)

    @property
    def position(self) -> int:
        """1-based card number, 0 when no deck is loaded."""
        return self._cursor + 1 if self._deck else 0

    @property
    def current_card(self) -> Flashcard | None:
        return self._deck[self._cursor] if self._deck else None

    @property
    def is_first(self) -> bool:
        return self._cursor == 0

    @property
    def is_last(self) -> bool:
        return not self._deck or self._cursor == len(self._deck) - 1

    @property
    def progress(self) -> float:
        if not self._deck:
            return 0.0
        return (self._cursor + 1) / len(self._deck)

    def load(self, deck: Sequence[Flashcard]) -> bool:
        """Replace the deck and rewind. An empty deck leaves the session untouched."""
        cards = tuple(deck)
        if not cards:
            LOGGER.debug("ignoring empty deck")
            return False
        self._deck = cards
        self._cursor = 0
        self._face_up = False
        LOGGER.debug("loaded deck of %s cards", len(cards))
        return True

    def flip(self) -> None:
        if self._deck:
            self._face_up = not self._face_up

    def next(self) -> bool:
        if not self._deck or self._cursor >= len(self._deck) - 1:
            return False
        self._cursor += 1
        self._face_up = False
        return True

    def previous(self) -> bool:
        if not self._deck or self._cursor == 0:
            return False
        self._cursor -= 1
        self._face_up = False
        return True

    def reset(self) -> None:
        self._deck = ()
        self._cursor = 0
        self._face_up = False
