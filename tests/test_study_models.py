"""Tests for study model invariants and payload normalization."""

from __future__ import annotations

import dataclasses

import pytest

from services.study_models import ChatTurn, Flashcard, QuizQuestion, Speaker


class TestQuizQuestion:
    def test_valid_question(self):
        q = QuizQuestion("Q?", ("a", "b", "c"), 2, "exp")
        assert q.is_correct(2)
        assert not q.is_correct(0)

    def test_needs_two_options(self):
        with pytest.raises(ValueError):
            QuizQuestion("Q?", ("a",), 0)

    @pytest.mark.parametrize("correct", [-1, 2])
    def test_correct_index_in_range(self, correct):
        with pytest.raises(ValueError):
            QuizQuestion("Q?", ("a", "b"), correct)

    def test_from_payload_rejects_bool_correct(self):
        with pytest.raises(ValueError):
            QuizQuestion.from_payload({"question": "q", "options": ["a", "b"], "correct": True})

    def test_from_payload_rejects_string_options(self):
        with pytest.raises(ValueError):
            QuizQuestion.from_payload({"question": "q", "options": "ab", "correct": 0})

    def test_from_payload_stringifies_options(self):
        q = QuizQuestion.from_payload({"question": "q", "options": [1, 2], "correct": 0})
        assert q.options == ("1", "2")
        assert q.explanation == ""


class TestFlashcard:
    def test_frozen(self):
        card = Flashcard("f", "b")
        with pytest.raises(dataclasses.FrozenInstanceError):
            card.front = "x"  # type: ignore[misc]

    def test_from_payload_strips_whitespace(self):
        card = Flashcard.from_payload({"front": "  term ", "back": " def "})
        assert card == Flashcard("term", "def")

    def test_from_payload_rejects_non_dict(self):
        with pytest.raises(ValueError):
            Flashcard.from_payload(["front", "back"])


def test_chat_turn_speaker_values():
    turn = ChatTurn(Speaker.USER, "hi")
    assert turn.speaker.value == "user"
    assert Speaker.ASSISTANT.value == "assistant"
