"""Shared pytest fixtures for the StudyBot test suite."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

# Ensure src/ is on the path so all service imports resolve.
SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from services.content_client import ContentClient, GenerationError  # noqa: E402
from services.study_models import Flashcard, QuizQuestion  # noqa: E402


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeContentClient:
    """Scripted stand-in for ContentClient.

    Each ``*_result`` is either the value to return or an exception to raise.
    ``on_call`` runs inside every call, before the result is produced.
    """

    def __init__(self) -> None:
        self.flashcards_result: Any = []
        self.quiz_result: Any = []
        self.answer_result: Any = ""
        self.calls: list[tuple[str, str]] = []
        self.on_call: Callable[[], None] | None = None

    def _produce(self, name: str, arg: str, result: Any) -> Any:
        self.calls.append((name, arg))
        if self.on_call is not None:
            self.on_call()
        if isinstance(result, Exception):
            raise result
        return result

    def generate_flashcards(self, notes: str) -> list[Flashcard]:
        return self._produce("generate_flashcards", notes, self.flashcards_result)

    def generate_quiz(self, source_text: str) -> list[QuizQuestion]:
        return self._produce("generate_quiz", source_text, self.quiz_result)

    def ask_question(self, question: str) -> str:
        return self._produce("ask_question", question, self.answer_result)


def make_deck(n: int = 3) -> list[Flashcard]:
    return [Flashcard(front=f"Term {i}", back=f"Definition {i}") for i in range(n)]


def make_quiz(correct: list[int]) -> list[QuizQuestion]:
    return [
        QuizQuestion(
            question=f"Q{i}?",
            options=("A", "B", "C", "D"),
            correct_index=c,
            explanation=f"Because {i}.",
        )
        for i, c in enumerate(correct)
    ]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_client() -> FakeContentClient:
    return FakeContentClient()


@pytest.fixture
def failing_client() -> FakeContentClient:
    client = FakeContentClient()
    boom = GenerationError("backend unavailable")
    client.flashcards_result = boom
    client.quiz_result = boom
    client.answer_result = boom
    return client


@pytest.fixture
def client_factory() -> Callable[..., tuple[ContentClient, list[httpx.Request]]]:
    """Build a ContentClient served by an in-process httpx.MockTransport.

    *responder* receives the decoded request body and returns an
    ``httpx.Response``; every request is recorded for assertions.
    """
    created: list[ContentClient] = []

    def _factory(responder: Callable[[str, dict[str, Any]], httpx.Response]):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            body = json.loads(request.content.decode("utf-8") or "{}")
            return responder(request.url.path, body)

        client = ContentClient(base_url="http://studybot.test", transport=httpx.MockTransport(handler))
        created.append(client)
        return client, requests

    yield _factory
    for client in created:
        client.close()
