"""
HTTP client for the content-generation backend: flashcards, quizzes and answers.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, TypeVar

import httpx

from config import API_BASE_URL, API_TIMEOUT_S, FLASHCARDS_PATH, QUIZ_PATH, STUDY_BUDDY_PATH
from services.study_models import Flashcard, QuizQuestion

LOGGER = logging.getLogger("studybot.client")

T = TypeVar("T")


class GenerationError(RuntimeError):
    """The backend could not produce usable content (network, status or payload)."""


def _parse_items(payload: dict[str, Any], key: str, build: Callable[[Any], T]) -> list[T]:
    """
    Pull the list under *key* out of *payload* and build each entry.

    Malformed entries are dropped; an absent key or nothing usable is a failure.
    """
    raw_items = payload.get(key)
    if not isinstance(raw_items, list):
        raise GenerationError(f"response is missing '{key}'")
    out: list[T] = []
    for i, item in enumerate(raw_items):
        try:
            out.append(build(item))
        except ValueError as e:
            LOGGER.warning("dropping %s entry #%s: %s", key, i, e)
    if not out:
        raise GenerationError(f"response contained no usable '{key}'")
    return out


def _parse_answer(payload: dict[str, Any]) -> str:
    answer = payload.get("answer")
    if not isinstance(answer, str) or not answer.strip():
        raise GenerationError("response is missing 'answer'")
    return answer


class ContentClient:
    """Performs the three generation calls; holds no study state."""

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = API_TIMEOUT_S,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._http = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def __enter__(self) -> "ContentClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def _post(self, path: str, body: dict[str, Any]) -> dict[str, Any]:
        """
        Send one JSON POST and return the decoded object.

        Raises:
            GenerationError: On transport failure, non-2xx status or a non-object body.
        """
        started = time.perf_counter()
        try:
            response = self._http.post(path, json=body)
            response.raise_for_status()
            parsed = response.json()
        except httpx.HTTPStatusError as e:
            LOGGER.warning("%s failed with status %s", path, e.response.status_code)
            raise GenerationError(f"backend returned status {e.response.status_code}") from e
        except httpx.HTTPError as e:
            LOGGER.warning("%s request failed: %s", path, e)
            raise GenerationError(f"request to {path} failed: {e}") from e
        except ValueError as e:
            LOGGER.warning("%s returned a non-JSON body", path)
            raise GenerationError("backend returned invalid JSON") from e
        LOGGER.info("POST %s ok in %.3fs", path, time.perf_counter() - started)
        if not isinstance(parsed, dict):
            raise GenerationError("backend returned a non-object payload")
        return parsed

    def generate_flashcards(self, notes: str) -> list[Flashcard]:
        """
        Generate a flashcard deck from study notes.

        Raises:
            GenerationError: If the call fails or no usable deck comes back.
        """
        payload = self._post(FLASHCARDS_PATH, {"notes": notes})
        return _parse_items(payload, "flashcards", Flashcard.from_payload)

    def generate_quiz(self, source_text: str) -> list[QuizQuestion]:
        """
        Generate quiz questions from source text.

        Raises:
            GenerationError: If the call fails or no usable question comes back.
        """
        payload = self._post(QUIZ_PATH, {"text": source_text})
        return _parse_items(payload, "quiz", QuizQuestion.from_payload)

    def ask_question(self, question: str) -> str:
        payload = self._post(STUDY_BUDDY_PATH, {"question": question})
        return _parse_answer(payload)
