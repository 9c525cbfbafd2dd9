"""Study buddy transcript."""

from __future__ import annotations

import logging
from typing import Protocol

from config import CHAT_ERROR_MESSAGE
from services.content_client import GenerationError
from services.study_models import ChatTurn, Speaker

LOGGER = logging.getLogger("studybot.chat")


class QuestionAnswerer(Protocol):
    def ask_question(self, question: str) -> str: ...


class ChatSession:
    """Append-only transcript. Backend failures become assistant turns."""

    def __init__(self, client: QuestionAnswerer, error_message: str = CHAT_ERROR_MESSAGE) -> None:
        self._client = client
        self._error_message = error_message
        self._turns: list[ChatTurn] = []

    @property
    def turns(self) -> tuple[ChatTurn, ...]:
        return tuple(self._turns)

    @property
    def questions_asked(self) -> int:
        return sum(1 for t in self._turns if t.speaker is Speaker.USER)

    def ask(self, question: str) -> ChatTurn:
        """Append the question, then the answer or the fixed error text; return the reply turn."""
        self._turns.append(ChatTurn(Speaker.USER, question))
        try:
            content = self._client.ask_question(question)
        except GenerationError as e:
            LOGGER.warning("study buddy failed: %s", e)
            content = self._error_message
        reply = ChatTurn(Speaker.ASSISTANT, content)
        self._turns.append(reply)
        return reply
