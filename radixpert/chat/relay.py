"""Server side of the radiology chat: history + message in, reply out."""

from __future__ import annotations

import logging
from typing import Any, Callable

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from radixpert.config import Settings
from radixpert.errors import ConfigurationError, InputValidationError, UpstreamError
from radixpert.models import get_chat_model
from radixpert.prompts import RADIOLOGY_ASSISTANT_SYSTEM_PROMPT

logger = logging.getLogger(__name__)

_ROLE_TO_MESSAGE: dict[str, type[BaseMessage]] = {
    "user": HumanMessage,
    "assistant": AIMessage,
    "system": SystemMessage,
}


def build_messages(
    message: str, chat_history: list[dict[str, str]]
) -> list[BaseMessage]:
    """System prompt, then the prior turns, then the new user message."""
    messages: list[BaseMessage] = [
        SystemMessage(content=RADIOLOGY_ASSISTANT_SYSTEM_PROMPT)
    ]
    for turn in chat_history:
        message_cls = _ROLE_TO_MESSAGE.get(turn.get("role", ""))
        if message_cls is None:
            logger.warning("Skipping history turn with role %r", turn.get("role"))
            continue
        messages.append(message_cls(content=turn.get("content", "")))
    messages.append(HumanMessage(content=message))
    return messages


def _text_content(content: Any) -> str:
    if isinstance(content, str):
        return content
    # Content blocks: keep the text parts
    parts = [
        block.get("text", "") if isinstance(block, dict) else str(block)
        for block in content
    ]
    return "".join(parts)


class ChatRelay:
    """Answers radiology chat turns with a single chat-model call."""

    def __init__(
        self,
        settings: Settings,
        model_factory: Callable[[Settings], BaseChatModel] = get_chat_model,
    ) -> None:
        self.settings = settings
        self._model_factory = model_factory
        self._model: BaseChatModel | None = None

    def _get_model(self) -> BaseChatModel:
        if self._model is None:
            self._model = self._model_factory(self.settings)
        return self._model

    async def reply(self, message: str, chat_history: list[dict[str, str]]) -> str:
        if not self.settings.openai_api_key:
            logger.error("OPENAI_API_KEY is not configured")
            raise ConfigurationError("OpenAI API key is not configured.")
        if not message or not message.strip():
            raise InputValidationError("Message is required.")

        messages = build_messages(message, chat_history)
        try:
            result = await self._get_model().ainvoke(messages)
        except Exception as e:
            logger.exception("Chat model call failed: %s", e)
            raise UpstreamError(f"OpenAI API error: {e}") from e

        return _text_content(result.content)
