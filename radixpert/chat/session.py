"""Conversation state and the chat session manager.

The manager owns no state of its own: callers hold a ``ConversationState``
and pass it to every operation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Literal, Protocol

from radixpert.chat.formatting import format_reply

logger = logging.getLogger(__name__)

Role = Literal["user", "assistant", "system"]

FALLBACK_REPLY = (
    "I'm sorry, I couldn't process your request. Please try again later."
)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class ConversationTurn:
    """One message in a conversation."""

    role: Role
    content: str
    timestamp: str = field(default_factory=_now_iso)


@dataclass
class ConversationState:
    """Ordered conversation turns plus the in-flight flag."""

    turns: list[ConversationTurn] = field(default_factory=list)
    is_loading: bool = False

    def history(self) -> list[dict[str, str]]:
        """Turns reduced to ``{role, content}`` pairs."""
        return [{"role": t.role, "content": t.content} for t in self.turns]


@dataclass(frozen=True)
class Notification:
    """User-visible notice raised when a chat turn fails."""

    title: str = "Error"
    description: str = "Failed to get a response from the AI assistant."
    variant: str = "destructive"


class ChatService(Protocol):
    async def reply(
        self, message: str, chat_history: list[dict[str, str]]
    ) -> str: ...


def log_notification(notification: Notification) -> None:
    logger.warning("%s: %s", notification.title, notification.description)


class ChatSessionManager:
    """Sends user turns to the chat service and records the replies."""

    def __init__(
        self,
        service: ChatService,
        notify: Callable[[Notification], None] = log_notification,
    ) -> None:
        self.service = service
        self.notify = notify

    async def send_message(self, state: ConversationState, text: str) -> None:
        """Append a user turn and exactly one assistant turn.

        Blank input is ignored. Failures are never raised: the user gets a
        notification and the conversation gets the fallback reply.
        """
        if not text.strip():
            return

        # History is the conversation as it stood before this message
        chat_history = state.history()
        state.turns.append(ConversationTurn(role="user", content=text))
        state.is_loading = True

        try:
            reply = await self.service.reply(text, chat_history)
            state.turns.append(
                ConversationTurn(role="assistant", content=format_reply(reply))
            )
        except Exception as e:
            logger.exception("Chat service request failed: %s", e)
            self.notify(Notification())
            state.turns.append(
                ConversationTurn(role="assistant", content=FALLBACK_REPLY)
            )
        finally:
            state.is_loading = False

    def clear_chat(self, state: ConversationState) -> None:
        state.turns.clear()
