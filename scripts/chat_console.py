"""Interactive console chat with the RadiAI assistant.

Usage:
    python scripts/chat_console.py

Talks to the chat service at CHAT_SERVICE_URL (the running service's
/radiology-ai-chat endpoint by default). Type /clear to start over and
/quit to exit.
"""

import asyncio
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from radixpert.chat.session import ChatSessionManager, ConversationState, Notification
from radixpert.clients.chat_service import ChatServiceClient
from radixpert.config import Settings

logging.basicConfig(level=logging.WARNING)
logger = logging.getLogger(__name__)


def print_notification(notification: Notification) -> None:
    print(f"[{notification.title}] {notification.description}", file=sys.stderr)


async def main():
    settings = Settings()
    client = ChatServiceClient(
        settings.chat_service_url,
        api_key=settings.chat_service_api_key,
        timeout=settings.inference_timeout_seconds,
    )
    manager = ChatSessionManager(client, notify=print_notification)
    state = ConversationState()

    print("RadiAI Assistant — ask about radiology procedures and terminology.")
    try:
        while True:
            try:
                text = await asyncio.to_thread(input, "you> ")
            except EOFError:
                break

            command = text.strip().lower()
            if command == "/quit":
                break
            if command == "/clear":
                manager.clear_chat(state)
                print("(conversation cleared)")
                continue

            before = len(state.turns)
            await manager.send_message(state, text)
            for turn in state.turns[before:]:
                if turn.role == "assistant":
                    print(f"\nRadiAI> {turn.content}\n")
    finally:
        await client.close()


if __name__ == "__main__":
    asyncio.run(main())
