"""HTTP client for the radiology chat inference service."""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class ChatServiceError(Exception):
    """Raised when the chat service fails or answers with an unusable body."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ChatServiceClient:
    """Posts ``{message, chatHistory}`` and returns the ``reply`` text."""

    def __init__(self, url: str, api_key: str = "", timeout: float = 60.0) -> None:
        self.url = url
        self.api_key = api_key
        self.http = httpx.AsyncClient(timeout=timeout)

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def reply(
        self, message: str, chat_history: list[dict[str, str]]
    ) -> str:
        payload = {"message": message, "chatHistory": chat_history}
        resp = await self.http.post(self.url, json=payload, headers=self._headers())

        if resp.is_error:
            raise ChatServiceError(_error_message(resp))

        data: Any = resp.json()
        reply = data.get("reply") if isinstance(data, dict) else None
        if not isinstance(reply, str):
            raise ChatServiceError("Chat service response has no reply text")
        return reply

    async def close(self) -> None:
        await self.http.aclose()


def _error_message(resp: httpx.Response) -> str:
    """Pull the ``error`` field out of an error body, if there is one."""
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"Chat service returned HTTP {resp.status_code}"
