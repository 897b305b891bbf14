"""OpenAI chat-completions client for image + text prompts."""

import logging
from typing import Any

import httpx

from radixpert.config import Settings
from radixpert.errors import TransportError, UpstreamError

logger = logging.getLogger(__name__)


class VisionClient:
    """Sends one text prompt with one image to the chat-completions endpoint.

    Makes exactly one request per call: no retries, no model fallback.
    """

    def __init__(self, settings: Settings) -> None:
        self.api_key = settings.openai_api_key
        self.url = f"{settings.openai_base_url.rstrip('/')}/chat/completions"
        self.model = settings.report_model
        self.max_tokens = settings.report_max_tokens
        self.temperature = settings.report_temperature
        self.http = httpx.AsyncClient(timeout=settings.inference_timeout_seconds)

    def build_payload(self, prompt: str, image_url: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": prompt},
                        {"type": "image_url", "image_url": {"url": image_url}},
                    ],
                }
            ],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }

    async def complete(self, prompt: str, image_url: str) -> str:
        """Return the generated text.

        Raises UpstreamError when the API reports an error and TransportError
        when it answers without text. Network and parse failures propagate
        as-is.
        """
        resp = await self.http.post(
            self.url,
            json=self.build_payload(prompt, image_url),
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
        )
        data = resp.json()

        error = data.get("error") if isinstance(data, dict) else None
        if resp.is_error or error:
            message = error.get("message") if isinstance(error, dict) else None
            logger.error(
                "%s API error (HTTP %s): %s", self.model, resp.status_code, error
            )
            raise UpstreamError(f"OpenAI API error: {message or 'Unknown API error'}")

        # content is null on refusals and content-filter stops
        content = data["choices"][0]["message"]["content"]
        if not isinstance(content, str):
            raise TransportError("OpenAI response has no report text")
        return content

    async def close(self) -> None:
        await self.http.aclose()
