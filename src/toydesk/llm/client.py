"""Client for OpenAI-compatible chat completion APIs.

One request per call: a single user message goes out, the first choice of
the reply comes back. No retries, no streaming, no conversation state.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from toydesk.core.config import Settings
from toydesk.core.http import make_httpx_client
from toydesk.llm.types import (
    ChatErrorKind,
    ChatMessage,
    ChatResponse,
    ChatResult,
    LLMConfig,
    Role,
)

logger = logging.getLogger(__name__)


def build_request_body(model: str, text: str) -> dict[str, Any]:
    """Build the request body for a single user prompt.

    Raises ValueError for empty text. The content is passed through verbatim.
    """
    if not text:
        raise ValueError("Prompt text must not be empty")
    messages = [ChatMessage(role=Role.USER, content=text)]
    return {
        "model": model,
        "messages": [m.to_api() for m in messages],
    }


def decode_response(body: bytes | str) -> ChatResult:
    """Decode a chat completions response body into a ChatResult."""
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning("Chat response is not valid JSON: %s", e)
        return ChatResult(error=ChatErrorKind.DECODE)

    try:
        response = ChatResponse.model_validate(data)
    except ValidationError as e:
        logger.warning("Chat response has unexpected shape: %s", e)
        return ChatResult(error=ChatErrorKind.DECODE)

    content = response.first_content
    if content is None:
        logger.warning("Chat response contained no choices")
        return ChatResult(error=ChatErrorKind.EMPTY)
    return ChatResult(text=content)


class ChatCompletionClient:
    """Sends a prompt to a chat completions endpoint and returns the reply."""

    def __init__(self, config: LLMConfig, http_client: httpx.AsyncClient | None = None) -> None:
        self._config = config
        self._client = http_client or make_httpx_client(timeout=config.timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> ChatCompletionClient:
        return cls(
            LLMConfig(
                model=settings.model,
                api_key=settings.openai_api_key,
                chat_url=settings.chat_url,
                timeout=settings.request_timeout,
            )
        )

    @property
    def model(self) -> str:
        return self._config.model

    def _get_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._config.api_key}",
            "Content-Type": "application/json",
        }

    async def send(self, text: str) -> ChatResult:
        """POST one user message and decode the reply.

        Transport and decode failures are returned as a ChatResult error
        instead of being raised.
        """
        request_body = build_request_body(self._config.model, text)

        try:
            response = await self._client.post(
                self._config.chat_url,
                content=json.dumps(request_body),
                headers=self._get_headers(),
            )
        except httpx.HTTPError as e:
            logger.warning("Chat request to %s failed: %s", self._config.chat_url, e)
            return ChatResult(error=ChatErrorKind.TRANSPORT)

        if response.status_code != 200:
            logger.warning(
                "Chat API returned %s: %s", response.status_code, response.text[:500]
            )

        return decode_response(response.content)

    async def complete(self, text: str) -> str | None:
        """Return the reply text, or None when no reply could be obtained."""
        result = await self.send(text)
        return result.text

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()
