"""Types for chat completion requests and responses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass
class ChatMessage:
    role: Role
    content: str

    def to_api(self) -> dict[str, Any]:
        return {"role": self.role.value, "content": self.content}


# Wire models for the chat completions response. Extra fields such as
# ``id``, ``usage`` and ``finish_reason`` are ignored.


class ResponseMessage(BaseModel):
    role: str
    content: str


class ChatChoice(BaseModel):
    message: ResponseMessage


class ChatResponse(BaseModel):
    choices: list[ChatChoice]

    @property
    def first_content(self) -> str | None:
        if not self.choices:
            return None
        return self.choices[0].message.content


class ChatErrorKind(str, Enum):
    TRANSPORT = "transport"
    DECODE = "decode"
    EMPTY = "empty"  # well-formed response without any choices


@dataclass
class ChatResult:
    text: str | None = None
    error: ChatErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class LLMConfig:
    """Configuration for the chat completion client."""

    model: str
    api_key: str = ""
    chat_url: str = "https://api.openai.com/v1/chat/completions"
    timeout: float | None = None
