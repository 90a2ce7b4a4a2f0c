from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple, Union


ROLE_SYSTEM = "system"
ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"


@dataclass(frozen=True)
class TextPart:
    text: str


@dataclass(frozen=True)
class ImagePart:
    url: str


ContentPart = Union[TextPart, ImagePart]


@dataclass(frozen=True)
class TextContent:
    text: str


@dataclass(frozen=True)
class MultimodalContent:
    parts: Tuple[ContentPart, ...]


MessageContent = Union[TextContent, MultimodalContent]


@dataclass(frozen=True)
class Message:
    role: str
    content: MessageContent

    @classmethod
    def system(cls, text: str) -> "Message":
        return cls(role=ROLE_SYSTEM, content=TextContent(text))

    @classmethod
    def user(cls, text: str) -> "Message":
        return cls(role=ROLE_USER, content=TextContent(text))


@dataclass(frozen=True)
class ChatCompletionRequest:
    model: str
    messages: Tuple[Message, ...]
    temperature: float
    max_tokens: int


@dataclass(frozen=True)
class Usage:
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass(frozen=True)
class ChatCompletionResponse:
    content: str
    usage: Usage = field(default_factory=Usage)
    model: str = "unknown"
