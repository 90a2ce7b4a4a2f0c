"""Chat completion types, errors and the OpenAI adapter."""

from .base import ChatCompletionClient
from .errors import (
    ApiError,
    ContentError,
    EmptyResponseError,
    InvalidMessageError,
    LLMError,
    NoResponseError,
    RequestTimeoutError,
    SerializationError,
    TransportError,
)
from .factory import create_chat_client
from .openai_adapter import OpenAIClientAdapter, build_payload, convert_message, parse_response
from .types import (
    ROLE_ASSISTANT,
    ROLE_SYSTEM,
    ROLE_USER,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ContentPart,
    ImagePart,
    Message,
    MessageContent,
    MultimodalContent,
    TextContent,
    TextPart,
    Usage,
)

__all__ = [
    "ROLE_ASSISTANT",
    "ROLE_SYSTEM",
    "ROLE_USER",
    "ApiError",
    "ChatCompletionClient",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ContentError",
    "ContentPart",
    "EmptyResponseError",
    "ImagePart",
    "InvalidMessageError",
    "LLMError",
    "Message",
    "MessageContent",
    "MultimodalContent",
    "NoResponseError",
    "OpenAIClientAdapter",
    "RequestTimeoutError",
    "SerializationError",
    "TextContent",
    "TextPart",
    "TransportError",
    "Usage",
    "build_payload",
    "convert_message",
    "create_chat_client",
    "parse_response",
]
