from __future__ import annotations

from drone_openai.errors import PluginError


class LLMError(PluginError):
    """Base error for chat completion failures."""


class InvalidMessageError(LLMError):
    """Raised when a message content shape is not valid for its role."""


class SerializationError(LLMError):
    """Raised when a request or response cannot be encoded or decoded."""


class TransportError(LLMError):
    """Raised when the API cannot be reached."""


class RequestTimeoutError(TransportError):
    """Raised when the request deadline elapses before a response arrives."""


class ApiError(LLMError):
    """Raised when the API answers with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"OpenAI API error (status {status_code}): {body}")
        self.status_code = status_code
        self.body = body


class ContentError(LLMError):
    """Raised when a successful response carries no usable content."""


class NoResponseError(ContentError):
    """Raised when the response has no choices."""


class EmptyResponseError(ContentError):
    """Raised when the first choice has empty content."""
