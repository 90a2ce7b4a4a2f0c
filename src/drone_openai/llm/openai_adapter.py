from __future__ import annotations

from typing import Any, Callable, Optional
import asyncio
import logging

import openai
from openai import AsyncOpenAI

from .base import ChatCompletionClient
from .errors import (
    ApiError,
    EmptyResponseError,
    InvalidMessageError,
    NoResponseError,
    RequestTimeoutError,
    SerializationError,
    TransportError,
)
from .types import (
    ROLE_ASSISTANT,
    ROLE_SYSTEM,
    ROLE_USER,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ImagePart,
    Message,
    MultimodalContent,
    TextContent,
    TextPart,
    Usage,
)


class OpenAIClientAdapter(ChatCompletionClient):
    """
    Adapter for the OpenAI chat completions endpoint (or any compatible one).

    Exactly one attempt is made per request: the SDK client is built with
    retries disabled and the call is bound to ``timeout_seconds``.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: float,
        base_url: Optional[str] = None,
        client: Any | None = None,
        client_factory: Callable[..., Any] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._api_key = api_key
        self._timeout_seconds = timeout_seconds
        self._base_url = base_url
        self._client = client
        self._owns_client = client is None
        self._client_factory = client_factory or AsyncOpenAI
        self._logger = logger or logging.getLogger("drone_openai.llm")

    async def complete(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        payload = build_payload(request)
        self._logger.info(
            "chat_completion_request model=%s temperature=%s max_tokens=%s num_messages=%s",
            request.model,
            request.temperature,
            request.max_tokens,
            len(request.messages),
        )

        client = self._client or self._build_client()
        try:
            raw = await asyncio.wait_for(
                client.chat.completions.create(**payload),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            raise RequestTimeoutError(
                f"OpenAI request did not complete within {self._timeout_seconds}s."
            ) from exc
        except openai.APITimeoutError as exc:
            raise RequestTimeoutError(
                f"OpenAI request did not complete within {self._timeout_seconds}s."
            ) from exc
        except openai.APIConnectionError as exc:
            raise TransportError(f"OpenAI request failed: {exc}") from exc
        except openai.APIStatusError as exc:
            raise ApiError(exc.status_code, exc.response.text) from exc
        except openai.APIResponseValidationError as exc:
            raise SerializationError(f"OpenAI response was malformed: {exc}") from exc
        except ValueError as exc:
            raise SerializationError(f"OpenAI response was not valid JSON: {exc}") from exc

        response = parse_response(raw)
        self._logger.info(
            "chat_completion_success model=%s prompt_tokens=%s completion_tokens=%s total_tokens=%s",
            response.model,
            response.usage.prompt_tokens,
            response.usage.completion_tokens,
            response.usage.total_tokens,
        )
        return response

    def _build_client(self) -> Any:
        kwargs: dict[str, Any] = {"api_key": self._api_key, "max_retries": 0}
        if self._timeout_seconds > 0:
            kwargs["timeout"] = float(self._timeout_seconds)
        if self._base_url:
            kwargs["base_url"] = self._base_url

        self._client = self._client_factory(**kwargs)
        return self._client

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.close()
        self._client = None


def build_payload(request: ChatCompletionRequest) -> dict[str, Any]:
    """Render the chat completion body; non-positive sampling limits are omitted."""

    payload: dict[str, Any] = {
        "model": request.model,
        "messages": [convert_message(message) for message in request.messages],
    }
    if request.temperature > 0:
        payload["temperature"] = request.temperature
    if request.max_tokens > 0:
        payload["max_tokens"] = request.max_tokens
    return payload


def convert_message(message: Message) -> dict[str, Any]:
    content = message.content

    if message.role in (ROLE_SYSTEM, ROLE_ASSISTANT):
        if not isinstance(content, TextContent):
            raise InvalidMessageError(f"{message.role} message content must be text.")
        return {"role": message.role, "content": content.text}

    # Unknown roles are sent as user messages.
    if isinstance(content, TextContent):
        return {"role": ROLE_USER, "content": content.text}

    if isinstance(content, MultimodalContent):
        return {"role": ROLE_USER, "content": [_convert_part(part) for part in content.parts]}

    raise InvalidMessageError(f"Unsupported message content: {type(content).__name__}.")


def _convert_part(part: Any) -> dict[str, Any]:
    if isinstance(part, TextPart):
        return {"type": "text", "text": part.text}
    if isinstance(part, ImagePart):
        return {"type": "image_url", "image_url": {"url": part.url}}
    raise InvalidMessageError(f"Unsupported content part: {type(part).__name__}.")


def parse_response(raw: Any) -> ChatCompletionResponse:
    if not hasattr(raw, "choices"):
        raise SerializationError(
            f"OpenAI response was not a chat completion object: {type(raw).__name__}."
        )

    choices = raw.choices
    if not choices:
        raise NoResponseError("no response from OpenAI")

    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    if content is not None and not isinstance(content, str):
        raise SerializationError("OpenAI message content is not a string.")
    if not content:
        raise EmptyResponseError("empty response from OpenAI")

    usage = getattr(raw, "usage", None)
    model = getattr(raw, "model", None)
    if not isinstance(model, str) or not model.strip():
        model = "unknown"

    return ChatCompletionResponse(
        content=content,
        usage=Usage(
            prompt_tokens=_as_int(getattr(usage, "prompt_tokens", 0)),
            completion_tokens=_as_int(getattr(usage, "completion_tokens", 0)),
            total_tokens=_as_int(getattr(usage, "total_tokens", 0)),
        ),
        model=model,
    )


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    return 0
