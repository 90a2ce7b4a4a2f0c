from __future__ import annotations

from abc import ABC, abstractmethod

from .types import ChatCompletionRequest, ChatCompletionResponse


class ChatCompletionClient(ABC):
    @abstractmethod
    async def complete(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        """Send one chat completion request and return the first choice."""

    async def aclose(self) -> None:
        """Release transport resources; clients without any keep this no-op."""
