from __future__ import annotations

import logging

from drone_openai.config.settings import PluginSettings

from .base import ChatCompletionClient
from .openai_adapter import OpenAIClientAdapter


def create_chat_client(
    settings: PluginSettings,
    logger: logging.Logger | None = None,
) -> ChatCompletionClient:
    return OpenAIClientAdapter(
        api_key=settings.api_key,
        timeout_seconds=settings.timeout_seconds,
        base_url=settings.base_url,
        logger=logger,
    )
