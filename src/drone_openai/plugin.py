"""One plugin invocation: settings to printed response."""

from __future__ import annotations

from typing import Optional
import logging

from drone_openai.config.settings import PluginSettings, settings_summary
from drone_openai.files.processor import FileProcessor
from drone_openai.llm.base import ChatCompletionClient
from drone_openai.llm.factory import create_chat_client
from drone_openai.llm.types import ChatCompletionRequest, ChatCompletionResponse, Message
from drone_openai.output.writer import OutputWriter


async def run_plugin(
    settings: PluginSettings,
    *,
    client: Optional[ChatCompletionClient] = None,
    file_processor: Optional[FileProcessor] = None,
    output_writer: Optional[OutputWriter] = None,
    logger: Optional[logging.Logger] = None,
) -> ChatCompletionResponse:
    """Run the pipeline once.

    Settings are validated and the optional file is read before any network
    access. Every failure propagates as a ``PluginError`` subclass; nothing is
    retried.
    """

    log = logger or logging.getLogger("drone_openai.plugin")
    log.info("configuration_loaded %s", _format_summary(settings))
    settings.validate()

    user_message = _build_user_message(settings, file_processor, logger)
    request = ChatCompletionRequest(
        model=settings.model,
        messages=(Message.system(settings.system_prompt), user_message),
        temperature=settings.temperature,
        max_tokens=settings.max_tokens,
    )

    chat_client = client or create_chat_client(settings, logger=logger)
    log.info("calling_openai_api timeout_seconds=%s", settings.timeout_seconds)
    try:
        response = await chat_client.complete(request)
    finally:
        # Caller-supplied clients stay open.
        if client is None:
            await chat_client.aclose()

    writer = output_writer or OutputWriter(logger=logger)
    writer.write_response(response.content, response.usage, settings.output_file)

    log.info("plugin_execution_completed")
    return response


def _build_user_message(
    settings: PluginSettings,
    file_processor: Optional[FileProcessor],
    logger: Optional[logging.Logger],
) -> Message:
    if not settings.has_file:
        return Message.user(settings.prompt)

    processor = file_processor or FileProcessor(logger=logger)
    return processor.process(settings.prompt, settings.file_path)


def _format_summary(settings: PluginSettings) -> str:
    summary = settings_summary(settings)
    keys = ("model", "temperature", "max_tokens", "timeout_seconds")
    fields = [f"{key}={summary[key]}" for key in keys]
    fields.append(f"has_file={settings.has_file}")
    fields.append(f"has_output_file={settings.has_output_file}")
    return " ".join(fields)
