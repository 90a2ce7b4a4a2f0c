"""Attach a local file to the user prompt."""

from __future__ import annotations

from pathlib import Path
from typing import Optional
import base64
import logging

from drone_openai.errors import PluginError
from drone_openai.llm.types import (
    ROLE_USER,
    ImagePart,
    Message,
    MultimodalContent,
    TextContent,
    TextPart,
)


_MIME_TYPES: tuple[tuple[str, str], ...] = (
    (".jpg", "image/jpeg"),
    (".jpeg", "image/jpeg"),
    (".png", "image/png"),
    (".gif", "image/gif"),
    (".webp", "image/webp"),
)

IMAGE_EXTENSIONS = tuple(ext for ext, _ in _MIME_TYPES)
FALLBACK_MIME_TYPE = "application/octet-stream"
TEXT_FILE_TEMPLATE = "{prompt}\n\nFile content:\n{file_content}"


class FileReadError(PluginError):
    """Raised when the input file cannot be read."""


class FileProcessor:
    """Turns a prompt plus a file path into the user message."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger("drone_openai.files")

    def process(self, prompt: str, file_path: str) -> Message:
        """Read ``file_path`` fully and build a text or image user message.

        Images become a text part carrying the prompt followed by an image
        part with a base64 data URL. Anything else is decoded as text and
        appended to the prompt.
        """

        self._logger.info("processing_file path=%s", file_path)
        data = self._read(file_path)

        if self.is_image_file(file_path):
            mime_type = self.mime_type_for(file_path)
            self._logger.info("detected_image_file mime_type=%s", mime_type)
            return Message(
                role=ROLE_USER,
                content=MultimodalContent(
                    parts=(
                        TextPart(text=prompt),
                        ImagePart(url=build_data_url(mime_type, data)),
                    )
                ),
            )

        self._logger.info("detected_text_file size_bytes=%s", len(data))
        file_content = data.decode("utf-8", errors="replace")
        return Message(
            role=ROLE_USER,
            content=TextContent(TEXT_FILE_TEMPLATE.format(prompt=prompt, file_content=file_content)),
        )

    @staticmethod
    def is_image_file(file_path: str) -> bool:
        return file_path.lower().endswith(IMAGE_EXTENSIONS)

    @staticmethod
    def mime_type_for(file_path: str) -> str:
        lowered = file_path.lower()
        for extension, mime_type in _MIME_TYPES:
            if lowered.endswith(extension):
                return mime_type
        return FALLBACK_MIME_TYPE

    @staticmethod
    def _read(file_path: str) -> bytes:
        try:
            with Path(file_path).open("rb") as handle:
                return handle.read()
        except OSError as exc:
            raise FileReadError(f"error reading file {file_path}: {exc}") from exc


def build_data_url(mime_type: str, data: bytes) -> str:
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"
