from __future__ import annotations

from pathlib import Path
from typing import Optional, TextIO
import logging
import sys

from drone_openai.errors import PluginError
from drone_openai.llm.types import Usage


class OutputWriteError(PluginError):
    """Raised when the response cannot be saved to the output file."""


class OutputWriter:
    """Prints the response with usage statistics and optionally saves it."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._stream = stream
        self._logger = logger or logging.getLogger("drone_openai.output")

    def write_response(self, content: str, usage: Usage, output_file: str = "") -> None:
        self._print("=== OpenAI Response ===")
        self._print(content)
        self._print("\n=== Usage Statistics ===")
        self._print(f"Prompt Tokens: {usage.prompt_tokens}")
        self._print(f"Completion Tokens: {usage.completion_tokens}")
        self._print(f"Total Tokens: {usage.total_tokens}")

        if not output_file:
            return

        # Only the content is saved; usage stays on stdout.
        try:
            Path(output_file).write_bytes(content.encode("utf-8", errors="replace"))
        except OSError as exc:
            raise OutputWriteError(f"error writing output file {output_file}: {exc}") from exc

        self._logger.info("output_file_written path=%s size_chars=%s", output_file, len(content))
        self._print(f"\nResponse saved to: {output_file}")

    def _print(self, line: str) -> None:
        # Resolved per call so redirected stdout is honoured.
        print(line, file=self._stream or sys.stdout)
