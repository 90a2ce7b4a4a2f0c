"""Result rendering."""

from drone_openai.output.writer import OutputWriteError, OutputWriter

__all__ = ["OutputWriteError", "OutputWriter"]
