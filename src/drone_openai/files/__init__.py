"""Input file handling."""

from drone_openai.files.processor import FileProcessor, FileReadError, build_data_url

__all__ = ["FileProcessor", "FileReadError", "build_data_url"]
