"""Typed settings loader for the plugin."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional
import math
import os
import re

from drone_openai.errors import PluginError


_VALID_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 1000
DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant."
DEFAULT_TIMEOUT_SECONDS = 60
DEFAULT_LOG_LEVEL = "INFO"

ENV_KEYS = (
    "PLUGIN_API_KEY",
    "PLUGIN_MODEL",
    "PLUGIN_PROMPT",
    "PLUGIN_FILE",
    "PLUGIN_TEMPERATURE",
    "PLUGIN_MAX_TOKENS",
    "PLUGIN_SYSTEM_PROMPT",
    "PLUGIN_OUTPUT_FILE",
    "PLUGIN_TIMEOUT",
    "PLUGIN_BASE_URL",
    "PLUGIN_LOG_LEVEL",
)


class SettingsError(PluginError):
    """Raised when settings fail validation."""


@dataclass(frozen=True)
class PluginSettings:
    api_key: str = ""
    model: str = DEFAULT_MODEL
    prompt: str = ""
    file_path: str = ""
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS
    system_prompt: str = DEFAULT_SYSTEM_PROMPT
    output_file: str = ""
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    base_url: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def has_file(self) -> bool:
        return self.file_path != ""

    @property
    def has_output_file(self) -> bool:
        return self.output_file != ""

    def validate(self) -> None:
        """Reject settings that cannot produce a request.

        The API key is checked before the prompt, so a run missing both
        reports the API key.
        """

        if self.api_key == "":
            raise SettingsError("API_KEY is required")
        if self.prompt == "":
            raise SettingsError("PROMPT is required")


def load_settings(environ: Optional[Mapping[str, str]] = None) -> PluginSettings:
    """Load settings from ``PLUGIN_*`` environment variables.

    Loading never fails: unset or empty variables take their defaults, and
    numeric values that do not parse are treated as unset.
    """

    env = environ if environ is not None else os.environ

    return PluginSettings(
        api_key=_read_str(env, "PLUGIN_API_KEY", ""),
        model=_read_str(env, "PLUGIN_MODEL", DEFAULT_MODEL),
        prompt=_read_str(env, "PLUGIN_PROMPT", ""),
        file_path=_read_str(env, "PLUGIN_FILE", ""),
        temperature=_read_number(env, "PLUGIN_TEMPERATURE", _as_float, DEFAULT_TEMPERATURE),
        max_tokens=_read_number(env, "PLUGIN_MAX_TOKENS", _as_int, DEFAULT_MAX_TOKENS),
        system_prompt=_read_str(env, "PLUGIN_SYSTEM_PROMPT", DEFAULT_SYSTEM_PROMPT),
        output_file=_read_str(env, "PLUGIN_OUTPUT_FILE", ""),
        timeout_seconds=_read_number(env, "PLUGIN_TIMEOUT", _as_int, DEFAULT_TIMEOUT_SECONDS),
        base_url=_read_str(env, "PLUGIN_BASE_URL", "") or None,
        log_level=_read_log_level(env),
    )


def settings_summary(settings: PluginSettings) -> dict:
    """Render redacted settings for diagnostics."""

    return {
        "api_key_set": settings.api_key != "",
        "model": settings.model,
        "prompt_length": len(settings.prompt),
        "file_path": settings.file_path or None,
        "temperature": settings.temperature,
        "max_tokens": settings.max_tokens,
        "system_prompt": settings.system_prompt,
        "output_file": settings.output_file or None,
        "timeout_seconds": settings.timeout_seconds,
        "base_url": settings.base_url,
        "log_level": settings.log_level,
    }


def _read_str(environ: Mapping[str, str], key: str, default: str) -> str:
    value = environ.get(key)
    if value in (None, ""):
        return default
    return value


_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _as_int(value: str) -> int:
    if not _INT_PATTERN.fullmatch(value):
        raise ValueError(f"not a plain integer: {value!r}")
    return int(value)


def _as_float(value: str) -> float:
    if not _FLOAT_PATTERN.fullmatch(value):
        raise ValueError(f"not a plain decimal: {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"not a finite number: {value!r}")
    return number


def _read_number(
    environ: Mapping[str, str],
    key: str,
    caster: Callable[[str], Any],
    default: Any,
) -> Any:
    value = environ.get(key)
    if value in (None, ""):
        return default

    try:
        return caster(value)
    except ValueError:
        return default


def _read_log_level(environ: Mapping[str, str]) -> str:
    level = _read_str(environ, "PLUGIN_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if level not in _VALID_LOG_LEVELS:
        return DEFAULT_LOG_LEVEL
    return level
