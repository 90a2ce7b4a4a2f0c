"""CLI entry point for the Drone OpenAI plugin."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence
import argparse
import asyncio
import json
import logging
import platform
import sys

from drone_openai import __version__
from drone_openai.config.settings import SettingsError, load_settings, settings_summary
from drone_openai.errors import PluginError
from drone_openai.plugin import run_plugin


EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Send a prompt (and optional file) to an OpenAI-compatible API.",
        epilog="All plugin settings are read from PLUGIN_* environment variables.",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate settings and print a redacted summary without calling the API.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"drone-openai {__version__}",
    )
    return parser


def configure_logging(log_level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def print_banner() -> None:
    print("===========================================")
    print(f"Drone OpenAI Plugin v{__version__}")
    print(f"Running on: {platform.system().lower()}/{platform.machine().lower()}")
    print(f"Python version: {platform.python_version()}")
    print("===========================================\n")


def main(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings(environ)
    configure_logging(settings.log_level)
    logger = logging.getLogger("drone_openai")

    if args.check:
        try:
            settings.validate()
        except SettingsError as exc:
            print(f"Configuration error: {exc}", file=sys.stderr)
            return EXIT_CONFIG_ERROR
        print(json.dumps(settings_summary(settings), indent=2, sort_keys=True))
        return 0

    print_banner()
    logger.info("starting drone openai plugin")

    try:
        asyncio.run(run_plugin(settings, logger=logger))
    except SettingsError as exc:
        logger.error("Configuration error: %s", exc)
        return EXIT_CONFIG_ERROR
    except PluginError as exc:
        logger.error("Plugin execution failed: %s", exc)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        return 130

    print("\nOpenAI plugin execution completed successfully")
    return 0
