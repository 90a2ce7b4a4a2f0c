"""Drone CI plugin that sends one prompt to an OpenAI-compatible API."""

__version__ = "0.1.2"
