from __future__ import annotations


class PluginError(Exception):
    """Base error for failures that abort a plugin invocation."""
