"""
Custom exceptions for claude-tmux.

Pane operations never raise; only configuration validation does.
"""

from typing import Any


class ClaudeTmuxError(Exception):
    """Base exception for all claude-tmux errors."""
    pass


class InvalidConfigError(ClaudeTmuxError):
    """Raised when a configuration value is out of range or has the wrong type."""

    def __init__(self, key: str, value: Any, reason: str):
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value for '{key}': {value!r} ({reason})")
