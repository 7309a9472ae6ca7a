"""
claude-tmux - Run Claude Code in a tmux split beside your editor.
"""

from importlib.metadata import version as _version

__version__ = _version("claude-tmux")
