"""Tests for package metadata."""

from importlib.metadata import version

import claude_tmux


def test_version_matches_installed_distribution():
    assert claude_tmux.__version__ == version("claude-tmux")
