"""
Unit test fixtures for claude-tmux.

Everything here runs against MockTmux; no tmux installation is needed.
"""

import pytest

from claude_tmux.interfaces import MockTmux
from claude_tmux.provider import setup


@pytest.fixture
def tmux_env():
    """Environment of a process running in the editor pane of a tmux session."""
    return {"TMUX": "/tmp/tmux-1000/default,1234,0", "TMUX_PANE": "%0"}


@pytest.fixture
def mock_tmux():
    return MockTmux()


@pytest.fixture
def provider(mock_tmux, tmux_env):
    """A provider with default settings, running in editor pane %0."""
    return setup(tmux=mock_tmux, environ=tmux_env)
