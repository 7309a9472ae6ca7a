"""
Pytest configuration for claude-tmux tests.
"""

import pytest


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "requires_tmux: mark test as requiring a real tmux server"
    )
