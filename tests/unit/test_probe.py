"""Tests for probe module."""

import pytest
from unittest.mock import MagicMock

from claude_tmux.interfaces import MockTmux
from claude_tmux.probe import TmuxProbe, is_corroborated, is_in_tmux


class TestIsInTmux:
    """Tests for is_in_tmux."""

    def test_true_when_tmux_set(self):
        assert is_in_tmux({"TMUX": "/tmp/tmux-1000/default,1,0"}) is True

    def test_false_when_unset(self):
        assert is_in_tmux({}) is False

    def test_false_when_empty(self):
        assert is_in_tmux({"TMUX": ""}) is False

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("TMUX", "x")
        assert is_in_tmux() is True
        monkeypatch.delenv("TMUX")
        assert is_in_tmux() is False


class TestIsCorroborated:
    """Tests for is_corroborated."""

    def test_listed_pane(self):
        assert is_corroborated("%1", {"%0", "%1"}) is True

    def test_unlisted_pane(self):
        assert is_corroborated("%2", {"%0", "%1"}) is False

    def test_no_prefix_match(self):
        # %1 must not be confirmed by %10 or %11
        assert is_corroborated("%1", {"%10", "%11"}) is False

    def test_unset_id(self):
        assert is_corroborated(None, {"%0"}) is False
        assert is_corroborated("", {"%0"}) is False

    def test_failed_listing(self):
        assert is_corroborated("%1", None) is False


class TestTmuxProbe:
    """Tests for TmuxProbe against MockTmux."""

    def test_live_pane_ids(self):
        tmux = MockTmux(initial_panes=("%0", "%3"))
        probe = TmuxProbe(tmux, environ={})
        assert probe.live_pane_ids() == {"%0", "%3"}

    def test_live_pane_ids_none_when_tmux_unavailable(self):
        tmux = MockTmux()
        tmux.available = False
        probe = TmuxProbe(tmux, environ={})
        assert probe.live_pane_ids() is None

    def test_pane_is_live(self):
        tmux = MockTmux()
        probe = TmuxProbe(tmux, environ={})
        assert probe.pane_is_live("%0") is True
        assert probe.pane_is_live("%9") is False
        assert probe.pane_is_live(None) is False

    def test_pane_is_live_does_not_query_for_unset_id(self):
        tmux = MockTmux()
        probe = TmuxProbe(tmux, environ={})
        probe.pane_is_live(None)
        assert tmux.calls == []

    def test_pane_is_live_false_when_tmux_fails(self):
        tmux = MockTmux()
        tmux.failing.add("list-panes")
        probe = TmuxProbe(tmux, environ={})
        assert probe.pane_is_live("%0") is False

    def test_pane_is_focused(self):
        tmux = MockTmux(initial_panes=("%0", "%1"))
        probe = TmuxProbe(tmux, environ={})
        assert probe.pane_is_focused("%0") is True
        assert probe.pane_is_focused("%1") is False

        tmux.focus("%1")
        assert probe.pane_is_focused("%1") is True

    def test_pane_is_focused_false_on_failure(self):
        tmux = MockTmux()
        tmux.available = False
        probe = TmuxProbe(tmux, environ={})
        assert probe.pane_is_focused("%0") is False
        assert probe.pane_is_focused(None) is False

    def test_current_pane_id_uses_tmux_pane(self):
        tmux = MockTmux(initial_panes=("%0", "%1"))
        tmux.focus("%1")
        probe = TmuxProbe(tmux, environ={"TMUX_PANE": "%0"})

        assert probe.current_pane_id() == "%0"
        assert tmux.calls[-1] == ("display-message", "-p", "-t", "%0", "#{pane_id}")

    def test_current_pane_id_falls_back_to_active(self):
        tmux = MockTmux(initial_panes=("%0", "%1"))
        tmux.focus("%1")
        probe = TmuxProbe(tmux, environ={})

        assert probe.current_pane_id() == "%1"

    def test_query_passes_through(self):
        tmux = MagicMock()
        tmux.query.return_value = "out"
        probe = TmuxProbe(tmux, environ={})

        assert probe.query("list-panes") == "out"
        tmux.query.assert_called_once_with("list-panes")
