"""Tests for implementations module."""

import os
import shutil

import pytest
from unittest.mock import patch, MagicMock

from libtmux.exc import LibTmuxException, TmuxCommandNotFound

from claude_tmux.implementations import RealTmux
from claude_tmux.protocols import TmuxInterface


def tmux_result(stdout=None, stderr=None, returncode=0):
    result = MagicMock()
    result.stdout = stdout if stdout is not None else []
    result.stderr = stderr if stderr is not None else []
    result.returncode = returncode
    return result


class TestRealTmuxServer:
    """Tests for RealTmux server handling."""

    def test_implements_protocol(self):
        assert isinstance(RealTmux(), TmuxInterface)

    def test_init_default(self):
        with patch.dict('os.environ', {}, clear=True):
            tmux = RealTmux()
            assert tmux._socket_name is None

    def test_init_with_socket_name(self):
        tmux = RealTmux(socket_name="test_socket")
        assert tmux._socket_name == "test_socket"

    def test_init_from_env_var(self):
        with patch.dict('os.environ', {'CLAUDE_TMUX_SOCKET': 'env_socket'}):
            tmux = RealTmux()
            assert tmux._socket_name == "env_socket"

    def test_server_lazy_load(self):
        with patch.dict('os.environ', {}, clear=True):
            with patch('claude_tmux.implementations.libtmux.Server') as mock_server:
                tmux = RealTmux()
                assert tmux._server is None

                _ = tmux.server

                mock_server.assert_called_once_with()
                assert tmux._server is not None

    def test_server_with_socket_name(self):
        with patch('claude_tmux.implementations.libtmux.Server') as mock_server:
            tmux = RealTmux(socket_name="custom_socket")
            _ = tmux.server

            mock_server.assert_called_once_with(socket_name="custom_socket")

    def test_server_cached(self):
        with patch('claude_tmux.implementations.libtmux.Server') as mock_server:
            tmux = RealTmux()
            _ = tmux.server
            _ = tmux.server

            mock_server.assert_called_once()


class TestRealTmuxQuery:
    """Tests for RealTmux.query."""

    def _tmux(self, result=None, side_effect=None):
        tmux = RealTmux(socket_name="test")
        tmux._server = MagicMock()
        if side_effect is not None:
            tmux._server.cmd.side_effect = side_effect
        else:
            tmux._server.cmd.return_value = result
        return tmux

    def test_passes_args_to_libtmux(self):
        tmux = self._tmux(tmux_result(["%0"]))

        tmux.query("list-panes", "-a", "-F", "#{pane_id}")

        tmux._server.cmd.assert_called_once_with("list-panes", "-a", "-F", "#{pane_id}")

    def test_joins_lines(self):
        tmux = self._tmux(tmux_result(["%0", "%1"]))
        assert tmux.query("list-panes") == "%0\n%1"

    def test_strips_trailing_whitespace(self):
        tmux = self._tmux(tmux_result(["%3  ", ""]))
        assert tmux.query("display-message", "-p", "#{pane_id}") == "%3"

    def test_none_when_no_output(self):
        tmux = self._tmux(tmux_result([]))
        assert tmux.query("select-pane", "-t", "%1") is None

    def test_none_on_nonzero_exit(self):
        tmux = self._tmux(tmux_result(["ignored"], ["can't find pane: %9"], returncode=1))
        assert tmux.query("display-message", "-p", "-t", "%9", "#{pane_id}") is None

    def test_none_when_tmux_missing(self):
        tmux = self._tmux(side_effect=TmuxCommandNotFound())
        assert tmux.query("list-panes") is None

    def test_none_on_libtmux_error(self):
        tmux = self._tmux(side_effect=LibTmuxException("no server running"))
        assert tmux.query("list-panes") is None

    def test_none_on_os_error(self):
        tmux = self._tmux(side_effect=OSError("exec failed"))
        assert tmux.query("list-panes") is None

    def test_none_for_empty_args(self):
        tmux = self._tmux(tmux_result(["x"]))
        assert tmux.query() is None
        tmux._server.cmd.assert_not_called()


class TestRealTmuxRun:
    """Tests for RealTmux.run."""

    def test_true_on_success_without_output(self):
        tmux = RealTmux(socket_name="test")
        tmux._server = MagicMock()
        tmux._server.cmd.return_value = tmux_result([])

        assert tmux.run("kill-pane", "-t", "%1") is True

    def test_false_on_failure(self):
        tmux = RealTmux(socket_name="test")
        tmux._server = MagicMock()
        tmux._server.cmd.return_value = tmux_result([], ["can't find pane"], returncode=1)

        assert tmux.run("kill-pane", "-t", "%1") is False

    def test_false_on_exception(self):
        tmux = RealTmux(socket_name="test")
        tmux._server = MagicMock()
        tmux._server.cmd.side_effect = LibTmuxException("boom")

        assert tmux.run("last-pane") is False


@pytest.mark.requires_tmux
@pytest.mark.skipif(shutil.which("tmux") is None, reason="tmux not available")
@pytest.mark.skipif("TMUX" not in os.environ, reason="not inside a tmux session")
class TestRealTmuxLive:
    """Runs against the tmux server of the enclosing session."""

    def test_lists_own_pane(self, monkeypatch):
        monkeypatch.delenv("CLAUDE_TMUX_SOCKET", raising=False)

        output = RealTmux().query("list-panes", "-a", "-F", "#{pane_id}")

        assert output is not None
        pane_ids = output.splitlines()
        assert all(pane_id.startswith("%") for pane_id in pane_ids)
        if os.environ.get("TMUX_PANE"):
            assert os.environ["TMUX_PANE"] in pane_ids

    def test_failing_command_returns_none(self, monkeypatch):
        monkeypatch.delenv("CLAUDE_TMUX_SOCKET", raising=False)

        assert RealTmux().query("display-message", "-p", "-t", "%999999", "#{pane_id}") is None
