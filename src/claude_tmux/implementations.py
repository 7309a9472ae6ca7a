"""
Real implementations of protocol interfaces.

RealTmux sends every command through libtmux, one synchronous tmux
invocation per call.
"""

import logging
import os
from typing import Optional

import libtmux
from libtmux.exc import LibTmuxException

logger = logging.getLogger(__name__)


class RealTmux:
    """Production implementation of TmuxInterface using libtmux.

    Commands are passed to tmux as an argument vector, so nothing here goes
    through a shell. Failures of any kind (tmux missing, no server, non-zero
    exit) are reported as None/False rather than raised.
    """

    def __init__(self, socket_name: Optional[str] = None):
        """Initialize with optional socket name for test isolation.

        If no socket_name is provided, checks CLAUDE_TMUX_SOCKET env var.
        Without either, tmux picks the server of the enclosing $TMUX session.
        """
        self._socket_name = socket_name or os.environ.get("CLAUDE_TMUX_SOCKET")
        self._server: Optional[libtmux.Server] = None

    @property
    def server(self) -> libtmux.Server:
        """Lazy-load the tmux server connection."""
        if self._server is None:
            if self._socket_name:
                self._server = libtmux.Server(socket_name=self._socket_name)
            else:
                self._server = libtmux.Server()
        return self._server

    def _cmd(self, args: tuple):
        if not args:
            return None
        try:
            result = self.server.cmd(*args)
        except (LibTmuxException, OSError) as e:
            logger.debug("tmux %s failed: %s", args[0], e)
            return None
        if result.returncode != 0:
            logger.debug(
                "tmux %s exited %s: %s",
                args[0], result.returncode, " ".join(result.stderr or []),
            )
            return None
        return result

    def query(self, *args: str) -> Optional[str]:
        result = self._cmd(args)
        if result is None:
            return None
        output = "\n".join(result.stdout or []).rstrip()
        return output or None

    def run(self, *args: str) -> bool:
        return self._cmd(args) is not None
