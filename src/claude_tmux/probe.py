"""
Read-only queries against tmux.

Nothing here mutates tmux and nothing here raises: a failed or empty query
is reported as None, and every predicate built on one degrades to False.
"""

import os
from typing import Mapping, Optional, Set

from . import commands
from .protocols import TmuxInterface


def is_in_tmux(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Check whether this process runs inside a tmux session."""
    environ = os.environ if environ is None else environ
    return bool(environ.get("TMUX"))


def is_corroborated(pane_id: Optional[str], live_ids: Optional[Set[str]]) -> bool:
    """Check a remembered pane id against the set of panes tmux reports.

    A remembered id is only trusted when tmux still lists it. An unset id or
    a failed listing both count as "no pane".
    """
    if not pane_id or live_ids is None:
        return False
    return pane_id in live_ids


class TmuxProbe:
    """Answers questions about panes by polling tmux."""

    def __init__(self, tmux: TmuxInterface, environ: Optional[Mapping[str, str]] = None):
        self.tmux = tmux
        self._environ = os.environ if environ is None else environ

    def query(self, *args: str) -> Optional[str]:
        return self.tmux.query(*args)

    def live_pane_ids(self) -> Optional[Set[str]]:
        """All pane ids tmux knows about, or None if it couldn't be asked."""
        return commands.parse_pane_ids(self.query(*commands.list_panes()))

    def pane_is_live(self, pane_id: Optional[str]) -> bool:
        if not pane_id:
            return False
        return is_corroborated(pane_id, self.live_pane_ids())

    def active_pane_id(self) -> Optional[str]:
        """Id of the pane that currently has focus."""
        return self.query(*commands.display_pane_id())

    def pane_is_focused(self, pane_id: Optional[str]) -> bool:
        if not pane_id:
            return False
        active = self.active_pane_id()
        return active is not None and active == pane_id

    def current_pane_id(self) -> Optional[str]:
        """Id of the pane this process is running in.

        tmux exports $TMUX_PANE to every process it starts; when present it
        pins the query to our own pane instead of whichever one is active.
        """
        return self.query(*commands.display_pane_id(self._environ.get("TMUX_PANE")))
