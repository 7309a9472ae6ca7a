"""
Pane lifecycle: create, destroy, hide, show and focus the Claude pane.

tmux gives no notifications, so the controller never trusts state.pane_id
on its own. Every entry point that touches the pane first asks tmux whether
the pane still exists, and a pane that has vanished is handled exactly like
one that was never created.

tmux also gives no transactions: the pane can disappear between the check
and the action. Actions that fail leave the state as it was and are logged
at debug level; nothing here raises.
"""

import logging
from typing import Mapping, Optional

from . import commands
from .binding import ReturnBinding
from .probe import TmuxProbe
from .protocols import TmuxInterface
from .state import ProviderState

logger = logging.getLogger(__name__)


class PaneController:
    """Owns the one auxiliary pane described by a ProviderState."""

    def __init__(
        self,
        state: ProviderState,
        tmux: TmuxInterface,
        probe: Optional[TmuxProbe] = None,
        binding: Optional[ReturnBinding] = None,
    ):
        """Initialize the controller.

        Args:
            state: State object this controller reads and updates
            tmux: Command primitive used for every mutating tmux call
            probe: Optional TmuxProbe for dependency injection (testing)
            binding: Optional ReturnBinding for dependency injection (testing)
        """
        self.state = state
        self.tmux = tmux
        self.probe = probe if probe else TmuxProbe(tmux)
        self.binding = binding if binding else ReturnBinding(tmux)

    def is_live(self) -> bool:
        """Whether the remembered pane still exists in tmux."""
        return self.probe.pane_is_live(self.state.pane_id)

    def is_focused(self) -> bool:
        return self.probe.pane_is_focused(self.state.pane_id)

    def open(self, command: str, env: Optional[Mapping[str, object]] = None,
             focus: bool = True) -> None:
        """Open the pane running ``command``, or reuse the one already running.

        Args:
            command: Shell command to run in the new pane
            env: Environment variables to set for the command
            focus: Leave the new pane focused (otherwise return to the editor)
        """
        if self.is_live():
            if focus:
                self._select(self.state.pane_id)
            return

        host_pane = self.probe.current_pane_id()
        self.state.host_pane_id = host_pane

        split_size = self.state.config.split_size
        full_command = commands.build_command(command, env)
        new_pane = self.tmux.query(*commands.split_window(split_size, full_command))

        if new_pane:
            self.state.pane_id = new_pane
            self.state.hidden = False
            logger.debug("Opened pane %s (%s%%) from %s", new_pane, split_size, host_pane)
            self._rebind(new_pane, host_pane)
        else:
            logger.debug("split-window returned no pane id; no pane opened")
            self.state.pane_id = None
            self.state.hidden = False

        if not focus and host_pane:
            self._select(host_pane)

    def close(self) -> None:
        """Kill the pane if it exists and forget it.

        The binding is removed and the state cleared even when the pane is
        already gone, so a pane killed outside our control never leaves a
        key binding behind.
        """
        if self.is_live():
            if not self.tmux.run(*commands.kill_pane(self.state.pane_id)):
                logger.debug("kill-pane %s failed", self.state.pane_id)
        if self.state.bound_key:
            self.binding.unbind(self.state.bound_key)
        else:
            self.binding.remove(self.state.config.toggle_key)
        self.state.reset()

    def hide(self) -> None:
        """Shrink the pane to a single line.

        hidden is set once the pane is known to exist; the resize itself
        is not verified.
        """
        if not self.is_live():
            return
        if not self.tmux.run(*commands.resize_pane_lines(self.state.pane_id)):
            logger.debug("resize-pane %s to hide failed", self.state.pane_id)
        self.state.hidden = True

    def show(self) -> None:
        """Restore the pane to its configured height. Does not focus it."""
        if not self.is_live():
            return
        pane_id = self.state.pane_id
        if not self.tmux.run(*commands.resize_pane_percent(pane_id, self.state.config.split_size)):
            logger.debug("resize-pane %s to show failed", pane_id)
        self.state.hidden = False

    def focus(self) -> None:
        """Give the pane focus if it exists."""
        if self.is_live():
            self._select(self.state.pane_id)

    def focus_last(self) -> None:
        """Best-effort jump back to whichever pane was active before."""
        if not self.tmux.run(*commands.last_pane()):
            logger.debug("last-pane failed")

    def _select(self, pane_id: str) -> None:
        if not self.tmux.run(*commands.select_pane(pane_id)):
            logger.debug("select-pane %s failed", pane_id)

    def _rebind(self, pane_id: str, host_pane_id: Optional[str]) -> None:
        # A pane that died outside our control can leave its chord bound.
        previous = self.state.bound_key
        bound = self.binding.install(pane_id, host_pane_id, self.state.config.toggle_key)
        if previous and previous != bound:
            self.binding.unbind(previous)
        self.state.bound_key = bound
