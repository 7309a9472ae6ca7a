"""
The key binding that returns focus from the Claude pane to the editor pane.

tmux bindings are global, so the binding is installed in the root table
with a condition on the active pane: inside the Claude pane it selects the
editor pane, anywhere else it re-sends the same key so the binding is
invisible. install() and remove() must stay paired with pane creation and
destruction, otherwise the binding outlives the pane.
"""

import logging
from typing import Optional

from . import commands
from .keys import vim_key_to_tmux
from .protocols import TmuxInterface

logger = logging.getLogger(__name__)


class ReturnBinding:
    """Installs and removes the conditional return-to-editor binding."""

    def __init__(self, tmux: TmuxInterface):
        self.tmux = tmux

    def install(self, pane_id: Optional[str], host_pane_id: Optional[str],
                key: Optional[str]) -> Optional[str]:
        """Bind ``key`` to jump from ``pane_id`` to ``host_pane_id``.

        Returns:
            The tmux chord that was bound, or None if there was nothing
            to bind or tmux rejected it
        """
        if not pane_id or not host_pane_id:
            return None
        tmux_key = vim_key_to_tmux(key)
        if not tmux_key:
            return None

        if not self.tmux.run(*commands.bind_return_key(tmux_key, pane_id, host_pane_id)):
            logger.debug("Failed to bind %s", tmux_key)
            return None
        logger.debug("Bound %s: %s -> %s", tmux_key, pane_id, host_pane_id)
        return tmux_key

    def remove(self, key: Optional[str]) -> bool:
        """Unbind ``key`` (editor notation) from the root table. Safe to call repeatedly."""
        return self.unbind(vim_key_to_tmux(key))

    def unbind(self, tmux_key: Optional[str]) -> bool:
        """Unbind a chord already in tmux notation."""
        if not tmux_key:
            return False
        return self.tmux.run(*commands.unbind_key(tmux_key))
