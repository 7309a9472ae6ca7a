"""
Protocol definitions for external dependencies.

The only external dependency of the pane provider is tmux itself. All tmux
traffic goes through TmuxInterface so that tests can swap the real
libtmux-backed implementation for an in-memory fake.
"""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class TmuxInterface(Protocol):
    """Interface for issuing tmux commands"""

    def query(self, *args: str) -> Optional[str]:
        """Run a tmux command and return its output.

        Args:
            args: tmux subcommand and its arguments, e.g. ("list-panes", "-a")

        Returns:
            stdout with trailing whitespace stripped, or None if tmux is
            missing, the command failed, or it printed nothing
        """
        ...

    def run(self, *args: str) -> bool:
        """Run a tmux command for its side effect.

        Returns:
            True if tmux exited successfully, False otherwise
        """
        ...
