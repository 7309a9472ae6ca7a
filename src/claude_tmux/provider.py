"""
Terminal provider that runs Claude Code in a tmux split.

This is the surface a host application (an editor plugin) talks to. A
provider owns one ProviderState; nothing is shared between providers, so
any number can coexist (tests rely on this).

Typical use from a host::

    provider = setup({"split_size": 40})
    if provider.is_available():
        provider.focus_toggle("claude", {"CLAUDE_CODE_SSE_PORT": "12345"})
"""

import os
from typing import Any, Mapping, Optional

from .binding import ReturnBinding
from .config import deep_merge
from .implementations import RealTmux
from .pane_controller import PaneController
from .probe import TmuxProbe, is_in_tmux
from .protocols import TmuxInterface
from .state import PaneVisibility, ProviderConfig, ProviderState
from .toggle import ToggleOrchestrator

# The pane lives outside the host's buffer model.
NO_BUFFER = None


class TmuxProvider:
    """Manages a single Claude pane on behalf of a host application."""

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        tmux: Optional[TmuxInterface] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """Initialize the provider.

        Args:
            config: Resolved settings (defaults if omitted)
            tmux: Optional TmuxInterface for dependency injection (testing)
            environ: Environment to inspect instead of os.environ (testing)
        """
        self._environ = os.environ if environ is None else environ
        self.tmux = tmux if tmux else RealTmux()
        self.state = ProviderState(config=config or ProviderConfig())
        self.probe = TmuxProbe(self.tmux, environ=self._environ)
        self.controller = PaneController(
            self.state, self.tmux, probe=self.probe, binding=ReturnBinding(self.tmux)
        )
        self.toggles = ToggleOrchestrator(self.controller)

    def configure(self, options: Optional[Mapping[str, Any]] = None) -> None:
        """Merge ``options`` into the current configuration.

        Raises:
            InvalidConfigError: If a merged value is invalid
        """
        if options:
            merged = deep_merge(self.state.config.to_dict(), options)
            self.state.config = ProviderConfig.from_dict(merged)

    def get_config(self) -> ProviderConfig:
        return self.state.config

    def open(self, cmd_string: str, env_table: Optional[Mapping[str, object]] = None,
             effective_config: Optional[Mapping[str, Any]] = None,
             focus: bool = True) -> None:
        """Open the Claude pane, or focus it if it is already running.

        effective_config is the host's view of the terminal settings. It is
        accepted for interface compatibility only: the provider's own config
        always carries a split_size and takes precedence.
        """
        self.controller.open(cmd_string, env_table, focus=focus)

    def close(self) -> None:
        self.controller.close()

    def hide(self) -> None:
        self.controller.hide()

    def show(self) -> None:
        """Restore the pane and focus it."""
        self.controller.show()
        self.controller.focus()

    def is_hidden(self) -> bool:
        return self.state.hidden

    def visibility(self) -> PaneVisibility:
        return self.toggles.visibility()

    def simple_toggle(self, cmd_string: str, env_table: Optional[Mapping[str, object]] = None,
                      effective_config: Optional[Mapping[str, Any]] = None) -> None:
        self.toggles.simple_toggle(cmd_string, env_table)

    def focus_toggle(self, cmd_string: str, env_table: Optional[Mapping[str, object]] = None,
                     effective_config: Optional[Mapping[str, Any]] = None) -> None:
        self.toggles.focus_toggle(cmd_string, env_table)

    def toggle(self, cmd_string: str, env_table: Optional[Mapping[str, object]] = None,
               effective_config: Optional[Mapping[str, Any]] = None) -> None:
        """Default toggle; same as simple_toggle."""
        self.simple_toggle(cmd_string, env_table, effective_config)

    def get_active_buffer(self):
        """Always NO_BUFFER: the pane is not one of the host's buffers."""
        return NO_BUFFER

    def is_available(self) -> bool:
        return is_in_tmux(self._environ)

    def _get_terminal_for_test(self) -> Optional[str]:
        return self.state.pane_id


def setup(opts: Optional[Mapping[str, Any]] = None,
          tmux: Optional[TmuxInterface] = None,
          environ: Optional[Mapping[str, str]] = None) -> TmuxProvider:
    """Create a provider with defaults overridden by ``opts``.

    Args:
        opts: Options such as {"toggle_key": "<C-j>", "split_size": 30}
        tmux: Optional TmuxInterface for dependency injection (testing)
        environ: Environment to inspect instead of os.environ (testing)

    Raises:
        InvalidConfigError: If an option value is invalid
    """
    config = ProviderConfig.from_dict(deep_merge(ProviderConfig().to_dict(), opts))
    return TmuxProvider(config=config, tmux=tmux, environ=environ)


def is_available(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Check if the provider can be used (running inside tmux)."""
    return is_in_tmux(environ)
