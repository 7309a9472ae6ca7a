"""
Toggle policies for the Claude pane.

The pane is always in one of four states (see PaneVisibility), derived
fresh from tmux on every call:

                 simple_toggle           focus_toggle
    ABSENT       open + focus            open + focus
    HIDDEN       show + focus            show + focus
    UNFOCUSED    hide                    focus
    FOCUSED      hide                    hide + last-pane

ABSENT includes a pane killed behind our back, so both toggles always
recover by creating a new one.
"""

import logging
from typing import Mapping, Optional

from .pane_controller import PaneController
from .state import PaneVisibility

logger = logging.getLogger(__name__)


class ToggleOrchestrator:
    """Maps the current pane state to the next lifecycle action."""

    def __init__(self, controller: PaneController):
        self.controller = controller

    @property
    def state(self):
        return self.controller.state

    def visibility(self) -> PaneVisibility:
        """Work out the pane's current state from tmux."""
        if not self.controller.is_live():
            return PaneVisibility.ABSENT
        if self.state.hidden:
            return PaneVisibility.HIDDEN
        if self.controller.is_focused():
            return PaneVisibility.VISIBLE_FOCUSED
        return PaneVisibility.VISIBLE_UNFOCUSED

    def simple_toggle(self, command: str, env: Optional[Mapping[str, object]] = None) -> PaneVisibility:
        """Open, reveal or hide the pane; focus is not considered.

        Returns:
            The state the pane was in before the toggle
        """
        current = self.visibility()
        logger.debug("simple_toggle from %s", current.value)

        if current is PaneVisibility.ABSENT:
            self.controller.open(command, env, focus=True)
        elif current is PaneVisibility.HIDDEN:
            self._reveal()
        else:
            self.controller.hide()
        return current

    def focus_toggle(self, command: str, env: Optional[Mapping[str, object]] = None) -> PaneVisibility:
        """Like simple_toggle, but a visible pane without focus gets focus
        instead of being hidden, and hiding a focused pane hands focus back
        to the previous pane.

        Returns:
            The state the pane was in before the toggle
        """
        current = self.visibility()
        logger.debug("focus_toggle from %s", current.value)

        if current is PaneVisibility.ABSENT:
            self.controller.open(command, env, focus=True)
        elif current is PaneVisibility.HIDDEN:
            self._reveal()
        elif current is PaneVisibility.VISIBLE_FOCUSED:
            self.controller.hide()
            self.controller.focus_last()
        else:
            self.controller.focus()
        return current

    def toggle(self, command: str, env: Optional[Mapping[str, object]] = None) -> PaneVisibility:
        return self.simple_toggle(command, env)

    def _reveal(self) -> None:
        self.controller.show()
        self.controller.focus()
