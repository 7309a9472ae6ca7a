"""
Interfaces and in-memory implementations.

Re-exports the TmuxInterface protocol and provides MockTmux, a small
simulation of a tmux server that understands the commands claude-tmux
sends. Tests use it to drive the provider through real state transitions
without tmux installed.
"""

import shlex
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from .protocols import TmuxInterface

__all__ = ["TmuxInterface", "MockTmux", "MockPane"]


@dataclass
class MockPane:
    """A simulated tmux pane."""
    id: str
    command: Optional[str] = None
    height: Optional[str] = None
    sent_keys: List[str] = field(default_factory=list)


class MockTmux:
    """Mock implementation of TmuxInterface for testing.

    Starts with a single pane (``%0``) that is active, standing in for the
    editor. Every command is recorded in ``calls``.

    Failure injection:
        available = False makes every command fail, as if tmux were missing.
        failing = {"split-window", ...} makes those subcommands fail.
    """

    def __init__(self, initial_panes: Tuple[str, ...] = ("%0",)):
        self.panes: Dict[str, MockPane] = {pid: MockPane(pid) for pid in initial_panes}
        self.active: Optional[str] = initial_panes[0] if initial_panes else None
        self.last: Optional[str] = None
        self.bindings: Dict[str, Tuple[str, str, str]] = {}
        self.calls: List[Tuple[str, ...]] = []
        self.available = True
        self.failing: Set[str] = set()
        self._next_id = len(initial_panes)

    # -- TmuxInterface ---------------------------------------------------

    def query(self, *args: str) -> Optional[str]:
        self.calls.append(tuple(args))
        if not self.available or not args or args[0] in self.failing:
            return None
        handler = getattr(self, "_cmd_" + args[0].replace("-", "_"), None)
        if handler is None:
            return None
        ok, output = handler(list(args[1:]))
        if not ok:
            return None
        output = (output or "").rstrip()
        return output or None

    def run(self, *args: str) -> bool:
        self.calls.append(tuple(args))
        if not self.available or not args or args[0] in self.failing:
            return False
        handler = getattr(self, "_cmd_" + args[0].replace("-", "_"), None)
        if handler is None:
            return False
        ok, _ = handler(list(args[1:]))
        return ok

    # -- helpers for tests -------------------------------------------------

    def add_pane(self) -> str:
        """Create a pane without focusing it (e.g. the user split manually)."""
        pane_id = self._new_id()
        self.panes[pane_id] = MockPane(pane_id)
        return pane_id

    def kill_externally(self, pane_id: str) -> None:
        """Kill a pane behind the provider's back."""
        self._remove_pane(pane_id)

    def focus(self, pane_id: str) -> None:
        """Move focus as if the user clicked into ``pane_id``."""
        self._set_active(pane_id)

    def press(self, tmux_key: str) -> None:
        """Simulate the user pressing ``tmux_key`` in the active pane."""
        binding = self.bindings.get(tmux_key)
        if binding is None:
            if self.active in self.panes:
                self.panes[self.active].sent_keys.append(tmux_key)
            return
        condition, then_cmd, else_cmd = binding
        chosen = then_cmd if self._evaluate(condition) else else_cmd
        argv = shlex.split(chosen)
        self.run(*argv)

    def commands_named(self, name: str) -> List[Tuple[str, ...]]:
        return [c for c in self.calls if c and c[0] == name]

    # -- command handlers ------------------------------------------------

    def _new_id(self) -> str:
        pane_id = f"%{self._next_id}"
        self._next_id += 1
        return pane_id

    def _set_active(self, pane_id: str) -> None:
        if pane_id != self.active:
            self.last = self.active
            self.active = pane_id

    def _remove_pane(self, pane_id: str) -> bool:
        if pane_id not in self.panes:
            return False
        del self.panes[pane_id]
        if self.last == pane_id:
            self.last = None
        if self.active == pane_id:
            self.active = self.last or next(iter(self.panes), None)
            self.last = None
        return True

    @staticmethod
    def _option(args: List[str], flag: str) -> Optional[str]:
        if flag in args:
            i = args.index(flag)
            if i + 1 < len(args):
                return args[i + 1]
        return None

    def _evaluate(self, condition: str) -> bool:
        # Only the form produced by commands.return_condition is supported
        prefix = "#{==:#{pane_id},"
        if condition.startswith(prefix) and condition.endswith("}"):
            return self.active == condition[len(prefix):-1]
        return False

    def _cmd_list_panes(self, args):
        if not self.panes:
            return False, None
        return True, "\n".join(self.panes)

    def _cmd_display_message(self, args):
        target = self._option(args, "-t")
        pane_id = target if target else self.active
        if pane_id not in self.panes:
            return False, None
        return True, pane_id

    def _cmd_split_window(self, args):
        if self.active is None:
            return False, None
        size = self._option(args, "-l")
        pane = MockPane(self._new_id(), command=args[-1], height=size)
        self.panes[pane.id] = pane
        self._set_active(pane.id)
        return True, pane.id if "-P" in args else None

    def _cmd_resize_pane(self, args):
        pane_id = self._option(args, "-t")
        if pane_id not in self.panes:
            return False, None
        self.panes[pane_id].height = self._option(args, "-y")
        return True, None

    def _cmd_select_pane(self, args):
        pane_id = self._option(args, "-t")
        if pane_id not in self.panes:
            return False, None
        self._set_active(pane_id)
        return True, None

    def _cmd_kill_pane(self, args):
        return self._remove_pane(self._option(args, "-t")), None

    def _cmd_last_pane(self, args):
        if self.last not in self.panes:
            return False, None
        self._set_active(self.last)
        return True, None

    def _cmd_send_keys(self, args):
        if self.active not in self.panes:
            return False, None
        self.panes[self.active].sent_keys.extend(args)
        return True, None

    def _cmd_bind_key(self, args):
        # bind-key -n KEY if-shell -F CONDITION THEN ELSE
        if len(args) != 7 or args[0] != "-n" or args[2:4] != ["if-shell", "-F"]:
            return False, None
        self.bindings[args[1]] = (args[4], args[5], args[6])
        return True, None

    def _cmd_unbind_key(self, args):
        if len(args) != 2 or args[0] != "-n":
            return False, None
        self.bindings.pop(args[1], None)
        return True, None
