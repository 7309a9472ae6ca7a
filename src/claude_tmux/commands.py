"""
tmux command construction.

Every argument vector sent to tmux, and every piece of shell quoting, is
built here. Arguments are passed to tmux directly (no outer shell), so the
only string that is ever interpreted by a shell is the command given to
split-window, which tmux hands to the default shell.
"""

from typing import List, Mapping, Optional, Set

PANE_ID_FORMAT = "#{pane_id}"

# Height of a "hidden" pane. tmux has no hide primitive and won't go below 1.
HIDDEN_PANE_LINES = 1


def escape_single_quotes(value) -> str:
    """Escape a value for use inside a single-quoted shell string."""
    return str(value).replace("'", "'\\''")


def build_env_prefix(env: Optional[Mapping[str, object]]) -> str:
    """Build ``KEY='value' `` assignments for each environment entry."""
    if not env:
        return ""
    return "".join(
        f"{key}='{escape_single_quotes(value)}' " for key, value in env.items()
    )


def build_command(command: str, env: Optional[Mapping[str, object]] = None) -> str:
    """Prefix a shell command with environment assignments."""
    return build_env_prefix(env) + command


def list_panes() -> List[str]:
    return ["list-panes", "-a", "-F", PANE_ID_FORMAT]


def display_pane_id(target: Optional[str] = None) -> List[str]:
    """Print the id of the active pane, or of ``target`` when given."""
    args = ["display-message", "-p"]
    if target:
        args += ["-t", target]
    return args + [PANE_ID_FORMAT]


def split_window(size_percent: int, command: str) -> List[str]:
    """Split below the current pane and print the new pane's id."""
    return [
        "split-window", "-v",
        "-l", f"{size_percent}%",
        "-P", "-F", PANE_ID_FORMAT,
        command,
    ]


def resize_pane_lines(pane_id: str, lines: int = HIDDEN_PANE_LINES) -> List[str]:
    return ["resize-pane", "-t", pane_id, "-y", str(lines)]


def resize_pane_percent(pane_id: str, size_percent: int) -> List[str]:
    return ["resize-pane", "-t", pane_id, "-y", f"{size_percent}%"]


def select_pane(pane_id: str) -> List[str]:
    return ["select-pane", "-t", pane_id]


def kill_pane(pane_id: str) -> List[str]:
    return ["kill-pane", "-t", pane_id]


def last_pane() -> List[str]:
    return ["last-pane"]


def return_condition(pane_id: str) -> str:
    """tmux format that is true while ``pane_id`` is the active pane."""
    return f"#{{==:{PANE_ID_FORMAT},{pane_id}}}"


def bind_return_key(tmux_key: str, pane_id: str, host_pane_id: str) -> List[str]:
    """Root-table binding: jump to the host pane from ``pane_id``, else pass the key on."""
    return [
        "bind-key", "-n", tmux_key,
        "if-shell", "-F", return_condition(pane_id),
        f"select-pane -t {host_pane_id}",
        f"send-keys {tmux_key}",
    ]


def unbind_key(tmux_key: str) -> List[str]:
    return ["unbind-key", "-n", tmux_key]


def parse_pane_ids(output: Optional[str]) -> Optional[Set[str]]:
    """Split list-panes output into a set of pane ids."""
    if output is None:
        return None
    return {line.strip() for line in output.splitlines() if line.strip()}
