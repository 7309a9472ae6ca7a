"""
Translation of editor (vim-style) key notation into tmux key names.

Only single chords are understood. Anything not in the table below is
passed through untouched, so the result may not be a valid tmux key; the
binding code treats it as best-effort.
"""

import re
from typing import List, Optional, Tuple

# Applied in order. Each pattern consumes its angle brackets, so a second
# pass over the output never matches again.
_SUBSTITUTIONS: List[Tuple[re.Pattern, str]] = [
    (re.compile(r"<C-([A-Za-z0-9])>"), r"C-\1"),
    (re.compile(r"<[MA]-([A-Za-z0-9])>"), r"M-\1"),
    (re.compile(r"\r|<CR>|<Enter>"), "Enter"),
    (re.compile(r"<Tab>"), "Tab"),
    (re.compile(r"<Space>"), "Space"),
    (re.compile(r"<Esc>"), "Escape"),
    (re.compile(r"<BS>"), "BSpace"),
    (re.compile(r"<F(\d+)>"), r"F\1"),
]


def vim_key_to_tmux(vim_key: Optional[str]) -> Optional[str]:
    """Convert a key like ``<C-j>`` into tmux notation (``C-j``).

    Args:
        vim_key: Key in editor notation, or None

    Returns:
        The tmux key name, the input unchanged if no rule matched,
        or None if no key was given
    """
    if vim_key is None:
        return None

    key = vim_key
    for pattern, replacement in _SUBSTITUTIONS:
        key = pattern.sub(replacement, key)
    return key
