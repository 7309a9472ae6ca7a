"""
Provider configuration and pane state.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from .exceptions import InvalidConfigError


DEFAULT_TOGGLE_KEY = "<C-j>"
DEFAULT_SPLIT_SIZE = 30


class PaneVisibility(Enum):
    """Observable state of the auxiliary pane."""

    ABSENT = "absent"
    HIDDEN = "hidden"
    VISIBLE_UNFOCUSED = "visible_unfocused"
    VISIBLE_FOCUSED = "visible_focused"

    @property
    def is_visible(self) -> bool:
        return self in (PaneVisibility.VISIBLE_FOCUSED, PaneVisibility.VISIBLE_UNFOCUSED)


def validate_split_size(value: Any) -> int:
    """Return ``value`` as a percentage in 1..100 or raise InvalidConfigError."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigError("split_size", value, "must be an integer")
    if not 1 <= value <= 100:
        raise InvalidConfigError("split_size", value, "must be between 1 and 100")
    return value


@dataclass
class ProviderConfig:
    """Resolved provider settings.

    toggle_key: editor-notation key that jumps from the pane back to the
        editor. None disables the binding.
    split_size: percentage of the window height given to the pane.
    """

    toggle_key: Optional[str] = DEFAULT_TOGGLE_KEY
    split_size: int = DEFAULT_SPLIT_SIZE

    def __post_init__(self):
        validate_split_size(self.split_size)
        if self.toggle_key is not None and not isinstance(self.toggle_key, str):
            raise InvalidConfigError("toggle_key", self.toggle_key, "must be a string")

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ProviderConfig":
        """Build a config from an options dict, ignoring unknown keys."""
        data = data or {}
        kwargs = {}
        if "toggle_key" in data:
            kwargs["toggle_key"] = data["toggle_key"] or None
        if "split_size" in data:
            kwargs["split_size"] = data["split_size"]
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ProviderState:
    """Everything the provider believes about its pane.

    pane_id is only a belief: tmux may have killed the pane since, so it
    is always checked against a fresh pane listing before being acted on.
    hidden is meaningful only while pane_id names a live pane. bound_key is
    the tmux chord actually bound for the pane, which can differ from
    config.toggle_key once the config changes.
    """

    config: ProviderConfig = field(default_factory=ProviderConfig)
    pane_id: Optional[str] = None
    host_pane_id: Optional[str] = None
    hidden: bool = False
    bound_key: Optional[str] = None

    def reset(self) -> None:
        """Forget the pane, keeping the configuration."""
        self.pane_id = None
        self.host_pane_id = None
        self.hidden = False
        self.bound_key = None
