"""
Configuration file support.

Settings live in ~/.claude-tmux/config.yaml (override the location with
CLAUDE_TMUX_CONFIG). The file is optional; a missing or malformed file
behaves like an empty one.

    provider:
      toggle_key: "<C-j>"
      split_size: 30
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(
    os.environ.get("CLAUDE_TMUX_CONFIG", Path.home() / ".claude-tmux" / "config.yaml")
)


def load_config() -> Dict[str, Any]:
    """Load the config file.

    Returns:
        The parsed mapping, or {} if the file is missing, unreadable,
        invalid YAML, or not a mapping
    """
    if not CONFIG_PATH.exists():
        return {}
    try:
        with open(CONFIG_PATH) as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, OSError) as e:
        logger.warning("Ignoring unreadable config %s: %s", CONFIG_PATH, e)
        return {}
    if not isinstance(data, dict):
        return {}
    return data


def save_config(config: Mapping[str, Any]) -> None:
    """Write ``config`` to the config file, creating its directory."""
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    with open(CONFIG_PATH, "w") as f:
        yaml.safe_dump(dict(config), f, default_flow_style=False, sort_keys=False)


def deep_merge(base: Optional[Mapping[str, Any]],
               override: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Merge two option dicts, values from ``override`` winning.

    Nested dicts are merged key by key. Neither input is modified.
    """
    result = copy.deepcopy(dict(base or {}))
    for key, value in (override or {}).items():
        if isinstance(value, Mapping) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def get_provider_options() -> Dict[str, Any]:
    """The ``provider`` section of the config file, or {}."""
    section = load_config().get("provider")
    return section if isinstance(section, dict) else {}
