"""
Logging setup for claude-tmux.

Library modules log through ``logging.getLogger(__name__)`` and never
configure handlers themselves; the CLI (or a host that wants the output)
calls setup_logging() once.
"""

import logging
from pathlib import Path
from typing import Optional

LOGGER_NAME = "claude_tmux"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    console: bool = True,
    rich_console: bool = False,
) -> logging.Logger:
    """Configure the claude_tmux logger.

    Existing handlers are removed first, so calling this again replaces the
    previous setup.

    Args:
        level: Log level for the package logger
        log_file: Also write to this file (parent dirs are created)
        console: Log to stderr
        rich_console: Use rich's handler for console output

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(level)

    if console:
        if rich_console:
            from rich.logging import RichHandler
            handler = RichHandler(show_path=False, rich_tracebacks=True)
            handler.setFormatter(logging.Formatter("%(message)s"))
        else:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger
