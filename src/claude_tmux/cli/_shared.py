"""
Shared CLI state: Typer apps, console, options.
"""

import logging
from typing import Annotated

import typer
from rich.console import Console

from ..logging_config import setup_logging

console = Console()

# Main app
app = typer.Typer(
    name="claude-tmux",
    help="Run Claude Code in a tmux split beside your editor",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Config subcommand group
config_app = typer.Typer(
    name="config",
    help="Manage the claude-tmux config file.",
    no_args_is_help=False,
    invoke_without_command=True,
)
app.add_typer(config_app, name="config")


@app.callback()
def main_callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log tmux commands and failures")
    ] = False,
):
    """Run Claude Code in a tmux split beside your editor."""
    setup_logging(
        level=logging.DEBUG if verbose else logging.WARNING,
        console=True,
        rich_console=True,
    )
