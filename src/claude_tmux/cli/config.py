"""
Config commands: init, show, path.
"""

from typing import Annotated

import typer
from rich import print as rprint

from ._shared import config_app


CONFIG_TEMPLATE = """\
# claude-tmux configuration
# Location: ~/.claude-tmux/config.yaml

# provider:
#   # Key that jumps from the Claude pane back to the editor pane.
#   # Editor notation; set to null to disable the binding.
#   toggle_key: "<C-j>"
#
#   # Height of the Claude pane, as a percentage of the window (1-100)
#   split_size: 30
"""


@config_app.callback(invoke_without_command=True)
def config_default(ctx: typer.Context):
    """Show current configuration (default when no subcommand given)."""
    if ctx.invoked_subcommand is None:
        _config_show()


@config_app.command("init")
def config_init(
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Overwrite existing config file")
    ] = False,
):
    """Create a config file with documented defaults.

    Creates ~/.claude-tmux/config.yaml with all options commented out.
    Use --force to overwrite an existing config file.
    """
    from .. import config

    config.CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)

    if config.CONFIG_PATH.exists() and not force:
        rprint(f"[yellow]Config file already exists:[/yellow] {config.CONFIG_PATH}")
        rprint("[dim]Use --force to overwrite[/dim]")
        raise typer.Exit(1)

    config.CONFIG_PATH.write_text(CONFIG_TEMPLATE)
    rprint(f"[green]✓[/green] Created config file: [bold]{config.CONFIG_PATH}[/bold]")


@config_app.command("show")
def config_show():
    """Show current configuration."""
    _config_show()


@config_app.command("path")
def config_path():
    """Print the config file location."""
    from .. import config

    print(config.CONFIG_PATH)


def _config_show():
    """Internal function to display current config."""
    from .. import config

    if not config.CONFIG_PATH.exists():
        rprint(f"[dim]No config file found at {config.CONFIG_PATH}[/dim]")
        rprint("[dim]Run 'claude-tmux config init' to create one[/dim]")
        return

    options = config.get_provider_options()
    if not options:
        rprint(f"[dim]No provider settings in {config.CONFIG_PATH}[/dim]")
        return

    rprint(f"[bold]Configuration[/bold] ({config.CONFIG_PATH}):\n")
    for key in ("toggle_key", "split_size"):
        if key in options:
            rprint(f"  {key}: {options[key]!r}")
