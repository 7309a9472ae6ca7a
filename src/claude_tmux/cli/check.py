"""
Diagnostic commands: check, key.
"""

from typing import Annotated

import typer
from rich import print as rprint

from ._shared import app
from ..config import get_provider_options
from ..dependency_check import check_tmux
from ..exceptions import InvalidConfigError
from ..keys import vim_key_to_tmux
from ..probe import is_in_tmux


@app.command("check")
def check():
    """Check that claude-tmux can run here.

    Verifies that tmux is installed, that this shell is inside a tmux
    session, and that the config file holds valid provider settings.
    """
    from ..provider import setup

    ok = True

    available, path, version = check_tmux()
    if available:
        rprint(f"[green]✓[/green] tmux: {version or 'unknown version'} [dim]({path})[/dim]")
    else:
        rprint("[red]✗[/red] tmux: not found")
        ok = False

    if is_in_tmux():
        rprint("[green]✓[/green] inside a tmux session")
    else:
        rprint("[red]✗[/red] not inside a tmux session [dim]($TMUX is not set)[/dim]")
        ok = False

    try:
        config = setup(get_provider_options()).get_config()
    except InvalidConfigError as e:
        rprint(f"[red]✗[/red] config: {e}")
        raise typer.Exit(1)

    toggle_key = config.toggle_key
    if toggle_key:
        rprint(f"  toggle_key: {toggle_key} [dim](tmux: {vim_key_to_tmux(toggle_key)})[/dim]")
    else:
        rprint("  toggle_key: [dim]disabled[/dim]")
    rprint(f"  split_size: {config.split_size}%")

    if not ok:
        raise typer.Exit(1)


@app.command("key")
def key(
    vim_key: Annotated[str, typer.Argument(help="Key in editor notation, e.g. '<C-j>'")],
):
    """Show how an editor key is written for tmux."""
    print(vim_key_to_tmux(vim_key))
