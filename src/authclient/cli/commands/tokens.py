"""Inspect and manage stored tokens."""

from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from ...core.security import mask_token
from ...reporting import ConsoleErrorHandler, show_info
from ...tokens import FileTokenManager
from ..error_handlers import handle_cli_errors

console = Console()


def _token_manager(ctx: click.Context) -> FileTokenManager:
    return FileTokenManager(ctx.obj["settings"].token_file)


@click.group()
def tokens() -> None:
    """Manage the stored access and refresh tokens.

    \b
    Examples:
        authclient tokens show
        authclient tokens set --access A1 --refresh R1
        authclient tokens clear
    """


@tokens.command()
@click.option("--reveal", is_flag=True, help="Print the tokens unmasked")
@click.pass_context
@handle_cli_errors
def show(ctx: click.Context, reveal: bool) -> None:
    """Show the stored tokens (masked by default)."""
    manager = _token_manager(ctx)

    table = Table(title=f"Tokens ({manager.path})")
    table.add_column("Token", style="cyan")
    table.add_column("Value", style="green")

    for label, value in (
        ("access", manager.get_token()),
        ("refresh", manager.get_refresh_token()),
    ):
        shown = (value or "<none>") if reveal else mask_token(value)
        table.add_row(label, shown)

    console.print(table)


@tokens.command(name="set")
@click.option("--access", help="Access token")
@click.option("--refresh", help="Refresh token")
@click.pass_context
@handle_cli_errors
def set_tokens(ctx: click.Context, access: Optional[str], refresh: Optional[str]) -> None:
    """Store an access and/or refresh token."""
    if not access and not refresh:
        raise click.UsageError("Provide --access, --refresh or both")

    manager = _token_manager(ctx)
    reporter = ConsoleErrorHandler(console=console)
    if access:
        manager.set_token(access)
        show_info(reporter, f"Access token stored: {mask_token(access)}")
    if refresh:
        manager.set_refresh_token(refresh)
        show_info(reporter, f"Refresh token stored: {mask_token(refresh)}")


@tokens.command()
@click.pass_context
@handle_cli_errors
def clear(ctx: click.Context) -> None:
    """Remove both stored tokens."""
    manager = _token_manager(ctx)
    manager.remove_token()
    manager.remove_refresh_token()
    show_info(ConsoleErrorHandler(console=console), f"Tokens cleared from {manager.path}")
