"""authclient CLI main entry point."""

from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..core.config import ClientSettings
from ..logging import configure_logging
from .commands.call import call
from .commands.tokens import tokens
from .error_handlers import handle_cli_errors


@click.group()
@click.version_option(version=__version__, prog_name="authclient")
@click.option("--base-url", envvar="AUTHCLIENT_BASE_URL", help="Base URL of the API")
@click.option("--timeout", type=float, help="Per-call timeout in seconds")
@click.option(
    "--token-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Token storage file (default: ~/.authclient/tokens.json)",
)
@click.option(
    "--verbose", "-v",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG)",
)
@click.pass_context
@handle_cli_errors
def cli(
    ctx: click.Context,
    base_url: Optional[str],
    timeout: Optional[float],
    token_file: Optional[Path],
    verbose: int,
) -> None:
    """authclient: authenticated API requests from the command line.

    \b
    Examples:
        authclient tokens set --access A1 --refresh R1
        authclient call GET /users/{id} -p id=1
        authclient call POST /posts --json '{"title": "hi"}'
        authclient tokens clear
    """
    overrides = {}
    if base_url:
        overrides["base_url"] = base_url
    if timeout is not None:
        overrides["timeout"] = timeout
    if token_file:
        overrides["token_file"] = token_file
    if verbose:
        overrides["log_level"] = "DEBUG" if verbose > 1 else "INFO"

    settings = ClientSettings(**overrides)
    configure_logging(settings.to_logging_config())

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


cli.add_command(call)
cli.add_command(tokens)


def main():
    """Console script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
