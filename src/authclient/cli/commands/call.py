"""Send one authenticated call."""

import json
from typing import Dict, Optional, Tuple

import click
from rich.console import Console

from ...exceptions import InvalidConfigurationError
from ...logging import get_logger
from ...reporting import ConsoleErrorHandler
from ...request import RequestConfig, configure_from_settings
from ..error_handlers import handle_cli_errors

console = Console()
logger = get_logger("authclient.cli.call")

METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


def parse_pairs(option: str, pairs: Tuple[str, ...]) -> Dict[str, str]:
    """Turn ``("a=1", "b=2")`` into ``{"a": "1", "b": "2"}``."""
    parsed = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise InvalidConfigurationError(option, pair, "KEY=VALUE")
        parsed[key] = value
    return parsed


def parse_json_body(body: Optional[str]):
    if body is None:
        return None
    try:
        return json.loads(body)
    except ValueError as e:
        raise InvalidConfigurationError("--json", body, f"a JSON document ({e})") from e


@click.command()
@click.argument("method", type=click.Choice(METHODS, case_sensitive=False))
@click.argument("url")
@click.option(
    "--path-var", "-p",
    "path_vars",
    multiple=True,
    help="Path placeholder value as KEY=VALUE (repeatable)",
)
@click.option(
    "--query", "-q",
    "query",
    multiple=True,
    help="Query parameter as KEY=VALUE (repeatable)",
)
@click.option("--json", "json_body", help="JSON request body")
@click.option("--ignore-auth", is_flag=True, help="Do not send the bearer token")
@click.option("--silent", is_flag=True, help="Do not print the failure message")
@click.option("--throw", is_flag=True, help="Exit with an error instead of printing the Failure")
@click.pass_context
@handle_cli_errors
def call(
    ctx: click.Context,
    method: str,
    url: str,
    path_vars: Tuple[str, ...],
    query: Tuple[str, ...],
    json_body: Optional[str],
    ignore_auth: bool,
    silent: bool,
    throw: bool,
) -> None:
    """Send METHOD URL through the authenticated client.

    URL is relative to the configured base URL and may contain {name}
    placeholders filled from --path-var.

    \b
    Examples:
        authclient call GET /users/{id} -p id=1
        authclient call GET /search -q term=books --ignore-auth
        authclient call POST /posts --json '{"title": "hi"}' --throw
    """
    config = RequestConfig(
        url=url,
        method=method,
        path_variables=parse_pairs("--path-var", path_vars) or None,
        params=parse_pairs("--query", query) or None,
        json=parse_json_body(json_body),
        ignore_auth=ignore_auth,
        silent_error=silent,
        throw_error=throw,
    )

    client = configure_from_settings(
        error_handler=ConsoleErrorHandler(),
        settings=ctx.obj["settings"],
    )
    logger.debug(f"Calling {config.method} {url}", base_url=client.base_url)

    with client:
        result = client.request(config)

    if result.success:
        console.print_json(data=result.data)
    else:
        console.print_json(
            data={"errorCode": result.error_code, "errorMessage": result.error_message}
        )
        ctx.exit(1)
