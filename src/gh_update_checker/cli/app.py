"""gh-update-checker <repo-url-or-api-url> <local-version>."""

from __future__ import annotations

import logging
from functools import partial
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from gh_update_checker.cli.options import OutputOption, StrictOption, TimeoutOption, VerboseOption
from gh_update_checker.core import http_client
from gh_update_checker.core.update_checker import check_github_update
from gh_update_checker.output.formatters import output_result
from gh_update_checker.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)

EXIT_NO_UPDATE = 0
EXIT_USAGE = 1
EXIT_UPDATE_AVAILABLE = 2
EXIT_ERROR = 3

USAGE = (
    "Usage: gh-update-checker <repo-url-or-api-url> <local-version>\n"
    "Example:\n"
    "  gh-update-checker https://api.github.com/repos/nlohmann/json/releases/latest 3.11.2"
)

app = typer.Typer(
    name="gh-update-checker",
    help="Check whether a GitHub repository has a newer release than a local version.",
    add_completion=False,
)
err_console = Console(stderr=True)


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def check(
    repo: Optional[str] = typer.Argument(
        None, help="Repository URL or release API URL", show_default=False
    ),
    local_version: Optional[str] = typer.Argument(
        None, help="Local version, e.g. 3.11.2 or v1.0", show_default=False
    ),
    output: str = OutputOption,
    verbose: bool = VerboseOption,
    strict: bool = StrictOption,
    timeout: Optional[float] = TimeoutOption,
) -> None:
    """Exit 0 when up to date, 2 when an update exists, 3 on errors."""
    if repo is None or local_version is None:
        typer.echo(USAGE, err=True)
        raise typer.Exit(code=EXIT_USAGE)

    setup_logging(verbose)
    fetch = partial(http_client.fetch, timeout=timeout)

    try:
        with err_console.status("[bold cyan]Checking for updates…") as status:
            result = check_github_update(
                repo,
                local_version,
                fetch=fetch,
                on_stage=lambda stage: status.update(f"[bold cyan]{escape(stage)}…"),
                strict=strict or None,
            )
    except Exception as exc:
        logger.debug("Update check failed", exc_info=True)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=EXIT_ERROR)

    output_result(result, output)
    raise typer.Exit(code=EXIT_UPDATE_AVAILABLE if result.has_update else EXIT_NO_UPDATE)


def main() -> None:
    app()
