"""Text / JSON / YAML output dispatch."""

from __future__ import annotations

import json

import typer
import yaml
from rich.console import Console

from gh_update_checker.models.update import UpdateResult

console = Console()


def format_text(result: UpdateResult) -> str:
    """Plain three-line report; scripts parse this, keep it stable."""
    return "\n".join([
        f"Local version:  {result.current_version}",
        f"Remote version: {result.latest_version}",
        f"Update:         {'YES' if result.has_update else 'NO'}",
    ])


def output_result(result: UpdateResult, fmt: str) -> None:
    if fmt == "json":
        console.print_json(json.dumps(result.to_dict(), indent=2))
    elif fmt == "yaml":
        typer.echo(yaml.safe_dump(result.to_dict(), default_flow_style=False, sort_keys=False), nl=False)
    else:
        typer.echo(format_text(result))
