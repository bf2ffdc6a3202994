"""Shared CLI options."""

from __future__ import annotations

import typer

OutputOption = typer.Option("text", "--output", "-o", help="Output format: text, json, yaml")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr")
StrictOption = typer.Option(False, "--strict", help="Require the whole version string to be M.N[.P]")
TimeoutOption = typer.Option(None, "--timeout", help="HTTP timeout in seconds")
