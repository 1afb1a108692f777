"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and slug resolution summaries.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import SlugExhaustedError, SlugStageError
from .models.datatypes import SlugResult


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, SlugStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    elif isinstance(exc, SlugExhaustedError):
        typer.secho(f"{command_name} failed at stage `unique`: {exc}", fg=typer.colors.RED, err=True)
        typer.secho(
            "Hint: Raise `--max-attempts` or free some of the taken values.",
            fg=typer.colors.YELLOW,
            err=True,
        )
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_slug_result(result: SlugResult, verbose: bool = False) -> None:
    """Print the final slug, followed by resolution details when verbose."""

    typer.echo(result.value)
    if not verbose:
        return
    origin = "transliterated" if result.transliterated else "manual"
    typer.echo(f"Candidate: {result.candidate or '(empty)'} ({origin})", err=True)
    typer.echo(f"Uniqueness checks: {result.attempts}", err=True)
    if result.disambiguated:
        typer.echo(f"Disambiguated: {result.candidate} -> {result.value}", err=True)
