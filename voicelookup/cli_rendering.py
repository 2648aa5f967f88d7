"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
match results, lookup plans, and catalog listings.
"""

from __future__ import annotations

from typing import Iterable, NoReturn

import typer

from .errors import LookupStageError
from .matcher import LookupPlan
from .models.datatypes import CatalogRecord, MatchResult


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, LookupStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_match_result(transcript: str, result: MatchResult | None) -> None:
    """Print the matched tier and records, or a not-found line."""

    if result is None:
        typer.echo(f"No match for: {transcript!r}")
        return
    typer.echo(f"Match tier: {result.tier}")
    echo_records(result.records)


def echo_records(records: Iterable[CatalogRecord]) -> None:
    """Print numbered `name (id)` rows in the given order."""

    for position, record in enumerate(records, start=1):
        typer.echo(f"{position}. {record.name} ({record.id})")


def echo_lookup_plan(plan: LookupPlan) -> None:
    """Print the normalized key and the variations a lookup would search."""

    typer.echo(f"Normalized key: {plan.key!r}")
    if not plan.variations:
        typer.echo("Variations: (none)")
        return
    typer.echo("Variations:")
    for variation in plan.variations:
        typer.echo(f"- {variation}")
