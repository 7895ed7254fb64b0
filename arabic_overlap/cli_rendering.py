"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
comparison reports, and batch summaries.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn

import typer

from .errors import ComparisonError
from .models.datatypes import ComparisonResult, PairOutcome


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, ComparisonError):
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


def echo_comparison_report(first: Path, second: Path, result: ComparisonResult) -> None:
    """Print the human-readable comparison report."""

    typer.echo("")
    typer.echo("Plagiarism Detection Results")
    typer.echo("===========================")
    typer.echo(f"File 1: {first}")
    typer.echo(f"File 2: {second}")
    typer.echo(f"Similarity: {result.percentage:.2f}%")
    typer.echo("")
    typer.echo(f"Interpretation: {result.band.message}")


def echo_comparison_json(first: Path, second: Path, result: ComparisonResult) -> None:
    """Print the comparison result as one JSON object."""

    payload = {"file_1": str(first), "file_2": str(second), **result.as_dict()}
    typer.echo(json.dumps(payload, ensure_ascii=False, sort_keys=True))


def echo_batch_outcomes(outcomes: list[PairOutcome]) -> None:
    """Print one line per batch pair, then a success/failure summary."""

    for outcome in outcomes:
        label = f"{outcome.pair.first} <> {outcome.pair.second}"
        if outcome.result is not None:
            typer.echo(
                f"{label}: {outcome.result.percentage:.2f}% ({outcome.result.band.label})"
            )
        elif outcome.error is not None:
            typer.secho(
                f"{label}: failed at stage `{outcome.error.stage}`: {outcome.error.detail}",
                fg=typer.colors.RED,
                err=True,
            )
    failed = sum(1 for outcome in outcomes if not outcome.ok)
    typer.echo(f"Pairs compared: {len(outcomes) - failed}/{len(outcomes)}")
