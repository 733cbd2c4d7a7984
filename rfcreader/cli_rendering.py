"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
normalization summaries, and written artifact listings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, NoReturn

import requests
import typer

from .errors import ArchiveStatusError, PipelineStageError
from .models.datatypes import NormalizationReport


def _transport_hint(exc: Exception) -> str | None:
    """Return an actionable hint for archive fetch failures."""

    if isinstance(exc, ArchiveStatusError):
        if exc.status_code == 404:
            return "Check that the RFC number exists in the archive."
        return "The archive may be unavailable; retry later."
    if isinstance(exc, requests.Timeout):
        return "Increase `--timeout` or check network connectivity."
    if isinstance(exc, requests.exceptions.SSLError):
        return "Verify system CA certificates and the archive URL scheme."
    if isinstance(exc, requests.ConnectionError):
        return "Check network connectivity and the archive URL."
    return None


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, PipelineStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        hint = exc.hint
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
        hint = _transport_hint(exc)
    if hint:
        typer.secho(f"Hint: {hint}", fg=typer.colors.YELLOW, err=True)
    raise typer.Exit(code=1) from exc


def echo_normalization_summary(report: NormalizationReport) -> None:
    """Print normalization diagnostics."""

    typer.echo(f"Page headers removed: {report.page_headers_removed_count}")
    typer.echo(
        f"Table of contents: {'preserved' if report.table_of_contents_found else 'not found'}"
    )
    typer.echo(f"Paragraphs: {report.paragraph_count}")


def echo_artifacts(artifacts: Mapping[str, Path]) -> None:
    """Print written artifact paths in deterministic name order."""

    for name in sorted(artifacts):
        typer.echo(f"{name.capitalize()} text: {artifacts[name]}")
