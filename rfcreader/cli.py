"""Command-line interface for rfcreader.

Responsibilities:
- Expose user-facing commands for fetching and normalizing RFC documents.
- Convert CLI arguments into `ReaderConfig` and run the pipeline.
- Write document text only after the whole run succeeded.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_artifacts, echo_normalization_summary, exit_with_command_error
from .config import ConfigLoader, ReaderConfig
from .errors import PipelineStageError
from .io.archive_client import RfcArchiveClient
from .parsing import normalize_optional_string
from .pipeline import RfcReaderPipeline
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="rfcreader",
    no_args_is_help=True,
    help="Fetch RFC documents and reflow their plain-text layout.",
)


def _load_base_config(config_path: Path | None) -> ReaderConfig:
    """Load YAML config when requested, otherwise environment defaults."""

    try:
        if config_path is None:
            return ConfigLoader.from_env()
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        source = f"config file `{config_path}`" if config_path is not None else "environment"
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid {source}: {exc}",
            hint="Fix config values and rerun.",
        ) from exc


def _resolve_read_config(
    config_path: Path | None,
    number: int | None,
    out: Path | None,
    timeout: float | None,
    archive_url: str | None,
    save_raw: bool | None,
) -> ReaderConfig:
    """Resolve effective read config from file/env defaults and explicit CLI overrides."""

    base = _load_base_config(config_path)
    resolved = ReaderConfig(
        rfc_number=number if number is not None else base.rfc_number,
        archive_url_template=normalize_optional_string(archive_url)
        or base.archive_url_template,
        timeout_seconds=timeout if timeout is not None else base.timeout_seconds,
        output_dir=out if out is not None else base.output_dir,
        save_raw=save_raw if save_raw is not None else base.save_raw,
    )
    try:
        resolved.validate()
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=str(exc),
            hint="Fix command options and rerun.",
        ) from exc
    return resolved


@app.command("read")
def read_command(
    number: Annotated[
        int | None,
        typer.Argument(help="RFC number to fetch. Defaults to config/env, then 5246."),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file."),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Directory for written text artifacts."),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", help="Fetch timeout in seconds."),
    ] = None,
    archive_url: Annotated[
        str | None,
        typer.Option("--archive-url", help="Archive URL template containing `{number}`."),
    ] = None,
    save_raw: Annotated[
        bool | None,
        typer.Option("--save-raw/--no-save-raw", help="Also store the unmodified text."),
    ] = None,
) -> None:
    """Fetch an RFC and print (or store) its normalized text."""

    try:
        resolved = _resolve_read_config(config, number, out, timeout, archive_url, save_raw)
        pipeline = RfcReaderPipeline(run_logger=RunLogger())
        result = pipeline.read(resolved)
    except Exception as exc:
        exit_with_command_error("read", exc)

    if not result.artifacts:
        typer.echo(result.text)
        return

    typer.echo(f"RFC {result.document.number}: {result.document.source_url}")
    echo_normalization_summary(result.report)
    echo_artifacts(result.artifacts)


@app.command("normalize")
def normalize_command(
    input_path: Annotated[Path, typer.Argument(help="Path to a plain-text RFC file.")],
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write normalized text to this file instead of stdout."),
    ] = None,
) -> None:
    """Normalize a local RFC text file."""

    try:
        pipeline = RfcReaderPipeline(run_logger=RunLogger())
        report = pipeline.normalize_file(input_path, output_path=out)
    except Exception as exc:
        exit_with_command_error("normalize", exc)

    if out is None:
        typer.echo(report.normalized_text)
        return

    echo_normalization_summary(report)
    echo_artifacts({"normalized": out})


@app.command("url")
def url_command(
    number: Annotated[int, typer.Argument(help="RFC number.")],
    config: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file."),
    ] = None,
) -> None:
    """Print the archive URL for an RFC number."""

    try:
        base = _load_base_config(config)
        client = RfcArchiveClient(url_template=base.archive_url_template)
        url = client.document_url(number)
    except Exception as exc:
        exit_with_command_error("url", exc)

    typer.echo(url)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
