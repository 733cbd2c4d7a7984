"""Unit tests for CLI output and error rendering helpers."""

from __future__ import annotations

import pytest
import requests
import typer

from rfcreader.cli_rendering import exit_with_command_error
from rfcreader.errors import ArchiveStatusError, PipelineStageError


def test_exit_with_command_error_renders_stage_error_with_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print stage diagnostics and hint before exiting with code 1."""

    error = PipelineStageError(
        stage="store",
        detail="Failed to write artifacts to `out`: Permission denied.",
        hint="Verify the output directory is writable.",
    )

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("read", error)

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "read failed at stage `store`" in captured.err
    assert "Hint: Verify the output directory is writable." in captured.err
    assert captured.out == ""


@pytest.mark.parametrize(
    ("error", "hint"),
    [
        (
            ArchiveStatusError("status code: 503", status_code=503, url="https://x/rfc1.txt"),
            "The archive may be unavailable; retry later.",
        ),
        (
            requests.exceptions.SSLError("certificate verify failed"),
            "Verify system CA certificates and the archive URL scheme.",
        ),
        (
            requests.ConnectionError("connection refused"),
            "Check network connectivity and the archive URL.",
        ),
    ],
)
def test_exit_with_command_error_adds_fetch_hints(
    capsys: pytest.CaptureFixture[str], error: Exception, hint: str
) -> None:
    """Fetch failures keep their own message and gain a targeted hint."""

    with pytest.raises(typer.Exit):
        exit_with_command_error("read", error)

    captured = capsys.readouterr()
    assert f"read failed: {error}" in captured.err
    assert f"Hint: {hint}" in captured.err


def test_exit_with_command_error_renders_non_stage_fallback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print fallback exception text without a hint for unknown errors."""

    error = RuntimeError("unexpected error")

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("normalize", error)

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "normalize failed: unexpected error" in captured.err
    assert "Hint:" not in captured.err
