"""Unit tests for fetch-and-normalize pipeline orchestration."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
import requests

from rfcreader.config import ReaderConfig
from rfcreader.errors import ArchiveStatusError, PipelineStageError
from rfcreader.io.archive_client import RfcArchiveClient
from rfcreader.pipeline import RfcReaderPipeline
from rfcreader.telemetry.logger import RunLogger


def _patch_fetch(monkeypatch: pytest.MonkeyPatch, text: str) -> list[int]:
    """Replace archive fetches with a fixed body and record requested numbers."""

    requested: list[int] = []

    def _mock_fetch_text(self: RfcArchiveClient, number: int) -> str:
        """Return the fixed body for any RFC number."""

        _ = self
        requested.append(number)
        return text

    monkeypatch.setattr(RfcArchiveClient, "fetch_text", _mock_fetch_text)
    return requested


def test_read_fetches_and_normalizes_without_writing(
    monkeypatch: pytest.MonkeyPatch, sample_rfc_text: str
) -> None:
    """Without an output directory the pipeline only fetches and normalizes."""

    requested = _patch_fetch(monkeypatch, sample_rfc_text)
    progress: list[tuple[str, int, int]] = []

    def _record_progress(stage: str, index: int, total: int) -> None:
        """Record one progress callback invocation."""

        progress.append((stage, index, total))

    pipeline = RfcReaderPipeline(stage_progress_callback=_record_progress)

    result = pipeline.read(ReaderConfig(rfc_number=9999))

    assert requested == [9999]
    assert result.document.source_url == "https://www.rfc-editor.org/rfc/rfc9999.txt"
    assert result.report.page_headers_removed_count == 3
    assert "[Page" not in result.text
    assert result.artifacts == {}
    assert progress == [("fetch", 1, 2), ("normalize", 2, 2)]


def test_read_stores_normalized_and_raw_artifacts(
    monkeypatch: pytest.MonkeyPatch, sample_rfc_text: str, tmp_path: Path
) -> None:
    """Store stage writes `rfc<N>.txt` and, on request, `rfc<N>.raw.txt`."""

    _patch_fetch(monkeypatch, sample_rfc_text)
    sink = io.StringIO()
    pipeline = RfcReaderPipeline(run_logger=RunLogger(sink=sink))

    result = pipeline.read(ReaderConfig(rfc_number=9999, output_dir=tmp_path, save_raw=True))

    assert result.artifacts == {
        "normalized": tmp_path / "rfc9999.txt",
        "raw": tmp_path / "rfc9999.raw.txt",
    }
    assert (tmp_path / "rfc9999.txt").read_text(encoding="utf-8") == result.text
    assert (tmp_path / "rfc9999.raw.txt").read_text(encoding="utf-8") == sample_rfc_text
    log_lines = sink.getvalue().splitlines()
    assert "[phase] level=INFO stage=store event=complete artifacts=2" in log_lines
    assert (
        "[phase] level=INFO stage=normalize event=complete "
        "headers_removed=3 paragraphs=11 toc=yes"
    ) in log_lines


def test_read_propagates_status_errors_and_writes_nothing(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """Archive status failures surface unchanged and skip later stages."""

    def _failing_fetch(self: RfcArchiveClient, number: int) -> str:
        """Simulate a missing document."""

        raise ArchiveStatusError(
            "Failed to fetch RFC 1, status code: 404",
            status_code=404,
            url=self.document_url(number),
        )

    monkeypatch.setattr(RfcArchiveClient, "fetch_text", _failing_fetch)
    sink = io.StringIO()
    pipeline = RfcReaderPipeline(run_logger=RunLogger(sink=sink))

    with pytest.raises(ArchiveStatusError):
        pipeline.read(ReaderConfig(rfc_number=1, output_dir=tmp_path / "out"))

    assert not (tmp_path / "out").exists()
    assert sink.getvalue().splitlines() == [
        "[phase] level=INFO stage=fetch event=start",
        "[phase] level=ERROR stage=fetch event=failure error_type=ArchiveStatusError",
    ]


def test_read_propagates_transport_errors_unchanged(monkeypatch: pytest.MonkeyPatch) -> None:
    """Timeouts from the transport are not wrapped."""

    def _timeout_get(_url: str, **_kwargs: object) -> object:
        """Simulate a read timeout."""

        raise requests.Timeout("read timed out")

    monkeypatch.setattr("rfcreader.io.archive_client.requests.get", _timeout_get)

    with pytest.raises(requests.Timeout, match="read timed out"):
        RfcReaderPipeline().read(ReaderConfig())


def test_read_rejects_invalid_config_as_stage_error() -> None:
    """Invalid configs fail before any fetch is attempted."""

    with pytest.raises(PipelineStageError) as exc_info:
        RfcReaderPipeline().read(ReaderConfig(timeout_seconds=0))

    assert exc_info.value.stage == "config"


def test_normalize_file_reads_and_writes_local_text(
    sample_rfc_fixture_path: Path, tmp_path: Path
) -> None:
    """Local normalization loads, normalizes, and writes the output file."""

    output_path = tmp_path / "nested" / "rfc9999.txt"

    report = RfcReaderPipeline().normalize_file(sample_rfc_fixture_path, output_path)

    assert report.table_of_contents_found is True
    assert output_path.read_text(encoding="utf-8") == report.normalized_text


def test_normalize_file_maps_missing_input_to_load_stage_error(tmp_path: Path) -> None:
    """Unreadable input is reported as a `load` stage failure."""

    with pytest.raises(PipelineStageError) as exc_info:
        RfcReaderPipeline().normalize_file(tmp_path / "missing.txt")

    assert exc_info.value.stage == "load"
    assert "missing.txt" in exc_info.value.detail
