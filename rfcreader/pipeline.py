"""Fetch-and-normalize pipeline orchestration.

Responsibilities:
- Run named stages (`fetch`/`load`, `normalize`, `store`) in a fixed order.
- Emit stage telemetry and progress events around every stage.
- Write artifacts only after every earlier stage succeeded.

Key public types:
- `RfcReaderPipeline`: entry point used by the CLI.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, TypeVar

from .config import ReaderConfig
from .errors import PipelineStageError
from .io.archive_client import RfcArchiveClient
from .io.storage import ArtifactStore
from .models.datatypes import NormalizationReport, ReadResult, RfcDocument
from .telemetry.logger import RunLogger
from .text.normalizer import TextNormalizer

_StageResult = TypeVar("_StageResult")


class RfcReaderPipeline:
    """Fetch RFC documents and normalize their layout."""

    _READ_SEQUENCE = ("fetch", "normalize", "store")
    _FILE_SEQUENCE = ("load", "normalize", "store")

    def __init__(
        self,
        run_logger: RunLogger | None = None,
        stage_progress_callback: Callable[[str, int, int], None] | None = None,
        normalizer: TextNormalizer | None = None,
    ) -> None:
        """Initialize optional runtime logging and progress reporting hooks."""

        self._run_logger = run_logger
        self._stage_progress_callback = stage_progress_callback
        self._normalizer = normalizer or TextNormalizer()

    def read(self, config: ReaderConfig) -> ReadResult:
        """Fetch one RFC from the archive, normalize it, and optionally store it.

        Archive status and transport errors propagate unchanged.
        """

        self._validate_config(config)
        client = RfcArchiveClient(
            url_template=config.archive_url_template,
            timeout_seconds=config.timeout_seconds,
        )
        sequence = self._READ_SEQUENCE
        if config.output_dir is None:
            sequence = sequence[:2]

        document = self._run_stage(
            "fetch",
            sequence,
            lambda: client.fetch_document(config.rfc_number),
            context_of=lambda fetched: {"chars": len(fetched.raw_text), "rfc": fetched.number},
        )
        report = self._run_stage(
            "normalize",
            sequence,
            lambda: self._normalizer.normalize_with_report(document.raw_text),
            context_of=self._report_context,
        )

        artifacts: dict[str, Path] = {}
        if config.output_dir is not None:
            output_dir = config.output_dir
            artifacts = self._run_stage(
                "store",
                sequence,
                lambda: self._store_document(output_dir, document, report, config.save_raw),
                context_of=lambda written: {"artifacts": len(written)},
            )

        return ReadResult(document=document, report=report, artifacts=artifacts)

    def normalize_file(
        self, input_path: Path, output_path: Path | None = None
    ) -> NormalizationReport:
        """Normalize a local RFC text file and optionally write the result."""

        sequence = self._FILE_SEQUENCE if output_path is not None else self._FILE_SEQUENCE[:2]
        raw_text = self._run_stage(
            "load",
            sequence,
            lambda: self._load_text(input_path),
            context_of=lambda loaded: {"chars": len(loaded)},
        )
        report = self._run_stage(
            "normalize",
            sequence,
            lambda: self._normalizer.normalize_with_report(raw_text),
            context_of=self._report_context,
        )
        if output_path is not None:
            self._run_stage(
                "store",
                sequence,
                lambda: self._save_text(output_path, report.normalized_text),
            )
        return report

    @staticmethod
    def _validate_config(config: ReaderConfig) -> None:
        """Validate config and map failures to a config stage error."""

        try:
            config.validate()
        except ValueError as exc:
            raise PipelineStageError(
                stage="config",
                detail=str(exc),
                hint="Fix config values and rerun.",
            ) from exc

    @staticmethod
    def _report_context(report: NormalizationReport) -> dict[str, object]:
        """Return log context describing one normalization report."""

        return {
            "headers_removed": report.page_headers_removed_count,
            "paragraphs": report.paragraph_count,
            "toc": "yes" if report.table_of_contents_found else "no",
        }

    @staticmethod
    def _load_text(input_path: Path) -> str:
        """Read a local text file as UTF-8 with replacement of undecodable bytes."""

        try:
            return input_path.read_bytes().decode("utf-8", errors="replace")
        except OSError as exc:
            raise PipelineStageError(
                stage="load",
                detail=f"Failed to read input file `{input_path}`: {exc}",
                hint="Verify the input path exists and is readable.",
            ) from exc

    @staticmethod
    def _save_text(output_path: Path, content: str) -> Path:
        """Write one text file, creating parent directories as needed."""

        try:
            store = ArtifactStore(output_path.parent)
            return store.save_text(Path(output_path.name), content)
        except OSError as exc:
            raise PipelineStageError(
                stage="store",
                detail=f"Failed to write output file `{output_path}`: {exc}",
                hint="Verify the output directory is writable.",
            ) from exc

    @staticmethod
    def _store_document(
        output_dir: Path,
        document: RfcDocument,
        report: NormalizationReport,
        save_raw: bool,
    ) -> dict[str, Path]:
        """Write normalized (and optionally raw) text artifacts for one document."""

        store = ArtifactStore(output_dir)
        artifacts: dict[str, Path] = {}
        try:
            if save_raw:
                artifacts["raw"] = store.save_text(
                    Path(f"rfc{document.number}.raw.txt"), document.raw_text
                )
            artifacts["normalized"] = store.save_text(
                Path(f"rfc{document.number}.txt"), report.normalized_text
            )
        except OSError as exc:
            raise PipelineStageError(
                stage="store",
                detail=f"Failed to write artifacts to `{output_dir}`: {exc}",
                hint="Verify the output directory is writable.",
            ) from exc
        return artifacts

    def _on_stage_start(self, stage_name: str, sequence: tuple[str, ...]) -> None:
        """Emit start events to stage progress callback and structured logger."""

        if self._stage_progress_callback is not None and stage_name in sequence:
            self._stage_progress_callback(
                stage_name, sequence.index(stage_name) + 1, len(sequence)
            )
        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage_name)

    def _on_stage_complete(self, stage_name: str, context: dict[str, object]) -> None:
        """Emit stage-complete event to the structured logger."""

        if self._run_logger is not None:
            self._run_logger.log_stage_complete(stage_name, **context)

    def _on_stage_failure(self, stage_name: str, exc: Exception) -> None:
        """Emit stage-failure event with sanitized exception metadata."""

        if self._run_logger is not None:
            self._run_logger.log_stage_failure(stage_name, type(exc).__name__)

    def _run_stage(
        self,
        stage_name: str,
        sequence: tuple[str, ...],
        action: Callable[[], _StageResult],
        context_of: Callable[[_StageResult], dict[str, object]] | None = None,
    ) -> _StageResult:
        """Run one named stage and emit start/complete/failure telemetry events."""

        self._on_stage_start(stage_name, sequence)
        try:
            result = action()
        except Exception as exc:
            self._on_stage_failure(stage_name, exc)
            raise
        self._on_stage_complete(stage_name, context_of(result) if context_of else {})
        return result
