"""Domain exceptions for pipeline and CLI diagnostics."""

from __future__ import annotations


class PipelineStageError(RuntimeError):
    """Raised when a specific pipeline stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped pipeline error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class ArchiveStatusError(RuntimeError):
    """Raised when the RFC archive answers with a non-success HTTP status."""

    def __init__(self, message: str, *, status_code: int, url: str) -> None:
        """Initialize status error metadata for CLI diagnostics."""

        super().__init__(message)
        self.status_code = status_code
        self.url = url
