"""Core datatypes shared across rfcreader modules.

Responsibilities:
- Represent immutable records exchanged between pipeline stages.
- Provide explicit typing for normalization diagnostics and fetched documents.

Key types:
- `TextSegment`, `NormalizationReport`, `RfcDocument`, and `ReadResult`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping


@dataclass(frozen=True, slots=True)
class TextSegment:
    """A contiguous piece of document text.

    Attributes:
        text: Segment text content.
        protected: Whether whitespace reflow must leave this segment untouched.
    """

    text: str
    protected: bool = False


@dataclass(frozen=True, slots=True)
class NormalizationReport:
    """Structured output of RFC text normalization.

    Attributes:
        normalized_text: Reflowed document text.
        page_headers_removed_count: Number of page header/footer lines dropped.
        table_of_contents_found: Whether a table of contents was detected and protected.
        paragraph_count: Number of non-empty paragraphs in reflowed prose.
    """

    normalized_text: str
    page_headers_removed_count: int
    table_of_contents_found: bool
    paragraph_count: int


@dataclass(frozen=True, slots=True)
class RfcDocument:
    """A raw RFC document fetched from the archive.

    Attributes:
        number: RFC number.
        source_url: URL the text was fetched from.
        raw_text: Unmodified plain-text body.
    """

    number: int
    source_url: str
    raw_text: str


@dataclass(frozen=True, slots=True)
class ReadResult:
    """Outcome of one fetch-and-normalize run.

    Attributes:
        document: Fetched source document.
        report: Normalization result and diagnostics.
        artifacts: Written artifact paths keyed by artifact name.
    """

    document: RfcDocument
    report: NormalizationReport
    artifacts: Mapping[str, Path] = field(default_factory=dict)

    @property
    def text(self) -> str:
        """Return normalized document text."""

        return self.report.normalized_text
