"""RFC layout normalization stage.

Responsibilities:
- Turn a paginated, hard-wrapped RFC text body into reflowed paragraphs.
- Keep the table of contents one entry per line.
- Stay a pure function of its input: no I/O, no shared mutable state.

Stages run in order:
1. Drop page header/footer lines.
2. Extract the table of contents and protect it from later passes.
3. Reflow unprotected text: blank-line gaps become paragraph breaks, all
   other whitespace becomes a single space.
4. Reassemble segments in their original order.
"""

from __future__ import annotations

from ..models.datatypes import NormalizationReport
from .cleaners import NormalizeLineEndings, ReflowParagraphs, RemovePageHeaders
from .structure import TableOfContentsExtractor


class TextNormalizer:
    """Normalize raw RFC text into its reflowed representation."""

    def __init__(
        self,
        header_rule: RemovePageHeaders | None = None,
        table_extractor: TableOfContentsExtractor | None = None,
        reflow_rule: ReflowParagraphs | None = None,
    ) -> None:
        """Initialize with custom stage components or the default set."""

        self._line_endings = NormalizeLineEndings()
        self._header_rule = header_rule or RemovePageHeaders()
        self._table_extractor = table_extractor or TableOfContentsExtractor()
        self._reflow_rule = reflow_rule or ReflowParagraphs()

    def normalize_with_report(self, text: str) -> NormalizationReport:
        """Normalize text and return it with stage diagnostics."""

        current = self._line_endings.apply(text)
        current, removed_count = self._header_rule.remove(current)

        segments = self._table_extractor.split(current)
        table_found = any(segment.protected for segment in segments)

        parts: list[str] = []
        paragraph_count = 0
        for segment in segments:
            if segment.protected:
                parts.append(segment.text)
                continue
            paragraphs = self._reflow_rule.paragraphs(segment.text)
            paragraph_count += sum(1 for paragraph in paragraphs if paragraph.strip())
            parts.append("\n\n".join(paragraphs))

        return NormalizationReport(
            normalized_text="".join(parts),
            page_headers_removed_count=removed_count,
            table_of_contents_found=table_found,
            paragraph_count=paragraph_count,
        )

    def normalize(self, text: str) -> str:
        """Normalize text for display as continuous prose."""

        return self.normalize_with_report(text).normalized_text


_DEFAULT_NORMALIZER = TextNormalizer()


def normalize(raw_text: str) -> str:
    """Normalize raw RFC text with the shared default normalizer."""

    return _DEFAULT_NORMALIZER.normalize(raw_text)
