"""Table-of-contents detection and protection helpers.

Responsibilities:
- Locate the table of contents between its opening and closing marker phrases.
- Tighten its blank-line gaps while keeping one entry per line.
- Split document text into protected and unprotected segments so later
  whitespace passes leave the table layout intact.
"""

from __future__ import annotations

import re

from ..models.datatypes import TextSegment


class TableOfContentsExtractor:
    """Extract and protect the table-of-contents span of an RFC."""

    _OPENING_MARKER_RE = re.compile(r"Table\sof\sContents", re.ASCII)
    # The first "1.  Introduction" after the opening marker closes the table;
    # a table that lists "1.  Introduction" as an entry is cut at that entry.
    _CLOSING_MARKER_RE = re.compile(r"1\.\s{2}Introduction", re.ASCII)
    _BLANK_LINE_RUN_RE = re.compile(r"\n{2,}")

    def find(self, text: str) -> tuple[int, int] | None:
        """Return the `(start, end)` span of the first table, or `None`.

        The span starts at the first opening marker and ends after the first
        closing marker that follows it. Each marker is searched once, so the
        scan stays linear however often the opening phrase repeats.
        """

        opening = self._OPENING_MARKER_RE.search(text)
        if opening is None:
            return None
        closing = self._CLOSING_MARKER_RE.search(text, opening.end())
        if closing is None:
            return None
        return opening.start(), closing.end()

    def clean(self, table: str) -> str:
        """Collapse blank-line runs inside a table to single newlines."""

        return self._BLANK_LINE_RUN_RE.sub("\n", table)

    def split(self, text: str) -> list[TextSegment]:
        """Split text around the table of contents.

        Returns a single unprotected segment when no table is present, otherwise
        `[before, table, after]` with the cleaned table marked as protected.
        """

        span = self.find(text)
        if span is None:
            return [TextSegment(text)]
        start, end = span
        return [
            TextSegment(text[:start]),
            TextSegment(self.clean(text[start:end]), protected=True),
            TextSegment(text[end:]),
        ]
