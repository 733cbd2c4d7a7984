"""Deterministic text cleaning rules.

Responsibilities:
- Provide composable cleanup rules for paginated RFC plain-text artifacts.
- Keep rules free of per-call state so one instance can serve concurrent callers.
"""

from __future__ import annotations

import re
from typing import Protocol


class CleanerRule(Protocol):
    """Protocol for text cleaning rules."""

    def apply(self, text: str) -> str:
        """Apply a single cleaning transformation."""


class NormalizeLineEndings:
    """Convert CRLF line endings to LF.

    A lone CR is left in place and later collapses like any other whitespace.
    """

    def apply(self, text: str) -> str:
        """Apply line-ending normalization."""

        return text.replace("\r\n", "\n")


class RemovePageHeaders:
    """Drop the header and footer lines repeated at every page boundary.

    Footers end with the document status and page number, for example
    ``Dierks & Rescorla    Standards Track    [Page 12]``. Headers carry the
    RFC number, short title, and date, for example
    ``RFC 5246    TLS    August 2008``.
    """

    STATUS_TAGS = (
        "Standards Track",
        "Informational",
        "Experimental",
        "Best Current Practice",
        "Historic",
    )

    # Neither pattern stacks unbounded quantifiers over overlapping classes,
    # so a long line is rejected in linear time. The footer is searched as a
    # line suffix; any text may precede it.
    _FIRST_PAGE_HEADER_RE = re.compile(
        r"\s(?:" + "|".join(re.escape(tag) for tag in STATUS_TAGS) + r")\s+\[Page [0-9]+\]$",
        re.ASCII,
    )
    _SECOND_PAGE_HEADER_RE = re.compile(r"RFC\s[0-9]+\s[\w\s]+\s\w+\s\d{4}$", re.ASCII)

    def is_page_header(self, line: str) -> bool:
        """Return whether a single line matches either page header shape."""

        return bool(
            self._FIRST_PAGE_HEADER_RE.search(line) or self._SECOND_PAGE_HEADER_RE.match(line)
        )

    def remove(self, text: str) -> tuple[str, int]:
        """Return text without header lines and the number of dropped lines."""

        lines = text.split("\n")
        kept = [line for line in lines if not self.is_page_header(line)]
        return "\n".join(kept), len(lines) - len(kept)

    def apply(self, text: str) -> str:
        """Apply page-header cleanup rule."""

        return self.remove(text)[0]


class ReflowParagraphs:
    """Rejoin hard-wrapped lines into paragraphs separated by one blank line."""

    _PARAGRAPH_BREAK_RE = re.compile(r"\n{2,}\s*", re.ASCII)
    _WHITESPACE_RE = re.compile(r"\s+", re.ASCII)

    def paragraphs(self, text: str) -> list[str]:
        """Split text on blank-line gaps and collapse whitespace inside each piece."""

        return [
            self._WHITESPACE_RE.sub(" ", part)
            for part in self._PARAGRAPH_BREAK_RE.split(text)
        ]

    def apply(self, text: str) -> str:
        """Collapse wrap whitespace to spaces and paragraph gaps to two newlines."""

        return "\n\n".join(self.paragraphs(text))
