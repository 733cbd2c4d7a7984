"""Text normalization components.

This package provides the deterministic cleanup rules, table-of-contents
protection, and the normalizer that turns paginated RFC text into reflowed
prose.
"""

from .cleaners import (
    CleanerRule,
    NormalizeLineEndings,
    ReflowParagraphs,
    RemovePageHeaders,
)
from .normalizer import TextNormalizer, normalize
from .structure import TableOfContentsExtractor

__all__ = [
    "CleanerRule",
    "NormalizeLineEndings",
    "RemovePageHeaders",
    "ReflowParagraphs",
    "TableOfContentsExtractor",
    "TextNormalizer",
    "normalize",
]
