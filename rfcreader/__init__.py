"""Top-level package for rfcreader.

This package fetches plain-text RFC documents and reflows their paginated,
hard-wrapped layout into continuous paragraphs. The pure text entry point is
`normalize`; `RfcReaderPipeline` adds fetching, logging, and storage.
"""

from .pipeline import RfcReaderPipeline
from .text.normalizer import TextNormalizer, normalize

__all__ = ["RfcReaderPipeline", "TextNormalizer", "normalize", "__version__"]

__version__ = "0.1.0"
