"""Input/output stage components for rfcreader.

This package contains the archive fetch client and artifact storage used by
the pipeline.
"""

from .archive_client import RfcArchiveClient
from .storage import ArtifactStore

__all__ = ["RfcArchiveClient", "ArtifactStore"]
