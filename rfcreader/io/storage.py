"""Artifact storage abstraction.

Responsibilities:
- Provide deterministic filesystem storage for raw and normalized text artifacts.
"""

from __future__ import annotations

from pathlib import Path


class ArtifactStore:
    """Filesystem-backed text artifact store."""

    def __init__(self, root: Path) -> None:
        """Initialize the store with a root output directory."""

        self.root = root

    def save_text(self, relative_path: Path, content: str) -> Path:
        """Save text content and return final path."""

        path = self.root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path
