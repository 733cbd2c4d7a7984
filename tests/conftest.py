"""Shared pytest fixtures for the full rfcreader test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fixture_paths import sample_rfc_fixture_path as resolve_sample_rfc_fixture_path


@pytest.fixture
def sample_rfc_fixture_path() -> Path:
    """Provide the paginated sample RFC fixture path."""

    return resolve_sample_rfc_fixture_path()


@pytest.fixture
def sample_rfc_text(sample_rfc_fixture_path: Path) -> str:
    """Provide the raw text of the paginated sample RFC fixture."""

    return sample_rfc_fixture_path.read_text(encoding="utf-8")
