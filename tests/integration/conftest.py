"""Integration-test fixtures for deterministic archive behavior."""

from __future__ import annotations

import pytest

from rfcreader.errors import ArchiveStatusError
from rfcreader.io.archive_client import RfcArchiveClient
from tests.fixture_paths import sample_rfc_fixture_path as resolve_sample_rfc_fixture_path


@pytest.fixture(autouse=True)
def _mock_archive_fetch(monkeypatch: pytest.MonkeyPatch) -> None:
    """Serve the sample fixture for RFC 9999 and a 404 for everything else."""

    def _mock_fetch_text(self: RfcArchiveClient, number: int) -> str:
        """Return fixture text or raise the archive's not-found status."""

        url = self.document_url(number)
        if number != 9999:
            raise ArchiveStatusError(
                f"Failed to fetch RFC {number}, status code: 404",
                status_code=404,
                url=url,
            )
        return resolve_sample_rfc_fixture_path().read_text(encoding="utf-8")

    monkeypatch.setattr(RfcArchiveClient, "fetch_text", _mock_fetch_text)
