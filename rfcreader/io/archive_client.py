"""RFC archive HTTP client.

Responsibilities:
- Build archive URLs for numbered RFC plain-text documents.
- Fetch document bodies with a bounded timeout and verified TLS.
- Report non-success statuses as `ArchiveStatusError`; transport failures
  from `requests` propagate unchanged.
"""

from __future__ import annotations

import requests

from ..errors import ArchiveStatusError
from ..models.datatypes import RfcDocument

DEFAULT_ARCHIVE_URL_TEMPLATE = "https://www.rfc-editor.org/rfc/rfc{number}.txt"
DEFAULT_TIMEOUT_SECONDS = 10.0


class RfcArchiveClient:
    """Minimal requests-based client for the RFC Editor text archive."""

    def __init__(
        self,
        *,
        url_template: str = DEFAULT_ARCHIVE_URL_TEMPLATE,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize archive location and request timeout."""

        self.url_template = url_template
        self.timeout_seconds = timeout_seconds

    def document_url(self, number: int) -> str:
        """Return the archive URL for one RFC number."""

        if isinstance(number, bool) or not isinstance(number, int) or number <= 0:
            raise ValueError(f"RFC number must be a positive integer, got {number!r}.")
        return self.url_template.format(number=number)

    def fetch_text(self, number: int) -> str:
        """Fetch the raw plain-text body of an RFC.

        Raises:
            ValueError: If `number` is not a positive integer.
            ArchiveStatusError: If the archive responds with a status other than 200.
            requests.RequestException: On timeout, TLS, or connection failures.
        """

        url = self.document_url(number)
        response = requests.get(url, timeout=self.timeout_seconds)
        if response.status_code != requests.codes.ok:
            raise ArchiveStatusError(
                f"Failed to fetch RFC {number}, status code: {response.status_code}",
                status_code=response.status_code,
                url=url,
            )
        return bytes(response.content).decode("utf-8", errors="replace")

    def fetch_document(self, number: int) -> RfcDocument:
        """Fetch an RFC and wrap it with its source metadata."""

        raw_text = self.fetch_text(number)
        return RfcDocument(number=number, source_url=self.document_url(number), raw_text=raw_text)
