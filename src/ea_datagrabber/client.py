"""HTTP client for listing and downloading Electricity Authority datasets."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional, Tuple
import httpx

from .config import ListingConfig
from .listing import parse_page
from .query import filter_by_date, interpret
from .schemas import BlobRecord, DateRangeQuery, DownloadResult, DownloadSummary

logger = logging.getLogger("ea_datagrabber.client")

TEXT_EXTENSIONS = frozenset({"txt", "csv"})
BINARY_EXTENSIONS = frozenset({"pdf", "zip", "gdx"})


class DataGrabberClient:
    """Discovers blobs in the public container and downloads them."""

    def __init__(
        self,
        settings: Optional[ListingConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            settings: Endpoint and timeout settings (default: ListingConfig())
            transport: Optional httpx transport, mainly for tests
        """
        self.settings = settings or ListingConfig()
        self._client = httpx.Client(
            headers={"User-Agent": self.settings.user_agent},
            timeout=self.settings.request_timeout,
            follow_redirects=True,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "DataGrabberClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def fetch_page(self, prefix: str, marker: str = "") -> str:
        """Fetch one page of the container listing.

        Args:
            prefix: Blob path prefix, e.g. "Datasets/Wholesale"
            marker: Continuation marker from the previous page, if any

        Returns:
            The listing XML as text

        Raises:
            httpx.HTTPError: On transport failure or a non-2xx response
        """
        params = {"restype": "container", "comp": "list", "prefix": prefix}
        if marker:
            params["marker"] = marker

        logger.info("Requesting listing page (prefix=%r, marker=%r)", prefix, marker)
        response = self._client.get(self.settings.listing_url, params=params)
        response.raise_for_status()
        return response.text

    def discover(self, prefix: str) -> List[BlobRecord]:
        """Collect every blob under ``prefix``, following continuation markers.

        A failed request ends discovery early and the records gathered so far
        are returned.
        """
        records: List[BlobRecord] = []
        marker = ""
        pages = 0

        while True:
            try:
                body = self.fetch_page(prefix, marker)
            except httpx.HTTPError as e:
                logger.warning(
                    "Listing request failed after %d page(s): %s", pages, e
                )
                return records

            page_records, marker = parse_page(body)
            records.extend(page_records)
            pages += 1
            logger.debug("Page %d: %d blob(s)", pages, len(page_records))

            if not marker:
                return records

            if self.settings.max_pages is not None and pages >= self.settings.max_pages:
                logger.warning("Stopping after %d page(s), max_pages reached", pages)
                return records

    def search(self, raw_query: str) -> Tuple[str, DateRangeQuery, List[BlobRecord]]:
        """Interpret a user query, list the prefix and apply the date range.

        Returns:
            Tuple of (prefix, date range, matching records)
        """
        prefix, date_range = interpret(raw_query)
        records = self.discover(prefix)
        return prefix, date_range, filter_by_date(records, date_range)

    def download_file(self, record: BlobRecord, output_dir: Path) -> DownloadResult:
        """Download a single blob into ``output_dir``.

        The body is written verbatim. Binary files get the binary timeout.
        Unknown extensions are skipped without a request.

        Args:
            record: Blob to download
            output_dir: Directory to save into

        Returns:
            DownloadResult with status completed, failed or skipped
        """
        file_name = record.file_name
        extension = record.file_extension.lower()
        result = DownloadResult(url=record.url, file_name=file_name)

        if not file_name or extension not in TEXT_EXTENSIONS | BINARY_EXTENSIONS:
            result.download_status = "skipped"
            result.error_message = f"Unsupported file type: {extension or 'none'}"
            logger.warning("Skipping %s: %s", record.url, result.error_message)
            return result

        local_path = Path(output_dir) / file_name
        result.local_path = str(local_path)

        timeout = (
            self.settings.binary_timeout
            if extension in BINARY_EXTENSIONS
            else self.settings.request_timeout
        )

        try:
            response = self._client.get(record.url, timeout=timeout)
            response.raise_for_status()
            # Bodies are saved unchanged, text files included
            local_path.write_bytes(response.content)
            result.file_size_bytes = len(response.content)
        except (httpx.HTTPError, OSError) as e:
            result.download_status = "failed"
            result.error_message = str(e)
            if isinstance(e, httpx.HTTPStatusError):
                result.status_code = e.response.status_code
            logger.error("Download failed for %s: %s", file_name, e)
            return result

        result.download_status = "completed"
        result.status_code = response.status_code
        result.downloaded_at = datetime.now().isoformat()
        logger.info("HTTP %d for %s", response.status_code, file_name)
        return result

    def download_batch(
        self, records: Iterable[BlobRecord], output_dir: Path
    ) -> DownloadSummary:
        """Download blobs one after another, tallying the outcomes.

        Args:
            records: Blobs to download
            output_dir: Directory to save into

        Returns:
            Summary statistics with the failed file names
        """
        records = list(records)
        summary = DownloadSummary(total=len(records))

        for i, record in enumerate(records, 1):
            summary.add(self.download_file(record, output_dir))

            if i % 10 == 0:
                logger.info(
                    "Progress: %d/%d (Completed: %d, Failed: %d, Skipped: %d)",
                    i, len(records), summary.completed, summary.failed, summary.skipped,
                )

        return summary
