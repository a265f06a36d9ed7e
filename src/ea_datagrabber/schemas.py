"""Pydantic schemas for blob listings, date queries and downloads."""

from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class BlobRecord(BaseModel):
    """One file entry from the container listing."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(description="Full or relative URL of the blob")
    last_modified: Optional[date] = Field(
        default=None,
        description="Date from the listing's Last-Modified field"
    )
    embedded_date: Optional[date] = Field(
        default=None,
        description="Date inferred from a YYYYMMDD or YYYYMM token in the URL"
    )

    @property
    def file_name(self) -> str:
        """Text after the last '/', or empty if the URL has no slash."""
        slash = self.url.rfind("/")
        if slash == -1:
            return ""
        return self.url[slash + 1:]

    @property
    def file_extension(self) -> str:
        """Text after the last '.', or empty if there is no dot in the final segment."""
        dot = self.url.rfind(".")
        if dot == -1 or self.url.rfind("/") > dot:
            return ""
        return self.url[dot + 1:]


class DateRangeQuery(BaseModel):
    """Optional start and end bounds parsed from a user query."""

    model_config = ConfigDict(frozen=True)

    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @property
    def is_unbounded(self) -> bool:
        return self.start_date is None and self.end_date is None


class DownloadResult(BaseModel):
    """Outcome of downloading a single blob."""
    url: str
    file_name: str
    local_path: Optional[str] = None
    download_status: Literal["pending", "completed", "failed", "skipped"] = "pending"
    file_size_bytes: Optional[int] = None
    status_code: Optional[int] = None
    downloaded_at: Optional[str] = None
    error_message: Optional[str] = None


class DownloadSummary(BaseModel):
    """Tally of a batch of downloads."""
    completed: int = 0
    failed: int = 0
    skipped: int = 0
    total: int = 0
    failed_files: List[str] = Field(default_factory=list)
    results: List[DownloadResult] = Field(default_factory=list)

    def add(self, result: DownloadResult) -> None:
        """Count a finished download."""
        self.results.append(result)
        if result.download_status == "completed":
            self.completed += 1
        elif result.download_status == "skipped":
            self.skipped += 1
            self.failed_files.append(result.file_name or result.url)
        else:
            self.failed += 1
            self.failed_files.append(result.file_name or result.url)
