"""Result models for download operations."""

from typing import List, Literal, Optional

from pydantic import Field

from .base import NexusBaseModel

ErrorKind = Literal["network", "http", "filesystem", "checksum"]


class AssetDownloadResult(NexusBaseModel):
    """
    Outcome of downloading a single asset.

    Attributes:
        repository: Repository the asset was found in
        item_name: Name of the package the asset belongs to
        item_version: Version of the package the asset belongs to
        asset_path: Repository-relative path of the asset
        download_url: URL the asset was fetched from
        file_path: Local file the asset was written to (None if it was never created)
        status: "downloaded" or "failed"
        error_kind: Kind of failure, None on success
        message: Error description, None on success
        bytes_written: Number of bytes written to disk
    """

    repository: str
    item_name: str
    item_version: str
    asset_path: str
    download_url: str
    file_path: Optional[str] = None
    status: Literal["downloaded", "failed"]
    error_kind: Optional[ErrorKind] = None
    message: Optional[str] = None
    bytes_written: int = Field(default=0, ge=0)

    @property
    def succeeded(self) -> bool:
        """Whether the asset is on disk."""
        return self.status == "downloaded"


class DownloadReport(NexusBaseModel):
    """
    Result of a download operation.

    Per-asset failures do not abort the batch; they are recorded here so
    callers can see exactly which assets made it to disk.

    Attributes:
        repository: Repository that was searched
        package_name: Package name filter, if any
        version: Version filter, if any
        items_found: Number of search items the download iterated over
        more_available: The server reported further pages that were not fetched
        results: One entry per attempted asset, in download order
    """

    repository: str
    package_name: Optional[str] = None
    version: Optional[str] = None
    items_found: int = Field(default=0, ge=0)
    more_available: bool = False
    results: List[AssetDownloadResult] = Field(default_factory=list)

    def add_result(self, result: AssetDownloadResult) -> None:
        """Record the outcome of one asset."""
        self.results.append(result)

    @property
    def not_found(self) -> bool:
        """True when the search matched nothing."""
        return self.items_found == 0

    @property
    def completed(self) -> int:
        """Number of assets written to disk."""
        return sum(1 for result in self.results if result.succeeded)

    @property
    def failed(self) -> int:
        """Number of assets that could not be downloaded."""
        return sum(1 for result in self.results if not result.succeeded)

    @property
    def total_attempted(self) -> int:
        """Total number of download attempts."""
        return len(self.results)

    @property
    def has_failures(self) -> bool:
        """Check if there were any failures."""
        return self.failed > 0

    @property
    def failures(self) -> List[AssetDownloadResult]:
        """Failed results, in download order."""
        return [result for result in self.results if not result.succeeded]

    def describe_query(self) -> str:
        """Human readable repository/name/version triple."""
        return f"repository={self.repository} name={self.package_name or ''} version={self.version or ''}"


__all__ = ["ErrorKind", "AssetDownloadResult", "DownloadReport"]
