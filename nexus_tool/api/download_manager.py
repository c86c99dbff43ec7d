"""
Download operations for the Nexus REST API.

Assets are fetched one at a time and streamed straight to disk. A failing
asset is logged and recorded in the DownloadReport, and the loop moves on
to the next one; only failures that affect the whole batch (missing
credentials, a failed search) abort the operation.
"""

import logging
import os
import traceback
from contextlib import AbstractContextManager
from typing import Any, Dict, List, Optional, Protocol, Type, runtime_checkable

import httpx

from ..exceptions import ChecksumMismatch, FilesystemError, HttpError, NetworkError, NexusToolError
from ..models.config import ClientConfig
from ..models.nexus_api import Asset, SearchItem, SearchPage
from ..models.results import AssetDownloadResult, DownloadReport, ErrorKind
from ..utils.checksum import StreamingHasher
from ..utils.constants import DOWNLOAD_CHUNK_SIZE
from ..utils.path_utils import get_asset_save_path
from .search import describe_query

# Per-asset failures; anything else aborts the download
ASSET_ERROR_KINDS: Dict[Type[NexusToolError], ErrorKind] = {
    NetworkError: "network",
    HttpError: "http",
    FilesystemError: "filesystem",
    ChecksumMismatch: "checksum",
}


def _remove_partial_file(file_path: str) -> None:
    """Delete a file left behind by a failed download."""
    try:
        os.remove(file_path)
        logging.debug("Removed incomplete file %s", file_path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logging.warning("Could not remove incomplete file %s: %s", file_path, e)


@runtime_checkable
class DownloadMixin(Protocol):
    """Protocol that provides artifact download operations for Nexus."""

    # Required attributes
    config: ClientConfig

    def _stream(self, url: str, operation: str) -> AbstractContextManager[httpx.Response]:
        """Authenticated streaming GET."""
        ...  # pragma: no cover - defined in implementation

    def search_page(
        self,
        repository: str,
        package_name: Optional[str] = None,
        version: Optional[str] = None,
        continuation_token: Optional[str] = None,
    ) -> SearchPage:
        """Single search page."""
        ...  # pragma: no cover - defined in implementation

    def search(
        self, repository: str, package_name: Optional[str] = None, version: Optional[str] = None
    ) -> List[SearchItem]:
        """Paginated search."""
        ...  # pragma: no cover - defined in implementation

    def download(
        self,
        repository: str,
        package_name: Optional[str] = None,
        version: Optional[str] = None,
        *,
        output_dir: Optional[str] = None,
        all_pages: bool = False,
    ) -> DownloadReport:
        """
        Download every asset of every matching search item.

        By default only the first page of search results is considered, as the
        original command-line tool did. The report's ``more_available`` flag
        tells whether matches were left behind; pass ``all_pages=True`` to
        follow continuation tokens and download everything.

        Files are named after the last segment of the asset path and written
        to ``output_dir`` (default: current directory), replacing any existing
        file of the same name.

        Args:
            repository: Repository to search
            package_name: Optional package name filter
            version: Optional version filter
            output_dir: Directory to write files into
            all_pages: Follow pagination instead of using the first page only

        Returns:
            DownloadReport with one result per attempted asset. A search with no
            matches yields a report whose ``not_found`` is True.

        Raises:
            MissingCredentials, NetworkError, HttpError, DecodeError: If the search itself fails
            FilesystemError: If the output directory cannot be created
        """
        query = describe_query(repository, package_name, version)
        report = DownloadReport(repository=repository, package_name=package_name, version=version)

        if all_pages:
            items = self.search(repository, package_name, version)
        else:
            page = self.search_page(repository, package_name, version)
            items = page.items
            if page.has_more:
                report.more_available = True
                logging.warning(
                    "Search %s has more results than fit on one page; only the first page is downloaded",
                    query,
                )

        report.items_found = len(items)
        if not items:
            logging.warning("No package found for %s", query)
            return report

        if output_dir:
            try:
                os.makedirs(output_dir, exist_ok=True)
            except OSError as e:
                raise FilesystemError(f"Cannot create output directory {output_dir}: {e}", path=output_dir) from e

        for item in items:
            if not item.assets:
                logging.debug("Item %s %s in %s has no assets", item.name, item.version, item.repository)
            for asset in item.assets:
                report.add_result(self.download_asset(item, asset, output_dir=output_dir))

        if report.has_failures:
            logging.warning(
                "Download %s: %d/%d asset(s) downloaded, %d failed",
                query,
                report.completed,
                report.total_attempted,
                report.failed,
            )
        else:
            logging.info("Download %s: %d asset(s) downloaded", query, report.completed)
        return report

    def download_asset(self, item: SearchItem, asset: Asset, *, output_dir: Optional[str] = None) -> AssetDownloadResult:
        """
        Download one asset, recording rather than raising per-asset failures.

        Args:
            item: Search item the asset belongs to
            asset: Asset to download
            output_dir: Directory to write the file into

        Returns:
            AssetDownloadResult describing the outcome
        """
        label = f"{asset.path} ({item.repository}/{item.name} {item.version})"
        fields: Dict[str, Any] = {
            "repository": item.repository,
            "item_name": item.name,
            "item_version": item.version,
            "asset_path": asset.path,
            "download_url": asset.download_url,
        }

        try:
            file_path = get_asset_save_path(asset.filename, output_dir)
        except ValueError as e:
            message = f"Cannot save asset path '{asset.path}': {e}"
            logging.error("Failed to download %s: %s", label, message)
            return AssetDownloadResult(**fields, status="failed", error_kind="filesystem", message=message)

        logging.info("Downloading %s to %s", asset.download_url, file_path)
        try:
            bytes_written = self._fetch_asset(asset, file_path, label)
        except (NetworkError, HttpError, FilesystemError, ChecksumMismatch) as e:
            logging.error("Failed to download %s: %s", label, e)
            logging.debug("Traceback: %s", traceback.format_exc())
            return AssetDownloadResult(
                **fields,
                status="failed",
                error_kind=ASSET_ERROR_KINDS[type(e)],
                message=str(e),
            )

        return AssetDownloadResult(**fields, file_path=file_path, status="downloaded", bytes_written=bytes_written)

    def _fetch_asset(self, asset: Asset, file_path: str, label: str) -> int:
        """
        Stream one asset into file_path.

        The file is only created once the server has answered with a success
        status. It is removed again if the transfer or verification fails after
        it was opened; a file that could not be opened is left untouched.

        Returns:
            Number of bytes written
        """
        expected = asset.checksum.strongest() if self.config.verify_checksums else None
        if self.config.verify_checksums and expected is None:
            logging.debug("No checksum published for %s, skipping verification", label)
        hasher = StreamingHasher(expected[0] if expected else None)
        bytes_written = 0

        with self._stream(asset.download_url, f"download {label}") as response:
            try:
                f = open(file_path, "wb")  # pylint: disable=consider-using-with
            except OSError as e:
                raise FilesystemError(f"Cannot create {file_path} for {label}: {e}", path=file_path) from e

            # From here on the file holds this download's bytes only
            try:
                with f:
                    for chunk in response.iter_bytes(chunk_size=DOWNLOAD_CHUNK_SIZE):
                        f.write(chunk)
                        hasher.update(chunk)
                        bytes_written += len(chunk)
            except OSError as e:
                _remove_partial_file(file_path)
                raise FilesystemError(f"Failed to write {file_path} for {label}: {e}", path=file_path) from e
            except httpx.HTTPError:
                _remove_partial_file(file_path)
                raise

        if expected is not None:
            algorithm, digest = expected
            if not hasher.matches(digest):
                _remove_partial_file(file_path)
                raise ChecksumMismatch(
                    f"{algorithm} mismatch for {label}: expected {digest}, got {hasher.hexdigest()}",
                    algorithm=algorithm,
                    expected=digest,
                    actual=hasher.hexdigest() or "",
                )
            logging.debug("Verified %s checksum of %s", algorithm, label)

        return bytes_written


__all__ = ["DownloadMixin", "ASSET_ERROR_KINDS"]
