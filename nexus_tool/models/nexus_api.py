"""
Pydantic models for Nexus REST API responses.

The service speaks camelCase JSON; these models accept it through aliases and
expose snake_case attributes. Every model is frozen: once a response has been
decoded nothing in this package mutates it.
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..utils.constants import CHECKSUM_ALGORITHMS
from ..utils.path_utils import asset_filename


# ============================================================================
# Base Models
# ============================================================================


class NexusApiModel(BaseModel):
    """Base model for all Nexus API responses."""

    model_config = ConfigDict(
        extra="allow",  # Allow extra fields from API
        frozen=True,
        populate_by_name=True,
    )


# ============================================================================
# Search Models
# ============================================================================


class AssetChecksum(NexusApiModel):
    """Content hashes published for an asset. Any of them may be absent."""

    sha1: Optional[str] = None
    sha256: Optional[str] = None
    sha512: Optional[str] = None
    md5: Optional[str] = None

    def strongest(self) -> Optional[Tuple[str, str]]:
        """
        Return the strongest hash the server published.

        Returns:
            Tuple of (algorithm, hex digest), or None when no hash is present
        """
        for algorithm in CHECKSUM_ALGORITHMS:
            value = getattr(self, algorithm)
            if value:
                return algorithm, value.lower()
        return None


class Asset(NexusApiModel):
    """One retrievable file belonging to a package version."""

    download_url: str = Field(alias="downloadUrl")
    path: str
    format: str
    checksum: AssetChecksum = Field(default_factory=AssetChecksum)
    content_type: str = Field(alias="contentType")
    last_modified: str = Field(alias="lastModified")

    @property
    def filename(self) -> str:
        """Last segment of the repository-relative path."""
        return asset_filename(self.path)


class SearchItem(NexusApiModel):
    """One package version record returned by the search endpoint."""

    id: str
    repository: str
    format: str
    group: Optional[str] = None
    name: str
    version: str
    assets: List[Asset] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)


class SearchPage(NexusApiModel):
    """One page of search results."""

    items: List[SearchItem] = Field(default_factory=list)
    continuation_token: Optional[str] = Field(default=None, alias="continuationToken")

    @property
    def has_more(self) -> bool:
        """Whether the server reported more results behind this page."""
        return bool(self.continuation_token)


# ============================================================================
# Repository Models
# ============================================================================


class Repository(NexusApiModel):
    """A configured repository. Format-specific attributes are kept as-is."""

    name: str
    format: str
    url: str
    attributes: Dict[str, Any] = Field(default_factory=dict)


__all__ = [
    "NexusApiModel",
    "AssetChecksum",
    "Asset",
    "SearchItem",
    "SearchPage",
    "Repository",
]
