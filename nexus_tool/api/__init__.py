"""
Nexus API client modules.

This package provides clients for interacting with the Nexus REST API:
- Basic authentication with credentials resolved from the environment
- Main Nexus client composed from specialized mixins
- Search, repository and download operations
"""

from .auth import Credentials, CredentialResolver
from .download_manager import DownloadMixin
from .nexus_client import NexusClient
from .repository_manager import RepositoryMixin
from .search import SearchMixin

# Import Nexus API models for convenience
from ..models.nexus_api import (
    Asset,
    AssetChecksum,
    Repository,
    SearchItem,
    SearchPage,
)

__all__ = [
    "Credentials",
    "CredentialResolver",
    "DownloadMixin",
    "NexusClient",
    "RepositoryMixin",
    "SearchMixin",
    # API Models
    "Asset",
    "AssetChecksum",
    "Repository",
    "SearchItem",
    "SearchPage",
]
