"""
Pydantic models for nexus-tool.

This package contains all Pydantic models used in the application:
- nexus_api: Models for Nexus REST API responses
- base, config, results: Domain models
"""

# Nexus API Response Models
from .nexus_api import (
    NexusApiModel,
    AssetChecksum,
    Asset,
    SearchItem,
    SearchPage,
    Repository,
)

# Domain Models
from .base import NexusBaseModel
from .config import ClientConfig
from .results import AssetDownloadResult, DownloadReport

__all__ = [
    # Nexus API Models
    "NexusApiModel",
    "AssetChecksum",
    "Asset",
    "SearchItem",
    "SearchPage",
    "Repository",
    # Domain Models
    "NexusBaseModel",
    "ClientConfig",
    "AssetDownloadResult",
    "DownloadReport",
]
