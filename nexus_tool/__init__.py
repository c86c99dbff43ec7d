"""
Nexus Tool - A Python client for the Nexus Repository Manager REST API.

This package provides tools for searching Nexus repositories, listing
packages and repositories, and downloading artifacts with HTTP Basic
authentication.
"""

from ._version import __version__

# Import main classes and functions for easy access
from .api import NexusClient, CredentialResolver
from .models import ClientConfig, DownloadReport
from .exceptions import (
    NexusToolError,
    MissingCredentials,
    MissingConfiguration,
    NetworkError,
    HttpError,
    DecodeError,
    FilesystemError,
    ChecksumMismatch,
    PaginationLimitExceeded,
)
from .utils import setup_logging, WrappingFormatter, create_session
from .cli import main as cli_main, cli as cli_group

__all__ = [
    "__version__",
    "NexusClient",
    "CredentialResolver",
    "ClientConfig",
    "DownloadReport",
    "NexusToolError",
    "MissingCredentials",
    "MissingConfiguration",
    "NetworkError",
    "HttpError",
    "DecodeError",
    "FilesystemError",
    "ChecksumMismatch",
    "PaginationLimitExceeded",
    "setup_logging",
    "WrappingFormatter",
    "create_session",
    "cli_main",
    "cli_group",
]
