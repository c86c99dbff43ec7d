"""
Exception types raised by nexus-tool.

Every error raised by the client derives from NexusToolError so callers can
catch the whole family at once, while still telling a transport failure
("couldn't reach the server") apart from a decode failure ("talked to the
server but got garbage").
"""

from typing import Iterable, Optional


class NexusToolError(Exception):
    """Base class for all nexus-tool errors."""


class MissingCredentials(NexusToolError):
    """A required credential is not present in the environment."""

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = list(missing)
        super().__init__(
            f"Missing Nexus credentials: {', '.join(self.missing)} must be set in the environment"
        )


class MissingConfiguration(NexusToolError):
    """A required configuration value (such as the base URL) is not available."""


class NetworkError(NexusToolError):
    """The request could not be completed at the HTTP level (DNS, connect, timeout, redirect loop, undecodable body)."""

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class HttpError(NexusToolError):
    """The server answered with a non-success status code."""

    def __init__(self, message: str, status_code: int, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class DecodeError(NexusToolError):
    """The response body is not the expected JSON document."""

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class FilesystemError(NexusToolError):
    """A local file could not be created or written."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class ChecksumMismatch(NexusToolError):
    """Downloaded content does not match the checksum published by the server."""

    def __init__(self, message: str, algorithm: str, expected: str, actual: str) -> None:
        super().__init__(message)
        self.algorithm = algorithm
        self.expected = expected
        self.actual = actual


class PaginationLimitExceeded(NexusToolError):
    """The search did not terminate within the page cap, or the server repeated a token."""

    def __init__(self, message: str, pages: int, token: Optional[str] = None) -> None:
        super().__init__(message)
        self.pages = pages
        self.token = token


__all__ = [
    "NexusToolError",
    "MissingCredentials",
    "MissingConfiguration",
    "NetworkError",
    "HttpError",
    "DecodeError",
    "FilesystemError",
    "ChecksumMismatch",
    "PaginationLimitExceeded",
]
