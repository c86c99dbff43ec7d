"""Client configuration model."""

from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from ..utils.constants import (
    DEFAULT_API_VERSION,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_MAX_PAGES,
    DEFAULT_RETRIES,
    DEFAULT_TIMEOUT,
    DEFAULT_URL_PATH,
    IDENTITY_ENV,
    SECRET_ENV,
)
from .base import NexusBaseModel


class ClientConfig(NexusBaseModel):
    """
    Settings shared read-only by every operation issued through a client.

    Attributes:
        base_url: Scheme and host of the Nexus instance (e.g. "https://nexus.example.com")
        url_path: REST API path prefix
        api_version: API version segment
        timeout: Read/write/pool timeout in seconds
        connect_timeout: Connect timeout in seconds
        retries: Connection retries performed by the transport
        max_pages: Maximum pages a single search follows (None for no limit)
        verify_checksums: Verify downloads against the hashes published by the server
        identity_env: Environment variable holding the basic auth identity
        secret_env: Environment variable holding the basic auth secret
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str
    url_path: str = DEFAULT_URL_PATH
    api_version: str = DEFAULT_API_VERSION
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    connect_timeout: float = Field(default=DEFAULT_CONNECT_TIMEOUT, gt=0)
    retries: int = Field(default=DEFAULT_RETRIES, ge=0)
    max_pages: Optional[int] = Field(default=DEFAULT_MAX_PAGES, ge=1)
    verify_checksums: bool = False
    identity_env: str = IDENTITY_ENV
    secret_env: str = SECRET_ENV

    @field_validator("base_url", mode="after")
    @classmethod
    def strip_base_url(cls, value: str) -> str:
        """Reject empty base URLs and drop any trailing slash."""
        value = value.strip()
        if not value:
            raise ValueError("base_url must not be empty")
        return value.rstrip("/")


__all__ = ["ClientConfig"]
