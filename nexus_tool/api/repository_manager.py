"""
Repository operations for the Nexus REST API.
"""

import logging
from typing import Any, List, Protocol, runtime_checkable

import httpx

from ..models.config import ClientConfig
from ..models.nexus_api import Repository
from ..utils.url import build_repositories_url


@runtime_checkable
class RepositoryMixin(Protocol):
    """Protocol that provides repository listing for Nexus."""

    # Required attributes
    config: ClientConfig

    def _get(self, url: str, operation: str) -> httpx.Response:
        """Authenticated GET."""
        ...  # pragma: no cover - defined in implementation

    def _decode(self, response: httpx.Response, schema: Any, operation: str) -> Any:
        """Decode a JSON response."""
        ...  # pragma: no cover - defined in implementation

    def list_repositories(self) -> List[Repository]:
        """
        List every repository configured on the server.

        The endpoint returns a plain JSON array; there is no pagination.

        Returns:
            Repositories in the order the server listed them
        """
        operation = "list repositories"
        url = build_repositories_url(self.config.base_url, self.config.url_path, self.config.api_version)
        response = self._get(url, operation)
        repositories = self._decode(response, List[Repository], operation)
        logging.info("Found %d repositories", len(repositories))
        return repositories


__all__ = ["RepositoryMixin"]
