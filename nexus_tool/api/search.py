"""
Search operations for the Nexus REST API.

The search endpoint returns results a page at a time. Each page may carry a
continuation token, which has to be passed back verbatim to get the next
page; a page without one is the last. Pages are fetched strictly in order and
their items concatenated without deduplication.
"""

import logging
from typing import Any, List, Optional, Protocol, Set, runtime_checkable

import httpx

from ..exceptions import PaginationLimitExceeded
from ..models.config import ClientConfig
from ..models.nexus_api import SearchItem, SearchPage
from ..utils.url import build_search_url


def describe_query(repository: str, package_name: Optional[str], version: Optional[str]) -> str:
    """Format a search query for log and error messages."""
    return f"repository={repository} name={package_name or ''} version={version or ''}"


@runtime_checkable
class SearchMixin(Protocol):
    """Protocol that provides paginated search operations for Nexus."""

    # Required attributes
    config: ClientConfig

    def _get(self, url: str, operation: str) -> httpx.Response:
        """Authenticated GET."""
        ...  # pragma: no cover - defined in implementation

    def _decode(self, response: httpx.Response, schema: Any, operation: str) -> Any:
        """Decode a JSON response."""
        ...  # pragma: no cover - defined in implementation

    def search_page(
        self,
        repository: str,
        package_name: Optional[str] = None,
        version: Optional[str] = None,
        continuation_token: Optional[str] = None,
    ) -> SearchPage:
        """
        Fetch a single page of search results.

        Args:
            repository: Repository to search (e.g. "pypi-internal")
            package_name: Optional package name filter
            version: Optional version filter
            continuation_token: Token returned by the previous page, None for the first page

        Returns:
            SearchPage with the items of this page and the token for the next one
        """
        url = build_search_url(
            self.config.base_url,
            self.config.url_path,
            self.config.api_version,
            repository,
            package_name,
            version,
            continuation_token,
        )
        operation = f"search {describe_query(repository, package_name, version)}"
        if continuation_token is not None:
            operation += f" (continuationToken={continuation_token})"

        response = self._get(url, operation)
        return self._decode(response, SearchPage, operation)

    def search(
        self, repository: str, package_name: Optional[str] = None, version: Optional[str] = None
    ) -> List[SearchItem]:
        """
        Search a repository, following continuation tokens until the last page.

        Items are returned in page order, then in the order the server listed
        them within each page. Any failure aborts the whole search.

        Args:
            repository: Repository to search
            package_name: Optional package name filter (None matches all)
            version: Optional version filter (None matches all)

        Returns:
            All matching search items

        Raises:
            PaginationLimitExceeded: If more than config.max_pages pages would be
                needed, or the server hands out a token it already returned
        """
        query = describe_query(repository, package_name, version)
        max_pages = self.config.max_pages
        items: List[SearchItem] = []
        seen_tokens: Set[str] = set()
        continuation_token: Optional[str] = None
        pages = 0

        while True:
            page = self.search_page(repository, package_name, version, continuation_token)
            pages += 1
            items.extend(page.items)
            logging.debug("Search %s: page %d returned %d item(s)", query, pages, len(page.items))

            if not page.has_more:
                break

            continuation_token = page.continuation_token
            if continuation_token in seen_tokens:
                raise PaginationLimitExceeded(
                    f"Search {query} returned continuation token '{continuation_token}' twice after {pages} page(s)",
                    pages=pages,
                    token=continuation_token,
                )
            if max_pages is not None and pages >= max_pages:
                raise PaginationLimitExceeded(
                    f"Search {query} still had more results after {pages} page(s) (max_pages={max_pages})",
                    pages=pages,
                    token=continuation_token,
                )
            seen_tokens.add(continuation_token)

        logging.info("Search %s found %d item(s) in %d page(s)", query, len(items), pages)
        return items

    def list_packages(self, repository: str) -> List[str]:
        """
        List the names of every component in a repository.

        One entry per search item, so a package with several versions appears
        several times.

        Args:
            repository: Repository to list

        Returns:
            Package names in search order, duplicates included
        """
        return [item.name for item in self.search(repository)]


__all__ = ["SearchMixin", "describe_query"]
