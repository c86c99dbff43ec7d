"""
URL utilities for the Nexus REST API.

Request URLs are assembled as ``base + path + api_version + endpoint`` with
an optional query string. Query values are URL-encoded, so package names and
versions containing reserved characters (``+``, ``&``, spaces) survive intact.
"""

from typing import List, Optional, Tuple
from urllib.parse import urlencode

from .constants import REPOSITORIES_ENDPOINT, SEARCH_ENDPOINT


def build_api_url(base_url: str, url_path: str, api_version: str, endpoint: str) -> str:
    """
    Join the configured URL parts with an endpoint.

    Example:
        >>> build_api_url("https://nexus.example.com", "/service/rest", "/v1", "/repositories")
        'https://nexus.example.com/service/rest/v1/repositories'
    """
    return f"{base_url}{url_path}{api_version}{endpoint}"


def build_search_url(
    base_url: str,
    url_path: str,
    api_version: str,
    repository: str,
    package_name: Optional[str] = None,
    version: Optional[str] = None,
    continuation_token: Optional[str] = None,
) -> str:
    """
    Build a search endpoint URL.

    Name and version are always sent; an empty value matches everything.
    The continuation token is only appended when one is given.

    Args:
        base_url: Base URL of the Nexus instance
        url_path: REST API path prefix
        api_version: API version segment
        repository: Repository to search
        package_name: Optional package name filter
        version: Optional version filter
        continuation_token: Token from the previous page, if any

    Returns:
        Fully qualified search URL

    Example:
        >>> build_search_url("https://nexus", "/service/rest", "/v1", "pypi-internal", "document-store")
        'https://nexus/service/rest/v1/search?repository=pypi-internal&name=document-store&version='
    """
    params: List[Tuple[str, str]] = [
        ("repository", repository),
        ("name", package_name or ""),
        ("version", version or ""),
    ]
    if continuation_token is not None:
        params.append(("continuationToken", continuation_token))

    return build_api_url(base_url, url_path, api_version, SEARCH_ENDPOINT) + "?" + urlencode(params)


def build_repositories_url(base_url: str, url_path: str, api_version: str) -> str:
    """Build the repositories endpoint URL (no query parameters)."""
    return build_api_url(base_url, url_path, api_version, REPOSITORIES_ENDPOINT)


__all__ = ["build_api_url", "build_search_url", "build_repositories_url"]
