"""
Test fixtures and mock data for nexus-tool tests.

This module provides common fixtures, mock API payloads, and helpers
for testing the nexus-tool package. HTTP traffic is mocked with respx.
"""

import hashlib
from typing import Any, Dict, List, Optional

import pytest
import respx

from nexus_tool.api import NexusClient
from nexus_tool.models import ClientConfig

BASE_URL = "https://nexus.example.com"
API_URL = f"{BASE_URL}/service/rest/v1"
SEARCH_URL = f"{API_URL}/search"
REPOSITORIES_URL = f"{API_URL}/repositories"

TEST_IDENTITY = "test-token-name"
TEST_SECRET = "test-token-secret"


def build_asset(
    path: str,
    content: Optional[bytes] = None,
    *,
    repository: str = "pypi-internal",
    checksum: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """
    Build an asset as returned by the search endpoint.

    When content is given and no checksum is, sha1/sha256 of the content are published.
    """
    if checksum is None:
        checksum = {}
        if content is not None:
            checksum = {
                "sha1": hashlib.sha1(content).hexdigest(),
                "sha256": hashlib.sha256(content).hexdigest(),
            }
    return {
        "downloadUrl": f"{BASE_URL}/repository/{repository}/{path}",
        "path": path,
        "id": f"asset-{path}",
        "repository": repository,
        "format": "pypi",
        "checksum": checksum,
        "contentType": "application/octet-stream",
        "lastModified": "2024-03-01T10:00:00.000+00:00",
    }


def build_item(
    name: str,
    version: str,
    assets: Optional[List[Dict[str, Any]]] = None,
    *,
    repository: str = "pypi-internal",
) -> Dict[str, Any]:
    """Build a search item as returned by the search endpoint."""
    return {
        "id": f"{repository}-{name}-{version}",
        "repository": repository,
        "format": "pypi",
        "group": None,
        "name": name,
        "version": version,
        "assets": assets or [],
        "tags": [],
    }


def build_page(items: List[Dict[str, Any]], token: Optional[str] = None) -> Dict[str, Any]:
    """Build a search response page."""
    return {"items": items, "continuationToken": token}


@pytest.fixture
def client_config():
    """Client configuration pointing at the mocked Nexus."""
    return ClientConfig(base_url=BASE_URL)


@pytest.fixture
def nexus_credentials(monkeypatch):
    """Set the credential environment variables."""
    monkeypatch.setenv("NEXUS_TOKEN_NAME", TEST_IDENTITY)
    monkeypatch.setenv("NEXUS_TOKEN_SECRET", TEST_SECRET)


@pytest.fixture
def no_credentials(monkeypatch):
    """Remove the credential environment variables."""
    monkeypatch.delenv("NEXUS_TOKEN_NAME", raising=False)
    monkeypatch.delenv("NEXUS_TOKEN_SECRET", raising=False)


@pytest.fixture
def httpx_mock():
    """Provide a respx router for HTTP mocking."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def nexus_client(client_config, nexus_credentials, httpx_mock):
    """NexusClient whose traffic goes to respx."""
    client = NexusClient(client_config)
    yield client
    client.close()


@pytest.fixture
def document_store_page():
    """A single page containing document-store 0.2.1 with a wheel and an sdist."""
    return build_page(
        [
            build_item(
                "document-store",
                "0.2.1",
                [
                    build_asset("document-store/0.2.1/document_store-0.2.1-py3-none-any.whl", b"wheel"),
                    build_asset("document-store/0.2.1/document_store-0.2.1.tar.gz", b"sdist"),
                ],
            )
        ]
    )


@pytest.fixture
def mock_repository_data():
    """Mock repositories endpoint payload."""
    return [
        {
            "name": "pypi-internal",
            "format": "pypi",
            "type": "hosted",
            "url": f"{BASE_URL}/repository/pypi-internal",
            "attributes": {},
        },
        {
            "name": "maven-central",
            "format": "maven2",
            "type": "proxy",
            "url": f"{BASE_URL}/repository/maven-central",
            "attributes": {"proxy": {"remoteUrl": "https://repo1.maven.org/maven2/"}},
        },
    ]


@pytest.fixture
def make_asset():
    """Factory for search endpoint assets."""
    return build_asset


@pytest.fixture
def make_item():
    """Factory for search endpoint items."""
    return build_item


@pytest.fixture
def make_page():
    """Factory for search endpoint pages."""
    return build_page
