"""
Nexus REST API client.

This module provides the main NexusClient class, which is composed using the
mixin pattern to provide specialized functionality:

Mixins:
    - SearchMixin: Paginated component search and package listing
    - RepositoryMixin: Listing configured repositories
    - DownloadMixin: Streaming matched assets to local files

The NexusClient class owns what the mixins share: the immutable ClientConfig,
the httpx session, credential resolution and the mapping of transport
failures onto the nexus-tool exception types.
"""

# Standard library imports
import logging
import os
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional, TypeVar

# Third-party imports
import httpx
from pydantic import TypeAdapter, ValidationError

# Local imports
from ..exceptions import DecodeError, HttpError, MissingConfiguration, NetworkError
from ..models.config import ClientConfig
from ..utils import create_session
from ..utils.config_manager import ConfigManager
from ..utils.constants import BASE_URL_ENV, CONFIG_SECTION
from ..utils.error_handling import parse_json
from .auth import CredentialResolver
from .download_manager import DownloadMixin
from .repository_manager import RepositoryMixin
from .search import SearchMixin

T = TypeVar("T")

# Headers whose values never reach the logs
SENSITIVE_HEADERS = ["authorization", "cookie", "x-api-key"]


class NexusClient(SearchMixin, RepositoryMixin, DownloadMixin):
    """
    A client for interacting with the Nexus Repository Manager REST API.

    API documentation:
    - https://help.sonatype.com/en/rest-and-integration-api.html

    All requests are blocking and issued one at a time. Every request carries
    HTTP Basic credentials resolved from the environment just before it is sent.

    Example:
        >>> with NexusClient(ClientConfig(base_url="https://nexus.example.com")) as client:
        ...     items = client.search("pypi-internal", "document-store", "0.2.1")
    """

    def __init__(self, config: ClientConfig, credentials: Optional[CredentialResolver] = None) -> None:
        """Initialize the Nexus client.

        Args:
            config: Client configuration (base URL, API path, timeouts, limits)
            credentials: Credential resolver; defaults to reading the variables named in config
        """
        self.config = config
        self.credentials = credentials or CredentialResolver(config.identity_env, config.secret_env)
        self.session = self._create_session()
        logging.debug("NexusClient initialized for %s", config.base_url)

    def _create_session(self) -> httpx.Client:
        """Create the httpx session using the configured timeouts."""
        return create_session(
            timeout=self.config.timeout,
            connect_timeout=self.config.connect_timeout,
            retries=self.config.retries,
        )

    def close(self) -> None:
        """Close the session and release all connections."""
        if self.session:
            self.session.close()
            logging.debug("NexusClient session closed and connections released")

    def __enter__(self) -> "NexusClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: Optional[type], exc_val: Optional[BaseException], exc_tb: Optional[Any]) -> None:
        """Context manager exit - ensures session is closed."""
        self.close()

    # ============================================================================
    # Construction helpers
    # ============================================================================

    @classmethod
    def from_environment(cls, **overrides: Any) -> "NexusClient":
        """
        Create a client whose base URL comes from the NEXUS_URL environment variable.

        Args:
            **overrides: Further ClientConfig fields (url_path, api_version, timeout, ...)

        Raises:
            MissingConfiguration: If NEXUS_URL is not set and no base_url override is given
        """
        base_url = overrides.pop("base_url", None) or os.environ.get(BASE_URL_ENV)
        if not base_url:
            raise MissingConfiguration(f"No Nexus base URL configured: set {BASE_URL_ENV} or pass --base-url")
        return cls(ClientConfig(base_url=base_url, **overrides))

    @classmethod
    def create_from_config_file(cls, path: Optional[str] = None, **overrides: Any) -> "NexusClient":
        """
        Create a client from the [cli] table of a TOML configuration file.

        Values passed as keyword arguments take precedence over the file.
        A base URL missing from both falls back to NEXUS_URL.
        """
        section = ConfigManager(path).get_section(CONFIG_SECTION)
        settings = {key: value for key, value in section.items() if key in ClientConfig.model_fields}
        settings.update({key: value for key, value in overrides.items() if value is not None})
        return cls.from_environment(**settings)

    # ============================================================================
    # Transport
    # ============================================================================

    @property
    def request_params(self) -> Dict[str, Any]:
        """
        Get per-request parameters.

        Credentials are resolved here, on every access, which is what makes a
        missing credential fail before anything is sent.
        """
        return {"auth": self.credentials.resolve().as_basic_auth()}

    def _get(self, url: str, operation: str) -> httpx.Response:
        """
        Issue an authenticated GET and return the successful response.

        Raises:
            MissingCredentials: Before sending, if credentials are absent
            NetworkError: If the server could not be reached or the exchange failed
                at the HTTP level (redirect loop, undecodable body)
            HttpError: If the server answered with a failure status
        """
        params = self.request_params
        logging.debug("GET %s", url)
        try:
            response = self.session.get(url, **params)
        except httpx.HTTPError as e:
            raise NetworkError(f"Failed to {operation}: {e}", url=url) from e

        self._check_response(response, operation)
        return response

    @contextmanager
    def _stream(self, url: str, operation: str) -> Iterator[httpx.Response]:
        """
        Issue an authenticated streaming GET.

        The response is closed when the block exits. httpx failures raised
        while the caller iterates over the body (dropped connections, corrupt
        content encoding) surface as NetworkError too.
        """
        params = self.request_params
        logging.debug("GET (stream) %s", url)
        try:
            with self.session.stream("GET", url, **params) as response:
                self._check_response(response, operation)
                yield response
        except httpx.HTTPError as e:
            raise NetworkError(f"Failed to {operation}: {e}", url=url) from e

    def _decode(self, response: httpx.Response, schema: Any, operation: str) -> Any:
        """
        Decode a JSON response body into the given model type.

        Args:
            response: Successful response
            schema: Pydantic model or type understood by TypeAdapter (e.g. List[Repository])
            operation: Description of the operation for error messages

        Raises:
            DecodeError: If the body is not JSON or does not match the schema
        """
        url = str(response.url)
        data = parse_json(response.text, operation, url=url)
        try:
            return TypeAdapter(schema).validate_python(data)
        except ValidationError as e:
            raise DecodeError(
                f"Unexpected response shape during {operation}: {e.error_count()} validation error(s): {e}",
                url=url,
            ) from e

    # ============================================================================
    # Response checking
    # ============================================================================

    def _log_server_error(self, response: httpx.Response, operation: str) -> None:
        """Log detailed information for server errors (5xx)."""
        logging.error("=" * 80)
        logging.error("SERVER ERROR (%s) during %s", response.status_code, operation)
        logging.error("=" * 80)
        logging.error("REQUEST DETAILS:")
        logging.error("  Method: %s", response.request.method)
        logging.error("  URL: %s", response.url)

        safe_headers = dict(response.request.headers)
        for sensitive_key in SENSITIVE_HEADERS:
            if sensitive_key in safe_headers:
                safe_headers[sensitive_key] = "[REDACTED]"
        logging.error("  Request Headers: %s", safe_headers)

        logging.error("RESPONSE DETAILS:")
        logging.error("  Status Code: %s", response.status_code)
        logging.error("  Response Headers: %s", dict(response.headers))
        if len(response.text) > 500:
            logging.error("  Response Body (truncated): %s...", response.text[:500])
        else:
            logging.error("  Response Body: %s", response.text)
        logging.error("=" * 80)

    def _check_response(self, response: httpx.Response, operation: str = "request") -> None:
        """Check if a response is successful, raise HttpError if not."""
        if response.is_success:
            return

        # Streamed bodies have to be read before .text is available
        response.read()

        if response.status_code >= 500:
            self._log_server_error(response, operation)
        else:
            logging.debug("Client error during %s: %s - %s", operation, response.status_code, response.text)

        body = response.text if len(response.text) <= 500 else response.text[:500] + "..."
        raise HttpError(
            f"Failed to {operation}: {response.status_code} - {body}",
            status_code=response.status_code,
            url=str(response.url),
        )


__all__ = ["NexusClient"]
