"""
Central constants for the nexus-tool package.

This module consolidates all constants used throughout the codebase
to eliminate magic numbers and strings.
"""

# ============================================================================
# REST API Layout
# ============================================================================

# Path prefix of the Nexus REST API
DEFAULT_URL_PATH = "/service/rest"

# API version segment appended after the path prefix
DEFAULT_API_VERSION = "/v1"

SEARCH_ENDPOINT = "/search"
REPOSITORIES_ENDPOINT = "/repositories"

# ============================================================================
# Environment Variables
# ============================================================================

# Base URL of the Nexus instance (used when no config file or flag is given)
BASE_URL_ENV = "NEXUS_URL"

# Basic auth identity and secret
IDENTITY_ENV = "NEXUS_TOKEN_NAME"
SECRET_ENV = "NEXUS_TOKEN_SECRET"  # nosec B105

# ============================================================================
# API and Network Constants
# ============================================================================

# Default read/write/pool timeout for HTTP requests (seconds)
DEFAULT_TIMEOUT = 120.0

# Default connect timeout (seconds)
DEFAULT_CONNECT_TIMEOUT = 10.0

# Connection retries performed by the transport; 0 leaves retry policy to the caller
DEFAULT_RETRIES = 0

# Upper bound on pages followed by a single search (None disables the cap)
DEFAULT_MAX_PAGES = 1000

# ============================================================================
# File and Path Constants
# ============================================================================

# Default configuration file location
DEFAULT_CONFIG_PATH = "~/.config/nexus/cli.toml"

# Section of the configuration file holding client settings
CONFIG_SECTION = "cli"

# Chunk size used when streaming downloads to disk
DOWNLOAD_CHUNK_SIZE = 65536

# Strongest first; the first hash present on an asset is the one verified
CHECKSUM_ALGORITHMS = ["sha512", "sha256", "sha1", "md5"]

__all__ = [
    "DEFAULT_URL_PATH",
    "DEFAULT_API_VERSION",
    "SEARCH_ENDPOINT",
    "REPOSITORIES_ENDPOINT",
    "BASE_URL_ENV",
    "IDENTITY_ENV",
    "SECRET_ENV",
    "DEFAULT_TIMEOUT",
    "DEFAULT_CONNECT_TIMEOUT",
    "DEFAULT_RETRIES",
    "DEFAULT_MAX_PAGES",
    "DEFAULT_CONFIG_PATH",
    "CONFIG_SECTION",
    "DOWNLOAD_CHUNK_SIZE",
    "CHECKSUM_ALGORITHMS",
]
