"""
Utility modules for nexus-tool operations.
"""

from .logger import setup_logging, WrappingFormatter
from .session import create_session
from .url import build_api_url, build_search_url, build_repositories_url
from .path_utils import asset_filename, get_asset_save_path
from .checksum import StreamingHasher
from .config_manager import ConfigManager

from . import error_handling
from . import constants

__all__ = [
    "setup_logging",
    "WrappingFormatter",
    "create_session",
    "build_api_url",
    "build_search_url",
    "build_repositories_url",
    "asset_filename",
    "get_asset_save_path",
    "StreamingHasher",
    "ConfigManager",
    "error_handling",
    "constants",
]
