"""
File path handling utilities.

This module provides the functions that decide where a downloaded asset is
written locally.
"""

import os
from pathlib import PurePosixPath
from typing import Optional


def asset_filename(asset_path: str) -> str:
    """
    Derive a local filename from a repository-relative asset path.

    Args:
        asset_path: Path of the asset inside the repository

    Returns:
        Last path segment, or an empty string if the path has none

    Example:
        >>> asset_filename("document-store/0.2.1/document_store-0.2.1.tar.gz")
        'document_store-0.2.1.tar.gz'
    """
    return PurePosixPath(asset_path).name


def get_asset_save_path(filename: str, base_dir: Optional[str] = None) -> str:
    """
    Determine the save path for an asset.

    Callers pass the final segment of the asset path (see asset_filename), so
    two assets with the same basename overwrite each other.

    Args:
        filename: Local filename of the asset
        base_dir: Optional base directory (defaults to current directory)

    Returns:
        Path where the asset should be saved

    Raises:
        ValueError: If the filename is empty or names a directory

    Example:
        >>> get_asset_save_path("pkg-1.0.whl")
        'pkg-1.0.whl'
        >>> get_asset_save_path("pkg-1.0.whl", "downloads")
        'downloads/pkg-1.0.whl'
    """
    if filename in ("", ".", ".."):
        raise ValueError(f"Invalid asset filename '{filename}'")

    if base_dir:
        return os.path.join(base_dir, filename)
    return filename


__all__ = ["asset_filename", "get_asset_save_path"]
