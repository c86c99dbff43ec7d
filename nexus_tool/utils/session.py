"""
Session utilities for Nexus operations.

This module provides a factory for the httpx client shared by every request
a NexusClient makes.
"""

import logging

import httpx
from httpx import HTTPTransport

from .constants import DEFAULT_CONNECT_TIMEOUT, DEFAULT_RETRIES, DEFAULT_TIMEOUT


def create_session(
    timeout: float = DEFAULT_TIMEOUT,
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    retries: int = DEFAULT_RETRIES,
) -> httpx.Client:
    """
    Create an httpx client for talking to Nexus.

    Args:
        timeout: Read, write and pool timeout in seconds
        connect_timeout: Connect timeout in seconds
        retries: Number of connection attempts the transport retries.
            Defaults to 0: a failed request is reported, never silently repeated.

    Returns:
        Configured httpx.Client with redirects followed and JSON preferred

    Example:
        >>> client = create_session(timeout=300.0)
        >>> response = client.get("https://nexus.example.com/service/rest/v1/repositories")
    """
    timeout_config = httpx.Timeout(timeout, connect=connect_timeout)
    transport = HTTPTransport(retries=retries)

    logging.debug(
        "Creating HTTP session (timeout=%ss, connect_timeout=%ss, retries=%d)", timeout, connect_timeout, retries
    )

    return httpx.Client(
        transport=transport,
        timeout=timeout_config,
        follow_redirects=True,
        headers={"Accept": "application/json"},
    )


__all__ = ["create_session"]
