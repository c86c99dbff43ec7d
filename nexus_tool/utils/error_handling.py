"""
Error handling utilities for standardized error logging and handling.

This module provides reusable error handling patterns so the client and the
CLI report failures the same way.
"""

import json
import logging
import sys
import traceback
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

from ..exceptions import (
    DecodeError,
    HttpError,
    MissingConfiguration,
    MissingCredentials,
    NetworkError,
    NexusToolError,
    PaginationLimitExceeded,
)


# Type variable for generic function decorators
F = TypeVar("F", bound=Callable[..., Any])


def handle_http_error(error: HttpError, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle HTTP status errors with standardized logging.

    Args:
        error: The HTTP error to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    if error.status_code == 403:
        logging.error(
            "Authentication failed during %s: You don't have permission to access this resource. "
            "Please check the privileges of the account in NEXUS_TOKEN_NAME.",
            operation,
        )
    elif error.status_code == 401:
        logging.error(
            "Authentication failed during %s: Invalid credentials. "
            "Please check NEXUS_TOKEN_NAME and NEXUS_TOKEN_SECRET.",
            operation,
        )
    elif error.status_code == 404:
        logging.error("Resource not found during %s: %s", operation, error)
    elif error.status_code >= 500:
        logging.error("Server error during %s: %s", operation, error)
    else:
        logging.error("HTTP error during %s: %s", operation, error)

    if log_traceback:
        logging.debug("Traceback: %s", traceback.format_exc())


def handle_client_error(error: NexusToolError, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle any nexus-tool error with a message suited to its kind.

    Args:
        error: The error to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    if isinstance(error, HttpError):
        handle_http_error(error, operation, log_traceback=log_traceback)
        return

    if isinstance(error, (MissingCredentials, MissingConfiguration)):
        logging.error("Cannot %s: %s", operation, error)
    elif isinstance(error, NetworkError):
        logging.error("Could not reach Nexus during %s: %s", operation, error)
    elif isinstance(error, DecodeError):
        logging.error("Unexpected response from Nexus during %s: %s", operation, error)
    elif isinstance(error, PaginationLimitExceeded):
        logging.error("Search did not finish during %s: %s", operation, error)
    else:
        logging.error("Error during %s: %s", operation, error)

    if log_traceback:
        logging.debug("Traceback: %s", traceback.format_exc())


def handle_generic_error(error: Exception, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle generic errors with standardized logging.

    Args:
        error: The exception to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    logging.error("Unexpected error during %s: %s", operation, error)

    if log_traceback:
        logging.error("Traceback: %s", traceback.format_exc())


def with_error_handling(
    operation: str, *, exit_on_error: bool = False, exit_code: int = 1, reraise: bool = True
) -> Callable[[F], F]:
    """
    Decorator to wrap functions with consistent error handling.

    Args:
        operation: Description of the operation for logging
        exit_on_error: If True, call sys.exit on error
        exit_code: Exit code to use if exit_on_error is True
        reraise: If True, reraise the exception after logging (unless exiting)

    Returns:
        Decorator function

    Example:
        @with_error_handling("list repositories", exit_on_error=True)
        def list_repositories():
            ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except NexusToolError as e:
                handle_client_error(e, operation)
                if exit_on_error:
                    sys.exit(exit_code)
                if reraise:
                    raise
            except Exception as e:
                handle_generic_error(e, operation)
                if exit_on_error:
                    sys.exit(exit_code)
                if reraise:
                    raise
            return None

        return wrapper  # type: ignore[return-value]

    return decorator


def log_and_exit(message: str, exit_code: int = 1) -> None:
    """
    Log an error message and exit the program.

    Args:
        message: Error message to log
        exit_code: Exit code (default: 1)
    """
    logging.error(message)
    sys.exit(exit_code)


def parse_json(content: str, operation: str, *, url: Optional[str] = None) -> Any:
    """
    Parse a JSON response body.

    Args:
        content: JSON string to parse
        operation: Description of operation for error messages
        url: URL the content was fetched from

    Returns:
        Parsed JSON data

    Raises:
        DecodeError: If the content is not valid JSON
    """
    try:
        return json.loads(content)
    except ValueError as e:
        logging.debug("Content preview: %s", content[:500] if len(content) > 500 else content)
        raise DecodeError(f"Invalid JSON during {operation}: {e}", url=url) from e


__all__ = [
    "handle_http_error",
    "handle_client_error",
    "handle_generic_error",
    "with_error_handling",
    "log_and_exit",
    "parse_json",
]
