"""Structured logging for connection string parsing."""

import json
import logging
import time
from typing import Optional

from .cursor import Cursor, scan_to

# Audit logger for parse events
uri_logger = logging.getLogger("mongouri.uri")


def sanitize_uri(uri: str) -> str:
    """Mask the password part of a connection string.

    Args:
        uri: Connection string, parsed or not

    Returns:
        Connection string with the password replaced by ``***``
    """
    start = uri.find("://")
    if start == -1:
        return uri
    start += len("://")

    # Same escape-aware scan as the credentials stage, so an escaped '@'
    # inside the password is masked too.
    found = Cursor(uri, start).scan_until("@")
    if found is None:
        return uri

    userinfo, index = found
    split = scan_to(userinfo, ":")
    if split is None:
        return uri

    return f"{uri[:start]}{split[0]}:***{uri[index:]}"


def log_parse(
    uri: str,
    success: bool,
    host_count: int = 0,
    duration: float = 0.0,
    error: Optional[str] = None,
    cause: Optional[str] = None,
) -> None:
    """Log one parse attempt.

    Successful parses are logged at DEBUG, failures at WARNING.

    Args:
        uri: Connection string (will be sanitized)
        success: Whether parsing succeeded
        host_count: Number of hosts found
        duration: Parse time in seconds
        error: Error message if failed
        cause: Failure cause name if failed
    """
    log_data = {
        "event": "uri_parse",
        "uri": sanitize_uri(uri),
        "success": success,
        "host_count": host_count,
        "duration_seconds": round(duration, 6),
    }

    if error:
        log_data["error"] = error.splitlines()[0]
    if cause:
        log_data["cause"] = cause

    if success:
        uri_logger.debug(json.dumps(log_data))
    else:
        uri_logger.warning(json.dumps(log_data))


class OperationTimer:
    """Context manager for timing a parse or a client round trip."""

    def __init__(self):
        self.start_time: float = 0.0
        self.duration: float = 0.0

    def __enter__(self):
        self.start_time = time.time()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.time() - self.start_time


def log_connection(uri: str, success: bool, error: Optional[str] = None, duration: float = 0.0) -> None:
    """Log a client connection attempt made from a parsed connection string.

    Args:
        uri: Connection string (will be sanitized)
        success: Whether connection succeeded
        error: Error message if failed
        duration: Connection time in seconds
    """
    log_data = {
        "event": "client_connection",
        "uri": sanitize_uri(uri),
        "success": success,
        "duration_seconds": round(duration, 3),
    }

    if error:
        log_data["error"] = error

    if success:
        uri_logger.info(json.dumps(log_data))
    else:
        uri_logger.error(json.dumps(log_data))
