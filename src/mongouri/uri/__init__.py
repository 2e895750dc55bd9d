"""Connection string parsing for mongouri.

This module turns a ``mongodb://`` connection string into an immutable,
validated ConnectionString.

Architecture:
- cursor.py: Cursor and the shared escape-aware delimiter scanner
- hosts.py: Host-list stage and single-host parsing (TCP and Unix sockets)
- options.py: Option coercion table and read-preference tag sets
- parser.py: Scheme, credentials and database stages plus the driver
- connection_string.py: Parsed result and fail-soft accessors
- formatting.py: Plain-text and JSON rendering
- logging.py: Structured parse logging with credential masking
"""

from mongouri.uri.connection_string import (
    ConnectionString,
    copy,
    get_database,
    get_hosts,
    get_options,
    get_password,
    get_read_preferences,
    get_string,
    get_username,
)
from mongouri.uri.formatting import connection_string_to_dict, format_connection_string
from mongouri.uri.hosts import HostEntry
from mongouri.uri.options import Options
from mongouri.uri.parser import parse

__all__ = [
    "ConnectionString",
    "HostEntry",
    "Options",
    "connection_string_to_dict",
    "copy",
    "format_connection_string",
    "get_database",
    "get_hosts",
    "get_options",
    "get_password",
    "get_read_preferences",
    "get_string",
    "get_username",
    "parse",
]
