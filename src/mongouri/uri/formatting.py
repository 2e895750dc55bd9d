"""Plain-text and JSON-ready rendering of parsed connection strings."""

from typing import Any

from .connection_string import ConnectionString
from .logging import sanitize_uri

RESULT_SEPARATOR = "=" * 80
ROW_SEPARATOR = "-" * 80
PASSWORD_MASK = "***"


def connection_string_to_dict(uri: ConnectionString, show_password: bool = False) -> dict[str, Any]:
    """Convert a parsed connection string to plain JSON-serializable data.

    Args:
        uri: Parsed connection string
        show_password: Include the password verbatim instead of masking it

    Returns:
        Dictionary with keys: uri, hosts, username, password, database,
        options, read_preference_tags, write_concern
    """
    password = uri.password
    if password is not None and not show_password:
        password = PASSWORD_MASK

    return {
        "uri": uri.string if show_password else sanitize_uri(uri.string),
        "hosts": [
            {"host": entry.host, "port": entry.port, "socket": entry.is_socket}
            for entry in uri.hosts
        ],
        "username": uri.username,
        "password": password,
        "database": uri.database,
        "options": uri.options.to_dict(),
        "read_preference_tags": [dict(tags) for tags in uri.read_preference_tags],
        "write_concern": uri.write_concern,
    }


def format_connection_string(uri: ConnectionString) -> str:
    """Format a parsed connection string as a plain-text report.

    The password is always masked.

    Args:
        uri: Parsed connection string

    Returns:
        Plain text report with clear separators
    """
    output = [
        RESULT_SEPARATOR,
        "MONGODB CONNECTION STRING",
        RESULT_SEPARATOR,
        f"URI: {sanitize_uri(uri.string)}",
        f"Database: {uri.database if uri.database is not None else '(none)'}",
    ]

    if uri.username is not None:
        output.append(f"Username: {uri.username}")
        output.append(f"Password: {PASSWORD_MASK if uri.password else '(empty)'}")

    output.extend(["", f"Hosts: {len(uri.hosts)}", ROW_SEPARATOR])
    for idx, entry in enumerate(uri.hosts, start=1):
        kind = "socket" if entry.is_socket else "tcp"
        output.append(f"{idx:4d}  {entry.host_and_port}  ({kind})")
    output.append(ROW_SEPARATOR)

    if uri.options:
        output.append(f"Options: {len(uri.options)}")
        width = max(len(key) for key in uri.options)
        for key, value in uri.options.items():
            output.append(f"  {key.ljust(width)}  {value!r}")
        output.append(ROW_SEPARATOR)

    if uri.read_preference_tags:
        output.append(f"Read preference tag sets: {len(uri.read_preference_tags)}")
        for idx, tags in enumerate(uri.read_preference_tags):
            rendered = ", ".join(f"{key}: {value}" for key, value in tags.items())
            output.append(f"  #{idx}: {{{rendered}}}")
        output.append(ROW_SEPARATOR)

    output.extend([RESULT_SEPARATOR, ""])

    return "\n".join(output)
