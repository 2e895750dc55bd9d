"""Host-list scanning: network hosts and Unix domain socket paths."""

import re
from dataclasses import dataclass
from typing import Optional

from ..constants import DEFAULT_PORT, MAX_PORT, SOCKET_SUFFIX
from ..errors import EmptyHostListError, MalformedHostError
from .cursor import Cursor, scan_to

_PORT_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class HostEntry:
    """One server address from the host list.

    Network hosts always carry a port. Socket entries carry ``port=None``
    and keep the full path in ``host``.
    """

    host: str
    port: Optional[int] = None

    @property
    def is_socket(self) -> bool:
        return self.port is None

    @property
    def host_and_port(self) -> str:
        if self.is_socket:
            return self.host
        return f"{self.host}:{self.port}"

    def __str__(self) -> str:
        return self.host_and_port


def parse_host(token: str) -> HostEntry:
    """Parse a single host token into a HostEntry.

    Args:
        token: ``hostname``, ``hostname:port`` or a path containing ``.sock``

    Returns:
        HostEntry for the token (default port 27017 when none is given)

    Raises:
        MalformedHostError: If the token's ':' is not followed by a decimal
            port in 0..65535
    """
    if SOCKET_SUFFIX in token:
        return HostEntry(token)

    split = scan_to(token, ":")
    if split is None:
        return HostEntry(token, DEFAULT_PORT)

    hostname, port_text = split
    match = _PORT_DIGITS.match(port_text)
    if match is None:
        raise MalformedHostError(
            f"Invalid host: {token!r}",
            "Use hostname[:port] where port is a decimal number",
        )

    port = int(match.group())
    if port > MAX_PORT:
        raise MalformedHostError(
            f"Invalid port in host {token!r}: {port} is out of range",
            f"Ports must be between 0 and {MAX_PORT}",
        )

    return HostEntry(hostname, port)


def _socket_end(cursor: Cursor) -> int:
    """Return the index just past a leading socket path, or -1.

    A token starting with '/' is a socket path when ``.sock`` appears
    later and neither ',' nor '?' comes before it.
    """
    if not cursor.startswith("/"):
        return -1

    sock = cursor.find(SOCKET_SUFFIX)
    if sock == -1:
        return -1

    for separator in (",", "?"):
        index = cursor.find(separator)
        if index != -1 and index < sock:
            return -1

    return sock + len(SOCKET_SUFFIX)


def _scan_to_terminator(cursor: Cursor) -> Optional[tuple[str, int]]:
    """Scan to whichever of '/' or '?' comes first."""
    found = [
        result
        for result in (cursor.scan_until("/"), cursor.scan_until("?"))
        if result is not None
    ]
    if not found:
        return None
    return min(found, key=lambda result: result[1])


def parse_hosts(cursor: Cursor) -> list[HostEntry]:
    """Consume the host list, leaving the cursor on the '/' or '?' after it.

    Args:
        cursor: Cursor positioned at the first host token

    Returns:
        Hosts in order of appearance (duplicates kept)

    Raises:
        EmptyHostListError: If no host token precedes '/', '?' or end of input
        MalformedHostError: If any host token fails to parse
    """
    hosts: list[HostEntry] = []

    while True:
        sock_end = _socket_end(cursor)
        if sock_end != -1:
            hosts.append(parse_host(cursor.text[cursor.pos:sock_end]))
            cursor.seek(sock_end)
            if cursor.peek() == ",":
                cursor.advance()
                continue
            return hosts

        comma = cursor.scan_until(",")
        terminator = _scan_to_terminator(cursor)

        # A ',' after the first '/' or '?' belongs to the database or options.
        if comma is not None and (terminator is None or comma[1] < terminator[1]):
            token, index = comma
            hosts.append(parse_host(token))
            cursor.seek(index + 1)
            continue

        if terminator is not None:
            token, index = terminator
            if not token and not hosts:
                break
            hosts.append(parse_host(token))
            cursor.seek(index)
            return hosts

        if not cursor.at_end:
            hosts.append(parse_host(cursor.remaining))
            cursor.seek(len(cursor.text))
            return hosts

        # Trailing ',' after at least one host
        if hosts:
            return hosts
        break

    raise EmptyHostListError(
        "Invalid connection string: no hosts given",
        "Use mongodb://host[:port][,host[:port]...]",
    )
