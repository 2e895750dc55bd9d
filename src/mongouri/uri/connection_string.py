"""Parsed connection string and its read-only accessors."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Optional

from ..constants import WRITE_CONCERN_OPTION
from .hosts import HostEntry
from .logging import sanitize_uri
from .options import Options


@dataclass(frozen=True)
class ConnectionString:
    """Validated result of parsing a ``mongodb://`` connection string.

    Instances are only produced by ``parse`` and never change afterwards,
    so they can be shared freely between threads.
    """

    string: str
    hosts: tuple[HostEntry, ...]
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    database: Optional[str] = None
    options: Options = field(default_factory=Options)
    read_preference_tags: tuple[Mapping[str, str], ...] = ()

    def __post_init__(self):
        tag_sets = tuple(MappingProxyType(dict(tags)) for tags in self.read_preference_tags)
        object.__setattr__(self, "hosts", tuple(self.hosts))
        object.__setattr__(self, "read_preference_tags", tag_sets)

    def __repr__(self) -> str:
        return f"ConnectionString({sanitize_uri(self.string)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConnectionString):
            return NotImplemented
        return (
            self.string == other.string
            and self.hosts == other.hosts
            and self.username == other.username
            and self.password == other.password
            and self.database == other.database
            and self.options == other.options
            and [dict(t) for t in self.read_preference_tags]
            == [dict(t) for t in other.read_preference_tags]
        )

    def __hash__(self) -> int:
        return hash(self.string)

    @property
    def write_concern(self) -> dict[str, Any]:
        """Write concern fields (w, wtimeout, j) taken from the options."""
        concern: dict[str, Any] = {}
        if WRITE_CONCERN_OPTION in self.options:
            concern["w"] = self.options[WRITE_CONCERN_OPTION]
        if "wtimeoutms" in self.options:
            concern["wtimeout"] = self.options["wtimeoutms"]
        if "journal" in self.options:
            concern["j"] = self.options["journal"]
        return concern

    def copy(self) -> "ConnectionString":
        """Return a fresh parse of the original text."""
        from .parser import parse

        return parse(self.string)


# Fail-soft accessors: None in, None out.

def get_string(uri: Optional[ConnectionString]) -> Optional[str]:
    return uri.string if uri is not None else None


def get_hosts(uri: Optional[ConnectionString]) -> Optional[tuple[HostEntry, ...]]:
    return uri.hosts if uri is not None else None


def get_username(uri: Optional[ConnectionString]) -> Optional[str]:
    return uri.username if uri is not None else None


def get_password(uri: Optional[ConnectionString]) -> Optional[str]:
    return uri.password if uri is not None else None


def get_database(uri: Optional[ConnectionString]) -> Optional[str]:
    return uri.database if uri is not None else None


def get_options(uri: Optional[ConnectionString]) -> Optional[Options]:
    return uri.options if uri is not None else None


def get_read_preferences(uri: Optional[ConnectionString]) -> Optional[tuple[Mapping[str, str], ...]]:
    return uri.read_preference_tags if uri is not None else None


def copy(uri: Optional[ConnectionString]) -> Optional[ConnectionString]:
    """Re-parse ``uri``'s original text; ``copy(None)`` is None."""
    return uri.copy() if uri is not None else None
