"""mongouri - parse MongoDB connection strings into validated structures."""

from mongouri.constants import DEFAULT_PORT, VERSION
from mongouri.errors import (
    EmptyHostListError,
    InvalidEncodingError,
    MalformedCredentialsError,
    MalformedHostError,
    MalformedOptionError,
    MalformedSchemeError,
    ParseError,
)
from mongouri.uri import (
    ConnectionString,
    HostEntry,
    Options,
    copy,
    get_database,
    get_hosts,
    get_options,
    get_password,
    get_read_preferences,
    get_string,
    get_username,
    parse,
)

__version__ = VERSION

__all__ = [
    "DEFAULT_PORT",
    "ConnectionString",
    "EmptyHostListError",
    "HostEntry",
    "InvalidEncodingError",
    "MalformedCredentialsError",
    "MalformedHostError",
    "MalformedOptionError",
    "MalformedSchemeError",
    "Options",
    "ParseError",
    "copy",
    "get_database",
    "get_hosts",
    "get_options",
    "get_password",
    "get_read_preferences",
    "get_string",
    "get_username",
    "parse",
]
