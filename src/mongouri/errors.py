"""Parse failures raised while building a ConnectionString."""

from typing import Optional


class ParseError(ValueError):
    """Base class for every connection string parse failure.

    The ``cause`` attribute names the failing rule so callers can tell
    failures apart without matching on message text.
    """

    cause = "parse-error"

    def __init__(self, message: str, hint: Optional[str] = None):
        if hint:
            message = f"{message}\n  Hint: {hint}"
        super().__init__(message)
        self.hint = hint


class InvalidEncodingError(ParseError):
    """Byte input is not valid UTF-8."""

    cause = "invalid-encoding"


class MalformedSchemeError(ParseError):
    """Input does not start with the mongodb:// prefix."""

    cause = "malformed-scheme"


class MalformedCredentialsError(ParseError):
    """A userinfo segment exists but has no ':' separator."""

    cause = "malformed-credentials"


class EmptyHostListError(ParseError):
    """No host token could be extracted."""

    cause = "empty-host-list"


class MalformedHostError(ParseError):
    """A host token is empty or carries an unusable port."""

    cause = "malformed-host"


class MalformedOptionError(ParseError):
    """An option segment lacks '='."""

    cause = "malformed-option"
