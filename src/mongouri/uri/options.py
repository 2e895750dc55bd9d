"""Query option scanning, typed coercion and read-preference tag sets."""

import re
from collections.abc import Iterator, Mapping
from typing import Callable, Optional, Union

from ..constants import (
    BOOL_OPTIONS,
    INT32_MAX,
    INT32_MIN,
    INT_OPTIONS,
    TAG_SETS_OPTION,
    WRITE_CONCERN_OPTION,
)
from ..errors import MalformedOptionError
from .cursor import Cursor, scan_to

OptionValue = Union[int, bool, str]

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_NUMERIC_START = re.compile(r"[-0-9]")


class Options(Mapping):
    """Ordered option mapping with case-insensitive keys.

    A key written twice keeps its first position and takes the last
    value (and the last spelling of the key).
    """

    def __init__(self, items: Optional[Mapping] = None):
        self._data: dict[str, tuple[str, OptionValue]] = {}
        if items:
            for key, value in items.items():
                self.add(key, value)

    def add(self, key: str, value: OptionValue) -> None:
        """Store ``value`` under ``key``; only the options stage calls this."""
        self._data[key.lower()] = (key, value)

    def __getitem__(self, key: str) -> OptionValue:
        if not isinstance(key, str):
            raise KeyError(key)
        return self._data[key.lower()][1]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._data

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self._data.values())

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Options):
            return self.to_dict(lower=True) == other.to_dict(lower=True)
        if isinstance(other, Mapping):
            if not all(isinstance(key, str) for key in other):
                return False
            return self == Options(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Options({self.to_dict()!r})"

    def to_dict(self, lower: bool = False) -> dict[str, OptionValue]:
        """Return a plain dict copy, optionally keyed by lower-case names."""
        if lower:
            return {name: value for name, (_, value) in self._data.items()}
        return dict(self._data.values())


def parse_int(value: str) -> int:
    """Best-effort base-10 parse: leading digits count, anything else is 0.

    Results are clamped to the signed 32-bit range.
    """
    match = _LEADING_INT.match(value)
    if match is None:
        return 0
    return max(INT32_MIN, min(INT32_MAX, int(match.group(1))))


def parse_write_concern(value: str) -> Union[int, str]:
    """Numeric ``w`` values become ints, named levels stay strings."""
    if _NUMERIC_START.match(value):
        return parse_int(value)
    return value


def parse_bool(value: str) -> bool:
    # Only the exact lower-case literal counts; "TRUE" and "True" are False.
    return value == "true"


COERCIONS: dict[str, Callable[[str], OptionValue]] = {
    **{key: parse_int for key in INT_OPTIONS},
    WRITE_CONCERN_OPTION: parse_write_concern,
    **{key: parse_bool for key in BOOL_OPTIONS},
}


def _split_segments(cursor: Cursor, separator: str) -> Iterator[str]:
    """Yield separator-delimited segments; a final empty segment is skipped."""
    while True:
        found = cursor.scan_until(separator)
        if found is None:
            break
        segment, index = found
        yield segment
        cursor.seek(index + 1)

    if not cursor.at_end:
        yield cursor.remaining
        cursor.seek(len(cursor.text))


def parse_tag_set(value: str) -> dict[str, str]:
    """Parse one readPreferenceTags value (``k:v,k:v``) into a tag set.

    Pairs without ':' are dropped silently. A tag key repeated within one
    value keeps its last value.
    """
    tags: dict[str, str] = {}
    for pair in _split_segments(Cursor(value), ","):
        split = scan_to(pair, ":")
        if split is not None:
            key, tag_value = split
            tags[key] = tag_value
    return tags


def parse_option(segment: str, options: Options, tag_sets: list[dict[str, str]]) -> None:
    """Parse one ``key=value`` segment into ``options`` or ``tag_sets``.

    Raises:
        MalformedOptionError: If the segment has no unescaped '='
    """
    split = scan_to(segment, "=")
    if split is None:
        raise MalformedOptionError(
            f"Invalid option: {segment!r}",
            "Options must be written as key=value and separated by '&'",
        )

    key, value = split
    name = key.lower()

    if name == TAG_SETS_OPTION:
        tag_sets.append(parse_tag_set(value))
        return

    coerce = COERCIONS.get(name)
    options.add(key, coerce(value) if coerce else value)


def parse_options(cursor: Cursor, options: Options, tag_sets: list[dict[str, str]]) -> None:
    """Consume the rest of the input as '&'-separated options."""
    for segment in _split_segments(cursor, "&"):
        parse_option(segment, options, tag_sets)
