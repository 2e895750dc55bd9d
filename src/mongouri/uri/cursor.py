"""Cursor over connection string text and the shared delimiter scanner."""

from typing import Optional

from ..constants import ESCAPE_CHAR


class Cursor:
    """Read position into an immutable piece of text.

    Every scan stage works through the same few primitives so the
    escaping rule lives in exactly one place (``scan_until``). Positions
    are indexes into a ``str``, so a scan never splits a multi-byte
    character.
    """

    def __init__(self, text: str, pos: int = 0):
        self.text = text
        self.pos = pos

    def __repr__(self) -> str:
        return f"Cursor(pos={self.pos}, remaining={self.remaining!r})"

    @property
    def remaining(self) -> str:
        return self.text[self.pos:]

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Return the current character, or an empty string at end of input."""
        if self.at_end:
            return ""
        return self.text[self.pos]

    def advance(self, count: int = 1) -> None:
        self.pos = min(self.pos + count, len(self.text))

    def seek(self, pos: int) -> None:
        self.pos = min(max(pos, 0), len(self.text))

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.pos)

    def find(self, needle: str) -> int:
        """Return the absolute index of ``needle`` at or after the cursor, or -1."""
        return self.text.find(needle, self.pos)

    def scan_until(self, stop: str, escape: bool = True) -> Optional[tuple[str, int]]:
        """Scan forward to the first unescaped ``stop`` character.

        The cursor itself does not move.

        Args:
            stop: Single character that ends the scan
            escape: When True a backslash protects the character after it

        Returns:
            Tuple of (prefix, index of the stop character), or None when the
            stop character never appears or a trailing backslash has nothing
            to protect. The backslash is kept in the prefix: no unescaping
            is performed.
        """
        text = self.text
        i = self.pos
        end = len(text)
        while i < end:
            c = text[i]
            if c == stop:
                return text[self.pos:i], i
            if escape and c == ESCAPE_CHAR:
                i += 1
                if i >= end:
                    return None
            i += 1
        return None


def scan_to(text: str, stop: str) -> Optional[tuple[str, str]]:
    """Split ``text`` once on its first unescaped ``stop`` character.

    Returns:
        Tuple of (before, after) with the stop character dropped, or None
        when ``text`` holds no unescaped ``stop``.
    """
    found = Cursor(text).scan_until(stop)
    if found is None:
        return None
    prefix, index = found
    return prefix, text[index + 1:]
