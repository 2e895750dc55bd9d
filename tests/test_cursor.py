"""Unit tests for the cursor and delimiter scanner."""

from mongouri.uri.cursor import Cursor, scan_to


class TestScanUntil:
    """Test Cursor.scan_until."""

    def test_finds_stop_character(self):
        """Test prefix and stop index are returned."""
        assert Cursor("abc@def").scan_until("@") == ("abc", 3)

    def test_missing_stop_character(self):
        """Test None when the stop character never appears."""
        assert Cursor("abcdef").scan_until("@") is None

    def test_empty_prefix(self):
        """Test stop character at the cursor yields an empty prefix."""
        assert Cursor("@abc").scan_until("@") == ("", 0)

    def test_escaped_stop_does_not_terminate(self):
        """Test backslash protects the next character and is kept."""
        assert Cursor(r"a\@b@c").scan_until("@") == ("a\\@b", 4)

    def test_only_escaped_stop(self):
        """Test an input whose only stop character is escaped."""
        assert Cursor(r"a\@b").scan_until("@") is None

    def test_trailing_escape_fails(self):
        """Test trailing backslash with nothing to protect is no match."""
        assert Cursor("abc\\").scan_until("@") is None

    def test_escape_disabled(self):
        """Test backslash is ordinary text when escaping is off."""
        assert Cursor(r"a\@b").scan_until("@", escape=False) == ("a\\", 2)

    def test_scans_from_cursor_position(self):
        """Test scanning starts at the current position."""
        cursor = Cursor("x,y,z", pos=2)
        assert cursor.scan_until(",") == ("y", 3)

    def test_does_not_move_cursor(self):
        """Test scanning leaves the cursor where it was."""
        cursor = Cursor("a,b")
        cursor.scan_until(",")
        assert cursor.pos == 0

    def test_unicode_characters(self):
        """Test multi-byte characters are never split."""
        assert Cursor("café@h").scan_until("@") == ("café", 4)

    def test_escaped_multibyte_character(self):
        """Test an escaped multi-byte character is skipped whole."""
        assert Cursor("a\\é@b").scan_until("@") == ("a\\é", 3)


class TestCursorPrimitives:
    """Test peek, advance, seek and find."""

    def test_peek_and_advance(self):
        """Test walking through the text one character at a time."""
        cursor = Cursor("ab")
        assert cursor.peek() == "a"
        cursor.advance()
        assert cursor.peek() == "b"
        cursor.advance()
        assert cursor.peek() == ""
        assert cursor.at_end

    def test_advance_clamps_to_end(self):
        """Test advancing past the end stops at the end."""
        cursor = Cursor("abc")
        cursor.advance(10)
        assert cursor.pos == 3
        assert cursor.remaining == ""

    def test_startswith_and_find(self):
        """Test prefix checks and searches are relative to the cursor."""
        cursor = Cursor("mongodb://h.sock", pos=10)
        assert cursor.startswith("h")
        assert not cursor.startswith("mongodb")
        assert cursor.find(".sock") == 11
        assert cursor.find("mongodb") == -1

    def test_seek(self):
        """Test seek moves to an absolute position."""
        cursor = Cursor("abcdef")
        cursor.seek(4)
        assert cursor.remaining == "ef"


class TestScanTo:
    """Test scan_to helper."""

    def test_splits_once(self):
        """Test only the first stop character splits."""
        assert scan_to("key=val=ue", "=") == ("key", "val=ue")

    def test_no_separator(self):
        """Test None when the separator is missing."""
        assert scan_to("novalue", "=") is None

    def test_empty_after(self):
        """Test separator at the end gives an empty suffix."""
        assert scan_to("user:", ":") == ("user", "")
