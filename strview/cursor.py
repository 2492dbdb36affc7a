# The author disclaims copyright to this source code. Please see the
# accompanying UNLICENSE file.
"""A mutable source view, for consuming splits in place.

Example:
    cursor = Cursor(cstr(b"2023/07/03"))
    year = cursor.split_first_delimiter(cstr_sl(b"/"))
    month = cursor.split_first_delimiter(cstr_sl(b"/"))
    day = cursor.split_first_delimiter(cstr_sl(b"/"))
    # cursor.view is now INVALID

A Cursor is not thread-safe. Views themselves are plain values, and may be
shared freely.
"""

import dataclasses
from typing import Iterator

from strview import const
from strview import split
from strview import view as view_lib
from strview.view import View


@dataclasses.dataclass
class Cursor:
    """The remaining part of a view being split.

    Attributes:
        view: The unconsumed part of the source.
        eol: The line ending discriminator, carried between calls to
            split_line(). This only matters if view is replaced with a view of
            the next piece of a stream between calls.
    """

    view: View = view_lib.INVALID
    eol: int = const.NUL

    def _take(self, result: split.Split) -> View:
        consumed, remainder = result
        assert remainder is not None
        self.view = remainder
        return consumed

    def swap(self, other: "Cursor") -> None:
        self.view, other.view = other.view, self.view

    def split_first_delimiter(self, delimiters: View) -> View:
        return self._take(split.split_first_delimiter(self.view, delimiters))

    def split_first_delimiter_nocase(self, delimiters: View) -> View:
        return self._take(
            split.split_first_delimiter_nocase(self.view, delimiters)
        )

    def split_last_delimiter(self, delimiters: View) -> View:
        return self._take(split.split_last_delimiter(self.view, delimiters))

    def split_last_delimiter_nocase(self, delimiters: View) -> View:
        return self._take(
            split.split_last_delimiter_nocase(self.view, delimiters)
        )

    def split_index(self, index: int) -> View:
        return self._take(split.split_index(self.view, index))

    def split_left(self, pos: View) -> View:
        return self._take(split.split_left(self.view, pos))

    def split_right(self, pos: View) -> View:
        return self._take(split.split_right(self.view, pos))

    def pop_first_char(self) -> int:
        byte, remainder = split.pop_first_char(self.view)
        assert remainder is not None
        self.view = remainder
        return byte

    def split_line(self) -> View:
        line, remainder, eol = split.split_line(self.view, self.eol)
        assert remainder is not None and eol is not None
        self.view = remainder
        self.eol = eol
        return line

    def feed(self, view: View) -> None:
        """Replaces the source with the next piece of a stream.

        The eol discriminator is kept.
        """
        self.view = view

    def iter_split(self, delimiters: View) -> Iterator[View]:
        """Yields each delimited field, until the source becomes INVALID."""
        while view_lib.is_valid(self.view):
            yield self.split_first_delimiter(delimiters)

    def iter_lines(self) -> Iterator[View]:
        """Yields each complete line.

        Stops when no line ending remains. Any unterminated tail is left in
        view.
        """
        while True:
            line = self.split_line()
            if not view_lib.is_valid(line):
                return
            yield line
