# The author disclaims copyright to this source code. Please see the
# accompanying UNLICENSE file.
"""Trimming views and extracting sub-views."""

from strview import compare
from strview import view as view_lib
from strview.view import View


def trim_start(str_: View, chars_to_trim: View) -> View:
    """Removes leading bytes of str_ which are any of chars_to_trim."""
    start = str_.start
    while start < str_.stop and compare.contains_char(
        chars_to_trim, str_.obj[start]
    ):
        start += 1
    if start == str_.start:
        return str_
    return str_.replace(start=start)


def trim_end(str_: View, chars_to_trim: View) -> View:
    """Removes trailing bytes of str_ which are any of chars_to_trim."""
    stop = str_.stop
    while stop > str_.start and compare.contains_char(
        chars_to_trim, str_.obj[stop - 1]
    ):
        stop -= 1
    if stop == str_.stop:
        return str_
    return str_.replace(stop=stop)


def trim(str_: View, chars_to_trim: View) -> View:
    return trim_end(trim_start(str_, chars_to_trim), chars_to_trim)


def sub(str_: View, begin: int, end: int) -> View:
    """Returns a sub-view of str_, from begin up to (not including) end.

    Negative indexes count back from the end of str_. Indexes are clipped to
    the bounds of str_, so sys.maxsize may be used to mean "the end".

    Returns:
        The sub-view, which may be valid-empty. INVALID if begin comes after
            end, or the range lies entirely outside str_. A valid-empty str_
            always yields a valid-empty view, and an INVALID one yields
            INVALID.
    """
    if str_.obj is None or len(str_) == 0:
        return str_
    size = len(str_)
    if begin < 0:
        begin += size
    if end < 0:
        end += size
    if begin > end or begin >= size or end < 0:
        return view_lib.INVALID
    begin = max(begin, 0)
    end = min(end, size)
    return View(obj=str_.obj, start=str_.start + begin, stop=str_.start + end)
