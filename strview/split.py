# The author disclaims copyright to this source code. Please see the
# accompanying UNLICENSE file.
"""Consuming splits.

Each function here takes a source view and returns the portion it consumed,
along with the new source: the part that was not consumed. The caller should
replace its source with the returned one. A source of None (that is, no source
at all) yields (INVALID, None).

See strview.cursor.Cursor for a wrapper which updates its source in place.
"""

from typing import Iterable
from typing import Optional
from typing import Tuple

from strview import compare
from strview import const
from strview import view as view_lib
from strview.view import View

Split = Tuple[View, Optional[View]]

_LINE_TERMINATORS = view_lib.cstr_sl(const.LINE_TERMINATORS)


def _find_delimiter(
    src: View, delimiters: View, nocase: bool, reverse: bool
) -> Optional[int]:
    if src.obj is None or delimiters.obj is None:
        return None
    indexes: Iterable[int] = range(src.start, src.stop)
    if reverse:
        indexes = reversed(indexes)
    for i in indexes:
        if compare.contains_char(delimiters, src.obj[i], nocase):
            return i
    return None


def _split_first(src: View, delimiters: View, nocase: bool) -> Split:
    index = _find_delimiter(src, delimiters, nocase, False)
    if index is None:
        return src, view_lib.INVALID
    result = src.replace(stop=index)
    # Only point past the delimiter if there's anything there
    if index + 1 < src.stop:
        return result, src.replace(start=index + 1)
    return result, View(obj=src.obj, start=index, stop=index)


def _split_last(src: View, delimiters: View, nocase: bool) -> Split:
    index = _find_delimiter(src, delimiters, nocase, True)
    if index is None:
        return src, view_lib.INVALID
    if index + 1 < src.stop:
        result = src.replace(start=index + 1)
    else:
        result = View(obj=src.obj, start=index, stop=index)
    return result, src.replace(stop=index)


def split_first_delimiter(src: Optional[View], delimiters: View) -> Split:
    """Splits a view at the first of any of the delimiter bytes.

    Args:
        src: The view to split.
        delimiters: A set of delimiter bytes. Any one of them ends the split.

    Returns:
        A (result, src) tuple. result is everything before the delimiter. src
            is everything after it; the delimiter itself is discarded. If no
            delimiter was found, result is all of src, and src is INVALID.
    """
    if src is None:
        return view_lib.INVALID, None
    return _split_first(src, delimiters, False)


def split_first_delimiter_nocase(
    src: Optional[View], delimiters: View
) -> Split:
    if src is None:
        return view_lib.INVALID, None
    return _split_first(src, delimiters, True)


def split_last_delimiter(src: Optional[View], delimiters: View) -> Split:
    """Splits a view at the last of any of the delimiter bytes.

    Returns:
        A (result, src) tuple. result is everything after the delimiter. src
            is everything before it. If no delimiter was found, result is all
            of src, and src is INVALID.
    """
    if src is None:
        return view_lib.INVALID, None
    return _split_last(src, delimiters, False)


def split_last_delimiter_nocase(
    src: Optional[View], delimiters: View
) -> Split:
    if src is None:
        return view_lib.INVALID, None
    return _split_last(src, delimiters, True)


def split_index(src: Optional[View], index: int) -> Split:
    """Splits a number of bytes from a view.

    A non-negative index splits from the front, and a negative one from the
    back. The index is clipped to the length of src, so if it's too large,
    everything is split and src becomes valid-empty.

    Returns:
        A (result, src) tuple, where result holds the split bytes.
    """
    if src is None:
        return view_lib.INVALID, None
    if src.obj is None:
        return view_lib.INVALID, view_lib.INVALID
    size = len(src)
    neg = index < 0
    if neg:
        index += size
    index = min(max(index, 0), size)
    head = src.replace(stop=src.start + index)
    tail = src.replace(start=src.start + index)
    if neg:
        return tail, head
    return head, tail


def pop_first_char(src: Optional[View]) -> Tuple[int, Optional[View]]:
    """Splits the first byte from a view.

    Returns:
        A (byte, src) tuple. byte is NUL if src was empty, INVALID or None.
    """
    if src is None or len(src) == 0:
        return const.NUL, src
    result, src = split_index(src, 1)
    return result.byte_at(0), src


def split_left(src: Optional[View], pos: View) -> Split:
    """Splits everything before pos from a view.

    pos must be a view of the same buffer as src, as returned by e.g.
    compare.find_first(src, ...).

    Returns:
        A (result, src) tuple. If pos starts at the end of src, result is
            all of src, and src becomes valid-empty. If pos starts at the
            start of src, result is valid-empty, and src is unchanged. If pos
            doesn't start within src, result is INVALID, and src is unchanged.
    """
    if src is None:
        return view_lib.INVALID, None
    if not (view_lib.is_valid(src) and src.same_buffer(pos)):
        return view_lib.INVALID, src
    if not src.start <= pos.start <= src.stop:
        return view_lib.INVALID, src
    return split_index(src, pos.start - src.start)


def split_right(src: Optional[View], pos: View) -> Split:
    """Splits everything after pos from a view.

    Like split_left(), but result is everything from the end of pos, and src
    keeps everything before that. If pos ends at the end of src, or at the
    start of src, result is valid-empty, and src is unchanged.
    """
    if src is None:
        return view_lib.INVALID, None
    if not (view_lib.is_valid(src) and src.same_buffer(pos)):
        return view_lib.INVALID, src
    split_point = pos.stop
    if not src.start <= split_point <= src.stop:
        return view_lib.INVALID, src
    if split_point == src.start:
        return View(obj=src.obj, start=split_point, stop=split_point), src
    head, tail = split_index(src, split_point - src.start)
    return tail, head


def split_line(
    src: Optional[View], eol: Optional[int] = None
) -> Tuple[View, Optional[View], Optional[int]]:
    """Splits the first line from a view.

    Any mixture of CR, LF, CRLF and LFCR line endings is handled. A CRLF or LFCR
    pair is one line ending, but CRCR or LFLF is two.

    When reading a stream in pieces, a pair may be split between the end of one
    piece and the start of the next. The eol discriminator handles this: pass
    the eol returned by the previous call. It is only set when the line ending
    is the last byte of src, and is 0 otherwise. None means the caller doesn't
    track it.

    Args:
        src: The view to split.
        eol: The eol discriminator from the previous call, 0, or None.

    Returns:
        A (line, src, eol) tuple. line excludes the line ending, which is also
            removed from src. If no line ending was found, line is INVALID and
            src is left as it was, except that the second half of a split pair
            is consumed.
    """
    if src is None or len(src) == 0:
        return view_lib.INVALID, src, eol
    if eol and eol + src.byte_at(0) == const.CRLF_SUM:
        _, src = pop_first_char(src)
        eol = const.NUL
    assert src is not None

    line, rest = split_first_delimiter(src, _LINE_TERMINATORS)
    if not (rest is not None and view_lib.is_valid(rest)):
        return view_lib.INVALID, src, eol

    terminator = line.obj[line.stop]
    if len(rest):
        if terminator + rest.byte_at(0) == const.CRLF_SUM:
            _, rest = pop_first_char(rest)
        # Only a terminator at the very end may be half of a split pair
        terminator = const.NUL
    if eol is not None:
        eol = terminator
    return line, rest, eol
