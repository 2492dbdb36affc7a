# The author disclaims copyright to this source code. Please see the
# accompanying UNLICENSE file.
"""Comparing and searching views.

Nothing here copies the referenced data. Case-insensitive variants fold ASCII
letters only.
"""

from strview import view as view_lib
from strview.view import View

# Maps each byte to its ASCII upper-case form
_FOLD = bytes(range(256)).upper()


def _same_start(a: View, b: View) -> bool:
    return a.obj is b.obj and a.start == b.start


def _match_nocase(a: memoryview, b: memoryview) -> bool:
    for x, y in zip(a, b):
        if _FOLD[x] != _FOLD[y]:
            return False
    return True


def contains_char(chars: View, byte: int, nocase: bool = False) -> bool:
    """Returns True if byte is any of the bytes of chars.

    An INVALID chars view contains nothing.
    """
    if not nocase:
        for c in chars.to_memoryview():
            if c == byte:
                return True
        return False
    byte = _FOLD[byte]
    for c in chars.to_memoryview():
        if _FOLD[c] == byte:
            return True
    return False


def is_match(str1: View, str2: View) -> bool:
    """Returns True if both views hold the same bytes.

    This compares content only. INVALID matches INVALID, and also matches any
    valid-empty view.
    """
    return str1 == str2


def is_match_nocase(str1: View, str2: View) -> bool:
    if len(str1) != len(str2):
        return False
    if _same_start(str1, str2):
        return True
    return _match_nocase(str1.to_memoryview(), str2.to_memoryview())


def starts_with(str1: View, str2: View) -> bool:
    """Returns True if str1 starts with str2.

    If str2 is INVALID, returns True only if str1 is also INVALID.
    """
    if not view_lib.is_valid(str2):
        return not view_lib.is_valid(str1)
    if len(str1) < len(str2):
        return False
    if _same_start(str1, str2):
        return True
    return str1.to_memoryview()[: len(str2)] == str2.to_memoryview()


def starts_with_nocase(str1: View, str2: View) -> bool:
    if not view_lib.is_valid(str2):
        return not view_lib.is_valid(str1)
    if len(str1) < len(str2):
        return False
    if _same_start(str1, str2):
        return True
    return _match_nocase(
        str1.to_memoryview()[: len(str2)], str2.to_memoryview()
    )


def compare(str1: View, str2: View) -> int:
    """Compares two views lexicographically, by unsigned byte value.

    Returns:
        The difference of the first pair of differing bytes, if any. Otherwise
            +1 if str1 is longer, -1 if str2 is longer, or 0.
    """
    for x, y in zip(str1.to_memoryview(), str2.to_memoryview()):
        if x != y:
            return x - y
    if len(str1) == len(str2):
        return 0
    return 1 if len(str1) > len(str2) else -1


def find_first(haystack: View, needle: View) -> View:
    """Finds the first occurrence of needle in haystack.

    Returns:
        A view of the occurrence, within haystack's buffer, or INVALID if
            needle wasn't found or either view is INVALID. An empty needle
            matches at the start of haystack.
    """
    if haystack.obj is None or needle.obj is None:
        return view_lib.INVALID
    if len(needle) > len(haystack):
        return view_lib.INVALID
    index = haystack.obj.find(
        needle.to_memoryview(), haystack.start, haystack.stop
    )
    if index < 0:
        return view_lib.INVALID
    return View(obj=haystack.obj, start=index, stop=index + len(needle))


def find_last(haystack: View, needle: View) -> View:
    """Finds the last occurrence of needle in haystack.

    Like find_first(), but an empty needle matches at the end of haystack.
    """
    if haystack.obj is None or needle.obj is None:
        return view_lib.INVALID
    if len(needle) > len(haystack):
        return view_lib.INVALID
    index = haystack.obj.rfind(
        needle.to_memoryview(), haystack.start, haystack.stop
    )
    if index < 0:
        return view_lib.INVALID
    return View(obj=haystack.obj, start=index, stop=index + len(needle))


def contains(haystack: View, needle: View) -> bool:
    return view_lib.is_valid(find_first(haystack, needle))
