# The author disclaims copyright to this source code. Please see the
# accompanying UNLICENSE file.
"""Zero-copy views of byte strings.

The core is strview.view.View, a reference to a run of bytes inside a buffer
owned by the caller, plus functions which compare, search, trim and split
views without copying the data:

    strview.compare: matching, ordering and searching.
    strview.trim: trimming and sub-views.
    strview.split: consuming splits, which return a new source.
    strview.cursor: a mutable source, for consuming splits in place.
    strview.lines: splitting lines from a stream read in chunks.
"""

from strview.compare import contains
from strview.compare import find_first
from strview.compare import find_last
from strview.compare import is_match
from strview.compare import is_match_nocase
from strview.compare import starts_with
from strview.compare import starts_with_nocase
from strview.cursor import Cursor
from strview.trim import sub
from strview.trim import trim_end
from strview.trim import trim_start
from strview.view import INVALID
from strview.view import PRI_STR
from strview.view import View
from strview.view import cstr
from strview.view import cstr_sl
from strview.view import is_valid
from strview.view import pri_str_arg
from strview.view import swap
from strview.view import to_cstr
