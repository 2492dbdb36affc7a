# The author disclaims copyright to this source code. Please see the
# accompanying UNLICENSE file.
"""Constants for strview."""

NUL = 0
"""The byte returned by pop_first_char() when there is nothing to pop."""

CR = 0x0D
LF = 0x0A

CRLF_SUM = CR + LF
"""The sum of the bytes of a CRLF or LFCR pair, in either order."""

LINE_TERMINATORS = b"\r\n"
"""The delimiter set which ends a line."""
