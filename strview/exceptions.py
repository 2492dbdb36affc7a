# The author disclaims copyright to this source code. Please see the
# accompanying UNLICENSE file.
"""Exception types for strview.

The view operations themselves never raise; they return INVALID instead. These
are only raised where views meet I/O.
"""
from typing import Optional


class Error(Exception):
    def __init__(self, message: str, details: Optional[str] = None):
        super(Error, self).__init__(message)
        self.message = message
        self.details = details


class LineTooLongError(Error):
    def __init__(self, limit: int, offset: int):
        super(LineTooLongError, self).__init__(
            f"line at offset {offset} is longer than {limit} bytes",
            details=f"limit={limit} offset={offset}",
        )
        self.limit = limit
        self.offset = offset
