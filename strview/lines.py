# The author disclaims copyright to this source code. Please see the
# accompanying UNLICENSE file.
"""Splitting lines from a binary stream, read in chunks.

Lines are returned as views of the chunks they were read in, so the line data
is not copied, except for a line which straddles two chunks.
"""

import dataclasses
import logging
from typing import BinaryIO
from typing import Iterator
from typing import Optional

import dataclasses_json

from strview import config as config_lib
from strview import const
from strview import cursor as cursor_lib
from strview import exceptions
from strview import view as view_lib
from strview.view import View

_LOG = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 65536
DEFAULT_MAX_LINE_LENGTH = 1 << 20


@dataclasses_json.dataclass_json
@dataclasses.dataclass(frozen=True)
class ReaderState:
    """Where a LineReader left off.

    Attributes:
        offset: The stream offset of the first byte not yet returned as part
            of a line.
        eol: The line ending discriminator at that point.
        lines: The number of lines returned so far.
    """

    offset: int = 0
    eol: int = const.NUL
    lines: int = 0


class LineReader:
    def __init__(
        self,
        fp: BinaryIO,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
        state: Optional[ReaderState] = None,
    ):
        if chunk_size <= 0:
            raise ValueError(f"chunk_size: {chunk_size} <= 0")
        if max_line_length <= 0:
            raise ValueError(f"max_line_length: {max_line_length} <= 0")
        self._fp = fp
        self._chunk_size = chunk_size
        self._max_line_length = max_line_length

        if state is None:
            state = ReaderState()
        else:
            fp.seek(state.offset)
        # The stream offset of the start of the current chunk
        self._chunk_offset = state.offset
        self._chunk_len = 0
        self._lines = state.lines
        self._cursor = cursor_lib.Cursor(
            view=view_lib.cstr_sl(b""), eol=state.eol
        )
        self._eof = False

    @classmethod
    def from_config(
        cls,
        fp: BinaryIO,
        config: config_lib.Config,
        state: Optional[ReaderState] = None,
    ) -> "LineReader":
        return cls(
            fp,
            chunk_size=config.get_positive_int(
                "reader_chunk_size", DEFAULT_CHUNK_SIZE
            ),
            max_line_length=config.get_positive_int(
                "reader_max_line_length", DEFAULT_MAX_LINE_LENGTH
            ),
            state=state,
        )

    @property
    def offset(self) -> int:
        # Views here may not end at the end of their chunk: an empty remainder
        # may sit on the last line ending. Only their length is reliable.
        return self._chunk_offset + self._chunk_len - len(self._cursor.view)

    def state(self) -> ReaderState:
        return ReaderState(
            offset=self.offset, eol=self._cursor.eol, lines=self._lines
        )

    def _check_length(self, length: int) -> None:
        if length > self._max_line_length:
            _LOG.warning(
                "line at offset %d exceeds %d bytes",
                self.offset,
                self._max_line_length,
            )
            raise exceptions.LineTooLongError(
                self._max_line_length, self.offset
            )

    def _fill(self) -> bool:
        tail = self._cursor.view
        chunk = self._fp.read(self._chunk_size)
        if not chunk:
            return False
        if len(tail):
            # Only the unterminated tail is copied
            data = bytes(tail) + chunk
        else:
            data = chunk
        self._chunk_offset += self._chunk_len - len(tail)
        self._chunk_len = len(data)
        if self._cursor.eol and self._cursor.eol + data[0] == const.CRLF_SUM:
            _LOG.debug(
                "line ending split between reads at offset %d",
                self._chunk_offset,
            )
        self._cursor.feed(view_lib.cstr_sl(data))
        return True

    def readline(self) -> View:
        """Returns the next line, without its line ending.

        At the end of the stream, a final line with no line ending is returned
        as-is.

        Returns:
            A view of the line, or INVALID at the end of the stream.

        Raises:
            LineTooLongError: if a line is longer than max_line_length.
        """
        while True:
            if self._eof:
                return view_lib.INVALID
            line = self._cursor.split_line()
            if view_lib.is_valid(line):
                self._check_length(len(line))
                self._lines += 1
                return line
            self._check_length(len(self._cursor.view))
            if self._fill():
                continue
            self._eof = True
            tail = self._cursor.view
            # Consume the tail, but keep a position for offset
            self._cursor.view = tail.replace(start=tail.stop)
            _LOG.debug("end of stream at offset %d", self.offset)
            if len(tail) == 0:
                return view_lib.INVALID
            self._lines += 1
            return tail

    def __iter__(self) -> Iterator[View]:
        while True:
            line = self.readline()
            if not view_lib.is_valid(line):
                return
            yield line
