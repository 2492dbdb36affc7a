# The author disclaims copyright to this source code. Please see the
# accompanying UNLICENSE file.
"""The View type: a non-owning reference into a byte buffer.

A View is a (buffer, start, stop) triple. It never copies the data it refers
to. The caller owns the buffer and must keep it alive (and unmodified, if the
results are to mean anything) for as long as views of it are in use.

A View has two distinguished zero-length states:

    INVALID: there is no buffer at all. Operations return this when they have
        no defined result, e.g. a search that found nothing.
    valid-empty: a buffer and a position, but no bytes. Operations return this
        when they legitimately produce nothing, e.g. splitting exactly at a
        boundary. It still marks a position within its buffer.
"""

import collections.abc
import dataclasses
import mmap
from typing import Optional
from typing import Tuple
from typing import Union

Target = Union[bytes, bytearray, mmap.mmap]
RenderTarget = Union[bytearray, memoryview]

PRI_STR = b".*s"
"""A %-format placeholder for a View. Use with pri_str_arg().

Example:
    (b"The view is %" + PRI_STR) % pri_str_arg(view)
"""


@dataclasses.dataclass(frozen=True, eq=False)
class View(collections.abc.Sized):
    # Like memoryview, but we need the bounds within the backing object to
    # tell whether two views point at the same place.
    obj: Optional[Target] = None
    start: int = 0
    stop: int = 0

    def __post_init__(self):
        if self.obj is None:
            if self.start or self.stop:
                raise ValueError("an invalid view has no bounds")
            return
        if self.start < 0:
            raise ValueError(f"start: {self.start} < 0")
        if self.start > self.stop:
            raise ValueError(f"start/stop: {self.start} > {self.stop}")
        if self.stop > len(self.obj):
            raise ValueError(f"stop: {self.stop} > {len(self.obj)}")

    def __len__(self) -> int:
        return self.stop - self.start

    def __bool__(self) -> bool:
        return self.obj is not None

    def __bytes__(self) -> bytes:
        return self.to_memoryview().tobytes()

    def __eq__(self, other) -> bool:
        # Content equality. INVALID and a valid-empty view are equal, since
        # both hold zero bytes.
        if not isinstance(other, View):
            return NotImplemented
        if len(self) != len(other):
            return False
        if self.obj is other.obj and self.start == other.start:
            return True
        return self.to_memoryview() == other.to_memoryview()

    def __hash__(self) -> int:
        return hash(bytes(self))

    def __repr__(self) -> str:
        if self.obj is None:
            return "View(INVALID)"
        return f"View({bytes(self)!r}, start={self.start}, stop={self.stop})"

    def to_memoryview(self) -> memoryview:
        if self.obj is None:
            return memoryview(b"")
        return memoryview(self.obj)[self.start : self.stop]

    def same_buffer(self, other: "View") -> bool:
        return self.obj is not None and self.obj is other.obj

    def byte_at(self, index: int) -> int:
        """Returns the byte at index, which counts from the view's start."""
        assert self.obj is not None and 0 <= index < len(self), index
        return self.obj[self.start + index]

    def replace(self, **changes) -> "View":
        return dataclasses.replace(self, **changes)


INVALID = View()


def is_valid(view: View) -> bool:
    """Returns True unless view is INVALID. A valid-empty view is valid."""
    return view.obj is not None


def cstr(obj: Optional[Target]) -> View:
    """Returns a view of a NUL-terminated buffer, up to the first NUL.

    Returns INVALID if obj is None. If obj has no NUL byte, the view spans all
    of it.
    """
    if obj is None:
        return INVALID
    stop = obj.find(b"\0")
    if stop < 0:
        stop = len(obj)
    return View(obj=obj, start=0, stop=stop)


def cstr_sl(obj: Target) -> View:
    """Returns a view of all of obj, without scanning it.

    This is meant for literals, whose length is already known.
    """
    return View(obj=obj, start=0, stop=len(obj))


def swap(a: View, b: View) -> Tuple[View, View]:
    return b, a


def to_cstr(dst: Optional[RenderTarget], view: View) -> Optional[RenderTarget]:
    """Copies a view into dst, as a NUL-terminated string.

    At most len(dst) - 1 bytes are copied, so the terminator always fits. If
    dst is None or has no room at all, nothing is written.

    Returns:
        dst.
    """
    if dst is None or len(dst) == 0:
        return dst
    size = min(len(dst) - 1, max(len(view), 0))
    dst[:size] = view.to_memoryview()[:size]
    dst[size] = 0
    return dst


def pri_str_arg(view: View) -> Tuple[int, memoryview]:
    """Returns the (length, data) arguments for a PRI_STR placeholder."""
    if view.obj is None:
        return 0, memoryview(b"")
    return len(view), memoryview(view.obj)[view.start :]
