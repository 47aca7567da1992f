"""
Buffer adapters and accessors.

Everything above this module reads and writes numeric data only through
the ``Buffer`` contract (``len``, ``get``, ``set`` on 1-based positions).
This module makes ordinary Python objects satisfy that contract:

    - views and user types that already expose ``get``/``set`` are used as-is
    - any 0-based sequence (``list``, ``tuple``, ``array.array``,
      ``numpy.ndarray``, ``ctypes`` arrays, ``memoryview``) is wrapped in a
      ``SequenceBuffer`` that translates 1-based positions and range-checks
      every access

Python sequences accept negative indices, so the range check is what
turns ``get(b, 0)`` into a ``RangeError`` instead of a silent read of the
last element.
"""

from __future__ import annotations

from typing import Any, Iterator, Sequence

import numpy as np
from numpy.typing import DTypeLike, NDArray

from pyflatalg.core.exceptions import RangeError, ValidationError, DimensionError
from pyflatalg.core.validation import check_integer, check_range


class SequenceBuffer:
    """
    1-based buffer over a 0-based Python sequence.

    Holds a non-owning reference: writes go straight to the wrapped
    sequence and the length is re-read on every access, so a list that
    grows or shrinks is seen as it is now.
    """

    __slots__ = ('_seq',)

    def __init__(self, seq: Sequence[Any]):
        self._seq = seq

    @property
    def sequence(self) -> Sequence[Any]:
        """The wrapped 0-based sequence."""
        return self._seq

    def __len__(self) -> int:
        return len(self._seq)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._seq)

    def __repr__(self) -> str:
        return f"SequenceBuffer({self._seq!r})"

    def _check(self, index: int) -> int:
        n = len(self._seq)
        if isinstance(index, bool) or not isinstance(index, int):
            index = check_integer(index, 'index')
        if index < 1 or index > n:
            raise RangeError(
                f"buffer: index {index} out of range [1, {n}]",
                name='buffer', index=index, lower=1, upper=n,
            )
        return index

    def get(self, index: int) -> Any:
        return self._seq[self._check(index) - 1]

    def set(self, index: int, value: Any) -> None:
        self._seq[self._check(index) - 1] = value


def is_buffer(obj: Any) -> bool:
    """True if ``obj`` already satisfies the buffer contract."""
    return (
        callable(getattr(obj, 'get', None))
        and callable(getattr(obj, 'set', None))
        and hasattr(obj, '__len__')
    )


def as_buffer(obj: Any, name: str = 'buffer') -> Any:
    """
    Return ``obj`` as an object satisfying the ``Buffer`` protocol.

    Args:
        obj: A buffer, a view, or a 0-based sequence
        name: Parameter name for error messages

    Returns:
        ``obj`` itself if it already has ``get``/``set``/``__len__``,
        otherwise a ``SequenceBuffer`` wrapping it

    Raises:
        ValidationError: If obj is None, a string, or not indexable
        DimensionError: If obj is a multi-dimensional array
    """
    if obj is None:
        raise ValidationError(f"{name}: expected buffer or sequence, got None")
    if is_buffer(obj):
        return obj
    if isinstance(obj, (str, bytes)):
        raise ValidationError(
            f"{name}: expected numeric sequence, got {type(obj).__name__}"
        )
    ndim = getattr(obj, 'ndim', 1)
    if ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D buffer, got {ndim}D with shape "
            f"{getattr(obj, 'shape', None)}",
            expected=1, actual=ndim,
        )
    if not (hasattr(obj, '__len__') and hasattr(obj, '__getitem__')):
        raise ValidationError(
            f"{name}: {type(obj).__name__} is not indexable "
            f"(needs __len__ and __getitem__, or get/set)"
        )
    return SequenceBuffer(obj)


def length(buffer: Any) -> int:
    """Number of elements of any buffer-like object."""
    return len(as_buffer(buffer))


def get(buffer: Any, index: int) -> Any:
    """Read the element at a 1-based position of any buffer-like object."""
    return as_buffer(buffer).get(index)


def set(buffer: Any, index: int, value: Any) -> None:
    """Write the element at a 1-based position of any buffer-like object."""
    as_buffer(buffer).set(index, value)


def read(buffer: Any, index: int, count: int, name: str = 'buffer') -> tuple:
    """
    Read ``count`` consecutive elements starting at ``index``.

    The whole range is checked before the first read.

    Raises:
        RangeError: If any position in the range is outside the buffer
    """
    buf = as_buffer(buffer, name)
    index = check_range(len(buf), index, count, name)
    get_ = buf.get
    return tuple(get_(index + i) for i in range(count))


def write(buffer: Any, index: int, values: Sequence[Any], name: str = 'dest') -> None:
    """
    Write ``values`` to consecutive positions starting at ``index``.

    The whole range is checked before the first write, so a failing call
    leaves the destination untouched.

    Raises:
        RangeError: If index is below 1
        DimensionError: If fewer than ``len(values)`` positions remain
            from ``index`` to the end of the buffer
    """
    buf = as_buffer(buffer, name)
    index = check_range(len(buf), index, 0, name)
    available = max(len(buf) - index + 1, 0)
    if available < len(values):
        raise DimensionError(
            f"{name}: {len(values)} values do not fit from index {index} "
            f"(length {len(buf)}, {available} available)",
            expected=len(values), actual=available,
        )
    set_ = buf.set
    for i, value in enumerate(values):
        set_(index + i, value)


def to_list(buffer: Any) -> list:
    """Copy every element of a buffer into a new list."""
    buf = as_buffer(buffer)
    get_ = buf.get
    return [get_(i) for i in range(1, len(buf) + 1)]


def to_numpy(buffer: Any, dtype: DTypeLike = np.float64) -> NDArray[Any]:
    """
    Copy every element of a buffer into a new 1D numpy array.

    Args:
        buffer: Any buffer-like object
        dtype: Result dtype

    Returns:
        numpy.ndarray of shape (len(buffer),)
    """
    buf = as_buffer(buffer)
    n = len(buf)
    get_ = buf.get
    return np.fromiter((get_(i) for i in range(1, n + 1)), dtype=dtype, count=n)
