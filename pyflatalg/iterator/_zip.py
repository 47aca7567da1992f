"""
Zip iterators: advance one element per input per step.
"""

from __future__ import annotations

from typing import Any, Iterator

from pyflatalg.core.buffer import as_buffer
from pyflatalg.core.exceptions import ValidationError
from pyflatalg.core.validation import check_count, check_range


def _lockstep(bufs: list, starts: list[int], count: int) -> Iterator[tuple]:
    getters = [b.get for b in bufs]
    pairs = list(zip(getters, starts))
    for i in range(count):
        yield tuple(get_(start + i) for get_, start in pairs)


def zip_buffers(*srcs: Any) -> Iterator[tuple]:
    """
    Iterate over several buffers in lockstep.

    Yields one tuple per position holding the element of each input at
    that position, stopping at the end of the shortest input.

    Example:
        >>> list(zip_buffers([1, -2, 3], [-1, 2, -3, 4]))
        [(1, -1), (-2, 2), (3, -3)]

    Raises:
        ValidationError: If no inputs are given
    """
    if not srcs:
        raise ValidationError("zip_buffers: expected at least one buffer")
    bufs = [as_buffer(s, f'src{k + 1}') for k, s in enumerate(srcs)]
    count = min(len(b) for b in bufs)
    return _lockstep(bufs, [1] * len(bufs), count)


def zip_ex(count: int, *ranges: tuple[Any, int]) -> Iterator[tuple]:
    """
    Iterate in lockstep over ``count`` elements of each ``(src, index)``.

    Args:
        count: Number of steps
        *ranges: ``(src, start_index)`` pairs

    Returns:
        A fresh generator of tuples, one element per range

    Raises:
        ValidationError: If no ranges are given or count is negative
        RangeError: If any range runs past its buffer
    """
    if not ranges:
        raise ValidationError("zip_ex: expected at least one (src, index) pair")
    count = check_count(count, 'count')
    bufs = []
    starts = []
    for k, (src, index) in enumerate(ranges):
        name = f'src{k + 1}'
        buf = as_buffer(src, name)
        starts.append(check_range(len(buf), index, count, name))
        bufs.append(buf)
    return _lockstep(bufs, starts, count)


def zip_2(a: Any, b: Any) -> Iterator[tuple]:
    """
    Iterate over two buffers in lockstep.

    Example:
        >>> list(zip_2([1, -2, 3, -4], [-1, 2, -3, 4]))
        [(1, -1), (-2, 2), (3, -3), (-4, 4)]
    """
    return zip_buffers(a, b)


def zip_3(a: Any, b: Any, c: Any) -> Iterator[tuple]:
    """Iterate over three buffers in lockstep."""
    return zip_buffers(a, b, c)


def zip_4(a: Any, b: Any, c: Any, d: Any) -> Iterator[tuple]:
    """Iterate over four buffers in lockstep."""
    return zip_buffers(a, b, c, d)


def zip_2_ex(a: Any, a_index: int, b: Any, b_index: int, count: int) -> Iterator[tuple]:
    """Iterate over ``count`` elements of two buffers from explicit offsets."""
    return zip_ex(count, (a, a_index), (b, b_index))


def zip_3_ex(
    a: Any, a_index: int,
    b: Any, b_index: int,
    c: Any, c_index: int,
    count: int,
) -> Iterator[tuple]:
    """Iterate over ``count`` elements of three buffers from explicit offsets."""
    return zip_ex(count, (a, a_index), (b, b_index), (c, c_index))


def zip_4_ex(
    a: Any, a_index: int,
    b: Any, b_index: int,
    c: Any, c_index: int,
    d: Any, d_index: int,
    count: int,
) -> Iterator[tuple]:
    """Iterate over ``count`` elements of four buffers from explicit offsets."""
    return zip_ex(count, (a, a_index), (b, b_index), (c, c_index), (d, d_index))
