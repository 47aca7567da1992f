"""
Grouping iterators: consecutive, non-overlapping fixed-size windows.

Arguments are validated when the iterator is created, not on the first
``next()``; the returned generator then only reads.
"""

from __future__ import annotations

from typing import Any, Iterator

from pyflatalg.core.buffer import as_buffer
from pyflatalg.core.validation import check_count, check_positive, check_range


def _windows(buf: Any, n: int, start: int, groups: int) -> Iterator[tuple]:
    get_ = buf.get
    for g in range(groups):
        j = start + g * n
        yield tuple(get_(j + k) for k in range(n))


def group_ex(src: Any, n: int, start: int, count: int) -> Iterator[tuple]:
    """
    Iterate over ``src[start .. start+count-1]`` in consecutive n-tuples.

    Produces ``count // n`` tuples; a trailing remainder shorter than
    ``n`` is dropped.

    Args:
        src: Buffer or sequence to read
        n: Tuple size
        start: 1-based first position
        count: Number of positions in the sub-range

    Returns:
        A fresh generator of n-tuples

    Raises:
        DomainError: If n <= 0
        RangeError: If the sub-range falls outside ``src``
    """
    buf = as_buffer(src, 'src')
    n = check_positive(n, 'n')
    count = check_count(count, 'count')
    start = check_range(len(buf), start, count, 'src')
    return _windows(buf, n, start, count // n)


def group(src: Any, n: int) -> Iterator[tuple]:
    """
    Iterate over all of ``src`` in consecutive n-tuples.

    Example:
        >>> list(group([1, 2, 3, 4, 5, 6, 7], 2))
        [(1, 2), (3, 4), (5, 6)]
    """
    buf = as_buffer(src, 'src')
    return group_ex(buf, n, 1, len(buf))


def group_2(src: Any) -> Iterator[tuple]:
    """Iterate over ``src`` as consecutive pairs."""
    return group(src, 2)


def group_3(src: Any) -> Iterator[tuple]:
    """Iterate over ``src`` as consecutive triples."""
    return group(src, 3)


def group_4(src: Any) -> Iterator[tuple]:
    """Iterate over ``src`` as consecutive 4-tuples."""
    return group(src, 4)


def group_2_ex(src: Any, start: int, count: int) -> Iterator[tuple]:
    """
    Iterate over a sub-range of ``src`` as consecutive pairs.

    Example:
        >>> list(group_2_ex([1, 2, 3, 4, 5, 6], 2, 4))
        [(2, 3), (4, 5)]
    """
    return group_ex(src, 2, start, count)


def group_3_ex(src: Any, start: int, count: int) -> Iterator[tuple]:
    """Iterate over a sub-range of ``src`` as consecutive triples."""
    return group_ex(src, 3, start, count)


def group_4_ex(src: Any, start: int, count: int) -> Iterator[tuple]:
    """Iterate over a sub-range of ``src`` as consecutive 4-tuples."""
    return group_ex(src, 4, start, count)
