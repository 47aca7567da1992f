"""
Element access, copying, reversing, joining and appending.

Every "ex" function reads its whole source range before writing, so the
source and destination ranges may overlap.
"""

from __future__ import annotations

from typing import Any

from pyflatalg.array._common import deliver, whole
from pyflatalg.core.buffer import read, write
from pyflatalg.core.exceptions import ValidationError
from pyflatalg.core.validation import check_count


def set_values(dest: Any, index: int, *values: Any) -> Any:
    """
    Write ``values`` to consecutive positions of ``dest`` from ``index``.

    Example:
        >>> a = [1, 2, 3, 4, 5]
        >>> set_values(a, 1, 2, 3, 4, 5, 6)
        [2, 3, 4, 5, 6]
    """
    write(dest, index, values, 'dest')
    return dest


def get_values(src: Any, index: int, count: int) -> tuple:
    """``count`` consecutive values of ``src`` from ``index``, as a tuple."""
    count = check_count(count, 'count')
    return read(src, index, count, 'src')


def copy(src: Any) -> list:
    """New list holding every element of ``src``."""
    return list(whole(src, 'src'))


def copy_ex(
    src: Any,
    src_index: int,
    src_count: int,
    dest: Any = None,
    dest_index: int = 1,
) -> Any:
    """
    Copy ``src[src_index .. src_index+src_count-1]`` to ``dest`` at ``dest_index``.

    Without ``dest`` a new list is returned (zero-filled before
    ``dest_index``). Overlapping ranges within one buffer copy correctly.

    Example:
        >>> a = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
        >>> copy_ex(a, 1, 3, a, 5)
        [1, 2, 3, 4, 1, 2, 3, 8, 9, 10]
    """
    src_count = check_count(src_count, 'src_count')
    return deliver(read(src, src_index, src_count, 'src'), dest, dest_index)


def reverse(src: Any) -> list:
    """New list with the elements of ``src`` in reverse order."""
    return list(reversed(whole(src, 'src')))


def reverse_ex(
    src: Any,
    src_index: int,
    src_count: int,
    dest: Any = None,
    dest_index: int = 1,
) -> Any:
    """Copy a range of ``src`` to ``dest`` in reverse order (in-place reversal allowed)."""
    src_count = check_count(src_count, 'src_count')
    values = read(src, src_index, src_count, 'src')
    return deliver(values[::-1], dest, dest_index)


def join(a: Any, b: Any) -> list:
    """New list ``[a_1, ..., a_n, b_1, ..., b_m]``."""
    return list(whole(a, 'a') + whole(b, 'b'))


def join_ex(a: Any, a_index: int, a_count: int, b: Any, b_index: int, b_count: int) -> list:
    """New list joining a range of ``a`` and a range of ``b``."""
    a_count = check_count(a_count, 'a_count')
    b_count = check_count(b_count, 'b_count')
    return list(read(a, a_index, a_count, 'a') + read(b, b_index, b_count, 'b'))


def append(src: Any, dest: Any) -> Any:
    """
    Append every element of ``src`` onto the end of ``dest``; returns ``dest``.

    ``dest`` must be growable (``list``, ``array.array`` or anything with an
    ``extend`` method). ``src`` is read completely first, so ``src`` may be
    ``dest``.

    Raises:
        ValidationError: If ``dest`` has a fixed size (numpy arrays, ctypes
            arrays, views)

    Example:
        >>> append([3, 4], [1, 2])
        [1, 2, 3, 4]
    """
    values = whole(src, 'src')
    grow = getattr(dest, 'extend', None)
    if not callable(grow):
        raise ValidationError(
            f"dest: {type(dest).__name__} has a fixed size and cannot be "
            f"appended to"
        )
    grow(values)
    return dest


def extend(dest: Any, src: Any) -> Any:
    """``append`` with the destination first."""
    return append(src, dest)
