"""
Fused arithmetic and user-supplied element-wise functions.
"""

from __future__ import annotations

from typing import Any, Callable

from pyflatalg.array._common import constant_values, deliver, whole
from pyflatalg.core.buffer import read
from pyflatalg.core.exceptions import ValidationError
from pyflatalg.core.validation import check_count


def mul_add(a: Any, b: Any, c: Any) -> list:
    """
    New list ``a[i] + b[i] * c[i]`` over all of ``a``.

    Example:
        >>> mul_add([0, 0, 0], [0, 1, 2], [3, 3, 3])
        [0, 3, 6]
    """
    av = whole(a, 'a')
    n = len(av)
    bv = read(b, 1, n, 'b')
    cv = read(c, 1, n, 'c')
    return [x + y * z for x, y, z in zip(av, bv, cv)]


def mul_add_ex(
    a: Any, a_index: int, a_count: int,
    b: Any, b_index: int,
    c: Any, c_index: int,
    dest: Any = None,
    dest_index: int = 1,
) -> Any:
    """Range form of ``mul_add``; returns ``dest`` (a new list when omitted)."""
    a_count = check_count(a_count, 'a_count')
    av = read(a, a_index, a_count, 'a')
    bv = read(b, b_index, a_count, 'b')
    cv = read(c, c_index, a_count, 'c')
    return deliver([x + y * z for x, y, z in zip(av, bv, cv)], dest, dest_index)


def mul_add_constant(a: Any, b: Any, c: Any) -> list:
    """
    New list ``a[i] + b[i] * c`` over all of ``a``.

    ``c`` may be a buffer, cycled across ``a``: with 2-D positions in ``a``
    and velocities in ``b``, ``mul_add_constant(a, b, dt)`` advances every
    point by one time step.
    """
    av = whole(a, 'a')
    n = len(av)
    bv = read(b, 1, n, 'b')
    return [x + y * z for x, y, z in zip(av, bv, constant_values(c, n))]


def mul_add_constant_ex(
    a: Any, a_index: int, a_count: int,
    b: Any, b_index: int,
    c: Any,
    dest: Any = None,
    dest_index: int = 1,
) -> Any:
    """Range form of ``mul_add_constant``; ``dest`` may be ``a`` itself."""
    a_count = check_count(a_count, 'a_count')
    av = read(a, a_index, a_count, 'a')
    bv = read(b, b_index, a_count, 'b')
    cv = constant_values(c, a_count)
    return deliver([x + y * z for x, y, z in zip(av, bv, cv)], dest, dest_index)


def lerp(a: Any, b: Any, t: float) -> list:
    """
    Linear interpolation ``a[i] * (1 - t) + b[i] * t`` over all of ``a``.

    Example:
        >>> lerp([1, 2, 3], [4, 5, 6], 0.5)
        [2.5, 3.5, 4.5]
    """
    av = whole(a, 'a')
    bv = read(b, 1, len(av), 'b')
    return [x * (1 - t) + y * t for x, y in zip(av, bv)]


def lerp_ex(
    a: Any, a_index: int, a_count: int,
    b: Any, b_index: int,
    t: float,
    dest: Any = None,
    dest_index: int = 1,
) -> Any:
    """Range form of ``lerp``; returns ``dest`` (a new list when omitted)."""
    a_count = check_count(a_count, 'a_count')
    av = read(a, a_index, a_count, 'a')
    bv = read(b, b_index, a_count, 'b')
    return deliver([x * (1 - t) + y * t for x, y in zip(av, bv)], dest, dest_index)


def map_values(f: Callable[..., Any], *srcs: Any) -> list:
    """
    New list ``f(s1[i], s2[i], ...)`` over the length of the first source.

    Example:
        >>> map_values(lambda x, y: x - y, [1, 2, 3], [1, 1, 1])
        [0, 1, 2]

    Raises:
        ValidationError: If no sources are given
        RangeError: If a later source is shorter than the first
    """
    if not srcs:
        raise ValidationError("map_values: expected at least one source")
    first = whole(srcs[0], 'src1')
    n = len(first)
    columns = [first] + [read(s, 1, n, f'src{k + 2}') for k, s in enumerate(srcs[1:])]
    return [f(*args) for args in zip(*columns)]


def map_ex(
    f: Callable[..., Any],
    count: int,
    *ranges: tuple[Any, int],
    dest: Any = None,
    dest_index: int = 1,
) -> Any:
    """
    Apply ``f`` across ``count`` elements of each ``(src, index)`` range.

    Example:
        >>> map_ex(lambda x, y: x * y, 2, ([1, 2, 3], 2), ([4, 5], 1))
        [8, 15]

    Returns:
        ``dest`` with the results written from ``dest_index``, or a new list
    """
    if not ranges:
        raise ValidationError("map_ex: expected at least one (src, index) pair")
    count = check_count(count, 'count')
    columns = [
        read(src, index, count, f'src{k + 1}')
        for k, (src, index) in enumerate(ranges)
    ]
    return deliver([f(*args) for args in zip(*columns)], dest, dest_index)
