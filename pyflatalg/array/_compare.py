"""
Comparisons: NaN-aware element-wise tests and whole-range reductions.
"""

from __future__ import annotations

from typing import Any

from pyflatalg.array._common import deliver, whole
from pyflatalg.core.buffer import as_buffer, read
from pyflatalg.core.tolerances import ALMOST_EQUAL_EPSILON
from pyflatalg.core.validation import check_count


def _both_nan(x: Any, y: Any) -> bool:
    return x != x and y != y


def _close_or_nan(x: Any, y: Any, epsilon: float) -> bool:
    return _both_nan(x, y) or abs(x - y) < epsilon


def almost_equal_with_nan(a: Any, b: Any, epsilon: float = ALMOST_EQUAL_EPSILON) -> list:
    """
    Element-wise ``|a[i] - b[i]| < epsilon`` where NaN compares equal to NaN.

    Example:
        >>> nan = float('nan')
        >>> almost_equal_with_nan([1, nan, 3], [1 + 1e-10, nan, 4])
        [True, True, False]
    """
    av = whole(a, 'a')
    bv = read(b, 1, len(av), 'b')
    return [_close_or_nan(x, y, epsilon) for x, y in zip(av, bv)]


def almost_equal_with_nan_ex(
    a: Any,
    a_index: int,
    a_count: int,
    b: Any,
    b_index: int,
    dest: Any = None,
    dest_index: int = 1,
    epsilon: float = ALMOST_EQUAL_EPSILON,
) -> Any:
    """Range form of ``almost_equal_with_nan``; returns ``dest`` (a new list when omitted)."""
    a_count = check_count(a_count, 'a_count')
    av = read(a, a_index, a_count, 'a')
    bv = read(b, b_index, a_count, 'b')
    return deliver([_close_or_nan(x, y, epsilon) for x, y in zip(av, bv)], dest, dest_index)


def all_equals(a: Any, b: Any) -> bool:
    """True if ``a`` and ``b`` have the same length and equal elements."""
    av = whole(a, 'a')
    if len(av) != len(as_buffer(b, 'b')):
        return False
    return all(x == y for x, y in zip(av, whole(b, 'b')))


def all_equals_ex(a: Any, a_index: int, a_count: int, b: Any, b_index: int) -> bool:
    """True if ``a_count`` elements of ``a`` and ``b`` from the given offsets are equal."""
    a_count = check_count(a_count, 'a_count')
    av = read(a, a_index, a_count, 'a')
    bv = read(b, b_index, a_count, 'b')
    return all(x == y for x, y in zip(av, bv))


def all_almost_equals(a: Any, b: Any, epsilon: float = ALMOST_EQUAL_EPSILON) -> bool:
    """True if ``a`` and ``b`` have the same length and differ by at most ``epsilon``."""
    av = whole(a, 'a')
    if len(av) != len(as_buffer(b, 'b')):
        return False
    return all(abs(x - y) <= epsilon for x, y in zip(av, whole(b, 'b')))


def all_almost_equals_ex(
    a: Any,
    a_index: int,
    a_count: int,
    b: Any,
    b_index: int,
    epsilon: float = ALMOST_EQUAL_EPSILON,
) -> bool:
    """Range form of ``all_almost_equals``."""
    a_count = check_count(a_count, 'a_count')
    av = read(a, a_index, a_count, 'a')
    bv = read(b, b_index, a_count, 'b')
    return all(abs(x - y) <= epsilon for x, y in zip(av, bv))


def all_almost_equals_with_nan(a: Any, b: Any, epsilon: float = ALMOST_EQUAL_EPSILON) -> bool:
    """Like ``all_almost_equals`` over ``a`` but NaN compares equal to NaN."""
    av = whole(a, 'a')
    bv = read(b, 1, len(av), 'b')
    return all(_both_nan(x, y) or abs(x - y) <= epsilon for x, y in zip(av, bv))


def all_equals_constant(a: Any, constant: Any) -> bool:
    """True if every element of ``a`` equals ``constant``."""
    return all(x == constant for x in whole(a, 'a'))


def all_equals_constant_ex(a: Any, a_index: int, a_count: int, constant: Any) -> bool:
    """True if every element of the range equals ``constant``."""
    a_count = check_count(a_count, 'a_count')
    return all(x == constant for x in read(a, a_index, a_count, 'a'))


def all_almost_equals_constant(
    a: Any,
    constant: Any,
    epsilon: float = ALMOST_EQUAL_EPSILON,
) -> bool:
    """
    True if every element of ``a`` is within ``epsilon`` of ``constant``.

    Example:
        >>> all_almost_equals_constant([1.01, 1.05, 0.95], 1, 0.1)
        True
    """
    return all(abs(x - constant) <= epsilon for x in whole(a, 'a'))


def all_almost_equals_constant_ex(
    a: Any,
    a_index: int,
    a_count: int,
    constant: Any,
    epsilon: float = ALMOST_EQUAL_EPSILON,
) -> bool:
    """Range form of ``all_almost_equals_constant``."""
    a_count = check_count(a_count, 'a_count')
    return all(abs(x - constant) <= epsilon for x in read(a, a_index, a_count, 'a'))
