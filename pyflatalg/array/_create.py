"""
Array creation: filled, stepped, generated and flattened arrays.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np

from pyflatalg.array._common import deliver
from pyflatalg.core.exceptions import DimensionError, DomainError, ValidationError
from pyflatalg.core.precision import whole_steps
from pyflatalg.core.validation import check_count


def new_array(count: int, value: Any = 0) -> list:
    """New list of ``count`` elements, each ``value``."""
    count = check_count(count, 'count')
    return [value] * count


def zeros(count: int) -> list:
    """New list of ``count`` zeros."""
    return new_array(count, 0.0)


def fill(value: Any, count: int) -> list:
    """New list of ``count`` copies of ``value``."""
    return new_array(count, value)


def fill_into(value: Any, count: int, dest: Any, dest_index: int = 1) -> Any:
    """Set ``dest[dest_index .. dest_index+count-1]`` to ``value``; returns ``dest``."""
    count = check_count(count, 'count')
    return deliver([value] * count, dest, dest_index)


def _stepped(start: float, stop: float, step: float | None) -> list:
    if step is None:
        step = 1 if start <= stop else -1
    if step == 0:
        raise DomainError("step: must be non-zero", parameter='step', value=step)
    if step > 0 and start > stop:
        raise ValidationError(
            f"start: must be <= stop when step > 0 (got {start} > {stop})"
        )
    if step < 0 and start < stop:
        raise ValidationError(
            f"start: must be >= stop when step < 0 (got {start} < {stop})"
        )
    n = whole_steps(start, stop, step) + 1
    return [start + i * step for i in range(n)]


def range_array(start: float, stop: float, step: float | None = None) -> list:
    """
    New list of values from ``start`` to ``stop`` inclusive in ``step`` increments.

    ``step`` defaults to 1 (or -1 when counting down). Float steps are
    allowed; ``stop`` is included when it lies on the grid up to rounding.

    Example:
        >>> range_array(1, 5)
        [1, 2, 3, 4, 5]
        >>> range_array(0, 0.9, 1/3)
        [0.0, 0.3333333333333333, 0.6666666666666666]

    Raises:
        DomainError: If step is zero
        ValidationError: If step points away from ``stop``
    """
    return _stepped(start, stop, step)


def range_into(
    start: float,
    stop: float,
    step: float | None,
    dest: Any,
    dest_index: int = 1,
) -> Any:
    """Write ``range_array(start, stop, step)`` into ``dest`` from ``dest_index``; returns ``dest``."""
    return deliver(_stepped(start, stop, step), dest, dest_index)


def generate(count: int, f: Callable[[int], Any]) -> list:
    """New list ``[f(1), ..., f(count)]``."""
    count = check_count(count, 'count')
    return [f(i) for i in range(1, count + 1)]


def generate_into(count: int, f: Callable[[int], Any], dest: Any, dest_index: int = 1) -> Any:
    """Write ``f(1), ..., f(count)`` into ``dest`` from ``dest_index``; returns ``dest``."""
    return deliver(generate(count, f), dest, dest_index)


# =====================================================================
# Flattening nested data
# =====================================================================

def _is_nested(obj: Any) -> bool:
    return isinstance(obj, (list, tuple, np.ndarray))


def _nested_shape(src: Any) -> list[int]:
    shape = []
    level = src
    while _is_nested(level):
        shape.append(len(level))
        if not len(level):
            break
        level = level[0]
    return shape


def _collect(node: Any, shape: list[int], depth: int, out: list) -> None:
    if depth == len(shape):
        if _is_nested(node):
            raise DimensionError(
                f"src: nesting deeper than {depth} levels below the first element",
                expected=depth, actual=depth + 1,
            )
        out.append(node)
        return
    size = len(node) if _is_nested(node) else None
    if size != shape[depth]:
        raise DimensionError(
            f"src: ragged nesting at depth {depth + 1}: expected "
            f"{shape[depth]} elements, got {size if size is not None else 'a scalar'}",
            expected=shape[depth], actual=size,
        )
    for child in node:
        _collect(child, shape, depth + 1, out)


def flatten(src: Any) -> list:
    """
    Flatten rectangular nested sequences into one new list.

    The shape is taken from the first element at each level; every other
    element must match it. An empty dimension gives an empty list.

    Example:
        >>> flatten([[1, 2, 3], [4, 5, 6]])
        [1, 2, 3, 4, 5, 6]

    Raises:
        ValidationError: If src is not a list, tuple or numpy array
        DimensionError: If the nesting is ragged
    """
    if not _is_nested(src):
        raise ValidationError(
            f"src: expected nested list, tuple or ndarray, got {type(src).__name__}"
        )
    shape = _nested_shape(src)
    if 0 in shape:
        return []
    out: list = []
    _collect(src, shape, 0, out)
    return out


def flatten_into(src: Any, dest: Any, dest_index: int = 1) -> Any:
    """Write ``flatten(src)`` into ``dest`` from ``dest_index``; returns ``dest``."""
    return deliver(flatten(src), dest, dest_index)
