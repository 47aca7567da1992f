"""
Helpers shared by the array operations.
"""

from __future__ import annotations

import warnings
from numbers import Number
from typing import Any, Callable, Sequence

from pyflatalg.core.buffer import as_buffer, read, write
from pyflatalg.core.exceptions import ValidationError
from pyflatalg.core.validation import check_range


def whole(src: Any, name: str) -> tuple:
    """Every element of ``src``, in order."""
    buf = as_buffer(src, name)
    return read(buf, 1, len(buf), name)


def deliver(values: Sequence[Any], dest: Any, dest_index: int) -> Any:
    """
    Deliver the result of an "ex" array operation.

    Without ``dest`` a new list of length ``dest_index - 1 + len(values)``
    is returned, zero-filled before ``dest_index``. With ``dest`` the
    values are written there and ``dest`` itself is returned.
    """
    if dest is None:
        dest_index = check_range(0, dest_index, 0, 'dest_index')
        return [0] * (dest_index - 1) + list(values)
    write(dest, dest_index, values, 'dest')
    return dest


def constant_values(c: Any, count: int) -> list:
    """
    Expand a constant operand to ``count`` values.

    A scalar is repeated. A buffer is cycled, so ``(x, y)`` against a
    flat array of 2-D points applies ``x`` to every first and ``y`` to
    every second component.
    """
    if isinstance(c, Number):
        return [c] * count
    buf = as_buffer(c, 'c')
    n = len(buf)
    if n == 0:
        raise ValidationError("c: constant buffer must not be empty")
    if count % n:
        warnings.warn(
            f"constant of length {n} does not divide {count} elements; "
            f"the last cycle is partial",
            RuntimeWarning,
            stacklevel=3,
        )
    get_ = buf.get
    return [get_(k % n + 1) for k in range(count)]


def rename(fn: Callable, name: str, doc: str) -> Callable:
    """Attach a public name and docstring to a generated function."""
    fn.__name__ = name
    fn.__qualname__ = name
    fn.__doc__ = doc
    return fn
