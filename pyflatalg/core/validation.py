"""
Input validation utilities for pyflatalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently clamping
indices or making assumptions about caller intent.

Design principles:
    - No silent coercion (integral arguments must already be integers)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from numbers import Integral
from typing import Any, Literal, Sequence

from pyflatalg.core.exceptions import (
    ValidationError,
    RangeError,
    DimensionError,
    DomainError,
)

MajorOrder = Literal['column', 'row']

_ORDERS = ('column', 'row')


def check_integer(value: Any, name: str) -> int:
    """
    Verify a value is an integer (bools rejected).

    Args:
        value: Value to check
        name: Parameter name for error messages

    Returns:
        The value as a plain int

    Raises:
        ValidationError: If value is not integral
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValidationError(
            f"{name}: expected integer, got {type(value).__name__} {value!r}"
        )
    return int(value)


def check_count(count: Any, name: str) -> int:
    """
    Verify an element count is a non-negative integer.

    Args:
        count: Count to check
        name: Parameter name for error messages

    Returns:
        The count as a plain int

    Raises:
        ValidationError: If count is not an integer or is negative
    """
    count = check_integer(count, name)
    if count < 0:
        raise ValidationError(f"{name}: must be >= 0, got {count}")
    return count


def check_index(index: Any, length: int, name: str) -> int:
    """
    Verify a 1-based index addresses an existing element.

    Args:
        index: 1-based position
        length: Length of the addressed buffer
        name: Parameter name for error messages

    Returns:
        The index as a plain int

    Raises:
        ValidationError: If index is not an integer
        RangeError: If index is outside [1, length]
    """
    index = check_integer(index, name)
    if index < 1 or index > length:
        raise RangeError(
            f"{name}: index {index} out of range [1, {length}]",
            name=name, index=index, lower=1, upper=length,
        )
    return index


def check_range(length: int, index: Any, count: int, name: str) -> int:
    """
    Verify ``count`` consecutive elements starting at ``index`` exist.

    An empty range (count == 0) is valid for any index >= 1.

    Args:
        length: Length of the addressed buffer
        index: 1-based start position
        count: Number of elements addressed
        name: Parameter name for error messages

    Returns:
        The start index as a plain int

    Raises:
        ValidationError: If index is not an integer
        RangeError: If any addressed position lies outside [1, length]
    """
    index = check_integer(index, name)
    if index < 1:
        raise RangeError(
            f"{name}: start index {index} must be >= 1",
            name=name, index=index, lower=1, upper=length,
        )
    last = index + count - 1
    if count > 0 and last > length:
        raise RangeError(
            f"{name}: range [{index}, {last}] exceeds length {length}",
            name=name, index=last, lower=1, upper=length,
        )
    return index


def check_nonzero(value: Any, name: str) -> int:
    """
    Verify an integer parameter (e.g. a stride) is non-zero.

    Raises:
        ValidationError: If value is not an integer
        DomainError: If value is zero
    """
    value = check_integer(value, name)
    if value == 0:
        raise DomainError(f"{name}: must be non-zero", parameter=name, value=0)
    return value


def check_positive(value: Any, name: str) -> int:
    """
    Verify an integer parameter (e.g. a group size) is strictly positive.

    Raises:
        ValidationError: If value is not an integer
        DomainError: If value is zero or negative
    """
    value = check_integer(value, name)
    if value <= 0:
        raise DomainError(
            f"{name}: must be > 0, got {value}", parameter=name, value=value
        )
    return value


def check_order(order: Any) -> MajorOrder:
    """
    Verify a matrix major-order selector.

    Raises:
        ValidationError: If order is not 'column' or 'row'
    """
    if order not in _ORDERS:
        raise ValidationError(
            f"order: expected 'column' or 'row', got {order!r}"
        )
    return order


def check_shape(rows: Any, cols: Any, name: str) -> tuple[int, int]:
    """
    Verify a matrix shape has strictly positive dimensions.

    Raises:
        ValidationError: If either dimension is not an integer
        DimensionError: If either dimension is < 1
    """
    rows = check_integer(rows, f"{name} rows")
    cols = check_integer(cols, f"{name} cols")
    if rows < 1 or cols < 1:
        raise DimensionError(
            f"{name}: shape must be at least 1x1, got {rows}x{cols}",
            expected="positive dimensions", actual=(rows, cols),
        )
    return rows, cols


def check_arity(values: Sequence[Any], expected: int, name: str) -> None:
    """
    Verify a scalar-form call received exactly ``expected`` components.

    Raises:
        DimensionError: If the number of values differs
    """
    if len(values) != expected:
        raise DimensionError(
            f"{name}: expected {expected} components, got {len(values)}",
            expected=expected, actual=len(values),
        )


def check_inner_dimensions(a_cols: int, b_rows: int) -> None:
    """
    Verify matrices are conformable for multiplication.

    Raises:
        DimensionError: If the columns of A differ from the rows of B
    """
    if a_cols != b_rows:
        raise DimensionError(
            f"matmul: inner dimensions differ (A has {a_cols} columns, "
            f"B has {b_rows} rows)",
            expected=a_cols, actual=b_rows,
        )
