"""
Element-wise binary operations.

Each operation comes in four forms, e.g. for addition:

    add(a, b)                                       -> [a[i] + b[i]]
    add_constant(a, c)                              -> [a[i] + c]
    add_ex(a, a_index, a_count, b, b_index,
           dest=None, dest_index=1)                 -> range form
    add_constant_ex(a, a_index, a_count, c,
                    dest=None, dest_index=1)        -> range form

The value forms cover all of ``a``; ``b`` must be at least as long. A
buffer constant ``c`` is cycled across ``a``.

The comparison families (``equal``, ``less_than``, ...) share the same
four forms and produce lists of booleans.

This module defines the public names ``min``, ``max`` and ``pow``.
"""

from __future__ import annotations

import builtins
import operator
from typing import Any, Callable

from pyflatalg.array._common import constant_values, deliver, rename, whole
from pyflatalg.core.buffer import read
from pyflatalg.core.exceptions import DomainError
from pyflatalg.core.tolerances import ALMOST_EQUAL_EPSILON
from pyflatalg.core.validation import check_count


def _checked_div(x, y):
    if y == 0:
        raise DomainError("division by zero", parameter='b', value=0)
    return x / y


def _checked_mod(x, y):
    if y == 0:
        raise DomainError("modulo by zero", parameter='b', value=0)
    return x % y


def _almost_equal(x, y):
    return abs(x - y) < ALMOST_EQUAL_EPSILON


def _family(op: Callable[[Any, Any], Any], name: str, formula: str) -> tuple:
    def value(a, b):
        av = whole(a, 'a')
        bv = read(b, 1, len(av), 'b')
        return [op(x, y) for x, y in zip(av, bv)]

    def constant(a, c):
        av = whole(a, 'a')
        return [op(x, y) for x, y in zip(av, constant_values(c, len(av)))]

    def ex(a, a_index, a_count, b, b_index, dest=None, dest_index=1):
        a_count = check_count(a_count, 'a_count')
        av = read(a, a_index, a_count, 'a')
        bv = read(b, b_index, a_count, 'b')
        return deliver([op(x, y) for x, y in zip(av, bv)], dest, dest_index)

    def constant_ex(a, a_index, a_count, c, dest=None, dest_index=1):
        a_count = check_count(a_count, 'a_count')
        av = read(a, a_index, a_count, 'a')
        cv = constant_values(c, a_count)
        return deliver([op(x, y) for x, y in zip(av, cv)], dest, dest_index)

    pair = formula.format(x='a[i]', y='b[i]')
    const = formula.format(x='a[i]', y='c')
    return (
        rename(value, name, f"New list ``{pair}`` over all of ``a``."),
        rename(constant, f'{name}_constant',
               f"New list ``{const}``; a buffer ``c`` is cycled across ``a``."),
        rename(ex, f'{name}_ex',
               f"``{pair}`` over ``a_count`` elements from explicit offsets; "
               f"returns ``dest`` (a new list when omitted)."),
        rename(constant_ex, f'{name}_constant_ex',
               f"``{const}`` over ``a_count`` elements; returns ``dest`` "
               f"(a new list when omitted)."),
    )


add, add_constant, add_ex, add_constant_ex = _family(
    operator.add, 'add', '{x} + {y}')
sub, sub_constant, sub_ex, sub_constant_ex = _family(
    operator.sub, 'sub', '{x} - {y}')
mul, mul_constant, mul_ex, mul_constant_ex = _family(
    operator.mul, 'mul', '{x} * {y}')
div, div_constant, div_ex, div_constant_ex = _family(
    _checked_div, 'div', '{x} / {y}')
mod, mod_constant, mod_ex, mod_constant_ex = _family(
    _checked_mod, 'mod', '{x} % {y}')
pow, pow_constant, pow_ex, pow_constant_ex = _family(
    operator.pow, 'pow', '{x} ** {y}')
min, min_constant, min_ex, min_constant_ex = _family(
    builtins.min, 'min', 'min({x}, {y})')
max, max_constant, max_ex, max_constant_ex = _family(
    builtins.max, 'max', 'max({x}, {y})')
almost_equal, almost_equal_constant, almost_equal_ex, almost_equal_constant_ex = _family(
    _almost_equal, 'almost_equal', '|{x} - {y}| < 1e-9')


# =====================================================================
# Comparisons (boolean results)
# =====================================================================

equal, equal_constant, equal_ex, equal_constant_ex = _family(
    operator.eq, 'equal', '{x} == {y}')
not_equal, not_equal_constant, not_equal_ex, not_equal_constant_ex = _family(
    operator.ne, 'not_equal', '{x} != {y}')
less_than, less_than_constant, less_than_ex, less_than_constant_ex = _family(
    operator.lt, 'less_than', '{x} < {y}')
(
    less_than_or_equal,
    less_than_or_equal_constant,
    less_than_or_equal_ex,
    less_than_or_equal_constant_ex,
) = _family(operator.le, 'less_than_or_equal', '{x} <= {y}')
greater_than, greater_than_constant, greater_than_ex, greater_than_constant_ex = _family(
    operator.gt, 'greater_than', '{x} > {y}')
(
    greater_than_or_equal,
    greater_than_or_equal_constant,
    greater_than_or_equal_ex,
    greater_than_or_equal_constant_ex,
) = _family(operator.ge, 'greater_than_or_equal', '{x} >= {y}')
