"""
Generic offset kernels for small vectors.

Each kernel takes the component count ``n`` first and follows the
operand convention described in ``_forms``. Every source component is
read before any destination component is written, so a destination may
alias a source.
"""

from __future__ import annotations

import math
import operator
from typing import Any, Callable

from pyflatalg.core.buffer import read
from pyflatalg.core.exceptions import DomainError
from pyflatalg.core.tolerances import DEFAULT_EPSILON
from pyflatalg.linalg._forms import finish, vector_forms


def _checked_div(x: Any, y: Any) -> Any:
    if y == 0:
        raise DomainError("division by zero", parameter='b', value=0)
    return x / y


def _binary(
    op: Callable[[Any, Any], Any],
    n: int,
    a: Any, a_index: int,
    b: Any, b_index: int,
    dest: Any,
    dest_index: int,
) -> tuple | None:
    av = read(a, a_index, n, 'a')
    bv = read(b, b_index, n, 'b')
    return finish([op(x, y) for x, y in zip(av, bv)], dest, dest_index)


def _with_constant(
    op: Callable[[Any, Any], Any],
    n: int,
    a: Any, a_index: int,
    c: Any,
    dest: Any,
    dest_index: int,
) -> tuple | None:
    av = read(a, a_index, n, 'a')
    return finish([op(x, c) for x in av], dest, dest_index)


def add(n, a, a_index, b, b_index, dest=None, dest_index=1):
    """Add two vectors component-wise."""
    return _binary(operator.add, n, a, a_index, b, b_index, dest, dest_index)


def sub(n, a, a_index, b, b_index, dest=None, dest_index=1):
    """Subtract the second vector from the first component-wise."""
    return _binary(operator.sub, n, a, a_index, b, b_index, dest, dest_index)


def mul(n, a, a_index, b, b_index, dest=None, dest_index=1):
    """Multiply two vectors component-wise."""
    return _binary(operator.mul, n, a, a_index, b, b_index, dest, dest_index)


def div(n, a, a_index, b, b_index, dest=None, dest_index=1):
    """Divide the first vector by the second component-wise (zero divisor is a DomainError)."""
    return _binary(_checked_div, n, a, a_index, b, b_index, dest, dest_index)


def add_constant(n, a, a_index, c, dest=None, dest_index=1):
    """Add a constant to every component."""
    return _with_constant(operator.add, n, a, a_index, c, dest, dest_index)


def sub_constant(n, a, a_index, c, dest=None, dest_index=1):
    """Subtract a constant from every component."""
    return _with_constant(operator.sub, n, a, a_index, c, dest, dest_index)


def mul_constant(n, a, a_index, c, dest=None, dest_index=1):
    """Scale every component by a constant."""
    return _with_constant(operator.mul, n, a, a_index, c, dest, dest_index)


def div_constant(n, a, a_index, c, dest=None, dest_index=1):
    """Divide every component by a constant (zero is a DomainError)."""
    if c == 0:
        raise DomainError("division by zero", parameter='c', value=0)
    return _with_constant(operator.truediv, n, a, a_index, c, dest, dest_index)


def negate(n, a, a_index, dest=None, dest_index=1):
    """Negate every component."""
    return finish([-x for x in read(a, a_index, n, 'a')], dest, dest_index)


def equals(n, a, a_index, b, b_index, epsilon=DEFAULT_EPSILON):
    """True if every pair of components differs by at most ``epsilon``."""
    av = read(a, a_index, n, 'a')
    bv = read(b, b_index, n, 'b')
    return all(abs(x - y) <= epsilon for x, y in zip(av, bv))


def inner_product(n, a, a_index, b, b_index):
    """Inner (dot) product: sum of pairwise component products."""
    av = read(a, a_index, n, 'a')
    bv = read(b, b_index, n, 'b')
    return sum(x * y for x, y in zip(av, bv))


def length_squared(n, a, a_index):
    """Squared Euclidean length."""
    return sum(x * x for x in read(a, a_index, n, 'a'))


def length(n, a, a_index):
    """Euclidean length."""
    return math.sqrt(length_squared(n, a, a_index))


def normalise(n, a, a_index, dest=None, dest_index=1):
    """Scale to unit length (a zero-length vector is a DomainError)."""
    av = read(a, a_index, n, 'a')
    size = math.sqrt(sum(x * x for x in av))
    if size == 0:
        raise DomainError(
            "normalise: vector has zero length", parameter='a', value=0.0
        )
    return finish([x / size for x in av], dest, dest_index)


def _cross(av: tuple, bv: tuple) -> tuple:
    a1, a2, a3 = av
    b1, b2, b3 = bv
    return (a2 * b3 - a3 * b2, a3 * b1 - a1 * b3, a1 * b2 - a2 * b1)


def cross_product_vec3_ex(a, a_index, b, b_index, dest=None, dest_index=1):
    """
    3-D cross product of ``a[a_index..+2]`` and ``b[b_index..+2]``.

    With ``dest`` the product is written there (``dest`` may alias either
    operand) and None is returned; otherwise the product is returned.

    Example:
        >>> cross_product_vec3_ex([1, 2, 3], 1, [4, 5, 6], 1)
        (-3, 6, -3)
    """
    av = read(a, a_index, 3, 'a')
    bv = read(b, b_index, 3, 'b')
    return finish(_cross(av, bv), dest, dest_index)


def cross_product_vec3(a, b):
    """3-D cross product of two buffers read from position 1."""
    return cross_product_vec3_ex(a, 1, b, 1)


def cross_product_3(a1, a2, a3, b1, b2, b3):
    """3-D cross product of two vectors given as components."""
    return _cross((a1, a2, a3), (b1, b2, b3))


# Fixed-arity surfaces.

add_2, add_vec2, add_vec2_ex = vector_forms(add, 2, 'add')
add_3, add_vec3, add_vec3_ex = vector_forms(add, 3, 'add')
add_4, add_vec4, add_vec4_ex = vector_forms(add, 4, 'add')

sub_2, sub_vec2, sub_vec2_ex = vector_forms(sub, 2, 'sub')
sub_3, sub_vec3, sub_vec3_ex = vector_forms(sub, 3, 'sub')
sub_4, sub_vec4, sub_vec4_ex = vector_forms(sub, 4, 'sub')

mul_2, mul_vec2, mul_vec2_ex = vector_forms(mul, 2, 'mul')
mul_3, mul_vec3, mul_vec3_ex = vector_forms(mul, 3, 'mul')
mul_4, mul_vec4, mul_vec4_ex = vector_forms(mul, 4, 'mul')

div_2, div_vec2, div_vec2_ex = vector_forms(div, 2, 'div')
div_3, div_vec3, div_vec3_ex = vector_forms(div, 3, 'div')
div_4, div_vec4, div_vec4_ex = vector_forms(div, 4, 'div')

add_constant_2, add_vec2_constant, add_vec2_constant_ex = vector_forms(
    add_constant, 2, 'add', vectors=1, extras=1, suffix='_constant')
add_constant_3, add_vec3_constant, add_vec3_constant_ex = vector_forms(
    add_constant, 3, 'add', vectors=1, extras=1, suffix='_constant')
add_constant_4, add_vec4_constant, add_vec4_constant_ex = vector_forms(
    add_constant, 4, 'add', vectors=1, extras=1, suffix='_constant')

sub_constant_2, sub_vec2_constant, sub_vec2_constant_ex = vector_forms(
    sub_constant, 2, 'sub', vectors=1, extras=1, suffix='_constant')
sub_constant_3, sub_vec3_constant, sub_vec3_constant_ex = vector_forms(
    sub_constant, 3, 'sub', vectors=1, extras=1, suffix='_constant')
sub_constant_4, sub_vec4_constant, sub_vec4_constant_ex = vector_forms(
    sub_constant, 4, 'sub', vectors=1, extras=1, suffix='_constant')

mul_constant_2, mul_vec2_constant, mul_vec2_constant_ex = vector_forms(
    mul_constant, 2, 'mul', vectors=1, extras=1, suffix='_constant')
mul_constant_3, mul_vec3_constant, mul_vec3_constant_ex = vector_forms(
    mul_constant, 3, 'mul', vectors=1, extras=1, suffix='_constant')
mul_constant_4, mul_vec4_constant, mul_vec4_constant_ex = vector_forms(
    mul_constant, 4, 'mul', vectors=1, extras=1, suffix='_constant')

div_constant_2, div_vec2_constant, div_vec2_constant_ex = vector_forms(
    div_constant, 2, 'div', vectors=1, extras=1, suffix='_constant')
div_constant_3, div_vec3_constant, div_vec3_constant_ex = vector_forms(
    div_constant, 3, 'div', vectors=1, extras=1, suffix='_constant')
div_constant_4, div_vec4_constant, div_vec4_constant_ex = vector_forms(
    div_constant, 4, 'div', vectors=1, extras=1, suffix='_constant')

negate_2, negate_vec2, negate_vec2_ex = vector_forms(negate, 2, 'negate', vectors=1)
negate_3, negate_vec3, negate_vec3_ex = vector_forms(negate, 3, 'negate', vectors=1)
negate_4, negate_vec4, negate_vec4_ex = vector_forms(negate, 4, 'negate', vectors=1)

equals_2, equals_vec2, equals_vec2_ex = vector_forms(equals, 2, 'equals')
equals_3, equals_vec3, equals_vec3_ex = vector_forms(equals, 3, 'equals')
equals_4, equals_vec4, equals_vec4_ex = vector_forms(equals, 4, 'equals')

inner_product_2, inner_product_vec2, inner_product_vec2_ex = vector_forms(
    inner_product, 2, 'inner_product')
inner_product_3, inner_product_vec3, inner_product_vec3_ex = vector_forms(
    inner_product, 3, 'inner_product')
inner_product_4, inner_product_vec4, inner_product_vec4_ex = vector_forms(
    inner_product, 4, 'inner_product')

length_2, length_vec2, length_vec2_ex = vector_forms(length, 2, 'length', vectors=1)
length_3, length_vec3, length_vec3_ex = vector_forms(length, 3, 'length', vectors=1)
length_4, length_vec4, length_vec4_ex = vector_forms(length, 4, 'length', vectors=1)

length_squared_2, length_squared_vec2, length_squared_vec2_ex = vector_forms(
    length_squared, 2, 'length_squared', vectors=1)
length_squared_3, length_squared_vec3, length_squared_vec3_ex = vector_forms(
    length_squared, 3, 'length_squared', vectors=1)
length_squared_4, length_squared_vec4, length_squared_vec4_ex = vector_forms(
    length_squared, 4, 'length_squared', vectors=1)

normalise_2, normalise_vec2, normalise_vec2_ex = vector_forms(
    normalise, 2, 'normalise', vectors=1)
normalise_3, normalise_vec3, normalise_vec3_ex = vector_forms(
    normalise, 3, 'normalise', vectors=1)
normalise_4, normalise_vec4, normalise_vec4_ex = vector_forms(
    normalise, 4, 'normalise', vectors=1)
