"""
Matrix kernels over flat buffers.

A R x C matrix occupies R*C consecutive buffer positions. Element
``(r, c)`` (1-based) sits at:

    column-major (default):  index + (c-1)*R + (r-1)
    row-major:               index + (r-1)*C + (c-1)

Element-wise operations ignore the major order. Transpose and the
multiply kernels take it as the keyword-only ``order`` argument; there is
no global setting.
"""

from __future__ import annotations

from typing import Any, Callable

from pyflatalg.core.buffer import read
from pyflatalg.core.tolerances import DEFAULT_EPSILON
from pyflatalg.core.validation import (
    MajorOrder,
    check_inner_dimensions,
    check_order,
    check_positive,
    check_shape,
)
from pyflatalg.linalg import _vector
from pyflatalg.linalg._forms import finish, matrix_forms, named


def offset(r: int, c: int, rows: int, cols: int, order: MajorOrder = 'column') -> int:
    """0-based offset of element ``(r, c)`` inside a ``rows`` x ``cols`` layout."""
    if order == 'column':
        return (c - 1) * rows + (r - 1)
    return (r - 1) * cols + (c - 1)


def layout(rows: list[list[Any]], order: MajorOrder = 'column') -> list:
    """Flatten a list of matrix rows into the requested major order."""
    order = check_order(order)
    n_rows = len(rows)
    n_cols = len(rows[0])
    flat = [None] * (n_rows * n_cols)
    for r, row in enumerate(rows, start=1):
        for c, value in enumerate(row, start=1):
            flat[offset(r, c, n_rows, n_cols, order)] = value
    return flat


# =====================================================================
# Constructors
# =====================================================================

def identity(size: int, dest=None, dest_index: int = 1):
    """
    ``size`` x ``size`` identity matrix (same layout in either major order).

    Example:
        >>> identity(2)
        (1, 0, 0, 1)
    """
    size = check_positive(size, 'size')
    values = [0] * (size * size)
    for k in range(size):
        values[k * size + k] = 1
    return finish(values, dest, dest_index)


def zeros(rows: int, cols: int, dest=None, dest_index: int = 1):
    """``rows`` x ``cols`` matrix of zeros."""
    rows, cols = check_shape(rows, cols, 'zeros')
    return finish([0] * (rows * cols), dest, dest_index)


def mat2_identity(dest=None, dest_index=1):
    """2x2 identity matrix."""
    return identity(2, dest, dest_index)


def mat3_identity(dest=None, dest_index=1):
    """3x3 identity matrix."""
    return identity(3, dest, dest_index)


def mat4_identity(dest=None, dest_index=1):
    """4x4 identity matrix."""
    return identity(4, dest, dest_index)


def mat2_zero(dest=None, dest_index=1):
    """2x2 zero matrix."""
    return zeros(2, 2, dest, dest_index)


def mat3_zero(dest=None, dest_index=1):
    """3x3 zero matrix."""
    return zeros(3, 3, dest, dest_index)


def mat4_zero(dest=None, dest_index=1):
    """4x4 zero matrix."""
    return zeros(4, 4, dest, dest_index)


# =====================================================================
# Element-wise operations
# =====================================================================

add_mat2, add_mat2_ex = matrix_forms(_vector.add, 2, 'add')
add_mat3, add_mat3_ex = matrix_forms(_vector.add, 3, 'add')
add_mat4, add_mat4_ex = matrix_forms(_vector.add, 4, 'add')

sub_mat2, sub_mat2_ex = matrix_forms(_vector.sub, 2, 'sub')
sub_mat3, sub_mat3_ex = matrix_forms(_vector.sub, 3, 'sub')
sub_mat4, sub_mat4_ex = matrix_forms(_vector.sub, 4, 'sub')

mul_mat2, mul_mat2_ex = matrix_forms(_vector.mul, 2, 'mul')
mul_mat3, mul_mat3_ex = matrix_forms(_vector.mul, 3, 'mul')
mul_mat4, mul_mat4_ex = matrix_forms(_vector.mul, 4, 'mul')

negate_mat2, negate_mat2_ex = matrix_forms(_vector.negate, 2, 'negate', matrices=1)
negate_mat3, negate_mat3_ex = matrix_forms(_vector.negate, 3, 'negate', matrices=1)
negate_mat4, negate_mat4_ex = matrix_forms(_vector.negate, 4, 'negate', matrices=1)

add_mat2_constant, add_mat2_constant_ex = matrix_forms(
    _vector.add_constant, 2, 'add', matrices=1, suffix='_constant')
add_mat3_constant, add_mat3_constant_ex = matrix_forms(
    _vector.add_constant, 3, 'add', matrices=1, suffix='_constant')
add_mat4_constant, add_mat4_constant_ex = matrix_forms(
    _vector.add_constant, 4, 'add', matrices=1, suffix='_constant')

mul_mat2_constant, mul_mat2_constant_ex = matrix_forms(
    _vector.mul_constant, 2, 'mul', matrices=1, suffix='_constant')
mul_mat3_constant, mul_mat3_constant_ex = matrix_forms(
    _vector.mul_constant, 3, 'mul', matrices=1, suffix='_constant')
mul_mat4_constant, mul_mat4_constant_ex = matrix_forms(
    _vector.mul_constant, 4, 'mul', matrices=1, suffix='_constant')

equals_mat2, equals_mat2_ex = matrix_forms(_vector.equals, 2, 'equals')
equals_mat3, equals_mat3_ex = matrix_forms(_vector.equals, 3, 'equals')
equals_mat4, equals_mat4_ex = matrix_forms(_vector.equals, 4, 'equals')


def equals_ex(a, a_index, b, b_index, rows, cols, epsilon=DEFAULT_EPSILON):
    """True if two ``rows`` x ``cols`` matrices agree within ``epsilon``."""
    rows, cols = check_shape(rows, cols, 'equals_ex')
    return _vector.equals(rows * cols, a, a_index, b, b_index, epsilon)


def _shaped_binary(kernel: Callable, op: str, summary: str) -> Callable:
    def ex(a, a_index, b, b_index, rows, cols, dest=None, dest_index=1):
        rows, cols = check_shape(rows, cols, f'{op}_ex')
        return kernel(rows * cols, a, a_index, b, b_index, dest, dest_index)
    return named(
        ex, f'{op}_ex',
        f"{summary}\n\n"
        f"General form over two ``rows`` x ``cols`` matrices (either major "
        f"order). Returns a tuple, or None when written to ``dest``.",
        __name__,
    )


def _shaped_constant(kernel: Callable, op: str, summary: str) -> Callable:
    def ex(a, a_index, c, rows, cols, dest=None, dest_index=1):
        rows, cols = check_shape(rows, cols, f'{op}_constant_ex')
        return kernel(rows * cols, a, a_index, c, dest, dest_index)
    return named(
        ex, f'{op}_constant_ex',
        f"{summary}\n\n"
        f"General form over a ``rows`` x ``cols`` matrix. Returns a tuple, "
        f"or None when written to ``dest``.",
        __name__,
    )


add_ex = _shaped_binary(_vector.add, 'add', "Add two matrices element-wise.")
sub_ex = _shaped_binary(_vector.sub, 'sub', "Subtract the second matrix from the first element-wise.")
mul_ex = _shaped_binary(_vector.mul, 'mul', "Multiply two matrices element-wise (Hadamard product).")
add_constant_ex = _shaped_constant(
    _vector.add_constant, 'add', "Add a constant to every matrix element.")
mul_constant_ex = _shaped_constant(
    _vector.mul_constant, 'mul', "Scale every matrix element by a constant.")


def negate_ex(a, a_index, rows, cols, dest=None, dest_index=1):
    """
    Negate every element of a ``rows`` x ``cols`` matrix.

    Example:
        >>> negate_ex([1, -2, 3, 0, 5, -6], 1, 2, 3)
        (-1, 2, -3, 0, -5, 6)
    """
    rows, cols = check_shape(rows, cols, 'negate_ex')
    return _vector.negate(rows * cols, a, a_index, dest, dest_index)


# =====================================================================
# Transpose
# =====================================================================

def transpose_ex(
    src: Any,
    src_index: int,
    rows: int,
    cols: int,
    dest: Any = None,
    dest_index: int = 1,
    *,
    order: MajorOrder = 'column',
):
    """
    Transpose a ``rows`` x ``cols`` matrix into a ``cols`` x ``rows`` one.

    The source is read completely before anything is written, so ``dest``
    may be the same region as ``src`` (for square matrices the transpose
    is then in place).

    Args:
        src: Source buffer
        src_index: 1-based position of element (1, 1)
        rows: Source row count
        cols: Source column count
        dest: Optional destination buffer
        dest_index: 1-based destination position
        order: 'column' (default) or 'row'

    Returns:
        The transposed matrix as a tuple, or None when written to ``dest``

    Raises:
        DimensionError: If the shape is not at least 1x1, or ``dest`` is too
            short for the result
        RangeError: If the source range is out of bounds
    """
    rows, cols = check_shape(rows, cols, 'transpose_ex')
    order = check_order(order)
    values = read(src, src_index, rows * cols, 'src')
    out = [None] * (rows * cols)
    for r in range(1, rows + 1):
        for c in range(1, cols + 1):
            out[offset(c, r, cols, rows, order)] = values[offset(r, c, rows, cols, order)]
    return finish(out, dest, dest_index)


def _square_transpose(size: int) -> tuple[Callable, Callable]:
    def value(src, *, order='column'):
        return transpose_ex(src, 1, size, size, order=order)

    def ex(src, src_index, dest=None, dest_index=1, *, order='column'):
        return transpose_ex(src, src_index, size, size, dest, dest_index, order=order)

    module = __name__
    return (
        named(value, f'transpose_mat{size}',
              f"Transpose of a {size}x{size} matrix read from position 1.", module),
        named(ex, f'transpose_mat{size}_ex',
              f"Offset form of ``transpose_mat{size}``; ``dest`` may equal ``src``.",
              module),
    )


transpose_mat2, transpose_mat2_ex = _square_transpose(2)
transpose_mat3, transpose_mat3_ex = _square_transpose(3)
transpose_mat4, transpose_mat4_ex = _square_transpose(4)


# =====================================================================
# Multiplication
# =====================================================================

def matmul_ex(
    a: Any,
    a_index: int,
    a_rows: int,
    a_cols: int,
    b: Any,
    b_index: int,
    b_rows: int,
    b_cols: int,
    dest: Any = None,
    dest_index: int = 1,
    *,
    order: MajorOrder = 'column',
):
    """
    Matrix product ``C = A @ B`` over flat buffers.

    ``A`` is ``a_rows`` x ``a_cols`` starting at ``a_index``, ``B`` is
    ``b_rows`` x ``b_cols`` starting at ``b_index``; the result is
    ``a_rows`` x ``b_cols`` in the same major order. Every product element
    is computed before the first write, so ``dest`` may overlap ``A`` or
    ``B``.

    Args:
        a, a_index, a_rows, a_cols: Left operand and its shape
        b, b_index, b_rows, b_cols: Right operand and its shape
        dest: Optional destination buffer
        dest_index: 1-based destination position
        order: 'column' (default) or 'row'

    Returns:
        The product as a tuple, or None when written to ``dest``

    Raises:
        DimensionError: If ``a_cols != b_rows``, a shape is degenerate, or
            ``dest`` is too short for the product
        RangeError: If an operand range is out of bounds

    Example:
        >>> matmul_ex([2, 4, 3, 1], 1, 2, 2, [5, 1, 2, 6], 1, 2, 2)
        (13, 21, 22, 14)
    """
    a_rows, a_cols = check_shape(a_rows, a_cols, 'a')
    b_rows, b_cols = check_shape(b_rows, b_cols, 'b')
    check_inner_dimensions(a_cols, b_rows)
    order = check_order(order)

    av = read(a, a_index, a_rows * a_cols, 'a')
    bv = read(b, b_index, b_rows * b_cols, 'b')

    out = [None] * (a_rows * b_cols)
    for r in range(1, a_rows + 1):
        for c in range(1, b_cols + 1):
            out[offset(r, c, a_rows, b_cols, order)] = sum(
                av[offset(r, k, a_rows, a_cols, order)]
                * bv[offset(k, c, b_rows, b_cols, order)]
                for k in range(1, a_cols + 1)
            )
    return finish(out, dest, dest_index)


def matmul(a, a_shape, b, b_shape, *, order='column'):
    """
    Matrix product of two whole buffers with explicit ``(rows, cols)`` shapes.

    Example:
        >>> matmul([1, 2], (2, 1), [3, 4], (1, 2))
        (3, 6, 4, 8)
    """
    a_rows, a_cols = a_shape
    b_rows, b_cols = b_shape
    return matmul_ex(a, 1, a_rows, a_cols, b, 1, b_rows, b_cols, order=order)


def _square_matmul(size: int) -> tuple[Callable, Callable]:
    def value(a, b, *, order='column'):
        return matmul_ex(a, 1, size, size, b, 1, size, size, order=order)

    def ex(a, a_index, b, b_index, dest=None, dest_index=1, *, order='column'):
        return matmul_ex(a, a_index, size, size, b, b_index, size, size,
                         dest, dest_index, order=order)

    name = f'matmul_mat{size}_mat{size}'
    return (
        named(value, name,
              f"Product of two {size}x{size} matrices read from position 1.",
              __name__),
        named(ex, f'{name}_ex',
              f"Offset form of ``{name}``; ``dest`` may overlap either operand.",
              __name__),
    )


matmul_mat2_mat2, matmul_mat2_mat2_ex = _square_matmul(2)
matmul_mat3_mat3, matmul_mat3_mat3_ex = _square_matmul(3)
matmul_mat4_mat4, matmul_mat4_mat4_ex = _square_matmul(4)


def matmul_vec_ex(
    m: Any,
    m_index: int,
    rows: int,
    cols: int,
    v: Any,
    v_index: int,
    dest: Any = None,
    dest_index: int = 1,
    *,
    order: MajorOrder = 'column',
    homogeneous: bool = False,
):
    """
    Matrix-vector product ``M @ v``.

    With ``homogeneous=True`` the vector holds ``cols - 1`` components: a
    trailing 1 is appended before multiplying and the last of the ``rows``
    outputs is dropped, so a 2-vector is transformed by a 3x3 matrix and a
    3-vector by a 4x4 one.

    Returns:
        The product as a tuple, or None when written to ``dest``

    Raises:
        DimensionError: If a homogeneous product is requested on a matrix
            with fewer than 2 rows or columns
    """
    rows, cols = check_shape(rows, cols, 'm')
    order = check_order(order)
    if homogeneous:
        check_shape(rows - 1, cols - 1, 'homogeneous m')
        vv = read(v, v_index, cols - 1, 'v') + (1,)
    else:
        vv = read(v, v_index, cols, 'v')
    mv = read(m, m_index, rows * cols, 'm')

    out_rows = rows - 1 if homogeneous else rows
    out = [
        sum(mv[offset(r, c, rows, cols, order)] * vv[c - 1] for c in range(1, cols + 1))
        for r in range(1, out_rows + 1)
    ]
    return finish(out, dest, dest_index)


def _matvec(size: int, homogeneous: bool) -> tuple[Callable, Callable]:
    n = size - 1 if homogeneous else size

    def value(m, v, *, order='column'):
        return matmul_vec_ex(m, 1, size, size, v, 1,
                             order=order, homogeneous=homogeneous)

    def ex(m, m_index, v, v_index, dest=None, dest_index=1, *, order='column'):
        return matmul_vec_ex(m, m_index, size, size, v, v_index, dest, dest_index,
                             order=order, homogeneous=homogeneous)

    name = f'matmul_mat{size}_vec{n}'
    summary = f"Product of a {size}x{size} matrix and a {n}-vector"
    if homogeneous:
        summary += " (homogeneous: 1 appended, last output dropped)"
    return (
        named(value, name, summary + ".", __name__),
        named(ex, f'{name}_ex', f"Offset form of ``{name}``.", __name__),
    )


matmul_mat2_vec2, matmul_mat2_vec2_ex = _matvec(2, homogeneous=False)
matmul_mat3_vec3, matmul_mat3_vec3_ex = _matvec(3, homogeneous=False)
matmul_mat4_vec4, matmul_mat4_vec4_ex = _matvec(4, homogeneous=False)
matmul_mat3_vec2, matmul_mat3_vec2_ex = _matvec(3, homogeneous=True)
matmul_mat4_vec3, matmul_mat4_vec3_ex = _matvec(4, homogeneous=True)
