"""
Call surfaces over the generic offset kernels.

Every kernel in this package has the shape::

    kernel(n, buf_1, index_1, ..., buf_k, index_k, *extras,
           dest=None, dest_index=1)

where ``n`` is the number of components read from each buffer. From one
such kernel this module builds the fixed-arity public functions:

    ex form      op_vecN_ex(a, a_index, b, b_index, ..., dest=None, dest_index=1)
    value form   op_vecN(a, b, ...)            buffers read from position 1
    scalar form  op_N(x1, y1, ..., x2, y2, ...) components packed into a tuple

The scalar form copies its arguments into a transient tuple and calls the
same kernel, so all three surfaces share one implementation.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from pyflatalg.core.buffer import write
from pyflatalg.core.validation import check_arity


def finish(values: Sequence[Any], dest: Any, dest_index: int) -> tuple | None:
    """
    Deliver a kernel result.

    Returns the values as a tuple when no destination is given, otherwise
    writes them to ``dest`` starting at ``dest_index`` and returns None.
    Callers compute every value before calling this, so ``dest`` may alias
    any source.
    """
    if dest is None:
        return tuple(values)
    write(dest, dest_index, values, 'dest')
    return None


def named(fn: Callable, name: str, doc: str, module: str) -> Callable:
    """Give a generated function its public name, docstring and module."""
    fn.__name__ = name
    fn.__qualname__ = name
    fn.__doc__ = doc
    fn.__module__ = module
    return fn


def _summary(kernel: Callable) -> str:
    return (kernel.__doc__ or '').strip().splitlines()[0]


def bind_ex(kernel: Callable, n: int, name: str) -> Callable:
    """Offset-addressed form: ``kernel`` with ``n`` fixed."""
    def ex(*args, **kwargs):
        return kernel(n, *args, **kwargs)
    doc = (
        f"{_summary(kernel)}\n\n"
        f"Offset form over {n} components: pass each operand as a buffer "
        f"followed by its 1-based start index. With ``dest`` the result is "
        f"written there (``dest`` may alias an operand) and None is returned; "
        f"without it the result is returned."
    )
    return named(ex, name, doc, kernel.__module__)


def bind_value(kernel: Callable, n: int, n_buffers: int, name: str) -> Callable:
    """Value form: every buffer operand read from position 1."""
    def value(*args, **kwargs):
        operands = []
        for buf in args[:n_buffers]:
            operands.append(buf)
            operands.append(1)
        return kernel(n, *operands, *args[n_buffers:], **kwargs)
    doc = (
        f"{_summary(kernel)}\n\n"
        f"Value form over {n} components: operands are buffers read from "
        f"position 1; the result is returned."
    )
    return named(value, name, doc, kernel.__module__)


def bind_scalar(
    kernel: Callable,
    n: int,
    n_vectors: int,
    n_extras: int,
    name: str,
) -> Callable:
    """Scalar form: components passed as positional arguments."""
    expected = n * n_vectors + n_extras

    def scalar(*components, **kwargs):
        check_arity(components, expected, name)
        operands = []
        for k in range(n_vectors):
            operands.append(components)
            operands.append(1 + k * n)
        return kernel(n, *operands, *components[n * n_vectors:], **kwargs)
    doc = (
        f"{_summary(kernel)}\n\n"
        f"Scalar form: takes {expected} numbers ({n_vectors} operand(s) of "
        f"{n} components"
        + (f", then {n_extras} extra argument(s)" if n_extras else "")
        + ") and returns the result."
    )
    return named(scalar, name, doc, kernel.__module__)


def vector_forms(
    kernel: Callable,
    n: int,
    op: str,
    vectors: int = 2,
    extras: int = 0,
    suffix: str = '',
) -> tuple[Callable, Callable, Callable]:
    """
    Build ``(op{suffix}_N, op_vecN{suffix}, op_vecN{suffix}_ex)`` for arity ``n``.
    """
    return (
        bind_scalar(kernel, n, vectors, extras, f'{op}{suffix}_{n}'),
        bind_value(kernel, n, vectors, f'{op}_vec{n}{suffix}'),
        bind_ex(kernel, n, f'{op}_vec{n}{suffix}_ex'),
    )


def matrix_forms(
    kernel: Callable,
    size: int,
    op: str,
    matrices: int = 2,
    suffix: str = '',
) -> tuple[Callable, Callable]:
    """
    Build ``(op_matS{suffix}, op_matS{suffix}_ex)`` for an SxS matrix.

    Element-wise matrix operations are the vector kernels applied to the
    ``size*size`` flat layout.
    """
    n = size * size
    return (
        bind_value(kernel, n, matrices, f'{op}_mat{size}{suffix}'),
        bind_ex(kernel, n, f'{op}_mat{size}{suffix}_ex'),
    )
