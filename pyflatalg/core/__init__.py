"""
Core infrastructure for pyflatalg.

This module provides the buffer contract and the shared utilities used by
the view, iterator, linalg and array submodules.

Key components:
    protocols: Buffer protocol (len/get/set on 1-based positions)
    buffer: SequenceBuffer adapter, as_buffer, read/write helpers
    exceptions: Exception hierarchy
    validation: Argument validators
    tolerances: Default epsilons for equality checks
    precision: Float64 epsilon and stepped-range counting
"""

from pyflatalg.core.protocols import Buffer
from pyflatalg.core.buffer import (
    SequenceBuffer,
    as_buffer,
    is_buffer,
    length,
    get,
    set,
    read,
    write,
    to_list,
    to_numpy,
)
from pyflatalg.core.exceptions import (
    PyFlatAlgError,
    ValidationError,
    RangeError,
    DimensionError,
    NumericalError,
    DomainError,
)
from pyflatalg.core.validation import MajorOrder

__all__ = [
    # Protocols
    "Buffer",
    # Buffers
    "SequenceBuffer",
    "as_buffer",
    "is_buffer",
    "length",
    "get",
    "set",
    "read",
    "write",
    "to_list",
    "to_numpy",
    # Layout
    "MajorOrder",
    # Exceptions
    "PyFlatAlgError",
    "ValidationError",
    "RangeError",
    "DimensionError",
    "NumericalError",
    "DomainError",
]
