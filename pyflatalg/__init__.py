"""
pyflatalg: small-vector and matrix kernels over flat, 1-indexed buffers.

Operations read and write plain sequences (lists, numpy arrays, ctypes
arrays, ...) or zero-copy views at caller-specified offsets, instead of
dedicated vector and matrix objects.

Submodules:
    core: Buffer contract, exceptions, validation, tolerances
    view: Slice, stride, reverse and interleave views
    iterator: group and zip iterators
    linalg: Vector and matrix kernels, affine transform builders
    array: Whole-array arithmetic, comparison and creation
"""

__version__ = "0.1.0"

from pyflatalg import core
from pyflatalg import view
from pyflatalg import iterator
from pyflatalg import linalg
from pyflatalg import array

__all__ = [
    "__version__",
    "core",
    "view",
    "iterator",
    "linalg",
    "array",
]
