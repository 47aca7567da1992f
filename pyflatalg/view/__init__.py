"""
Views over buffers.

A view is a buffer that maps into a subset of another buffer without
copying. Views are used to:
    - pass interleaved, strided or reversed data to kernels
    - give a 1-based window onto foreign memory (numpy arrays, ctypes arrays)

Public API:
    slice(src, start, count)                          - contiguous window
    slice_2/slice_3/slice_4(src, start)               - fixed-size windows
    stride(src, start, stride, count)                 - every k-th element
    reverse(src, count, start)                        - backwards window
    interleave(src, start, group_size, stride, count) - one packed channel

Views compose: any view can back another view. Writes through a view
mutate the backing buffer.
"""

from pyflatalg.view._views import (
    View,
    SliceView,
    StridedView,
    InterleavedView,
    slice,
    slice_2,
    slice_3,
    slice_4,
    stride,
    reverse,
    interleave,
)

__all__ = [
    "slice",
    "slice_2",
    "slice_3",
    "slice_4",
    "stride",
    "reverse",
    "interleave",
    "View",
    "SliceView",
    "StridedView",
    "InterleavedView",
]
