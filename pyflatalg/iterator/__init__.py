"""
Special purpose iterators over buffers and views.

All iterators are lazy generators; each call starts a fresh iteration.
Tuples hold values only. Use ``enumerate(..., start=1)`` when the 1-based
group number is needed.

Public API:
    group(src, n), group_2/3/4(src)           - consecutive n-tuples
    group_ex(src, n, start, count),
    group_2/3/4_ex(src, start, count)         - same over a sub-range
    zip_buffers(*srcs), zip_2/3/4(...)        - lockstep, shortest wins
    zip_ex(count, *(src, index)),
    zip_2/3/4_ex(...)                         - lockstep from explicit offsets
"""

from pyflatalg.iterator._group import (
    group,
    group_ex,
    group_2,
    group_3,
    group_4,
    group_2_ex,
    group_3_ex,
    group_4_ex,
)
from pyflatalg.iterator._zip import (
    zip_buffers,
    zip_ex,
    zip_2,
    zip_3,
    zip_4,
    zip_2_ex,
    zip_3_ex,
    zip_4_ex,
)

__all__ = [
    "group",
    "group_ex",
    "group_2",
    "group_3",
    "group_4",
    "group_2_ex",
    "group_3_ex",
    "group_4_ex",
    "zip_buffers",
    "zip_ex",
    "zip_2",
    "zip_3",
    "zip_4",
    "zip_2_ex",
    "zip_3_ex",
    "zip_4_ex",
]
