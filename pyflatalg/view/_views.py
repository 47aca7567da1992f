"""
View classes: buffers computed from another buffer by an index mapping.

A view holds a non-owning reference to its backing buffer plus the mapping
parameters. Reads and writes pass straight through; nothing is copied.
The caller must keep the backing storage alive and unchanged in length for
as long as the view is used.
"""

from __future__ import annotations

from typing import Any, Iterator

from pyflatalg.core.buffer import as_buffer
from pyflatalg.core.exceptions import RangeError
from pyflatalg.core.validation import (
    check_count,
    check_index,
    check_integer,
    check_nonzero,
    check_positive,
)


class View:
    """
    Base class for all views.

    Subclasses implement ``_map`` (logical 1-based index to backing index).
    Bounds on the logical index are checked here; the backing buffer checks
    the mapped index again on access.
    """

    __slots__ = ('_src', '_n')

    def __init__(self, src: Any, count: int):
        self._src = src
        self._n = count

    @property
    def backing(self) -> Any:
        """The buffer this view maps into."""
        return self._src

    def _map(self, index: int) -> int:
        raise NotImplementedError

    def _check(self, index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            index = check_integer(index, 'index')
        if index < 1 or index > self._n:
            raise RangeError(
                f"view: index {index} out of range [1, {self._n}]",
                name='view', index=index, lower=1, upper=self._n,
            )
        return index

    def __len__(self) -> int:
        return self._n

    def get(self, index: int) -> Any:
        return self._src.get(self._map(self._check(index)))

    def set(self, index: int, value: Any) -> None:
        self._src.set(self._map(self._check(index)), value)

    def __iter__(self) -> Iterator[Any]:
        get_ = self._src.get
        map_ = self._map
        for i in range(1, self._n + 1):
            yield get_(map_(i))

    def __repr__(self) -> str:
        values = ", ".join(repr(v) for v in self)
        return f"{type(self).__name__}([{values}])"


class SliceView(View):
    """Contiguous run of ``count`` elements starting at ``start``."""

    __slots__ = ('_start',)

    def __init__(self, src: Any, start: int, count: int):
        super().__init__(src, count)
        self._start = start

    def _map(self, index: int) -> int:
        return self._start + index - 1


class StridedView(View):
    """Every ``stride``-th element starting at ``start``; stride may be negative."""

    __slots__ = ('_start', '_stride')

    def __init__(self, src: Any, start: int, stride: int, count: int):
        super().__init__(src, count)
        self._start = start
        self._stride = stride

    @property
    def stride(self) -> int:
        return self._stride

    def _map(self, index: int) -> int:
        return self._start + (index - 1) * self._stride


class InterleavedView(View):
    """
    ``count`` groups of ``group_size`` adjacent elements, group starts
    ``stride`` apart.
    """

    __slots__ = ('_start', '_group_size', '_stride')

    def __init__(self, src: Any, start: int, group_size: int, stride: int, count: int):
        super().__init__(src, group_size * count)
        self._start = start
        self._group_size = group_size
        self._stride = stride

    @property
    def group_size(self) -> int:
        return self._group_size

    def _map(self, index: int) -> int:
        group, offset = divmod(index - 1, self._group_size)
        return self._start + group * self._stride + offset


def _check_span(length: int, first: int, last: int, name: str) -> None:
    """Both extreme backing indices of a non-empty view must exist."""
    check_index(first, length, name)
    check_index(last, length, name)


def slice(src: Any, start: int, count: int) -> SliceView:
    """
    Create a view of ``count`` elements of ``src`` starting at ``start``.

    Maps ``i -> start + i - 1``.

    Example:
        >>> b = slice([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], 2, 3)
        >>> list(b)
        [2, 3, 4]

    Raises:
        RangeError: If ``start < 1`` or the slice runs past the end of ``src``
        ValidationError: If count is negative
    """
    buf = as_buffer(src, 'src')
    count = check_count(count, 'count')
    start = check_integer(start, 'start')
    if start < 1:
        raise RangeError(
            f"src: start index {start} must be >= 1",
            name='src', index=start, lower=1, upper=len(buf),
        )
    if count > 0:
        _check_span(len(buf), start, start + count - 1, 'src')
    return SliceView(buf, start, count)


def slice_2(src: Any, start: int = 1) -> SliceView:
    """View of 2 elements of ``src`` starting at ``start``."""
    return slice(src, start, 2)


def slice_3(src: Any, start: int = 1) -> SliceView:
    """View of 3 elements of ``src`` starting at ``start``."""
    return slice(src, start, 3)


def slice_4(src: Any, start: int = 1) -> SliceView:
    """View of 4 elements of ``src`` starting at ``start``."""
    return slice(src, start, 4)


def stride(src: Any, start: int, stride: int, count: int) -> StridedView:
    """
    Create a view of every ``stride``-th element of ``src``.

    Maps ``i -> start + (i-1)*stride``. A negative stride walks the
    backing buffer downward from ``start``.

    Example:
        >>> odds = stride([1, 2, 3, 4, 5, 6], 1, 2, 3)
        >>> list(odds)
        [1, 3, 5]

    Raises:
        DomainError: If stride is zero
        RangeError: If any mapped index falls outside ``src``
    """
    buf = as_buffer(src, 'src')
    step = check_nonzero(stride, 'stride')
    count = check_count(count, 'count')
    start = check_integer(start, 'start')
    if count > 0:
        _check_span(len(buf), start, start + (count - 1) * step, 'src')
    return StridedView(buf, start, step, count)


def reverse(src: Any, count: int | None = None, start: int = 1) -> StridedView:
    """
    Create a view that walks ``count`` elements of ``src`` backwards.

    Maps ``i -> start + count - i``, so ``reverse(b, n)[1] == b[n]``.
    ``count`` defaults to every element from ``start`` to the end.

    Example:
        >>> list(reverse([1, 2, 3, 4, 5]))
        [5, 4, 3, 2, 1]

    Raises:
        RangeError: If the reversed range falls outside ``src``
    """
    buf = as_buffer(src, 'src')
    start = check_integer(start, 'start')
    if count is None:
        count = len(buf) - start + 1
    count = check_count(count, 'count')
    if start < 1:
        raise RangeError(
            f"src: start index {start} must be >= 1",
            name='src', index=start, lower=1, upper=len(buf),
        )
    last = start + count - 1
    if count > 0:
        _check_span(len(buf), start, last, 'src')
    return StridedView(buf, last, -1, count)


def interleave(
    src: Any,
    start: int,
    group_size: int,
    stride: int,
    count: int,
) -> InterleavedView:
    """
    Create a view over one group of interleaved data.

    Collects ``group_size`` adjacent elements starting at ``start``, then
    skips ahead ``stride`` elements for the next group, ``count`` times.
    For ``i`` in ``[1, group_size*count]``, with ``g = (i-1) // group_size``
    and ``k = (i-1) % group_size``, maps ``i -> start + g*stride + k``.

    Example:
        >>> x = 0
        >>> data = [1, 2, x, x, 5, 6, x, x, 9, 10]
        >>> list(interleave(data, 1, 2, 4, 3))
        [1, 2, 5, 6, 9, 10]

    Raises:
        DomainError: If group_size <= 0 or stride is zero
        RangeError: If any mapped index falls outside ``src``
    """
    buf = as_buffer(src, 'src')
    group_size = check_positive(group_size, 'group_size')
    step = check_nonzero(stride, 'stride')
    count = check_count(count, 'count')
    start = check_integer(start, 'start')
    if count > 0:
        span = (count - 1) * step
        _check_span(
            len(buf),
            start + min(0, span),
            start + max(0, span) + group_size - 1,
            'src',
        )
    return InterleavedView(buf, start, group_size, step, count)
