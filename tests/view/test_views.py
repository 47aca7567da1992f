"""
Tests for slice, stride, reverse and interleave views.

Validates:
    - index mappings against the backing buffer
    - write-through to the backing buffer
    - construction-time range and domain checks
    - composition (views backed by views)
"""

import numpy as np
import pytest

from pyflatalg import view
from pyflatalg.core.buffer import to_list
from pyflatalg.core.exceptions import DomainError, RangeError, ValidationError


TEN = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


# ═══════════════════════════════════════════════════════════════════════
# Slice
# ═══════════════════════════════════════════════════════════════════════


class TestSlice:

    def test_mapping(self):
        v = view.slice(TEN, 2, 3)
        assert len(v) == 3
        assert [v.get(i) for i in range(1, 4)] == [2, 3, 4]

    def test_write_through(self, make_buffer):
        backing = make_buffer([0.0] * 5)
        v = view.slice(backing, 3, 2)
        v.set(1, 9.0)
        v.set(2, 8.0)
        assert to_list(backing) == [0.0, 0.0, 9.0, 8.0, 0.0]

    def test_fixed_sizes(self):
        assert list(view.slice_2(TEN)) == [1, 2]
        assert list(view.slice_3(TEN, 4)) == [4, 5, 6]
        assert list(view.slice_4(TEN, 7)) == [7, 8, 9, 10]

    def test_empty(self):
        assert len(view.slice([1, 2], 3, 0)) == 0

    def test_runs_past_end(self):
        with pytest.raises(RangeError):
            view.slice(TEN, 9, 3)

    def test_start_below_one(self):
        with pytest.raises(RangeError):
            view.slice(TEN, 0, 2)

    def test_negative_count(self):
        with pytest.raises(ValidationError):
            view.slice(TEN, 1, -1)

    def test_access_past_view_end(self):
        v = view.slice(TEN, 1, 3)
        with pytest.raises(RangeError):
            v.get(4)


# ═══════════════════════════════════════════════════════════════════════
# Stride
# ═══════════════════════════════════════════════════════════════════════


class TestStride:

    @pytest.mark.parametrize("start,step,count", [
        (1, 2, 5),
        (2, 3, 3),
        (10, -1, 10),
        (9, -4, 3),
        (4, 7, 1),
    ])
    def test_mapping(self, start, step, count):
        v = view.stride(TEN, start, step, count)
        assert len(v) == count
        for i in range(1, count + 1):
            assert v.get(i) == TEN[start + (i - 1) * step - 1]

    def test_zero_stride(self):
        with pytest.raises(DomainError):
            view.stride(TEN, 1, 0, 3)

    def test_runs_past_end(self):
        with pytest.raises(RangeError):
            view.stride(TEN, 1, 3, 5)

    def test_negative_runs_past_start(self):
        with pytest.raises(RangeError):
            view.stride(TEN, 3, -2, 3)

    def test_stride_property(self):
        assert view.stride(TEN, 1, 2, 2).stride == 2

    def test_write_through(self):
        data = [0, 0, 0, 0, 0, 0]
        v = view.stride(data, 2, 2, 3)
        for i in range(1, 4):
            v.set(i, i)
        assert data == [0, 1, 0, 2, 0, 3]


# ═══════════════════════════════════════════════════════════════════════
# Reverse
# ═══════════════════════════════════════════════════════════════════════


class TestReverse:

    def test_whole_buffer(self):
        assert list(view.reverse(TEN)) == TEN[::-1]

    @pytest.mark.parametrize("n", [1, 4, 10])
    def test_prefix(self, n):
        v = view.reverse(TEN, n)
        for i in range(1, n + 1):
            assert v.get(i) == TEN[n - i]

    def test_explicit_start(self):
        assert list(view.reverse(TEN, 3, 5)) == [7, 6, 5]

    def test_equivalent_to_stride(self):
        assert list(view.reverse(TEN, 4, 2)) == list(view.stride(TEN, 5, -1, 4))

    def test_too_long(self):
        with pytest.raises(RangeError):
            view.reverse(TEN, 11)


# ═══════════════════════════════════════════════════════════════════════
# Interleave
# ═══════════════════════════════════════════════════════════════════════


class TestInterleave:

    def test_docstring_layout(self):
        data = [1, 2, 0, 0, 5, 6, 0, 0, 9, 10]
        assert list(view.interleave(data, 1, 2, 4, 3)) == [1, 2, 5, 6, 9, 10]

    @pytest.mark.parametrize("start,g,s,n", [
        (1, 2, 4, 3),
        (3, 2, 4, 2),
        (2, 3, 3, 3),
        (1, 1, 2, 5),
    ])
    def test_mapping(self, start, g, s, n):
        v = view.interleave(TEN, start, g, s, n)
        assert len(v) == g * n
        for k in range(1, n + 1):
            for j in range(1, g + 1):
                assert v.get((k - 1) * g + j) == TEN[start + (k - 1) * s + (j - 1) - 1]

    def test_colour_channel_of_records(self):
        # x, y, r, g, b per record; pull the rgb channel of 3 records
        records = [
            0, 0, 1, 2, 3,
            0, 0, 4, 5, 6,
            0, 0, 7, 8, 9,
        ]
        rgb = view.interleave(records, 3, 3, 5, 3)
        assert list(rgb) == [1, 2, 3, 4, 5, 6, 7, 8, 9]

    def test_group_size_property(self):
        assert view.interleave(TEN, 1, 2, 4, 2).group_size == 2

    def test_zero_group_size(self):
        with pytest.raises(DomainError):
            view.interleave(TEN, 1, 0, 4, 2)

    def test_zero_stride(self):
        with pytest.raises(DomainError):
            view.interleave(TEN, 1, 2, 0, 2)

    def test_last_group_past_end(self):
        with pytest.raises(RangeError):
            view.interleave(TEN, 1, 3, 4, 3)


# ═══════════════════════════════════════════════════════════════════════
# Composition and foreign storage
# ═══════════════════════════════════════════════════════════════════════


class TestComposition:

    def test_reverse_of_stride(self):
        odds = view.stride(TEN, 1, 2, 5)
        assert list(view.reverse(odds)) == [9, 7, 5, 3, 1]

    def test_slice_of_interleave_writes_backing(self):
        data = [0] * 8
        channel = view.interleave(data, 1, 2, 4, 2)
        second = view.slice(channel, 3, 2)
        second.set(1, 5)
        second.set(2, 6)
        assert data == [0, 0, 0, 0, 5, 6, 0, 0]

    def test_view_over_numpy_shares_memory(self):
        arr = np.zeros(6)
        v = view.stride(arr, 6, -2, 3)
        v.set(1, 1.0)
        v.set(3, 3.0)
        np.testing.assert_array_equal(arr, [0.0, 3.0, 0.0, 0.0, 0.0, 1.0])

    def test_repr_lists_values(self):
        assert repr(view.slice([1, 2, 3], 2, 2)) == "SliceView([2, 3])"

    def test_backing(self):
        data = [1, 2, 3]
        v = view.slice(data, 1, 2)
        assert v.backing.sequence is data
