"""
Tests for NaN-aware comparisons and whole-range reductions.
"""

import numpy as np
import pytest

from pyflatalg import array
from pyflatalg.core.exceptions import RangeError

nan = float('nan')


class TestAlmostEqualWithNan:

    def test_nan_matches_nan(self):
        result = array.almost_equal_with_nan([1, nan, 3, 4, 5], [1 + 1e-10, nan, 3, 4, 5])
        assert result == [True] * 5

    def test_nan_against_number(self):
        assert array.almost_equal_with_nan([nan, 1], [1, nan]) == [False, False]

    def test_epsilon(self):
        assert array.almost_equal_with_nan([1.0], [1.05], epsilon=0.1) == [True]

    def test_ex_new_list(self):
        assert array.almost_equal_with_nan_ex([0, nan, 2], 2, 2, [nan, 2], 1) == [True, True]

    def test_ex_into_dest(self):
        dest = [None] * 3
        array.almost_equal_with_nan_ex([1, 2], 1, 2, [1, 3], 1, dest, 2)
        assert dest == [None, True, False]

    def test_numpy_nan(self):
        a = np.array([np.nan, 1.0])
        assert array.almost_equal_with_nan(a, a.copy()) == [True, True]


class TestAllEquals:

    def test_equal(self):
        assert array.all_equals([1, 2, 3], [1, 2, 3])
        assert not array.all_equals([1, 2, 3], [1, 2, 4])

    def test_length_mismatch(self):
        assert not array.all_equals([1, 2], [1, 2, 3])
        assert not array.all_almost_equals([1, 2], [1, 2, 3])

    def test_across_storage(self):
        assert array.all_equals(np.array([1.0, 2.0]), [1, 2])

    def test_ex(self):
        assert array.all_equals_ex([0, 1, 2], 2, 2, [1, 2], 1)
        assert array.all_equals_ex([1], 1, 0, [2], 1)

    def test_ex_past_end(self):
        with pytest.raises(RangeError):
            array.all_equals_ex([1, 2], 1, 2, [1], 1)

    def test_nan_never_equal(self):
        assert not array.all_equals([nan], [nan])


class TestAllAlmostEquals:

    def test_default_epsilon(self):
        assert array.all_almost_equals([1, 2], [1 + 1e-10, 2])
        assert not array.all_almost_equals([1, 2], [1.001, 2])

    def test_epsilon_inclusive(self):
        assert array.all_almost_equals([0.0], [0.5], 0.5)

    def test_ex(self):
        assert array.all_almost_equals_ex([9, 1.0, 2.0], 2, 2, [1.01, 1.99], 1, 0.02)
        assert not array.all_almost_equals_ex([9, 1.0, 2.0], 1, 2, [1.01, 1.99], 1, 0.02)

    def test_with_nan(self):
        assert array.all_almost_equals_with_nan([nan, 1], [nan, 1 + 1e-12])
        assert not array.all_almost_equals([nan, 1], [nan, 1])


class TestConstantReductions:

    def test_all_equals_constant(self):
        assert array.all_equals_constant([2, 2, 2], 2)
        assert not array.all_equals_constant([2, 2, 3], 2)
        assert array.all_equals_constant([], 2)

    def test_all_equals_constant_ex(self):
        assert array.all_equals_constant_ex([1, 2, 2], 2, 2, 2)

    def test_all_almost_equals_constant(self):
        a = [1.01, 1.05, 0.95, 1, 1, 1.001]
        assert array.all_almost_equals_constant(a, 1, 0.1)
        assert not array.all_almost_equals_constant(a, 1)

    def test_all_almost_equals_constant_ex(self):
        a = [1.01, 1.05, 0.95, 1, 1, 1.001]
        assert not array.all_almost_equals_constant_ex(a, 1, 3, 1, 0.01)
        assert array.all_almost_equals_constant_ex(a, 4, 3, 1, 0.01)
