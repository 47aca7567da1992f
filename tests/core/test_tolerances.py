"""
Tests for default epsilons and stepped-range precision.
"""

import pytest

from pyflatalg import array, linalg
from pyflatalg.core.precision import EPSILON_64, RANGE_SLACK_ULPS, whole_steps
from pyflatalg.core.tolerances import ALMOST_EQUAL_EPSILON, DEFAULT_EPSILON


class TestDefaults:

    def test_values(self):
        assert DEFAULT_EPSILON == 0.0
        assert ALMOST_EQUAL_EPSILON == 1e-9

    def test_equals_is_exact_by_default(self):
        assert not linalg.equals_vec2([1.0, 2.0], [1.0, 2.0 + 1e-12])

    def test_almost_equal_uses_default(self):
        assert array.all_almost_equals([1.0], [1.0 + ALMOST_EQUAL_EPSILON / 2])
        assert not array.all_almost_equals([1.0], [1.0 + 2 * ALMOST_EQUAL_EPSILON])

    def test_float64_epsilon(self):
        assert 1.0 + EPSILON_64 != 1.0
        assert 1.0 + EPSILON_64 / 2 == 1.0


class TestWholeSteps:

    @pytest.mark.parametrize("start,stop,step,expected", [
        (1, 10, 1, 9),
        (0, 1, 0.1, 10),
        (0, 0.9, 1 / 3, 2),
        (-1, -10, -1, 9),
        (3, 3, 1, 0),
    ])
    def test_counts(self, start, stop, step, expected):
        assert whole_steps(start, stop, step) == expected

    def test_short_by_rounding_still_counts(self):
        stop = 0.1 * 3
        assert whole_steps(0, 0.3, 0.1) == 3
        assert whole_steps(0, stop, 0.1) == 3

    def test_slack_is_a_few_ulps(self):
        # a genuine shortfall is not absorbed
        assert whole_steps(0, 1 - 1e-9, 0.1) == 9
        assert RANGE_SLACK_ULPS * EPSILON_64 < 1e-14
