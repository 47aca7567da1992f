"""
Tests for element-wise array arithmetic, fused operations and map.

Validates:
    - value, constant and range forms of each operation
    - cycling buffer constants across an array
    - in-place updates through the range forms
    - error kinds for short operands and zero divisors
"""

import math

import numpy as np
import pytest

from pyflatalg import array
from pyflatalg.core.buffer import to_list
from pyflatalg.core.exceptions import DomainError, RangeError, ValidationError


# ═══════════════════════════════════════════════════════════════════════
# Binary operations
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_add_ex_into_dest(self):
        x = [0] * 5
        assert array.add_ex([1, 2, 3], 1, 3, [2, 3, 4], 1, x, 2) is x
        assert x == [0, 3, 5, 7, 0]

    def test_add_ex_new_list_padded(self):
        assert array.add_ex([1, 2, 3], 1, 3, [2, 3, 4], 1, None, 2) == [0, 3, 5, 7]

    def test_value_forms(self):
        assert array.add([1, 2], [3, 4]) == [4, 6]
        assert array.sub([5, 5], [1, 2]) == [4, 3]
        assert array.mul([2, 3], [4, 5]) == [8, 15]
        assert array.div([1, 4], [2, 8]) == [0.5, 0.5]
        assert array.mod([5, 7], [3, 4]) == [2, 3]
        assert array.pow([2, 3], [3, 2]) == [8, 9]

    def test_min_max(self):
        assert array.min([1, 5, 3], [3, 2, 3]) == [1, 2, 3]
        assert array.max([1, 5, 3], [3, 2, 3]) == [3, 5, 3]
        assert array.max_constant([1, 5], 3) == [3, 5]
        assert array.min_constant_ex([4, 1, 6], 1, 3, 2) == [2, 1, 2]

    def test_b_may_be_longer(self):
        assert array.add([1, 2], [1, 1, 1]) == [2, 3]

    def test_b_shorter_than_a(self):
        with pytest.raises(RangeError):
            array.add([1, 2, 3], [1, 2])

    def test_div_by_zero(self):
        with pytest.raises(DomainError):
            array.div([1, 2], [1, 0])

    def test_mod_by_zero_constant(self):
        with pytest.raises(DomainError):
            array.mod_constant([1, 2], 0)

    def test_sub_ex_offsets(self):
        a = [9, 9, 5, 6]
        b = [1, 2]
        assert array.sub_ex(a, 3, 2, b, 1) == [4, 4]

    def test_in_place(self):
        a = [1, 2, 3, 4]
        array.mul_ex(a, 1, 4, a, 1, a)
        assert a == [1, 4, 9, 16]

    def test_numpy_dest(self):
        dest = np.zeros(3)
        array.add_ex([1.0, 2.0], 1, 2, [1.0, 1.0], 1, dest, 2)
        np.testing.assert_array_equal(dest, [0.0, 2.0, 3.0])

    def test_every_storage(self, make_buffer):
        a = make_buffer([1.0, 2.0, 3.0])
        dest = make_buffer([0.0] * 3)
        array.pow_constant_ex(a, 1, 3, 2.0, dest)
        assert to_list(dest) == [1.0, 4.0, 9.0]

    def test_names(self):
        assert array.min.__name__ == 'min'
        assert array.add_constant_ex.__name__ == 'add_constant_ex'
        assert "a[i] / b[i]" in array.div.__doc__


class TestConstant:

    def test_scalar(self):
        assert array.add_constant([1, 2, 3], 1) == [2, 3, 4]
        assert array.pow_constant([1, 2, 3], 2) == [1, 4, 9]

    def test_buffer_is_cycled(self):
        assert array.add_constant([1, 2, 3, 4], [1, 2]) == [2, 4, 4, 6]

    def test_partial_cycle_warns(self):
        with pytest.warns(RuntimeWarning, match="last cycle is partial"):
            result = array.add_constant([1, 2, 3], [1, 2])
        assert result == [2, 4, 4]

    def test_empty_constant_buffer(self):
        with pytest.raises(ValidationError):
            array.mul_constant([1, 2], [])

    def test_constant_ex_in_place(self):
        points = [1, 1, 2, 2]
        array.mul_constant_ex(points, 1, 4, (10, 100), points)
        assert points == [10, 100, 20, 200]


class TestAlmostEqual:

    def test_elementwise(self):
        assert array.almost_equal([1, 2], [1 + 1e-10, 2.1]) == [True, False]

    def test_strict_bound(self):
        assert array.almost_equal_constant([0.0], 1e-9) == [False]

    def test_ex_into_dest(self):
        dest = [None, None]
        array.almost_equal_ex([1.0, 2.0], 1, 2, [1.0, 3.0], 1, dest)
        assert dest == [True, False]


class TestRelational:

    A = [1, 2, 3]
    B = [3, 2, 1]

    @pytest.mark.parametrize("name,expected", [
        ('equal', [False, True, False]),
        ('not_equal', [True, False, True]),
        ('less_than', [True, False, False]),
        ('less_than_or_equal', [True, True, False]),
        ('greater_than', [False, False, True]),
        ('greater_than_or_equal', [False, True, True]),
    ])
    def test_value_form(self, name, expected):
        assert getattr(array, name)(self.A, self.B) == expected

    @pytest.mark.parametrize("name,expected", [
        ('equal', [False, True, False]),
        ('less_than', [True, False, False]),
        ('greater_than_or_equal', [False, True, True]),
    ])
    def test_constant_form(self, name, expected):
        assert getattr(array, f'{name}_constant')(self.A, 2) == expected

    def test_cycled_constant(self):
        assert array.equal_constant([1, 2, 1, 3], (1, 2)) == [True, True, True, False]

    def test_ex_offsets(self):
        assert array.less_than_ex([0, 1, 5], 2, 2, [4, 4], 1) == [True, False]

    def test_ex_into_dest(self):
        dest = [None, None, None]
        result = array.not_equal_ex([1, 2], 1, 2, [1, 3], 1, dest, 2)
        assert result is dest
        assert dest == [None, False, True]

    def test_constant_ex_new_list_padded(self):
        assert array.greater_than_constant_ex([1, 5], 1, 2, 2, None, 2) == [0, False, True]

    def test_nan_compares_unequal(self):
        nan = float('nan')
        assert array.equal([nan], [nan]) == [False]
        assert array.not_equal([nan], [nan]) == [True]

    def test_numpy_input(self):
        assert array.less_than_or_equal(np.array([1.0, 2.0]), [1, 1]) == [True, False]

    def test_names(self):
        assert array.greater_than_or_equal_constant_ex.__name__ == 'greater_than_or_equal_constant_ex'
        assert ">=" in array.greater_than_or_equal.__doc__


# ═══════════════════════════════════════════════════════════════════════
# Fused operations
# ═══════════════════════════════════════════════════════════════════════


class TestMulAdd:

    def test_mul_add(self):
        assert array.mul_add([0, 0, 0], [0, 1, 2], [3, 3, 3]) == [0, 3, 6]

    def test_integrate_positions(self):
        positions = [0.0] * 6
        velocities = [0, 0, 1, 0, 0, 1]
        acceleration = [0, 0, -1, 0, 0, -1]
        positions = array.mul_add(positions, velocities, [0.5] * 6)
        velocities = array.mul_add(velocities, acceleration, [0.5] * 6)
        assert positions == [0, 0, 0.5, 0, 0, 0.5]
        assert velocities == [0, 0, 0.5, 0, 0, 0.5]

    def test_mul_add_ex(self):
        dest = [0, 0, 0]
        array.mul_add_ex([1, 1, 1], 2, 2, [2, 3], 1, [10, 10], 1, dest, 2)
        assert dest == [0, 21, 31]

    def test_constant(self):
        result = array.mul_add_constant([0] * 6, [0, 0, 1, 0, 0, 1], 0.1)
        assert result == [0, 0, 0.1, 0, 0, 0.1]

    def test_constant_in_place(self):
        p = [0, 0, 0.1, 0, 0, 0.1]
        v = [0, 0, 1, 0, 0, 1]
        assert array.mul_add_constant_ex(p, 1, 6, v, 1, 0.1, p) is p
        assert p == [0, 0, 0.2, 0, 0, 0.2]

    def test_per_component_constant(self):
        result = array.mul_add_constant([0] * 6, [0, 0, 0, 1, 1, 0], [0.1, 0.2])
        assert result == [0, 0, 0, 0.2, 0.1, 0]


class TestLerp:

    def test_midpoint(self):
        assert array.lerp([1, 2, 3], [4, 5, 6], 0.5) == [2.5, 3.5, 4.5]

    @pytest.mark.parametrize("t,expected", [(0, [1, 2]), (1, [3, 4])])
    def test_endpoints(self, t, expected):
        assert array.lerp([1, 2], [3, 4], t) == expected

    def test_lerp_ex(self):
        dest = [0.0, 0.0]
        array.lerp_ex([0, 10, 20], 2, 2, [20, 40], 1, 0.25, dest)
        assert dest == [12.5, 25.0]


# ═══════════════════════════════════════════════════════════════════════
# map
# ═══════════════════════════════════════════════════════════════════════


class TestMap:

    def test_map_values(self):
        assert array.map_values(lambda x, y: x - y, [1, 2, 3], [1, 1, 1]) == [0, 1, 2]

    def test_single_source(self):
        assert array.map_values(math.sqrt, [4, 9]) == [2.0, 3.0]

    def test_no_sources(self):
        with pytest.raises(ValidationError):
            array.map_values(abs)

    def test_later_source_shorter(self):
        with pytest.raises(RangeError):
            array.map_values(max, [1, 2, 3], [1])

    def test_map_ex(self):
        assert array.map_ex(lambda x, y: x * y, 2, ([1, 2, 3], 2), ([4, 5], 1)) == [8, 15]

    def test_map_ex_into_dest(self):
        dest = [0, 0, 0, 0]
        array.map_ex(abs, 2, ([-1, -2], 1), dest=dest, dest_index=3)
        assert dest == [0, 0, 1, 2]

    def test_map_ex_no_ranges(self):
        with pytest.raises(ValidationError):
            array.map_ex(abs, 2)
