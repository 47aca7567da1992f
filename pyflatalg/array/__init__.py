"""
Whole-array operations on flat buffers.

Value forms take whole buffers and return new lists. Range ("ex") forms
take ``(buffer, 1-based index)`` operands plus an element count and write
to ``dest`` from ``dest_index``; they return ``dest``, or a new list of
length ``dest_index - 1 + count`` when no destination is given.

Public API:
    creation    new_array, zeros, fill, fill_into, range_array, range_into,
                generate, generate_into, flatten, flatten_into
    access      set_values, get_values, copy, copy_ex, reverse, reverse_ex,
                join, join_ex, append, extend
    arithmetic  add, sub, mul, div, mod, pow, min, max, almost_equal, each
                with _constant, _ex and _constant_ex forms
    relational  equal, not_equal, less_than, less_than_or_equal, greater_than,
                greater_than_or_equal (boolean lists), same four forms
    comparison  almost_equal_with_nan, all_equals, all_almost_equals,
                all_equals_constant, all_almost_equals_constant (+ _ex)
    fused       mul_add, mul_add_constant, lerp (+ _ex), map_values, map_ex

``min``, ``max`` and ``pow`` shadow builtins; import the module rather than
its names (``from pyflatalg import array``).
"""

from pyflatalg.array._create import (
    new_array,
    zeros,
    fill,
    fill_into,
    range_array,
    range_into,
    generate,
    generate_into,
    flatten,
    flatten_into,
)
from pyflatalg.array._copy import (
    set_values,
    get_values,
    copy,
    copy_ex,
    reverse,
    reverse_ex,
    join,
    join_ex,
    append,
    extend,
)
from pyflatalg.array._elementwise import (
    add,
    add_constant,
    add_ex,
    add_constant_ex,
    sub,
    sub_constant,
    sub_ex,
    sub_constant_ex,
    mul,
    mul_constant,
    mul_ex,
    mul_constant_ex,
    div,
    div_constant,
    div_ex,
    div_constant_ex,
    mod,
    mod_constant,
    mod_ex,
    mod_constant_ex,
    pow,
    pow_constant,
    pow_ex,
    pow_constant_ex,
    min,
    min_constant,
    min_ex,
    min_constant_ex,
    max,
    max_constant,
    max_ex,
    max_constant_ex,
    almost_equal,
    almost_equal_constant,
    almost_equal_ex,
    almost_equal_constant_ex,
    equal,
    equal_constant,
    equal_ex,
    equal_constant_ex,
    not_equal,
    not_equal_constant,
    not_equal_ex,
    not_equal_constant_ex,
    less_than,
    less_than_constant,
    less_than_ex,
    less_than_constant_ex,
    less_than_or_equal,
    less_than_or_equal_constant,
    less_than_or_equal_ex,
    less_than_or_equal_constant_ex,
    greater_than,
    greater_than_constant,
    greater_than_ex,
    greater_than_constant_ex,
    greater_than_or_equal,
    greater_than_or_equal_constant,
    greater_than_or_equal_ex,
    greater_than_or_equal_constant_ex,
)
from pyflatalg.array._compare import (
    almost_equal_with_nan,
    almost_equal_with_nan_ex,
    all_equals,
    all_equals_ex,
    all_almost_equals,
    all_almost_equals_ex,
    all_almost_equals_with_nan,
    all_equals_constant,
    all_equals_constant_ex,
    all_almost_equals_constant,
    all_almost_equals_constant_ex,
)
from pyflatalg.array._functional import (
    mul_add,
    mul_add_ex,
    mul_add_constant,
    mul_add_constant_ex,
    lerp,
    lerp_ex,
    map_values,
    map_ex,
)

__all__ = [
    "new_array",
    "zeros",
    "fill",
    "fill_into",
    "range_array",
    "range_into",
    "generate",
    "generate_into",
    "flatten",
    "flatten_into",
    "set_values",
    "get_values",
    "copy",
    "copy_ex",
    "reverse",
    "reverse_ex",
    "join",
    "join_ex",
    "append",
    "extend",
    "add",
    "add_constant",
    "add_ex",
    "add_constant_ex",
    "sub",
    "sub_constant",
    "sub_ex",
    "sub_constant_ex",
    "mul",
    "mul_constant",
    "mul_ex",
    "mul_constant_ex",
    "div",
    "div_constant",
    "div_ex",
    "div_constant_ex",
    "mod",
    "mod_constant",
    "mod_ex",
    "mod_constant_ex",
    "pow",
    "pow_constant",
    "pow_ex",
    "pow_constant_ex",
    "min",
    "min_constant",
    "min_ex",
    "min_constant_ex",
    "max",
    "max_constant",
    "max_ex",
    "max_constant_ex",
    "almost_equal",
    "almost_equal_constant",
    "almost_equal_ex",
    "almost_equal_constant_ex",
    "equal",
    "equal_constant",
    "equal_ex",
    "equal_constant_ex",
    "not_equal",
    "not_equal_constant",
    "not_equal_ex",
    "not_equal_constant_ex",
    "less_than",
    "less_than_constant",
    "less_than_ex",
    "less_than_constant_ex",
    "less_than_or_equal",
    "less_than_or_equal_constant",
    "less_than_or_equal_ex",
    "less_than_or_equal_constant_ex",
    "greater_than",
    "greater_than_constant",
    "greater_than_ex",
    "greater_than_constant_ex",
    "greater_than_or_equal",
    "greater_than_or_equal_constant",
    "greater_than_or_equal_ex",
    "greater_than_or_equal_constant_ex",
    "almost_equal_with_nan",
    "almost_equal_with_nan_ex",
    "all_equals",
    "all_equals_ex",
    "all_almost_equals",
    "all_almost_equals_ex",
    "all_almost_equals_with_nan",
    "all_equals_constant",
    "all_equals_constant_ex",
    "all_almost_equals_constant",
    "all_almost_equals_constant_ex",
    "mul_add",
    "mul_add_ex",
    "mul_add_constant",
    "mul_add_constant_ex",
    "lerp",
    "lerp_ex",
    "map_values",
    "map_ex",
]
