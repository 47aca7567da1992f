"""
Vector and matrix kernels over flat buffers.

Every operation has an offset ("ex") form that addresses its operands as
``(buffer, 1-based index)`` pairs and optionally writes to ``dest``, plus
convenience forms that read whole buffers or take scalar components.

Naming:
    op_N(...)                   - scalar form, N components per operand
    op_vecN(a, b)               - buffers read from position 1
    op_vecN_ex(a, ai, b, bi,
               dest, di)        - offset form
    op_matN / op_matN_ex        - NxN matrices (column-major by default)
    matmul_ex, transpose_ex,
    add_ex, sub_ex, mul_ex,
    negate_ex, add_constant_ex,
    mul_constant_ex, equals_ex  - general RxC shapes (element-wise ops take
                                  ``rows, cols`` after the operands)

Without ``dest`` a result is returned as a tuple; with ``dest`` it is
written in place and None is returned. A destination may alias a source.
"""

from pyflatalg.linalg._vector import (
    cross_product_vec3_ex,
    cross_product_vec3,
    cross_product_3,
    add_2,
    add_vec2,
    add_vec2_ex,
    add_3,
    add_vec3,
    add_vec3_ex,
    add_4,
    add_vec4,
    add_vec4_ex,
    sub_2,
    sub_vec2,
    sub_vec2_ex,
    sub_3,
    sub_vec3,
    sub_vec3_ex,
    sub_4,
    sub_vec4,
    sub_vec4_ex,
    mul_2,
    mul_vec2,
    mul_vec2_ex,
    mul_3,
    mul_vec3,
    mul_vec3_ex,
    mul_4,
    mul_vec4,
    mul_vec4_ex,
    div_2,
    div_vec2,
    div_vec2_ex,
    div_3,
    div_vec3,
    div_vec3_ex,
    div_4,
    div_vec4,
    div_vec4_ex,
    add_constant_2,
    add_vec2_constant,
    add_vec2_constant_ex,
    add_constant_3,
    add_vec3_constant,
    add_vec3_constant_ex,
    add_constant_4,
    add_vec4_constant,
    add_vec4_constant_ex,
    sub_constant_2,
    sub_vec2_constant,
    sub_vec2_constant_ex,
    sub_constant_3,
    sub_vec3_constant,
    sub_vec3_constant_ex,
    sub_constant_4,
    sub_vec4_constant,
    sub_vec4_constant_ex,
    mul_constant_2,
    mul_vec2_constant,
    mul_vec2_constant_ex,
    mul_constant_3,
    mul_vec3_constant,
    mul_vec3_constant_ex,
    mul_constant_4,
    mul_vec4_constant,
    mul_vec4_constant_ex,
    div_constant_2,
    div_vec2_constant,
    div_vec2_constant_ex,
    div_constant_3,
    div_vec3_constant,
    div_vec3_constant_ex,
    div_constant_4,
    div_vec4_constant,
    div_vec4_constant_ex,
    negate_2,
    negate_vec2,
    negate_vec2_ex,
    negate_3,
    negate_vec3,
    negate_vec3_ex,
    negate_4,
    negate_vec4,
    negate_vec4_ex,
    equals_2,
    equals_vec2,
    equals_vec2_ex,
    equals_3,
    equals_vec3,
    equals_vec3_ex,
    equals_4,
    equals_vec4,
    equals_vec4_ex,
    inner_product_2,
    inner_product_vec2,
    inner_product_vec2_ex,
    inner_product_3,
    inner_product_vec3,
    inner_product_vec3_ex,
    inner_product_4,
    inner_product_vec4,
    inner_product_vec4_ex,
    length_2,
    length_vec2,
    length_vec2_ex,
    length_3,
    length_vec3,
    length_vec3_ex,
    length_4,
    length_vec4,
    length_vec4_ex,
    length_squared_2,
    length_squared_vec2,
    length_squared_vec2_ex,
    length_squared_3,
    length_squared_vec3,
    length_squared_vec3_ex,
    length_squared_4,
    length_squared_vec4,
    length_squared_vec4_ex,
    normalise_2,
    normalise_vec2,
    normalise_vec2_ex,
    normalise_3,
    normalise_vec3,
    normalise_vec3_ex,
    normalise_4,
    normalise_vec4,
    normalise_vec4_ex,
)
from pyflatalg.linalg._matrix import (
    identity,
    zeros,
    mat2_identity,
    mat3_identity,
    mat4_identity,
    mat2_zero,
    mat3_zero,
    mat4_zero,
    add_mat2,
    add_mat2_ex,
    add_mat3,
    add_mat3_ex,
    add_mat4,
    add_mat4_ex,
    sub_mat2,
    sub_mat2_ex,
    sub_mat3,
    sub_mat3_ex,
    sub_mat4,
    sub_mat4_ex,
    mul_mat2,
    mul_mat2_ex,
    mul_mat3,
    mul_mat3_ex,
    mul_mat4,
    mul_mat4_ex,
    negate_mat2,
    negate_mat2_ex,
    negate_mat3,
    negate_mat3_ex,
    negate_mat4,
    negate_mat4_ex,
    add_mat2_constant,
    add_mat2_constant_ex,
    add_mat3_constant,
    add_mat3_constant_ex,
    add_mat4_constant,
    add_mat4_constant_ex,
    mul_mat2_constant,
    mul_mat2_constant_ex,
    mul_mat3_constant,
    mul_mat3_constant_ex,
    mul_mat4_constant,
    mul_mat4_constant_ex,
    equals_mat2,
    equals_mat2_ex,
    equals_mat3,
    equals_mat3_ex,
    equals_mat4,
    equals_mat4_ex,
    equals_ex,
    add_ex,
    sub_ex,
    mul_ex,
    negate_ex,
    add_constant_ex,
    mul_constant_ex,
    transpose_ex,
    transpose_mat2,
    transpose_mat2_ex,
    transpose_mat3,
    transpose_mat3_ex,
    transpose_mat4,
    transpose_mat4_ex,
    matmul_ex,
    matmul,
    matmul_mat2_mat2,
    matmul_mat2_mat2_ex,
    matmul_mat3_mat3,
    matmul_mat3_mat3_ex,
    matmul_mat4_mat4,
    matmul_mat4_mat4_ex,
    matmul_vec_ex,
    matmul_mat2_vec2,
    matmul_mat2_vec2_ex,
    matmul_mat3_vec3,
    matmul_mat3_vec3_ex,
    matmul_mat4_vec4,
    matmul_mat4_vec4_ex,
    matmul_mat3_vec2,
    matmul_mat3_vec2_ex,
    matmul_mat4_vec3,
    matmul_mat4_vec3_ex,
)
from pyflatalg.linalg._transforms import (
    mat3_translate,
    mat3_scale,
    mat3_rotate,
    mat3_rotate_around_axis,
    mat4_translate,
    mat4_scale,
    mat4_rotate_around_axis,
)

__all__ = [
    # Vectors
    "cross_product_vec3_ex",
    "cross_product_vec3",
    "cross_product_3",
    "add_2",
    "add_vec2",
    "add_vec2_ex",
    "add_3",
    "add_vec3",
    "add_vec3_ex",
    "add_4",
    "add_vec4",
    "add_vec4_ex",
    "sub_2",
    "sub_vec2",
    "sub_vec2_ex",
    "sub_3",
    "sub_vec3",
    "sub_vec3_ex",
    "sub_4",
    "sub_vec4",
    "sub_vec4_ex",
    "mul_2",
    "mul_vec2",
    "mul_vec2_ex",
    "mul_3",
    "mul_vec3",
    "mul_vec3_ex",
    "mul_4",
    "mul_vec4",
    "mul_vec4_ex",
    "div_2",
    "div_vec2",
    "div_vec2_ex",
    "div_3",
    "div_vec3",
    "div_vec3_ex",
    "div_4",
    "div_vec4",
    "div_vec4_ex",
    "add_constant_2",
    "add_vec2_constant",
    "add_vec2_constant_ex",
    "add_constant_3",
    "add_vec3_constant",
    "add_vec3_constant_ex",
    "add_constant_4",
    "add_vec4_constant",
    "add_vec4_constant_ex",
    "sub_constant_2",
    "sub_vec2_constant",
    "sub_vec2_constant_ex",
    "sub_constant_3",
    "sub_vec3_constant",
    "sub_vec3_constant_ex",
    "sub_constant_4",
    "sub_vec4_constant",
    "sub_vec4_constant_ex",
    "mul_constant_2",
    "mul_vec2_constant",
    "mul_vec2_constant_ex",
    "mul_constant_3",
    "mul_vec3_constant",
    "mul_vec3_constant_ex",
    "mul_constant_4",
    "mul_vec4_constant",
    "mul_vec4_constant_ex",
    "div_constant_2",
    "div_vec2_constant",
    "div_vec2_constant_ex",
    "div_constant_3",
    "div_vec3_constant",
    "div_vec3_constant_ex",
    "div_constant_4",
    "div_vec4_constant",
    "div_vec4_constant_ex",
    "negate_2",
    "negate_vec2",
    "negate_vec2_ex",
    "negate_3",
    "negate_vec3",
    "negate_vec3_ex",
    "negate_4",
    "negate_vec4",
    "negate_vec4_ex",
    "equals_2",
    "equals_vec2",
    "equals_vec2_ex",
    "equals_3",
    "equals_vec3",
    "equals_vec3_ex",
    "equals_4",
    "equals_vec4",
    "equals_vec4_ex",
    "inner_product_2",
    "inner_product_vec2",
    "inner_product_vec2_ex",
    "inner_product_3",
    "inner_product_vec3",
    "inner_product_vec3_ex",
    "inner_product_4",
    "inner_product_vec4",
    "inner_product_vec4_ex",
    "length_2",
    "length_vec2",
    "length_vec2_ex",
    "length_3",
    "length_vec3",
    "length_vec3_ex",
    "length_4",
    "length_vec4",
    "length_vec4_ex",
    "length_squared_2",
    "length_squared_vec2",
    "length_squared_vec2_ex",
    "length_squared_3",
    "length_squared_vec3",
    "length_squared_vec3_ex",
    "length_squared_4",
    "length_squared_vec4",
    "length_squared_vec4_ex",
    "normalise_2",
    "normalise_vec2",
    "normalise_vec2_ex",
    "normalise_3",
    "normalise_vec3",
    "normalise_vec3_ex",
    "normalise_4",
    "normalise_vec4",
    "normalise_vec4_ex",
    # Matrices
    "identity",
    "zeros",
    "mat2_identity",
    "mat3_identity",
    "mat4_identity",
    "mat2_zero",
    "mat3_zero",
    "mat4_zero",
    "add_mat2",
    "add_mat2_ex",
    "add_mat3",
    "add_mat3_ex",
    "add_mat4",
    "add_mat4_ex",
    "sub_mat2",
    "sub_mat2_ex",
    "sub_mat3",
    "sub_mat3_ex",
    "sub_mat4",
    "sub_mat4_ex",
    "mul_mat2",
    "mul_mat2_ex",
    "mul_mat3",
    "mul_mat3_ex",
    "mul_mat4",
    "mul_mat4_ex",
    "negate_mat2",
    "negate_mat2_ex",
    "negate_mat3",
    "negate_mat3_ex",
    "negate_mat4",
    "negate_mat4_ex",
    "add_mat2_constant",
    "add_mat2_constant_ex",
    "add_mat3_constant",
    "add_mat3_constant_ex",
    "add_mat4_constant",
    "add_mat4_constant_ex",
    "mul_mat2_constant",
    "mul_mat2_constant_ex",
    "mul_mat3_constant",
    "mul_mat3_constant_ex",
    "mul_mat4_constant",
    "mul_mat4_constant_ex",
    "equals_mat2",
    "equals_mat2_ex",
    "equals_mat3",
    "equals_mat3_ex",
    "equals_mat4",
    "equals_mat4_ex",
    "equals_ex",
    "add_ex",
    "sub_ex",
    "mul_ex",
    "negate_ex",
    "add_constant_ex",
    "mul_constant_ex",
    "transpose_ex",
    "transpose_mat2",
    "transpose_mat2_ex",
    "transpose_mat3",
    "transpose_mat3_ex",
    "transpose_mat4",
    "transpose_mat4_ex",
    "matmul_ex",
    "matmul",
    "matmul_mat2_mat2",
    "matmul_mat2_mat2_ex",
    "matmul_mat3_mat3",
    "matmul_mat3_mat3_ex",
    "matmul_mat4_mat4",
    "matmul_mat4_mat4_ex",
    "matmul_vec_ex",
    "matmul_mat2_vec2",
    "matmul_mat2_vec2_ex",
    "matmul_mat3_vec3",
    "matmul_mat3_vec3_ex",
    "matmul_mat4_vec4",
    "matmul_mat4_vec4_ex",
    "matmul_mat3_vec2",
    "matmul_mat3_vec2_ex",
    "matmul_mat4_vec3",
    "matmul_mat4_vec3_ex",
    # Transforms
    "mat3_translate",
    "mat3_scale",
    "mat3_rotate",
    "mat3_rotate_around_axis",
    "mat4_translate",
    "mat4_scale",
    "mat4_rotate_around_axis",
]
