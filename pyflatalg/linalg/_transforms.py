"""
Affine transform builders.

2-D transforms are 3x3 homogeneous matrices, 3-D transforms are 4x4.
Angles are in radians. Matrices compose by multiplication in the usual
order: ``translate @ rotate`` applied to a point rotates first.

Rotation axes are used as given; pass a unit vector.
"""

from __future__ import annotations

import math

from pyflatalg.linalg._forms import finish
from pyflatalg.linalg._matrix import layout


def _axis_angle(angle: float, x: float, y: float, z: float) -> list[list[float]]:
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    return [
        [c + x * x * t, x * y * t - z * s, x * z * t + y * s],
        [y * x * t + z * s, c + y * y * t, y * z * t - x * s],
        [z * x * t - y * s, z * y * t + x * s, c + z * z * t],
    ]


def mat3_translate(x, y, dest=None, dest_index=1, *, order='column'):
    """
    2-D translation by ``(x, y)`` as a 3x3 homogeneous matrix.

    Example:
        >>> mat3_translate(2, 3)
        (1, 0, 0, 0, 1, 0, 2, 3, 1)
    """
    rows = [
        [1, 0, x],
        [0, 1, y],
        [0, 0, 1],
    ]
    return finish(layout(rows, order), dest, dest_index)


def mat3_scale(x, y, z, dest=None, dest_index=1, *, order='column'):
    """3x3 diagonal scale ``diag(x, y, z)``; pass ``z=1`` for a 2-D homogeneous scale."""
    rows = [
        [x, 0, 0],
        [0, y, 0],
        [0, 0, z],
    ]
    return finish(layout(rows, order), dest, dest_index)


def mat3_rotate(angle, dest=None, dest_index=1, *, order='column'):
    """2-D rotation by ``angle`` (counter-clockwise) as a 3x3 homogeneous matrix."""
    c = math.cos(angle)
    s = math.sin(angle)
    rows = [
        [c, -s, 0],
        [s, c, 0],
        [0, 0, 1],
    ]
    return finish(layout(rows, order), dest, dest_index)


def mat3_rotate_around_axis(angle, x, y, z, dest=None, dest_index=1, *, order='column'):
    """
    3x3 rotation by ``angle`` about the unit axis ``(x, y, z)``.

    Uses the axis-angle (Rodrigues) formula
    ``R = cos(a) I + sin(a) [k]x + (1 - cos(a)) k k^T``.
    """
    return finish(layout(_axis_angle(angle, x, y, z), order), dest, dest_index)


def mat4_translate(x, y, z, dest=None, dest_index=1, *, order='column'):
    """3-D translation by ``(x, y, z)`` as a 4x4 homogeneous matrix."""
    rows = [
        [1, 0, 0, x],
        [0, 1, 0, y],
        [0, 0, 1, z],
        [0, 0, 0, 1],
    ]
    return finish(layout(rows, order), dest, dest_index)


def mat4_scale(x, y, z, dest=None, dest_index=1, *, order='column'):
    """3-D scale ``diag(x, y, z, 1)``."""
    rows = [
        [x, 0, 0, 0],
        [0, y, 0, 0],
        [0, 0, z, 0],
        [0, 0, 0, 1],
    ]
    return finish(layout(rows, order), dest, dest_index)


def mat4_rotate_around_axis(angle, x, y, z, dest=None, dest_index=1, *, order='column'):
    """4x4 homogeneous rotation by ``angle`` about the unit axis ``(x, y, z)``."""
    rows = [row + [0] for row in _axis_angle(angle, x, y, z)]
    rows.append([0, 0, 0, 1])
    return finish(layout(rows, order), dest, dest_index)
