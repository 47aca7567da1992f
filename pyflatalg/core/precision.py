"""
Floating-point precision helpers.

Stepped ranges must decide whether a float step lands on an inclusive
end point. ``0.1 * 10`` may come out a few ulps short of ``1.0``, so the
step count is taken after widening the quotient by a small multiple of
machine epsilon.
"""

import math

import numpy as np


# float64 machine epsilon, ~2.22e-16
EPSILON_64: float = float(np.finfo(np.float64).eps)

# Ulps of slack allowed when a stepped range reaches its end point
RANGE_SLACK_ULPS: int = 4


def whole_steps(start: float, stop: float, step: float) -> int:
    """
    Number of whole ``step`` increments from ``start`` that stay within ``stop``.

    The quotient is widened by ``RANGE_SLACK_ULPS`` float64 ulps first, so
    an end point reached up to rounding counts as reached.

    Example:
        >>> whole_steps(0, 1, 0.1)
        10
        >>> whole_steps(0, 0.9, 1 / 3)
        2
    """
    return math.floor((stop - start) / step * (1 + RANGE_SLACK_ULPS * EPSILON_64))
