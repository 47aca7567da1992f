"""
Tolerance constants for equality checks.

Kernels never compare floats with an implicit tolerance: every equality
test takes an explicit ``epsilon`` whose default comes from here.

- DEFAULT_EPSILON: exact comparison, used by vector/matrix ``equals``
- ALMOST_EQUAL_EPSILON: default for the ``almost_*`` array comparisons
"""


# Vector and matrix equality are exact unless the caller widens them
DEFAULT_EPSILON: float = 0.0

# Array "almost equal" comparisons
ALMOST_EQUAL_EPSILON: float = 1e-9
