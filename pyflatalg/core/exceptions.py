"""
Exception hierarchy for pyflatalg.

All exceptions inherit from PyFlatAlgError to allow catching any
library-specific error. Kernels raise these synchronously to the direct
caller; nothing is clamped, truncated or replaced by a default.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyFlatAlgError(Exception):
    """Base exception for all pyflatalg errors."""
    pass


class ValidationError(PyFlatAlgError):
    """
    Input validation failed.

    Raised when user-provided arguments fail validation checks
    (wrong type, negative count, unknown matrix order, ...).
    """
    pass


class RangeError(ValidationError):
    """
    Index or computed offset falls outside the valid range of a buffer.

    Raised on view construction, view access and by "ex" kernels that
    address a buffer past either end.

    Attributes:
        name: Parameter name of the buffer being addressed
        index: The offending 1-based index
        lower: Smallest valid index (normally 1)
        upper: Largest valid index (the buffer length)
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        index: int | None = None,
        lower: int | None = None,
        upper: int | None = None
    ):
        super().__init__(message)
        self.name = name
        self.index = index
        self.lower = lower
        self.upper = upper


class DimensionError(ValidationError):
    """
    Shapes or arities are incompatible.

    Raised when matrix multiply inner dimensions differ, when a scalar form
    receives the wrong number of components, when a destination is too
    short to hold a result, or when a buffer is not one-dimensional.

    Attributes:
        expected: Expected shape, arity or length
        actual: Shape, arity or length actually supplied
    """

    def __init__(
        self,
        message: str,
        expected: object | None = None,
        actual: object | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NumericalError(PyFlatAlgError):
    """
    Numerical computation failed.

    Base class for errors arising from mathematically undefined operations.
    """
    pass


class DomainError(NumericalError):
    """
    Operation is undefined for the supplied values.

    Raised when normalising a zero-length vector, when a stride or group
    size is zero, or when a range step is zero.

    Attributes:
        parameter: Name of the argument outside the operation's domain
        value: The offending value
    """

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        value: float | None = None
    ):
        super().__init__(message)
        self.parameter = parameter
        self.value = value
