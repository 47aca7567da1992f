"""
Core protocols for pyflatalg.

These define structural interfaces that buffers and views must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so that
plain sequences (through an adapter), views, and foreign buffer types a
caller writes themselves are all interchangeable arguments.

Design Principles:
    - Minimal contract: length, get, set on 1-based positions
    - No assumption about physical storage
"""

from typing import Protocol, Any, runtime_checkable


@runtime_checkable
class Buffer(Protocol):
    """
    Minimal protocol for an indexable numeric sequence.

    Positions are 1-based: valid indices are ``1 <= i <= len(buffer)``.
    Implementations must raise ``RangeError`` for any other index rather
    than wrapping around or growing.

    Any object exposing these three members is a buffer: views, the
    ``SequenceBuffer`` adapter over Python sequences, or a user type
    wrapping foreign memory.
    """

    def __len__(self) -> int:
        """Number of addressable elements."""
        ...

    def get(self, index: int) -> Any:
        """
        Read the element at a 1-based position.

        Args:
            index: Position in ``[1, len(self)]``

        Returns:
            The stored element

        Raises:
            RangeError: If index is out of range
        """
        ...

    def set(self, index: int, value: Any) -> None:
        """
        Write the element at a 1-based position.

        Args:
            index: Position in ``[1, len(self)]``
            value: New element value

        Raises:
            RangeError: If index is out of range
        """
        ...
