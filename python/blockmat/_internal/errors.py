"""Blockmat exception types.

Each error also derives from the closest builtin so callers can catch either
the blockmat type or the usual ``ValueError``/``IndexError``.

Keep this module dependency-free to avoid import cycles.
"""


class BlockmatError(Exception):
    """Base class for all blockmat errors."""


class InvalidShapeError(BlockmatError, ValueError):
    """Grid data is not a rectangular matrix (or a size is negative)."""


class OutOfBoundsError(BlockmatError, IndexError):
    """Element, block or iterator access outside the valid index range."""


class ShapeMismatchError(BlockmatError, ValueError):
    """Operand shapes are incompatible for addition or multiplication."""


class MatrixFormatError(BlockmatError, ValueError):
    """Serialized matrix text is malformed."""
