"""Dense integer matrices with block-partitioned multiplication."""
from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError as _PackageNotFoundError
    from importlib.metadata import version as _version

    __version__ = _version("blockmat")
except _PackageNotFoundError:
    __version__ = "unknown"

from ._internal import formatting
from ._internal import runtime
from ._internal.codec import deserialize, dump, load, serialize
from ._internal.errors import (
    BlockmatError,
    InvalidShapeError,
    MatrixFormatError,
    OutOfBoundsError,
    ShapeMismatchError,
)
from ._internal.factories import matrix, random_matrix, zeros
from ._internal.formatting import describe_blocks
from ._internal.matrix import Matrix, VectorIterator, dot_product, vector_dot_product
from ._internal.partition import MatrixPartition
from ._internal.warnings import BlockmatPerformanceWarning, BlockmatWarning
from .logging_config import setup_logging


def multiply(a, b):
    """``a @ b`` for either two Matrix or two MatrixPartition operands."""

    return a @ b


__all__ = [
    "BlockmatError",
    "BlockmatPerformanceWarning",
    "BlockmatWarning",
    "InvalidShapeError",
    "Matrix",
    "MatrixFormatError",
    "MatrixPartition",
    "OutOfBoundsError",
    "ShapeMismatchError",
    "VectorIterator",
    "describe_blocks",
    "deserialize",
    "dot_product",
    "dump",
    "formatting",
    "load",
    "matrix",
    "multiply",
    "random_matrix",
    "runtime",
    "serialize",
    "setup_logging",
    "vector_dot_product",
    "zeros",
]
