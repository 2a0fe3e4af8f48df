from __future__ import annotations

import logging
import math
import operator
import warnings
from typing import TYPE_CHECKING, Any, Callable, Iterator, TypeVar

from . import formatting as _formatting
from . import runtime as _runtime
from .coercion import coerce_matrix_data
from .errors import InvalidShapeError, OutOfBoundsError, ShapeMismatchError
from .warnings import BlockmatPerformanceWarning

if TYPE_CHECKING:
    from .partition import MatrixPartition

try:  # NumPy is optional at runtime
    import numpy as _np
except ImportError:  # pragma: no cover - exercised when numpy is absent
    _np = None


logger = logging.getLogger(__name__)

T = TypeVar("T")
P = TypeVar("P")


class VectorIterator(Iterator[T]):
    """One-shot iterator over a row or column with a known ``size``.

    The size is fixed at construction so callers can check compatibility
    before consuming anything. Iterating a second time yields nothing.
    """

    def __init__(self, items: Iterator[T], size: int):
        self._items = items
        self._size = int(size)

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> "VectorIterator[T]":
        return self

    def __next__(self) -> T:
        return next(self._items)


def dot_product(
    a_vector: VectorIterator[Any],
    b_vector: VectorIterator[Any],
    *,
    multiply: Callable[[Any, Any], P],
    add_into: Callable[[P, P], P],
    zero: Callable[[P], P],
) -> P | None:
    """Sum of pairwise products of two equal-length vectors, in order.

    The accumulator is created from the first product (``zero(product)``) so
    that block accumulators get the right shape; ``add_into`` may update it in
    place. Returns ``None`` for empty vectors.
    """

    if a_vector.size != b_vector.size:
        raise ShapeMismatchError(
            f"cannot compute dot product of vectors with sizes {a_vector.size} and {b_vector.size}"
        )
    acc: P | None = None
    for a, b in zip(a_vector, b_vector):
        product = multiply(a, b)
        if acc is None:
            acc = zero(product)
        acc = add_into(acc, product)
    return acc


def vector_dot_product(a_vector: VectorIterator[int], b_vector: VectorIterator[int]) -> int:
    acc = dot_product(
        a_vector,
        b_vector,
        multiply=operator.mul,
        add_into=operator.add,
        zero=lambda _product: 0,
    )
    return 0 if acc is None else acc


class Matrix(_formatting.MatrixMixin):
    """Dense integer matrix backed by a list of row lists.

    ``Matrix(data)`` always validates; ``Matrix.zeros`` and the internal
    ``Matrix._trusted`` path build grids that are rectangular by construction.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, data: Any):
        self._data: list[list[int]] = coerce_matrix_data(data, np_module=_np)

    @classmethod
    def _trusted(cls, grid: list[list[int]]) -> "Matrix":
        # Caller guarantees a rectangular list-of-lists of ints; the grid is
        # adopted without a copy.
        obj = cls.__new__(cls)
        obj._data = grid
        return obj

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "Matrix":
        rows, cols = int(rows), int(cols)
        if rows < 0 or cols < 0:
            raise InvalidShapeError(f"matrix sizes must be non-negative; got {rows}x{cols}")
        if rows == 0:
            cols = 0
        return cls._trusted([[0] * cols for _ in range(rows)])

    # --- shape ---

    def rows(self) -> int:
        return len(self._data)

    def cols(self) -> int:
        return len(self._data[0]) if self._data else 0

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows(), self.cols())

    # --- element access ---

    def exists(self, i: int, j: int) -> bool:
        if not (isinstance(i, int) and isinstance(j, int)):
            return False
        return 0 <= i < self.rows() and 0 <= j < self.cols()

    def get(self, i: int, j: int) -> int:
        if not self.exists(i, j):
            raise OutOfBoundsError(f"position ({i}, {j}) out of bounds for {self.rows()}x{self.cols()}")
        return self._data[i][j]

    def __getitem__(self, key: Any) -> int:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("matrix indices must be provided as [row, col]")
        i, j = key
        return self.get(int(i), int(j))

    def tolist(self) -> list[list[int]]:
        return [list(row) for row in self._data]

    # --- traversal ---

    def row_iterator(self, i: int) -> VectorIterator[int]:
        if not 0 <= i < self.rows():
            raise OutOfBoundsError(f"row index {i} out of bounds for {self.rows()} rows")
        row = self._data[i]
        return VectorIterator(iter(row), len(row))

    def column_iterator(self, j: int) -> VectorIterator[int]:
        if not 0 <= j < self.cols():
            raise OutOfBoundsError(f"column index {j} out of bounds for {self.cols()} columns")
        return VectorIterator((row[j] for row in self._data), self.rows())

    # --- arithmetic ---

    @staticmethod
    def _add_into(a: "Matrix", b: "Matrix", target: "Matrix") -> "Matrix":
        if a.shape != b.shape:
            raise ShapeMismatchError(
                f"cannot add {a.rows()}x{a.cols()} to {b.rows()}x{b.cols()}: shapes differ"
            )
        for out_row, a_row, b_row in zip(target._data, a._data, b._data):
            for j in range(len(out_row)):
                out_row[j] = a_row[j] + b_row[j]
        return target

    def add(self, other: "Matrix") -> "Matrix":
        """Elementwise sum as a new matrix.

        Works both as ``Matrix.add(a, b)`` and ``a.add(b)``.
        """

        return Matrix._add_into(self, other, Matrix.zeros(*self.shape))

    def add_to_self(self, other: "Matrix") -> "Matrix":
        """Add ``other`` into this matrix in place and return ``self``."""

        return Matrix._add_into(self, other, self)

    def multiply(self, other: "Matrix") -> "Matrix":
        """Matrix product; cell (i, j) is the dot product of row i and column j.

        Works both as ``Matrix.multiply(a, b)`` and ``a.multiply(b)``.
        """

        if self.cols() != other.rows():
            raise ShapeMismatchError(
                f"cannot multiply {self.rows()}x{self.cols()} by {other.rows()}x{other.cols()}: "
                f"inner dimensions {self.cols()} and {other.rows()} differ"
            )
        out_rows, out_cols = self.rows(), other.cols()
        grid: list[list[int]] = []
        for i in range(out_rows):
            grid.append(
                [
                    vector_dot_product(self.row_iterator(i), other.column_iterator(j))
                    for j in range(out_cols)
                ]
            )
        return Matrix._trusted(grid)

    def __add__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __matmul__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    # --- partitioning ---

    def partition(self, max_block_rows: int, max_block_cols: int) -> "MatrixPartition":
        """Split into a grid of independent block copies.

        Blocks are ``max_block_rows x max_block_cols`` except along the last
        block-row/block-column, which are truncated to the remainder so the
        blocks tile the matrix exactly.
        """

        from .partition import MatrixPartition

        for name, value in (("max_block_rows", max_block_rows), ("max_block_cols", max_block_cols)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidShapeError(f"{name} must be a positive integer; got {value!r}")

        origin_rows, origin_cols = self.shape
        grid_rows = math.ceil(origin_rows / max_block_rows)
        # An Rx0 matrix still has rows to tile: keep one zero-width block-column.
        grid_cols = math.ceil(origin_cols / max_block_cols) if origin_cols else min(grid_rows, 1)

        if max_block_rows == 1 and max_block_cols == 1:
            limit = _runtime.settings().scalar_block_warn_elements
            if origin_rows * origin_cols > limit:
                warnings.warn(
                    f"partitioning a {origin_rows}x{origin_cols} matrix into 1x1 blocks allocates "
                    "one Matrix per element; use a larger block size",
                    BlockmatPerformanceWarning,
                    stacklevel=2,
                )

        logger.debug(
            "partition %dx%d into %dx%d grid (max block %dx%d)",
            origin_rows,
            origin_cols,
            grid_rows,
            grid_cols,
            max_block_rows,
            max_block_cols,
        )

        blocks: list[list[Matrix]] = []
        for i in range(grid_rows):
            r0 = i * max_block_rows
            r1 = r0 + max_block_rows if i + 1 < grid_rows else origin_rows
            row: list[Matrix] = []
            for j in range(grid_cols):
                c0 = j * max_block_cols
                c1 = c0 + max_block_cols if j + 1 < grid_cols else origin_cols
                row.append(Matrix._trusted([src[c0:c1] for src in self._data[r0:r1]]))
            blocks.append(row)
        return MatrixPartition._trusted(blocks)

    # --- numpy interop ---

    def __array__(self, dtype: Any = None, copy: Any = None) -> Any:
        if _np is None:  # pragma: no cover - exercised when numpy is absent
            raise TypeError("NumPy is required to convert a Matrix to an array")
        out = _np.array(self._data, dtype=dtype if dtype is not None else _np.int64)
        return out.reshape(self.shape)

    # --- codec convenience ---

    def serialize(self) -> str:
        from .codec import serialize

        return serialize(self)

    @staticmethod
    def deserialize(text: str) -> "Matrix":
        from .codec import deserialize

        return deserialize(text)
