from __future__ import annotations

import logging
from typing import Any, Iterable

from .errors import InvalidShapeError, OutOfBoundsError, ShapeMismatchError
from .formatting import partition_str
from .matrix import Matrix, VectorIterator, dot_product


logger = logging.getLogger(__name__)


def _zeros_like(product: Matrix) -> Matrix:
    return Matrix.zeros(*product.shape)


class MatrixPartition:
    """A rectangular grid of Matrix blocks (a block matrix).

    Construction only checks that the grid is rectangular and holds Matrix
    values. Blocks in one block-row are expected to share a height and blocks
    in one block-column a width; `to_matrix` verifies this before copying.
    Anything produced by `Matrix.partition` satisfies it.
    """

    def __init__(self, blocks: Iterable[Iterable[Matrix]]):
        try:
            grid = [list(row) for row in blocks]
        except TypeError as e:
            raise InvalidShapeError("MatrixPartition blocks must be a nested iterable") from e

        block_cols = len(grid[0]) if grid else 0
        for r, row in enumerate(grid):
            if len(row) != block_cols:
                raise InvalidShapeError(
                    f"MatrixPartition requires a rectangular block grid; block-row 0 has "
                    f"{block_cols} blocks, block-row {r} has {len(row)}"
                )
            for c, blk in enumerate(row):
                if not isinstance(blk, Matrix):
                    raise TypeError(
                        f"MatrixPartition blocks must be Matrix; got {type(blk).__name__} at ({r}, {c})"
                    )
        self._blocks: list[list[Matrix]] = grid

    @classmethod
    def _trusted(cls, grid: list[list[Matrix]]) -> "MatrixPartition":
        obj = cls.__new__(cls)
        obj._blocks = grid
        return obj

    # --- block grid shape ---

    def rows(self) -> int:
        return len(self._blocks)

    def cols(self) -> int:
        return len(self._blocks[0]) if self._blocks else 0

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows(), self.cols())

    def exists(self, r: int, c: int) -> bool:
        if not (isinstance(r, int) and isinstance(c, int)):
            return False
        return 0 <= r < self.rows() and 0 <= c < self.cols()

    def get_block(self, r: int, c: int) -> Matrix:
        if not self.exists(r, c):
            raise OutOfBoundsError(
                f"block ({r}, {c}) out of bounds for {self.rows()}x{self.cols()} grid"
            )
        return self._blocks[r][c]

    def __getitem__(self, key: Any) -> Matrix:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("partition indices must be provided as [block_row, block_col]")
        r, c = key
        return self.get_block(int(r), int(c))

    def row_heights(self) -> list[int]:
        """Height of each block-row, read from its first block."""

        if self.cols() == 0:
            return []
        return [row[0].rows() for row in self._blocks]

    def col_widths(self) -> list[int]:
        """Width of each block-column, read from the first block-row."""

        if self.rows() == 0:
            return []
        return [blk.cols() for blk in self._blocks[0]]

    # --- traversal ---

    def row_iterator(self, r: int) -> VectorIterator[Matrix]:
        if not 0 <= r < self.rows():
            raise OutOfBoundsError(f"block-row index {r} out of bounds for {self.rows()} block-rows")
        row = self._blocks[r]
        return VectorIterator(iter(row), len(row))

    def column_iterator(self, c: int) -> VectorIterator[Matrix]:
        if not 0 <= c < self.cols():
            raise OutOfBoundsError(
                f"block-column index {c} out of bounds for {self.cols()} block-columns"
            )
        return VectorIterator((row[c] for row in self._blocks), self.rows())

    # --- block arithmetic ---

    def multiply(self, other: "MatrixPartition") -> "MatrixPartition":
        """Block-wise product of two partitions.

        Cell (I, J) is the dot product of block-row I and block-column J with
        Matrix multiply as the product and in-place Matrix addition as the sum.
        Only the block-grid dimensions are checked up front; incompatible
        block shapes surface as ShapeMismatchError from the inner operations.

        Works both as ``MatrixPartition.multiply(a, b)`` and ``a.multiply(b)``.
        """

        if self.cols() > 0 and other.rows() == 0 and sum(self.col_widths()) == 0:
            # Zero-width blocks times an empty grid: the product has no columns,
            # one zero-width block per block-row.
            logger.debug("block multiply with empty inner dimension")
            return MatrixPartition._trusted([[Matrix.zeros(h, 0)] for h in self.row_heights()])

        if self.cols() != other.rows():
            raise ShapeMismatchError(
                f"cannot multiply {self.rows()}x{self.cols()} block grid by "
                f"{other.rows()}x{other.cols()} block grid: inner dimensions "
                f"{self.cols()} and {other.rows()} differ"
            )
        out_rows, out_cols = self.rows(), other.cols()
        logger.debug(
            "block multiply %dx%d @ %dx%d grids (%d block products)",
            self.rows(),
            self.cols(),
            other.rows(),
            other.cols(),
            out_rows * out_cols * self.cols(),
        )

        grid: list[list[Matrix]] = []
        for i in range(out_rows):
            row: list[Matrix] = []
            for j in range(out_cols):
                acc = dot_product(
                    self.row_iterator(i),
                    other.column_iterator(j),
                    multiply=Matrix.multiply,
                    add_into=Matrix.add_to_self,
                    zero=_zeros_like,
                )
                if acc is None:
                    raise RuntimeError("internal error: empty inner dimension")
                row.append(acc)
            grid.append(row)
        return MatrixPartition._trusted(grid)

    def __matmul__(self, other: Any) -> "MatrixPartition":
        if not isinstance(other, MatrixPartition):
            return NotImplemented
        return self.multiply(other)

    # --- reconstruction ---

    def _check_block_uniform(self, heights: list[int], widths: list[int]) -> None:
        for r, row in enumerate(self._blocks):
            for c, blk in enumerate(row):
                if blk.shape != (heights[r], widths[c]):
                    raise ShapeMismatchError(
                        f"block ({r}, {c}) is {blk.rows()}x{blk.cols()}, expected "
                        f"{heights[r]}x{widths[c]} from its block-row height and block-column width"
                    )

    def to_matrix(self) -> Matrix:
        """Concatenate the blocks back into one flat Matrix."""

        heights = self.row_heights()
        widths = self.col_widths()
        self._check_block_uniform(heights, widths)

        total_rows = sum(heights)
        total_cols = sum(widths)
        logger.debug(
            "reconstruct %dx%d grid into %dx%d matrix",
            self.rows(),
            self.cols(),
            total_rows,
            total_cols,
        )
        if total_rows == 0:
            return Matrix.zeros(0, 0)

        out: list[list[int]] = [[0] * total_cols for _ in range(total_rows)]
        row_offset = 0
        for r, block_row in enumerate(self._blocks):
            col_offset = 0
            for blk in block_row:
                w = blk.cols()
                for h, src in enumerate(blk._data):
                    out[row_offset + h][col_offset : col_offset + w] = src
                col_offset += w
            row_offset += heights[r]
        return Matrix._trusted(out)

    # --- printing ---

    def __str__(self) -> str:
        return partition_str(self)

    def __repr__(self) -> str:
        return f"<MatrixPartition grid={self.rows()}x{self.cols()}>"
