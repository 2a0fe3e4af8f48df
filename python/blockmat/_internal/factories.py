from __future__ import annotations

import random
from typing import Any

from .errors import InvalidShapeError
from .matrix import Matrix


def matrix(data: Any) -> Matrix:
    return Matrix(data)


def zeros(rows: int, cols: int) -> Matrix:
    return Matrix.zeros(rows, cols)


def random_matrix(
    rows: int,
    cols: int,
    low: int,
    high: int,
    *,
    seed: int | None = None,
) -> Matrix:
    """Matrix filled with integers drawn uniformly from ``[low, high)``.

    Intended for demos and tests; pass ``seed`` for reproducible output.
    """

    rows, cols = int(rows), int(cols)
    if rows < 0 or cols < 0:
        raise InvalidShapeError(f"matrix sizes must be non-negative; got {rows}x{cols}")
    if rows == 0:
        return Matrix.zeros(0, 0)
    if cols > 0 and high <= low:
        raise ValueError(f"random_matrix requires low < high; got [{low}, {high})")

    rng = random.Random(seed)
    grid = [[rng.randrange(low, high) for _ in range(cols)] for _ in range(rows)]
    return Matrix._trusted(grid)
