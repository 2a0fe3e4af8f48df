"""Line-oriented text form of a Matrix.

The format is ``"R C\n"`` followed by R lines of C integers, each integer
followed by a single space::

    2 2
    1 2 
    3 4 

Parsing is token based: any whitespace separates tokens and tokens after the
last element are ignored.
"""

from __future__ import annotations

import logging
from typing import IO

from .errors import MatrixFormatError
from .matrix import Matrix


logger = logging.getLogger(__name__)


def serialize(matrix: Matrix) -> str:
    rows, cols = matrix.shape
    lines = [f"{rows} {cols}\n"]
    for i in range(rows):
        lines.append("".join(f"{v} " for v in matrix.row_iterator(i)) + "\n")
    return "".join(lines)


def _parse_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError as e:
        raise MatrixFormatError(f"invalid data to deserialize: {what} {token!r} is not an integer") from e


def deserialize(text: str) -> Matrix:
    tokens = text.split()
    if len(tokens) < 2:
        raise MatrixFormatError("invalid data to deserialize: missing 'rows cols' header")
    rows = _parse_int(tokens[0], "row count")
    cols = _parse_int(tokens[1], "column count")
    if rows < 0 or cols < 0:
        raise MatrixFormatError(f"invalid data to deserialize: negative size {rows}x{cols}")
    if rows == 0 and cols != 0:
        raise MatrixFormatError(f"invalid data to deserialize: {rows}x{cols} is not a valid shape")

    needed = rows * cols
    body = tokens[2 : 2 + needed]
    if len(body) < needed:
        raise MatrixFormatError(
            f"invalid data to deserialize: expected {needed} elements, got {len(body)}"
        )
    if len(tokens) > 2 + needed:
        logger.debug("ignoring %d trailing tokens", len(tokens) - 2 - needed)

    values = [_parse_int(tok, "element") for tok in body]
    grid = [values[i * cols : (i + 1) * cols] for i in range(rows)]
    return Matrix._trusted(grid)


def dump(matrix: Matrix, fp: IO[str]) -> None:
    fp.write(serialize(matrix))


def load(fp: IO[str]) -> Matrix:
    return deserialize(fp.read())
