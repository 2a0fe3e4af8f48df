from __future__ import annotations

from collections.abc import Sequence as _SequenceABC
from typing import Any

from .errors import InvalidShapeError


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def _check_int(value: Any, i: int, j: int) -> int:
    # bool is an int subclass but not integer matrix data.
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"Matrix entries must be integers; got {type(value).__name__} at ({i}, {j})."
        )
    return value


def coerce_int_rows(candidate: Any) -> list[list[int]]:
    """Validate nested-sequence data and return a fresh list-of-lists copy."""

    if not is_sequence_like(candidate):
        raise InvalidShapeError(
            "Matrix data must be provided as a nested sequence or a NumPy array."
        )
    rows: list[list[int]] = []
    width = -1
    for i, row in enumerate(candidate):
        if not is_sequence_like(row):
            raise InvalidShapeError(f"Matrix row {i} must be a sequence of entries.")
        if width < 0:
            width = len(row)
        elif len(row) != width:
            raise InvalidShapeError(
                f"Matrix rows must have equal length; row 0 has {width}, row {i} has {len(row)}."
            )
        rows.append([_check_int(v, i, j) for j, v in enumerate(row)])
    return rows


def coerce_matrix_data(candidate: Any, *, np_module: Any | None) -> list[list[int]]:
    if np_module is not None and isinstance(candidate, np_module.ndarray):
        if candidate.ndim != 2:
            raise InvalidShapeError("Matrix input must be a 2D structure.")
        if candidate.dtype.kind not in ("i", "u"):
            raise TypeError(f"Matrix input must have an integer dtype; got {candidate.dtype}.")
        # tolist() yields Python ints, so arithmetic stays exact.
        return coerce_int_rows(candidate.tolist())

    return coerce_int_rows(candidate)
