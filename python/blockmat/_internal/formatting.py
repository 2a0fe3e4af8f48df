from __future__ import annotations

from typing import Any

from . import runtime as _runtime


_EDGE_ITEMS: int | None = None


def configure(*, edge_items: int | None = None) -> None:
    """Override the edge item count; ``None`` falls back to settings."""

    global _EDGE_ITEMS
    _EDGE_ITEMS = None if edge_items is None else int(edge_items)


def _edge_items() -> int:
    if _EDGE_ITEMS is not None:
        return _EDGE_ITEMS
    return _runtime.settings().edge_items


def _edge_indices(length: int) -> tuple[list[int], list[int], bool]:
    edge = _edge_items()
    if length <= edge * 2:
        return list(range(length)), [], False
    head = list(range(edge))
    tail = list(range(length - edge, length))
    return head, tail, True


def _format_matrix_row(
    matrix: Any,
    row_index: int,
    col_head: list[int],
    col_tail: list[int],
    truncated: bool,
) -> str:
    entries: list[str] = [str(matrix.get(row_index, col)) for col in col_head]
    if truncated:
        entries.append("...")
    entries.extend(str(matrix.get(row_index, col)) for col in col_tail)
    return " ".join(entries)


def matrix_str(self: Any) -> str:
    rows = self.rows()
    cols = self.cols()
    header = f"{self.__class__.__name__}(shape=({rows}, {cols}))"

    if rows == 0 or cols == 0:
        return header + "\n[]"

    row_head, row_tail, rows_truncated = _edge_indices(rows)
    col_head, col_tail, cols_truncated = _edge_indices(cols)

    lines = [header, "["]
    for row_index in row_head:
        row_repr = _format_matrix_row(self, row_index, col_head, col_tail, cols_truncated)
        lines.append(f" [{row_repr}]")
    if rows_truncated:
        lines.append(" ...")
    for row_index in row_tail:
        row_repr = _format_matrix_row(self, row_index, col_head, col_tail, cols_truncated)
        lines.append(f" [{row_repr}]")
    lines.append("]")
    return "\n".join(lines)


def partition_str(partition: Any, *, max_blocks: int = 16) -> str:
    """Structure-only preview: block shapes, never element values."""

    parts = [f"{partition.__class__.__name__}(grid={partition.rows()}x{partition.cols()})"]
    shown = 0
    for r in range(partition.rows()):
        cells: list[str] = []
        for c in range(partition.cols()):
            if shown >= max_blocks:
                cells.append("...")
                break
            blk = partition.get_block(r, c)
            cells.append(f"{blk.rows()}x{blk.cols()}")
            shown += 1
        parts.append(f"[{r}] " + " | ".join(cells))
        if shown >= max_blocks:
            break
    return "\n".join(parts)


def describe_blocks(partition: Any) -> str:
    """Full listing: the block grid followed by every block's contents."""

    lines = [partition_str(partition, max_blocks=partition.rows() * partition.cols())]
    for r in range(partition.rows()):
        for c in range(partition.cols()):
            lines.append("")
            lines.append(f"M({r},{c}):")
            lines.append(matrix_str(partition.get_block(r, c)))
    return "\n".join(lines)


class MatrixMixin:
    def __str__(self) -> str:
        return matrix_str(self)

    def __repr__(self) -> str:
        shape = getattr(self, "shape", None)
        return f"<{self.__class__.__name__} shape={shape}>"
