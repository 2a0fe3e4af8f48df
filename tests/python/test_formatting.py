import pytest

import blockmat
from blockmat import Matrix, MatrixPartition


@pytest.fixture
def edge_items():
    def _set(n):
        blockmat.formatting.configure(edge_items=n)

    yield _set
    blockmat.formatting.configure(edge_items=None)


def test_matrix_str_small():
    s = str(Matrix([[1, 2], [3, 4]]))
    assert s == "Matrix(shape=(2, 2))\n[\n [1 2]\n [3 4]\n]"


def test_matrix_str_empty():
    assert str(Matrix([])) == "Matrix(shape=(0, 0))\n[]"


def test_matrix_repr():
    assert repr(Matrix([[1, 2, 3]])) == "<Matrix shape=(1, 3)>"


def test_matrix_str_truncates_long_axes(edge_items):
    edge_items(1)
    m = Matrix([[i * 5 + j for j in range(5)] for i in range(4)])
    lines = str(m).splitlines()
    assert lines[0] == "Matrix(shape=(4, 5))"
    assert lines[2] == " [0 ... 4]"
    assert lines[3] == " ..."
    assert lines[4] == " [15 ... 19]"


def test_edge_items_from_environment(monkeypatch):
    monkeypatch.setenv("BLOCKMAT_EDGE_ITEMS", "1")
    blockmat.runtime.reset_settings()
    try:
        assert " [0 ... 2]" in str(Matrix([[0, 1, 2]]))
    finally:
        blockmat.runtime.reset_settings()


def test_partition_str_is_structure_only():
    p = Matrix([[1, 2, 3], [4, 5, 6]]).partition(1, 2)
    s = str(p)
    assert s.splitlines() == ["MatrixPartition(grid=2x2)", "[0] 1x2 | 1x1", "[1] 1x2 | 1x1"]
    assert repr(p) == "<MatrixPartition grid=2x2>"


def test_partition_str_limits_blocks():
    p = Matrix([[0] * 6 for _ in range(6)]).partition(1, 1)
    lines = str(p).splitlines()
    # 16 blocks shown, then the preview stops.
    assert lines[1] == "[0] " + " | ".join(["1x1"] * 6)
    assert lines[3].endswith("...")
    assert len(lines) == 4


def test_describe_blocks_lists_every_block():
    p = MatrixPartition([[Matrix([[1]]), Matrix([[2]])]])
    text = blockmat.describe_blocks(p)
    assert "M(0,0):" in text
    assert "M(0,1):" in text
    assert " [2]" in text
