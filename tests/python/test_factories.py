import pytest

import blockmat
from blockmat import InvalidShapeError, Matrix


def test_random_matrix_shape_and_range():
    m = blockmat.random_matrix(6, 9, 10, 20, seed=0)
    assert m.shape == (6, 9)
    values = [m.get(i, j) for i in range(6) for j in range(9)]
    assert all(10 <= v < 20 for v in values)
    assert all(type(v) is int for v in values)


def test_random_matrix_is_reproducible_with_seed():
    a = blockmat.random_matrix(4, 4, -100, 100, seed=42)
    b = blockmat.random_matrix(4, 4, -100, 100, seed=42)
    assert a == b


def test_random_matrix_single_value_range():
    assert blockmat.random_matrix(2, 2, 7, 8).tolist() == [[7, 7], [7, 7]]


def test_random_matrix_validation():
    with pytest.raises(InvalidShapeError):
        blockmat.random_matrix(-1, 2, 0, 1)
    with pytest.raises(ValueError):
        blockmat.random_matrix(2, 2, 5, 5)
    assert blockmat.random_matrix(0, 3, 5, 5).shape == (0, 0)
    assert blockmat.random_matrix(2, 0, 5, 5).shape == (2, 0)


def test_zeros_and_matrix_factories():
    assert blockmat.zeros(2, 1) == Matrix([[0], [0]])
    assert blockmat.matrix([[1, 2]]) == Matrix([[1, 2]])
