import math

import pytest

from algobox import matrices

SOURCE_DIMENSIONS = [13, 5, 89, 3, 34]


def test_matrix_chain_source_example_cost():
    assert matrices.matrix_chain_order(SOURCE_DIMENSIONS).cost == 2856


def test_matrix_chain_source_example_tables():
    result = matrices.matrix_chain_order(SOURCE_DIMENSIONS)
    assert result.costs == [
        [0, 5785, 1530, 2856],
        [None, 0, 1335, 1845],
        [None, None, 0, 9078],
        [None, None, None, 0],
    ]
    assert result.splits == [
        [0, 1, 1, 3],
        [None, 0, 2, 3],
        [None, None, 0, 3],
        [None, None, None, 0],
    ]


def test_matrix_chain_source_parenthesization():
    result = matrices.matrix_chain_order(SOURCE_DIMENSIONS)
    assert result.parenthesization() == "(( A1 ( A2  A3 )) A4 )"


def test_matrix_chain_single_matrix():
    result = matrices.matrix_chain_order([4, 9])
    assert result.cost == 0
    assert result.parenthesization() == " A1 "


def test_matrix_chain_two_matrices_cost():
    dims = [6, 7, 8]
    assert matrices.matrix_chain_order(dims).cost == dims[0] * dims[1] * dims[2]


def test_matrix_chain_too_short():
    with pytest.raises(ValueError):
        matrices.matrix_chain_order([5])


def test_determinant_single_entry():
    assert matrices.determinant([[7]]) == 7


def test_determinant_triangular_is_diagonal_product():
    matrix = [[2, 5, 1, 9], [0, 3, 4, 8], [0, 0, -1, 6], [0, 0, 0, 4]]
    assert matrices.determinant(matrix) == math.prod(matrix[i][i] for i in range(4))


def test_determinant_transpose_and_row_swap():
    matrix = [[1, 2, 3], [4, 5, 7], [2, 9, 1]]
    value = matrices.determinant(matrix)
    transposed = [list(column) for column in zip(*matrix)]
    assert matrices.determinant(transposed) == value
    swapped = [matrix[1], matrix[0], matrix[2]]
    assert matrices.determinant(swapped) == -value


def test_determinant_repeated_rows_is_zero():
    assert matrices.determinant([[1, 2, 3], [4, 5, 6], [1, 2, 3]]) == 0


def test_determinant_is_multiplicative():
    a = [[1, 2], [3, 4]]
    b = [[0, 5], [6, 7]]
    product = matrices.multiply(a, b)
    assert matrices.determinant(product) == matrices.determinant(a) * matrices.determinant(b)


@pytest.mark.parametrize("bad", [[], [[1, 2], [3]], [[1, 2, 3], [4, 5, 6]]])
def test_determinant_rejects_non_square(bad):
    with pytest.raises(ValueError):
        matrices.determinant(bad)


def test_multiply_identity():
    matrix = [[1, 2, 3], [4, 5, 6]]
    identity3 = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    identity2 = [[1, 0], [0, 1]]
    assert matrices.multiply(matrix, identity3) == matrix
    assert matrices.multiply(identity2, matrix) == matrix


def test_multiply_shape_and_associativity():
    a = [[1, 2], [3, 4], [5, 6]]
    b = [[7, 8, 9], [1, 0, 2]]
    c = [[1], [2], [3]]
    ab = matrices.multiply(a, b)
    assert len(ab) == 3 and all(len(row) == 3 for row in ab)
    assert matrices.multiply(ab, c) == matrices.multiply(a, matrices.multiply(b, c))


def test_multiply_incompatible():
    with pytest.raises(ValueError):
        matrices.multiply([[1, 2, 3]], [[1, 2], [3, 4]])