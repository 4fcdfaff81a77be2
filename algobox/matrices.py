"""Determinants, matrix products and optimal matrix-chain ordering."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

__all__ = ["MatrixChainResult", "determinant", "multiply", "matrix_chain_order"]

Matrix = list[list[int]]


def _laplace(rows: Matrix) -> int:
    if len(rows) == 1:
        return rows[0][0]
    first, rest = rows[0], rows[1:]
    total = 0
    for column, value in enumerate(first):
        minor = [row[:column] + row[column + 1 :] for row in rest]
        sign = -1 if column % 2 else 1
        total += sign * value * _laplace(minor)
    return total


def determinant(matrix: Iterable[Sequence[int]]) -> int:
    """Determinant by cofactor expansion along the first row."""
    rows = [list(row) for row in matrix]
    size = len(rows)
    if size == 0:
        raise ValueError("matrix is empty")
    if any(len(row) != size for row in rows):
        raise ValueError("matrix is not square")
    return _laplace(rows)


def multiply(first: Iterable[Sequence[int]], second: Iterable[Sequence[int]]) -> Matrix:
    """Product of two matrices given as lists of rows."""
    a = [list(row) for row in first]
    b = [list(row) for row in second]
    if any(len(row) != len(b) for row in a):
        raise ValueError("columns of the first matrix must equal rows of the second")
    if b and any(len(row) != len(b[0]) for row in b):
        raise ValueError("second matrix has rows of unequal length")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


@dataclass(frozen=True)
class MatrixChainResult:
    """Optimal multiplication order for a chain of matrices.

    ``costs[i][j]`` is the least scalar multiplications needed for matrices
    ``i + 1`` through ``j + 1``; ``splits[i][j]`` is the 1-based matrix after
    which that product is split (0 on the diagonal). Entries below the
    diagonal are None.
    """

    cost: int
    costs: list[list[Optional[int]]]
    splits: list[list[Optional[int]]]

    def parenthesization(self) -> str:
        """The optimal order written with matrices named A1, A2, ..."""

        def render(i: int, j: int) -> str:
            if i >= j:
                return f" A{i} "
            k = self.splits[i - 1][j - 1]
            return "(" + render(i, k) + render(k + 1, j) + ")"

        return render(1, len(self.costs))


def matrix_chain_order(dimensions: Iterable[int]) -> MatrixChainResult:
    """Solve matrix-chain multiplication; matrix ``i`` is ``dims[i-1] x dims[i]``."""
    dims = list(dimensions)
    n = len(dims) - 1
    if n < 1:
        raise ValueError("at least two dimensions are needed")
    costs: list[list[Optional[int]]] = [
        [0 if i <= j else None for j in range(n)] for i in range(n)
    ]
    splits: list[list[Optional[int]]] = [
        [0 if i <= j else None for j in range(n)] for i in range(n)
    ]
    for span in range(1, n):
        for i in range(1, n - span + 1):
            j = i + span
            best: Optional[int] = None
            for k in range(i, j):
                cost = dims[i - 1] * dims[k] * dims[j] + costs[i - 1][k - 1] + costs[k][j - 1]
                if best is None or cost < best:
                    best = cost
                    splits[i - 1][j - 1] = k
            costs[i - 1][j - 1] = best
    return MatrixChainResult(cost=costs[0][n - 1], costs=costs, splits=splits)