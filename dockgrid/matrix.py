"""Dense, triangular and strictly triangular matrices stored in flat lists."""

from __future__ import annotations

from typing import Any, Union

Key = Union[int, tuple[int, int]]


def triangular_matrix_index(n: int, i: int, j: int) -> int:
    """Flat index of ``(i, j)`` with ``i <= j < n`` in packed upper storage."""
    if not (0 <= j < n and 0 <= i <= j):
        raise IndexError(f"({i}, {j}) is outside a triangular matrix of size {n}")
    return i + j * (j + 1) // 2


class _FlatStorage:
    """Shared element access by flat index or by ``(i, j)`` pair."""

    data: list[Any]

    def index(self, i: int, j: int) -> int:
        raise NotImplementedError

    def _flat(self, key: Key) -> int:
        if isinstance(key, tuple):
            return self.index(*key)
        return key

    def __getitem__(self, key: Key) -> Any:
        return self.data[self._flat(key)]

    def __setitem__(self, key: Key, value: Any) -> None:
        self.data[self._flat(key)] = value


class Matrix(_FlatStorage):
    """Rectangular matrix in column-major order."""

    def __init__(self, rows: int = 0, cols: int = 0, filler: Any = None) -> None:
        self.data = [filler] * (rows * cols)
        self._rows = rows
        self._cols = cols

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def index(self, i: int, j: int) -> int:
        if not (0 <= i < self._rows and 0 <= j < self._cols):
            raise IndexError(f"({i}, {j}) is outside a {self._rows}x{self._cols} matrix")
        return i + self._rows * j

    def resize(self, m: int, n: int, filler: Any) -> None:
        """Grow to ``m`` rows and ``n`` columns, keeping existing elements."""
        if m == self._rows and n == self._cols:
            return
        if m < self._rows or n < self._cols:
            raise ValueError("a matrix can only grow")
        grown = [filler] * (m * n)
        for col in range(self._cols):
            grown[m * col : m * col + self._rows] = self.data[
                self._rows * col : self._rows * (col + 1)
            ]
        self.data = grown
        self._rows = m
        self._cols = n

    def append(self, other: Matrix, filler: Any) -> None:
        """Place ``other`` as a new block on the diagonal, below and right."""
        m, n = self._rows, self._cols
        self.resize(m + other.rows, n + other.cols, filler)
        for col in range(other.cols):
            start = self._rows * (n + col) + m
            self.data[start : start + other.rows] = other.data[
                other.rows * col : other.rows * (col + 1)
            ]


class TriangularMatrix(_FlatStorage):
    """Symmetric matrix storing the upper triangle including the diagonal."""

    def __init__(self, n: int = 0, filler: Any = None) -> None:
        self.data = [filler] * (n * (n + 1) // 2)
        self._dim = n

    @property
    def dim(self) -> int:
        return self._dim

    def index(self, i: int, j: int) -> int:
        return triangular_matrix_index(self._dim, i, j)

    def index_permissive(self, i: int, j: int) -> int:
        return self.index(i, j) if i < j else self.index(j, i)


class StrictlyTriangularMatrix(_FlatStorage):
    """Upper triangle without the diagonal, as for pairwise quantities."""

    def __init__(self, n: int = 0, filler: Any = None) -> None:
        self.data = [filler] * (n * (n - 1) // 2 if n > 0 else 0)
        self._dim = n

    @property
    def dim(self) -> int:
        return self._dim

    def index(self, i: int, j: int) -> int:
        if not (1 <= j < self._dim and 0 <= i < j):
            raise IndexError(
                f"({i}, {j}) is outside a strictly triangular matrix of size {self._dim}"
            )
        return i + j * (j - 1) // 2

    def index_permissive(self, i: int, j: int) -> int:
        return self.index(i, j) if i < j else self.index(j, i)

    def resize(self, n: int, filler: Any) -> None:
        """Grow to size ``n``; existing elements keep their positions."""
        if n == self._dim:
            return
        if n < self._dim:
            raise ValueError("a strictly triangular matrix can only grow")
        self._dim = n
        self.data.extend([filler] * (n * (n - 1) // 2 - len(self.data)))

    def append(self, other: StrictlyTriangularMatrix, filler: Any) -> None:
        """Append ``other`` as a new diagonal block; cross terms get ``filler``."""
        n = self._dim
        self.resize(n + other.dim, filler)
        for j in range(1, other.dim):
            for i in range(j):
                self[i + n, j + n] = other[i, j]

    def append_block(self, rectangular: Matrix, triangular: StrictlyTriangularMatrix) -> None:
        """Append ``triangular`` with ``rectangular`` as the cross terms."""
        if self._dim != rectangular.rows:
            raise ValueError("rectangular block rows must match the current size")
        if rectangular.cols != triangular.dim:
            raise ValueError("rectangular block columns must match the appended size")
        if rectangular.cols == 0:
            return
        if rectangular.rows == 0:
            self.data = list(triangular.data)
            self._dim = triangular.dim
            return
        filler = rectangular[0, 0]
        n = self._dim
        self.append(triangular, filler)
        for i in range(rectangular.rows):
            for j in range(rectangular.cols):
                self[i, n + j] = rectangular[i, j]