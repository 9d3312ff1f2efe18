"""A square diagonal matrix that stores only its diagonal."""

from __future__ import annotations


class DiagonalMatrix:
    """An n-by-n matrix that is zero off the diagonal; indices are 1-based."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self._diagonal = [0] * size

    def _check(self, i: int, j: int) -> None:
        n = len(self._diagonal)
        if not (1 <= i <= n and 1 <= j <= n):
            raise IndexError(f"index ({i}, {j}) is outside a {n}x{n} matrix")

    def set(self, i: int, j: int, value: int) -> None:
        """Set the entry at row ``i``, column ``j``.

        Raises IndexError outside the matrix and ValueError for a non-zero
        value off the diagonal.
        """
        self._check(i, j)
        if i == j:
            self._diagonal[i - 1] = value
        elif value != 0:
            raise ValueError(f"entry ({i}, {j}) is off the diagonal and must stay 0")

    def get(self, i: int, j: int) -> int:
        """Return the entry at row ``i``, column ``j``. Raises IndexError outside the matrix."""
        self._check(i, j)
        return self._diagonal[i - 1] if i == j else 0

    def rows(self) -> list[list[int]]:
        """The full matrix as a list of rows."""
        n = len(self._diagonal)
        return [
            [value if col == row else 0 for col in range(n)]
            for row, value in enumerate(self._diagonal)
        ]

    def dimension(self) -> int:
        """Number of rows, which equals the number of columns."""
        return len(self._diagonal)

    def __str__(self) -> str:
        return "\n".join(" ".join(str(value) for value in row) for row in self.rows())