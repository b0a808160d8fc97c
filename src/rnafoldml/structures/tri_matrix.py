from __future__ import annotations

from typing import Generic, TypeVar, List, Tuple

T = TypeVar("T")


class TriMatrix(Generic[T]):
    """
    A memory-efficient, upper-triangular matrix for interval DP tables.

    This class provides a 2D matrix-like interface but only allocates storage
    for the upper triangle (where `i <= j`). It maps 2D `(i, j)` coordinates
    to a compact list-of-lists representation.
    """
    __slots__ = ("_seq_len", "_rows")

    def __init__(self, seq_len: int, fill: T):
        self._seq_len = seq_len
        self._rows: List[List[T]] = [[fill for _ in range(seq_len - i)] for i in range(seq_len)]

    @property
    def size(self) -> int:
        """Returns the sequence length N that defines the matrix dimensions."""
        return self._seq_len

    @property
    def shape(self) -> Tuple[int, int]:
        """Returns the matrix shape as a tuple `(N, N)`."""
        return self._seq_len, self._seq_len

    def _offset(self, base_i: int, base_j: int) -> int:
        """Calculates the column offset within a row and validates indices."""
        if base_i < 0 or base_j < 0 or base_i >= self._seq_len or base_j >= self._seq_len or base_j < base_i:
            raise IndexError(f"TriMatrix invalid index: (i={base_i}, j={base_j}) for N={self._seq_len}")
        return base_j - base_i

    def get(self, base_i: int, base_j: int) -> T:
        """
        Retrieves the value at cell `(i, j)`.

        Parameters
        ----------
        base_i : int
            The row index (0-based).
        base_j : int
            The column index (0-based).

        Returns
        -------
        T
            The value stored at the specified cell.
        """
        return self._rows[base_i][self._offset(base_i, base_j)]

    def get_or(self, base_i: int, base_j: int, default: T) -> T:
        """
        Retrieves the value at `(i, j)`, or `default` for an empty interval (`j < i`).

        Out-of-range indices on a non-empty interval still raise `IndexError`.
        """
        if base_j < base_i:
            return default
        return self.get(base_i, base_j)

    def set(self, base_i: int, base_j: int, value: T) -> None:
        """
        Sets the `value` at cell `(i, j)`.

        Parameters
        ----------
        base_i : int
            The row index (0-based).
        base_j : int
            The column index (0-based).
        value : T
            The value to store in the cell.
        """
        self._rows[base_i][self._offset(base_i, base_j)] = value

