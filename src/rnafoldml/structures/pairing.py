from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Pair:
    """
    Immutable (i, j) index pair representing one base pair of a structure.

    Parameters
    ----------
    base_i : int
        Left index (0-based).
    base_j : int
        Right index (0-based), satisfies j > i for pairs produced by the folders.

    Notes
    -----
    - `span` is the inclusive length (j - i + 1).
    - `loop_len` is the number of nts enclosed between `i` and `j` (`j - i - 1`).
    """
    base_i: int
    base_j: int

    @property
    def span(self) -> int:
        """Inclusive span length, ``j - i + 1``."""
        return self.base_j - self.base_i + 1

    @property
    def loop_len(self) -> int:
        """Number of nucleotides enclosed by the pair, ``j - i - 1``."""
        return self.base_j - self.base_i - 1

    def crosses(self, other: Pair) -> bool:
        """
        Whether this pair and `other` interleave.

        Two pairs (i, j) and (k, l), each written with its lower index first,
        cross when ``i < k < j < l`` or ``k < i < l < j``.

        Parameters
        ----------
        other : Pair
            The pair to compare against.

        Returns
        -------
        bool
            True for crossing (pseudoknotted) pairs.
        """
        i, j = sorted(self.as_tuple())
        k, l = sorted(other.as_tuple())
        return i < k < j < l or k < i < l < j

    def as_tuple(self) -> tuple[int, int]:
        """
        Pair indices as a tuple.

        Returns
        -------
        tuple[int, int]
            The pair ``(i, j)``.
        """
        return self.base_i, self.base_j
