from __future__ import annotations
from dataclasses import dataclass

from rnafoldml.structures import TriMatrix
from rnafoldml.folding.nussinov.nussinov_back_pointer import NussinovBackPointer


@dataclass(frozen=True, slots=True)
class NussinovFoldState:
    """
    Holds the DP matrices of the Nussinov maximum-pairing algorithm.

    Attributes
    ----------
    best_matrix : TriMatrix[int]
        `best[i, j]` is the maximum number of non-crossing Watson-Crick pairs
        that can be formed using only bases `i..j`.
    back_ptr : TriMatrix[NussinovBackPointer]
        Backpointers recording the rule that achieved each `best[i, j]`.
    """
    best_matrix: TriMatrix[int]
    back_ptr: TriMatrix[NussinovBackPointer]

    @property
    def seq_len(self) -> int:
        return self.best_matrix.size


def make_fold_state(seq_len: int) -> NussinovFoldState:
    """
    Allocates the Nussinov matrices for a sequence of length `seq_len`.

    Every score starts at 0, which is also the base case for single bases;
    every backpointer starts as `NONE`.

    Parameters
    ----------
    seq_len : int
        The length of the RNA sequence (N).

    Returns
    -------
    NussinovFoldState
        A new state object with initialized matrices.
    """
    return NussinovFoldState(
        best_matrix=TriMatrix[int](seq_len, 0),
        back_ptr=TriMatrix[NussinovBackPointer](seq_len, NussinovBackPointer()),
    )
