from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

import numpy as np

from rnafoldml.rules import can_pair


@dataclass(slots=True)
class AkutsuFoldState:
    """
    Working state of the simple-pseudoknot maximum-pairing search.

    Attributes
    ----------
    pairable : np.ndarray
        Boolean (N, N) matrix of admissible Watson-Crick pairs.
    best_score : int
        Largest pair count found over all cut pairs so far.
    best_cuts : Optional[Tuple[int, int]]
        The `(cut1, cut2)` that achieved `best_score`, or None if no cut pair
        has been scored above zero.
    best_table : Optional[np.ndarray]
        The band table of `best_cuts[0]`, kept for traceback.
    cut_scores : Dict[Tuple[int, int], int]
        Optimal pair count for every cut pair that was evaluated.
    """
    pairable: np.ndarray
    best_score: int = 0
    best_cuts: Optional[Tuple[int, int]] = None
    best_table: Optional[np.ndarray] = None
    cut_scores: Dict[Tuple[int, int], int] = field(default_factory=dict)

    @property
    def seq_len(self) -> int:
        return self.pairable.shape[0]


def make_pairable_matrix(seq: str) -> np.ndarray:
    """Boolean matrix with `m[i, j]` True when `seq[i]` and `seq[j]` can pair."""
    n = len(seq)
    pairable = np.zeros((n, n), dtype=np.bool_)
    for i in range(n):
        for j in range(i + 1, n):
            if can_pair(seq[i], seq[j]):
                pairable[i, j] = True
                pairable[j, i] = True

    return pairable


def make_fold_state(seq: str) -> AkutsuFoldState:
    """
    Allocates a fresh search state for `seq`.

    Parameters
    ----------
    seq : str
        The RNA sequence.

    Returns
    -------
    AkutsuFoldState
        A state with no cut pair evaluated yet.
    """
    return AkutsuFoldState(pairable=make_pairable_matrix(seq))
