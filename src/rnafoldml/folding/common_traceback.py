from __future__ import annotations
from dataclasses import dataclass
from typing import List

from rnafoldml.structures import Pair


@dataclass(frozen=True, slots=True)
class TraceResult:
    """
    A standard container for the results of a folding traceback.

    Used as the common return type of the nested and pseudoknot-aware
    traceback routines.

    Attributes
    ----------
    pairs : List[Pair]
        Base pairs `(i, j)` with `i < j`, sorted by the 5' index `i`.
    """
    pairs: List[Pair]

    @property
    def num_pairs(self) -> int:
        return len(self.pairs)

    def as_tuples(self) -> List[tuple[int, int]]:
        return [pair.as_tuple() for pair in self.pairs]
