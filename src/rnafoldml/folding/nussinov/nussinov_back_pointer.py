from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

__all__ = ["NussinovBacktrackOp", "NussinovBackPointer"]


class NussinovBacktrackOp(Enum):
    """
    Recursion rules of the Nussinov maximum-pairing recurrence.

    NONE      : Not set yet, or an interval with fewer than two bases.
    UNPAIRED  : best[i,j] left base i unpaired (use best[i+1,j]).
    PAIR      : best[i,j] paired i with k (use best[i+1,k-1] + best[k+1,j]).
    """
    NONE = auto()
    UNPAIRED = auto()
    PAIR = auto()


@dataclass(frozen=True, slots=True)
class NussinovBackPointer:
    """
    Records which recursion rule produced the optimum of one DP cell.

    Attributes
    ----------
    operation : NussinovBacktrackOp
        The rule chosen for this cell.
    partner_k : Optional[int]
        For `PAIR`, the index `k` that base `i` pairs with.
    """
    operation: NussinovBacktrackOp = NussinovBacktrackOp.NONE
    partner_k: Optional[int] = None
