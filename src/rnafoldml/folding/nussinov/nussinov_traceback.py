from __future__ import annotations
from typing import List, Set, Tuple

from rnafoldml.folding.common_traceback import TraceResult
from rnafoldml.folding.nussinov.nussinov_back_pointer import NussinovBacktrackOp, NussinovBackPointer
from rnafoldml.folding.nussinov.nussinov_fold_state import NussinovFoldState
from rnafoldml.structures import Pair


def traceback_nested(state: NussinovFoldState) -> TraceResult:
    """
    Reconstructs the optimal crossing-free structure of the whole sequence.

    Parameters
    ----------
    state : NussinovFoldState
        A state whose matrices were filled by `NussinovFoldingEngine`.

    Returns
    -------
    TraceResult
        The realized base pairs.
    """
    if state.seq_len == 0:
        return TraceResult(pairs=[])

    return traceback_nested_interval(state, 0, state.seq_len - 1)


def traceback_nested_interval(state: NussinovFoldState, i: int, j: int) -> TraceResult:
    """
    Reconstructs the optimal crossing-free structure of the interval `[i, j]`.

    A stack of pending intervals is processed until empty: each interval's
    backpointer either drops base `i` (`UNPAIRED`) or records the pair
    `(i, k)` and pushes the enclosed and the trailing interval (`PAIR`).

    Parameters
    ----------
    state : NussinovFoldState
        The filled DP state.
    i : int
        The 5' start index of the interval to trace.
    j : int
        The 3' end index of the interval to trace.

    Returns
    -------
    TraceResult
        The base pairs found within the interval, sorted by 5' index.
    """
    pairs: Set[Pair] = set()
    stack: List[Tuple[int, int]] = [(i, j)]
    back_ptr = state.back_ptr

    while stack:
        lo, hi = stack.pop()
        # Empty and single-base intervals hold no pairs.
        if lo >= hi:
            continue

        bp: NussinovBackPointer = back_ptr.get(lo, hi)
        op = bp.operation

        if op is NussinovBacktrackOp.UNPAIRED:
            stack.append((lo + 1, hi))

        elif op is NussinovBacktrackOp.PAIR and bp.partner_k is not None:
            k = bp.partner_k
            pairs.add(Pair(lo, k))
            stack.append((lo + 1, k - 1))
            stack.append((k + 1, hi))

    ordered = sorted(pairs, key=lambda pr: (pr.base_i, pr.base_j))

    return TraceResult(pairs=ordered)
