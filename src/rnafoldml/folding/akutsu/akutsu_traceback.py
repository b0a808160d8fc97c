from __future__ import annotations
from typing import List

from rnafoldml.folding.common_traceback import TraceResult
from rnafoldml.folding.akutsu.akutsu_fold_state import AkutsuFoldState
from rnafoldml.structures import Pair


def traceback_simple_pk(state: AkutsuFoldState) -> TraceResult:
    """
    Reconstructs the pairs of the best simple pseudoknot found by the engine.

    Walks the band table of `state.best_cuts[0]` from the cell of the full
    regions, `(p = cut2 - 1, x = 0, y = cut2)`, until R2 is exhausted. At each
    cell the first move that reproduces the stored score is taken, trying in
    order: `p` unpaired, `x` unpaired, `y` unpaired, pair `(x, p)`, pair `(p, y)`.

    Parameters
    ----------
    state : AkutsuFoldState
        A state filled by `AkutsuFoldingEngine.fill_all_cuts`.

    Returns
    -------
    TraceResult
        The realized base pairs, sorted by 5' index. Empty if no cut pair
        scored above zero.

    Raises
    ------
    RuntimeError
        If no move reproduces a stored score, which means the table is corrupt.
    """
    if state.best_cuts is None or state.best_table is None:
        return TraceResult(pairs=[])

    pairable = state.pairable
    table = state.best_table
    n = state.seq_len
    cut1, cut2 = state.best_cuts

    pairs: List[Pair] = []
    p, x, y = cut2 - 1, 0, cut2

    while p >= cut1:
        row = p - cut1 + 1
        score = table[row, x, y]

        if score == table[row - 1, x, y]:
            p -= 1
        elif x < cut1 and score == table[row, x + 1, y]:
            x += 1
        elif y < n and score == table[row, x, y + 1]:
            y += 1
        elif x < cut1 and pairable[x, p] and score == table[row - 1, x + 1, y] + 1:
            pairs.append(Pair(x, p))
            x += 1
            p -= 1
        elif y < n and pairable[p, y] and score == table[row - 1, x, y + 1] + 1:
            pairs.append(Pair(p, y))
            y += 1
            p -= 1
        else:
            raise RuntimeError(f"Akutsu traceback is stuck at p={p}, x={x}, y={y} with score {score}.")

    pairs.sort(key=lambda pr: (pr.base_i, pr.base_j))

    return TraceResult(pairs=pairs)
