import numpy as np
import numba as nb


@nb.njit(cache=False)
def fill_band_table(pairable: np.ndarray, cut1: int) -> np.ndarray:
    """
    Fills the two-band pairing table for a fixed first cut.

    For a sequence of length N split at `cut1`, entry `table[p - cut1 + 1, x, y]`
    is the maximum number of pairs that can be formed using

    - R1 positions `x .. cut1 - 1`,
    - R2 positions `cut1 .. p`,
    - R3 positions `y .. N - 1`,

    where every pair links R1 with R2 or R2 with R3 and neither band crosses
    itself. Under those rules the highest remaining R2 position `p` can only
    pair with the lowest remaining R1 position `x` or the lowest remaining R3
    position `y`, so each cell takes the best of five moves:

        table[p, x, y] = max( table[p-1, x,   y  ],        p unpaired
                              table[p,   x+1, y  ],        x unpaired
                              table[p,   x,   y+1],        y unpaired
                              table[p-1, x+1, y  ] + 1,    pair (x, p)
                              table[p-1, x,   y+1] + 1 )   pair (p, y)

    Row 0 stands for an empty R2 (`p = cut1 - 1`) and is all zeros. The table
    does not depend on the second cut: for `cut2` the optimum is read at
    `table[cut2 - cut1, 0, cut2]`.

    Parameters
    ----------
    pairable : np.ndarray
        Boolean (N, N) matrix, `pairable[i, j]` is True when bases `i` and `j`
        form a Watson-Crick pair.
    cut1 : int
        Start index of R2, with `1 <= cut1 <= N - 3`.

    Returns
    -------
    np.ndarray
        An int32 array of shape (N - cut1, cut1 + 1, N + 1).
    """
    n = pairable.shape[0]
    table = np.zeros((n - cut1, cut1 + 1, n + 1), dtype=np.int32)

    for p in range(cut1, n - 1):
        row = p - cut1 + 1
        for x in range(cut1, -1, -1):
            for y in range(n, p, -1):
                best = table[row - 1, x, y]

                if x < cut1:
                    cand = table[row, x + 1, y]
                    if cand > best:
                        best = cand
                if y < n:
                    cand = table[row, x, y + 1]
                    if cand > best:
                        best = cand
                if x < cut1 and pairable[x, p]:
                    cand = table[row - 1, x + 1, y] + 1
                    if cand > best:
                        best = cand
                if y < n and pairable[p, y]:
                    cand = table[row - 1, x, y + 1] + 1
                    if cand > best:
                        best = cand

                table[row, x, y] = best

    return table
