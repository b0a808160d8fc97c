from typing import Iterator, Tuple


def iter_cut_pairs(n: int) -> Iterator[Tuple[int, int]]:
    """
    Iterates through every admissible pair of cut points for a sequence of length `n`.

    Two cuts `cut1 < cut2` split positions into the regions `[0, cut1)`,
    `[cut1, cut2)` and `[cut2, n)`. Cuts must lie strictly inside the
    sequence, `0 < cut1 < cut2 < n - 1`. Pairs are yielded in lexicographic
    order (lowest `cut1` first, then lowest `cut2`).

    Parameters
    ----------
    n : int
        The length of the sequence.

    Yields
    ------
    Iterator[Tuple[int, int]]
        `(cut1, cut2)` tuples.
    """
    for cut1 in iter_first_cuts(n):
        for cut2 in range(cut1 + 1, n - 1):
            yield cut1, cut2


def iter_first_cuts(n: int) -> range:
    """
    Range of admissible `cut1` values, those leaving room for a `cut2` with
    `cut1 < cut2 < n - 1`.
    """
    return range(1, max(1, n - 2))
