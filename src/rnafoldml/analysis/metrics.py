from __future__ import annotations
from typing import List, Tuple

from rnafoldml.errors import LengthMismatchError
from rnafoldml.structures.secondary import SecondaryStructure

# Partner coordinate of an unpaired position in `distance`.
UNPAIRED_COORD = -1


def _positions(structure: SecondaryStructure) -> List[Tuple[int, int]]:
    """Every position as `(index, partner)`, unpaired ones at `UNPAIRED_COORD`."""
    return [(i, UNPAIRED_COORD if j is None else j) for i, j in enumerate(structure.pairing)]


def distance(struct_a: SecondaryStructure, struct_b: SecondaryStructure) -> int:
    """
    Bottleneck distance between the pairings of two structures.

    Each position `i` with partner `j` is read as the point `(i, j)`, an
    unpaired position as `(i, -1)`. For every point `(i1, j1)` of `struct_a`,
    takes the closest point `(i2, j2)` of `struct_b` under the Chebyshev
    distance `max(|i1 - i2|, |j1 - j2|)`; the result is the largest of these
    minima. Unpaired positions can therefore absorb a pair that has no close
    counterpart among the other structure's pairs.

    If either structure has no base pairs the distance is 0. This is a
    convention of the metric, not an infinite distance. The two sequences do
    not need to match. Runs in O(n * m).

    Parameters
    ----------
    struct_a, struct_b : SecondaryStructure
        The structures to compare. The metric is directed: `struct_a`'s
        positions are matched against `struct_b`'s.

    Returns
    -------
    int
        The distance.
    """
    if struct_a.num_pairs == 0 or struct_b.num_pairs == 0:
        return 0

    positions_b = _positions(struct_b)
    return max(
        min(max(abs(i1 - i2), abs(j1 - j2)) for i2, j2 in positions_b)
        for i1, j1 in _positions(struct_a)
    )


def similarity(struct_a: SecondaryStructure, struct_b: SecondaryStructure) -> float:
    """
    Fraction of positions on which two structures agree.

    A position agrees when it is paired to the same partner in both structures
    or unpaired in both. Sequences need not be equal, only equally long. Two
    empty structures have similarity 1.0. Runs in O(n).

    Parameters
    ----------
    struct_a, struct_b : SecondaryStructure
        The structures to compare.

    Returns
    -------
    float
        A value in [0, 1].

    Raises
    ------
    LengthMismatchError
        If the sequences differ in length.
    """
    seq_len = len(struct_a.seq)
    if seq_len != len(struct_b.seq):
        raise LengthMismatchError(
            f"Cannot compare structures of different lengths ({seq_len} and {len(struct_b.seq)})."
        )

    if seq_len == 0:
        return 1.0

    agreeing = sum(1 for j_a, j_b in zip(struct_a.pairing, struct_b.pairing) if j_a == j_b)
    return agreeing / seq_len
