"""
Pseudoknot classification of positional pairings.

Two analyses are provided:

- `is_pseudoknot`: whether any two pairs cross (i < k < j < l).
- `is_simple_pseudoknot`: whether the pairing is a *simple pseudoknot* in the
  sense of Akutsu (2000), i.e. there are two cuts `0 < cut1 < cut2 < n - 1`
  splitting the positions into regions R1 = [0, cut1), R2 = [cut1, cut2) and
  R3 = [cut2, n) such that every pair links R1 with R2 or R2 with R3
  (containment), and the pairs of each of those two bands are mutually
  non-crossing (band nesting).

All functions accept any sequence whose entries are a partner index or None.
They do not validate symmetry or chemistry; that is `validate_pairing`'s job.
"""
from __future__ import annotations
import logging
from typing import List, Optional, Sequence, Tuple

from rnafoldml.errors import InvalidStructureError
from rnafoldml.utils.iter_utils import iter_cut_pairs

logger = logging.getLogger(__name__)

PairingLike = Sequence[Optional[int]]


def is_pseudoknot(pairing: PairingLike) -> bool:
    """
    Returns True if the pairing contains at least one pair of crossing base pairs.

    Scans left to right with a stack of partner indices: an opening position
    pushes its partner; a closing position must match the top of the stack,
    otherwise the pair it closes crosses a pair opened later. Runs in O(n).

    Parameters
    ----------
    pairing : Sequence[Optional[int]]
        Positional pairing.

    Returns
    -------
    bool
        True for pseudoknotted pairings, False for crossing-free ones.

    Raises
    ------
    InvalidStructureError
        If a position is paired with itself, or the partners are not symmetric
        (a closing position without a matching opening).
    """
    stack: List[int] = []

    for index, partner in enumerate(pairing):
        if partner is None:
            continue
        if partner == index:
            raise InvalidStructureError(f"Index {index} is paired with itself.")

        if partner > index:
            stack.append(partner)
            continue

        if not stack:
            raise InvalidStructureError(f"Index {index} closes a pair with {partner} that was never opened.")
        if stack[-1] != index:
            return True
        stack.pop()

    if stack:
        raise InvalidStructureError(f"Pairs opened towards {stack} are never closed.")

    return False


def _region(index: int, cut1: int, cut2: int) -> int:
    """Region number (0, 1 or 2) of `index` under the given cuts."""
    if index < cut1:
        return 0
    if index < cut2:
        return 1
    return 2


def satisfies_containment(pairing: PairingLike, cut1: int, cut2: int) -> bool:
    """
    Akutsu's first condition: every pair links two adjacent regions.

    Each paired position must lie in R1 with its partner in R2, in R2 with its
    partner in R1 or R3, or in R3 with its partner in R2. Pairs inside a single
    region, and pairs from R1 to R3, are rejected. Cuts outside
    `0 < cut1 < cut2 < n - 1` never satisfy the condition.

    Parameters
    ----------
    pairing : Sequence[Optional[int]]
        Positional pairing.
    cut1, cut2 : int
        Start of R2 and start of R3.

    Returns
    -------
    bool
        True if the condition holds for these cuts.
    """
    if not 0 < cut1 < cut2 < len(pairing) - 1:
        return False

    for index, partner in enumerate(pairing):
        if partner is None:
            continue
        if abs(_region(index, cut1, cut2) - _region(partner, cut1, cut2)) != 1:
            return False

    return True


def _band_is_nested(pairing: PairingLike, start: int, middle: int, stop: int) -> bool:
    """
    Checks that the pairs linking [start, middle) with [middle, stop) do not cross.

    Pairs with an endpoint outside [start, stop), or with both endpoints on
    the same side of `middle`, are ignored. The scan must end with every
    opened pair closed.
    """
    stack: List[int] = []

    for index in range(start, stop):
        partner = pairing[index]
        if partner is None or not start <= partner < stop:
            continue

        if index < middle <= partner:
            stack.append(partner)
        elif partner < middle <= index:
            if not stack or stack[-1] != index:
                return False
            stack.pop()

    return not stack


def satisfies_band_nesting(pairing: PairingLike, cut1: int, cut2: int) -> bool:
    """
    Akutsu's second condition: the R1-R2 pairs are mutually non-crossing, and so
    are the R2-R3 pairs.

    Parameters
    ----------
    pairing : Sequence[Optional[int]]
        Positional pairing.
    cut1, cut2 : int
        Start of R2 and start of R3.

    Returns
    -------
    bool
        True if both bands are internally nested.
    """
    return (_band_is_nested(pairing, 0, cut1, cut2)
            and _band_is_nested(pairing, cut1, cut2, len(pairing)))


def find_simple_pseudoknot_cuts(pairing: PairingLike) -> Optional[Tuple[int, int]]:
    """
    Finds the first cut pair under which `pairing` is a simple pseudoknot.

    Cut pairs are tried in lexicographic order, so the result has the lowest
    `cut1`, then the lowest `cut2`. O(n^3) overall.

    Parameters
    ----------
    pairing : Sequence[Optional[int]]
        Positional pairing.

    Returns
    -------
    Optional[Tuple[int, int]]
        `(cut1, cut2)`, or None when no cut pair satisfies both conditions or
        the pairing holds no pairs at all.
    """
    if all(partner is None for partner in pairing):
        return None

    for cut1, cut2 in iter_cut_pairs(len(pairing)):
        if satisfies_containment(pairing, cut1, cut2) and satisfies_band_nesting(pairing, cut1, cut2):
            logger.debug(f"Simple pseudoknot cuts found: cut1={cut1}, cut2={cut2}")
            return cut1, cut2

    return None


def is_simple_pseudoknot(pairing: PairingLike) -> bool:
    """
    Returns True if the pairing is a simple pseudoknot (Akutsu).

    A pairing without any pair, including the empty pairing, is not a simple
    pseudoknot.

    Parameters
    ----------
    pairing : Sequence[Optional[int]]
        Positional pairing.

    Returns
    -------
    bool
        True if some cut pair satisfies containment and band nesting.
    """
    return find_simple_pseudoknot_cuts(pairing) is not None
