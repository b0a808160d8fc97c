from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from rnafoldml.errors import ConstructionConflictError, InvalidSequenceError, InvalidStructureError
from rnafoldml.rules.constraints import can_pair, is_rna_seq
from rnafoldml.structures.pairing import Pair
from rnafoldml.structures.rna import Rna

# Positional pairing: entry i is the partner index of i, or None when i is unpaired.
Pairing = Tuple[Optional[int], ...]
PairLike = Union[Pair, Tuple[int, int]]


def build_pairing(seq_len: int, pairs: Iterable[PairLike]) -> List[Optional[int]]:
    """
    Converts an unordered collection of index pairs into positional form.

    Parameters
    ----------
    seq_len : int
        The length of the sequence the pairs belong to.
    pairs : Iterable[Pair | Tuple[int, int]]
        Base pairs in any order and orientation.

    Returns
    -------
    List[Optional[int]]
        A list `a` of length `seq_len` with `a[i] = j` and `a[j] = i` for every
        pair `(i, j)`, and `None` everywhere else.

    Raises
    ------
    InvalidStructureError
        If an index lies outside `0..seq_len-1`.
    ConstructionConflictError
        If an index appears in more than one pair.
    """
    pairing: List[Optional[int]] = [None] * seq_len

    for pair in pairs:
        base_a, base_b = pair.as_tuple() if isinstance(pair, Pair) else pair

        if not (0 <= base_a < seq_len and 0 <= base_b < seq_len):
            raise InvalidStructureError(f"Pair ({base_a}, {base_b}) is out of range for length {seq_len}.")

        if pairing[base_a] is not None or pairing[base_b] is not None:
            raise ConstructionConflictError(f"Pair ({base_a}, {base_b}) reuses an index that is already paired.")

        pairing[base_a] = base_b
        pairing[base_b] = base_a

    return pairing


def validate_pairing(seq: str, pairing: Sequence[Optional[int]]) -> Pairing:
    """
    Checks the secondary structure representation invariant.

    The sequence must be over {A, C, G, U}; the pairing must have the same
    length; every paired index must have an in-range partner different from
    itself, the partner must point back, and the two bases must form a
    Watson-Crick pair. Runs in O(n).

    Parameters
    ----------
    seq : str
        The sequence of bases.
    pairing : Sequence[Optional[int]]
        Candidate positional pairing.

    Returns
    -------
    Pairing
        The validated pairing as an immutable tuple.

    Raises
    ------
    InvalidSequenceError
        If `seq` holds characters outside the alphabet.
    InvalidStructureError
        On any pairing violation; the message names the failing check.
    """
    if not is_rna_seq(seq):
        raise InvalidSequenceError("Sequence contains characters other than A, C, G, U.")

    seq_len = len(seq)
    if len(pairing) != seq_len:
        raise InvalidStructureError(f"Pairing length {len(pairing)} does not match sequence length {seq_len}.")

    for i, j in enumerate(pairing):
        if j is None:
            continue
        if isinstance(j, bool) or not isinstance(j, int) or not 0 <= j < seq_len:
            raise InvalidStructureError(f"Index {i} has an invalid partner {j!r}.")
        if i == j:
            raise InvalidStructureError(f"Index {i} is paired with itself.")
        if pairing[j] != i:
            raise InvalidStructureError(f"Pairing is not symmetric: {i} -> {j} but {j} -> {pairing[j]}.")
        if not can_pair(seq[i], seq[j]):
            raise InvalidStructureError(f"Bases {seq[i]}{i} and {seq[j]}{j} do not form a Watson-Crick pair.")

    return tuple(pairing)


@dataclass(frozen=True, slots=True)
class SecondaryStructure:
    """
    An RNA sequence with a validated base pairing.

    Instances are immutable. The pairing is checked against the representation
    invariant on construction (see `validate_pairing`) and is never repaired.

    Attributes
    ----------
    rna : Rna
        The sequence this structure belongs to.
    pairing : Pairing
        Positional pairing; entry `i` is the partner of `i` or None.
    """
    rna: Rna
    pairing: Pairing

    def __post_init__(self) -> None:
        object.__setattr__(self, "pairing", validate_pairing(self.rna.seq, self.pairing))

    @classmethod
    def make(cls, rna: Rna, pairs: Iterable[PairLike]) -> SecondaryStructure:
        """
        Builds a structure of `rna` from an unordered collection of base pairs.

        Parameters
        ----------
        rna : Rna
            The sequence.
        pairs : Iterable[Pair | Tuple[int, int]]
            Base pairs in any order and orientation.

        Returns
        -------
        SecondaryStructure
            The validated structure.

        Raises
        ------
        InvalidStructureError
            If the pairs do not form a valid pairing for `rna.seq`.
        ConstructionConflictError
            If an index is used by more than one pair.
        """
        return cls(rna=rna, pairing=tuple(build_pairing(len(rna.seq), pairs)))

    def __len__(self) -> int:
        return len(self.pairing)

    @property
    def seq(self) -> str:
        return self.rna.seq

    @property
    def name(self) -> str:
        return self.rna.name

    @property
    def pairs(self) -> List[Optional[int]]:
        """A fresh copy of the positional pairing."""
        return list(self.pairing)

    @property
    def num_pairs(self) -> int:
        """Number of base pairs, each symmetric pair counted once."""
        return sum(1 for j in self.pairing if j is not None) // 2

    def pair_list(self) -> List[Pair]:
        """Base pairs as `Pair` objects with `base_i < base_j`, sorted by `base_i`."""
        return [Pair(i, j) for i, j in enumerate(self.pairing) if j is not None and i < j]
