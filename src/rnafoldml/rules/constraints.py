from __future__ import annotations
from typing import Final

# RNA alphabet accepted everywhere in the core.
RNA_ALPHABET: Final[frozenset[str]] = frozenset("ACGU")

# ---- Pairing rules (RNA) -----------------------------------------------------

# Canonical Watson-Crick pairs only; G-U wobble pairs are not admitted.
# Both orientations are listed for quick membership checks.
_RNA_ALLOWED_PAIRS: Final[frozenset[str]] = frozenset({"AU", "UA", "GC", "CG"})


def can_pair(base_i: str, base_j: str) -> bool:
    """
    Return True if nucleotides `base_i` and `base_j` form a Watson-Crick pair.

    Only A-U and C-G (in either order) are accepted. Bases are compared as
    given: callers are expected to hand over upper-case RNA letters.

    Parameters
    ----------
    base_i, base_j : str
        Single-character nucleotides.

    Returns
    -------
    bool
        True if (base_i, base_j) is in {AU, UA, GC, CG}; False otherwise.
    """
    if not isinstance(base_i, str) or not isinstance(base_j, str):
        return False

    if len(base_i) != 1 or len(base_j) != 1:
        return False

    return (base_i + base_j) in _RNA_ALLOWED_PAIRS


def is_rna_seq(seq: str) -> bool:
    """
    Return True if `seq` consists only of the characters A, C, G and U.

    The empty string is a valid (empty) RNA sequence.
    """
    return isinstance(seq, str) and all(base in RNA_ALPHABET for base in seq)
