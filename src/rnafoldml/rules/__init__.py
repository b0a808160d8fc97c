from rnafoldml.rules.constraints import (
    RNA_ALPHABET,
    can_pair,
    is_rna_seq,
)

__all__ = [
    "RNA_ALPHABET",
    "can_pair",
    "is_rna_seq",
]
