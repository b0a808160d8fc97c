from rnafoldml.structures.pairing import Pair
from rnafoldml.structures.tri_matrix import TriMatrix
from rnafoldml.structures.rna import Rna
from rnafoldml.structures.secondary import (
    Pairing,
    SecondaryStructure,
    build_pairing,
    validate_pairing,
)

__all__ = [
    "Pair",
    "TriMatrix",
    "Rna",
    "Pairing",
    "SecondaryStructure",
    "build_pairing",
    "validate_pairing",
]
