from rnafoldml.analysis.pseudoknot import (
    find_simple_pseudoknot_cuts,
    is_pseudoknot,
    is_simple_pseudoknot,
    satisfies_band_nesting,
    satisfies_containment,
)
from rnafoldml.analysis.metrics import distance, similarity

__all__ = [
    "find_simple_pseudoknot_cuts",
    "is_pseudoknot",
    "is_simple_pseudoknot",
    "satisfies_band_nesting",
    "satisfies_containment",
    "distance",
    "similarity",
]
