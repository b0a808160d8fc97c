from rnafoldml.utils.iter_utils import iter_cut_pairs, iter_first_cuts
from rnafoldml.utils.nucleotide_utils import normalize_base, normalize_seq

__all__ = [
    "iter_first_cuts",
    "iter_cut_pairs",
    "normalize_base",
    "normalize_seq",
]
