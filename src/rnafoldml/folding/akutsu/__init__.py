from rnafoldml.folding.akutsu.numba_kernels import fill_band_table
from rnafoldml.folding.akutsu.akutsu_fold_state import AkutsuFoldState, make_fold_state, make_pairable_matrix
from rnafoldml.folding.akutsu.akutsu_recurrences import AkutsuFoldingConfig, AkutsuFoldingEngine
from rnafoldml.folding.akutsu.akutsu_traceback import traceback_simple_pk
from rnafoldml.folding.akutsu.akutsu_predictor import predict

__all__ = [
    "fill_band_table",
    "AkutsuFoldState",
    "make_fold_state",
    "make_pairable_matrix",
    "AkutsuFoldingConfig",
    "AkutsuFoldingEngine",
    "traceback_simple_pk",
    "predict",
]
