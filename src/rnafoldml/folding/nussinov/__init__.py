from rnafoldml.folding.nussinov.nussinov_back_pointer import NussinovBacktrackOp, NussinovBackPointer
from rnafoldml.folding.nussinov.nussinov_fold_state import NussinovFoldState, make_fold_state
from rnafoldml.folding.nussinov.nussinov_recurrences import NussinovFoldingConfig, NussinovFoldingEngine
from rnafoldml.folding.nussinov.nussinov_traceback import traceback_nested, traceback_nested_interval
from rnafoldml.folding.nussinov.nussinov_predictor import fold_nested, predict

__all__ = [
    "NussinovBacktrackOp",
    "NussinovBackPointer",
    "NussinovFoldState",
    "make_fold_state",
    "NussinovFoldingConfig",
    "NussinovFoldingEngine",
    "traceback_nested",
    "traceback_nested_interval",
    "fold_nested",
    "predict",
]
