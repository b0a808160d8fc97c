from __future__ import annotations
import logging
from typing import Optional

from rnafoldml.folding.common_traceback import TraceResult
from rnafoldml.folding.nussinov.nussinov_fold_state import make_fold_state
from rnafoldml.folding.nussinov.nussinov_recurrences import NussinovFoldingConfig, NussinovFoldingEngine
from rnafoldml.folding.nussinov.nussinov_traceback import traceback_nested
from rnafoldml.structures import Rna, SecondaryStructure

logger = logging.getLogger(__name__)


def fold_nested(seq: str, config: Optional[NussinovFoldingConfig] = None) -> TraceResult:
    """
    Runs the Nussinov fill and traceback on a raw sequence string.

    Parameters
    ----------
    seq : str
        The RNA sequence.
    config : NussinovFoldingConfig, optional
        Engine settings; defaults to a quiet configuration.

    Returns
    -------
    TraceResult
        A maximum-cardinality crossing-free set of Watson-Crick pairs.
    """
    engine = NussinovFoldingEngine(config=config or NussinovFoldingConfig())
    state = make_fold_state(len(seq))
    engine.fill_all_matrices(seq, state)

    return traceback_nested(state)


def predict(rna: Rna, config: Optional[NussinovFoldingConfig] = None) -> SecondaryStructure:
    """
    Predicts the crossing-free secondary structure of `rna` with the most base pairs.

    Ties between equally good structures are broken deterministically, so the
    same input always yields the same pairing.

    Parameters
    ----------
    rna : Rna
        The sequence to fold.
    config : NussinovFoldingConfig, optional
        Engine settings.

    Returns
    -------
    SecondaryStructure
        The predicted structure.
    """
    trace = fold_nested(rna.seq, config)
    logger.info(f"Nussinov prediction for '{rna.name}': {trace.num_pairs} pair(s)")

    return SecondaryStructure.make(rna, trace.pairs)
