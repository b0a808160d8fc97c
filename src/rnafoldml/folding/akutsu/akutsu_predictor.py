from __future__ import annotations
import logging
from typing import Optional

from rnafoldml.folding.akutsu.akutsu_fold_state import make_fold_state
from rnafoldml.folding.akutsu.akutsu_recurrences import AkutsuFoldingConfig, AkutsuFoldingEngine
from rnafoldml.folding.akutsu.akutsu_traceback import traceback_simple_pk
from rnafoldml.folding.nussinov import NussinovFoldingConfig, fold_nested
from rnafoldml.structures import Rna, SecondaryStructure

logger = logging.getLogger(__name__)


def predict(rna: Rna, config: Optional[AkutsuFoldingConfig] = None) -> SecondaryStructure:
    """
    Predicts the structure of `rna` with the most base pairs among crossing-free
    structures and simple pseudoknots.

    The crossing-free optimum is computed with the Nussinov folder and the
    simple-pseudoknot optimum with the cut-pair search. The pseudoknot is
    returned only when it has strictly more pairs; otherwise the crossing-free
    structure is returned. Every simple pseudoknot with at least as many pairs
    as the crossing-free optimum therefore crosses, and the result never has
    fewer pairs than `nussinov.predict` would give.

    Parameters
    ----------
    rna : Rna
        The sequence to fold.
    config : AkutsuFoldingConfig, optional
        Engine settings, also forwarded to the crossing-free pass.

    Returns
    -------
    SecondaryStructure
        The predicted structure.
    """
    config = config or AkutsuFoldingConfig()

    nested = fold_nested(rna.seq, NussinovFoldingConfig(verbose=config.verbose))

    engine = AkutsuFoldingEngine(config=config)
    state = make_fold_state(rna.seq)
    engine.fill_all_cuts(state)

    if state.best_score > nested.num_pairs:
        trace = traceback_simple_pk(state)
        logger.info(
            f"Akutsu prediction for '{rna.name}': simple pseudoknot with {trace.num_pairs} pair(s) "
            f"at cuts {state.best_cuts}"
        )
    else:
        trace = nested
        logger.info(
            f"Akutsu prediction for '{rna.name}': crossing-free structure with {trace.num_pairs} pair(s)"
        )

    return SecondaryStructure.make(rna, trace.pairs)
