from __future__ import annotations
from dataclasses import dataclass, field
import time
import logging

import numpy as np
from tqdm import tqdm

from rnafoldml.folding.akutsu.akutsu_fold_state import AkutsuFoldState
from rnafoldml.folding.akutsu.numba_kernels import fill_band_table
from rnafoldml.utils.iter_utils import iter_first_cuts

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AkutsuFoldingConfig:
    """
    Configuration settings for the simple-pseudoknot folding algorithm.

    Attributes
    ----------
    verbose : bool
        If True, shows a progress bar over first-cut positions.
    """
    verbose: bool = False


@dataclass(slots=True)
class AkutsuFoldingEngine:
    """
    Searches all cut pairs for the simple pseudoknot with the most base pairs.

    For each `cut1` the band table is filled once by `fill_band_table`
    (O(N^3) cells, O(1) each), and every `cut2 > cut1` is then scored by a
    single lookup, giving O(N^4) time overall. Cut pairs are visited in
    lexicographic order and only a strictly larger score replaces the
    incumbent, so the lowest `(cut1, cut2)` wins ties.

    Attributes
    ----------
    config : AkutsuFoldingConfig
        A configuration object containing settings for the folding process.
    """
    config: AkutsuFoldingConfig = field(default_factory=AkutsuFoldingConfig)

    def fill_all_cuts(self, state: AkutsuFoldState) -> None:
        """
        Evaluates every admissible `(cut1, cut2)` and records the best one in `state`.

        Sequences shorter than four bases admit no cut pair and leave the
        state untouched.

        Parameters
        ----------
        state : AkutsuFoldState
            The state to fill.
        """
        start_time = time.perf_counter()
        n = state.seq_len
        first_cuts = iter_first_cuts(n)

        if len(first_cuts) == 0:
            logger.info(f"Akutsu DP: sequence length N={n} admits no cut pair; nothing to fill.")
            return

        logger.info(f"Akutsu DP for sequence length N={n}")
        logger.debug(f"Expected complexity: O(N⁴) ≈ {n ** 4:,} operations")

        show_progress = self.config.verbose or logger.isEnabledFor(logging.INFO)
        cut_iter = tqdm(first_cuts, desc="Akutsu DP", leave=False, disable=not show_progress)

        for cut1 in cut_iter:
            table = fill_band_table(state.pairable, cut1)
            self._score_second_cuts(cut1, table, state)

        elapsed = time.perf_counter() - start_time
        logger.info(
            f"Akutsu DP completed in {elapsed:.2f}s; best score {state.best_score} at cuts {state.best_cuts}"
        )

    @staticmethod
    def _score_second_cuts(cut1: int, table: np.ndarray, state: AkutsuFoldState) -> None:
        """
        Reads the optimum of every `cut2` from `cut1`'s band table and updates
        the incumbent.

        Parameters
        ----------
        cut1 : int
            The first cut the table was filled for.
        table : np.ndarray
            The band table returned by `fill_band_table`.
        state : AkutsuFoldState
            The state holding the incumbent.
        """
        n = state.seq_len
        cut2s = np.arange(cut1 + 1, n - 1)
        scores = table[cut2s - cut1, 0, cut2s]

        for cut2, score in zip(cut2s.tolist(), scores.tolist()):
            state.cut_scores[(cut1, cut2)] = score

        # argmax returns the first maximum, i.e. the lowest cut2 among ties.
        best_idx = int(np.argmax(scores))
        best_score = int(scores[best_idx])

        if best_score > state.best_score:
            state.best_score = best_score
            state.best_cuts = (cut1, int(cut2s[best_idx]))
            state.best_table = table
            logger.debug(f"New best simple pseudoknot: {best_score} pair(s) at cuts {state.best_cuts}")
