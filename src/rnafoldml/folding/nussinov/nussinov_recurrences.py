from __future__ import annotations
from dataclasses import dataclass, field
import time
import logging

from tqdm import tqdm

from rnafoldml.folding.nussinov.nussinov_back_pointer import NussinovBacktrackOp, NussinovBackPointer
from rnafoldml.folding.nussinov.nussinov_fold_state import NussinovFoldState
from rnafoldml.rules import can_pair

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class NussinovFoldingConfig:
    """
    Configuration settings for the Nussinov folding algorithm.

    Attributes
    ----------
    verbose : bool
        If True, shows a progress bar over span lengths.
    """
    verbose: bool = False


@dataclass(slots=True)
class NussinovFoldingEngine:
    """
    Implements the Nussinov interval DP for maximum crossing-free pairing.

    `best[i, j]` is the largest number of mutually non-crossing Watson-Crick
    pairs using only bases `i..j`:

        best[i, j] = max( best[i+1, j],
                          max_{i < k <= j, can_pair(i, k)} 1 + best[i+1, k-1] + best[k+1, j] )

    with `best[i, j] = 0` whenever `j <= i`. Candidates are compared in the
    order written above and only a strictly better score replaces the
    incumbent, so ties always go to "i unpaired" and then to the smallest `k`.

    Attributes
    ----------
    config : NussinovFoldingConfig
        A configuration object containing settings for the folding process.
    """
    config: NussinovFoldingConfig = field(default_factory=NussinovFoldingConfig)

    def fill_all_matrices(self, seq: str, state: NussinovFoldState) -> None:
        """
        Fills the `best` matrix and its backpointers bottom-up by span length.

        Parameters
        ----------
        seq : str
            The RNA sequence to fold.
        state : NussinovFoldState
            The state object containing the DP matrices to be filled.
        """
        start_time = time.perf_counter()
        n = len(seq)

        if n == 0:
            logger.info("Nussinov DP: empty sequence; nothing to fill.")
            return

        logger.info(f"Nussinov DP for sequence length N={n}")
        logger.debug(f"Expected complexity: O(N³) ≈ {n ** 3:,} operations")

        show_progress = self.config.verbose or logger.isEnabledFor(logging.INFO)
        span_iter = tqdm(range(1, n), desc="Nussinov DP", leave=False, disable=not show_progress)

        # Spans of length 0 (single bases) keep the initial score 0 and NONE backpointer.
        for d in span_iter:
            for i in range(0, n - d):
                self._fill_best_cell(seq, i, i + d, state)

        elapsed = time.perf_counter() - start_time
        logger.info(f"Nussinov DP completed in {elapsed:.2f}s; best[0,{n - 1}] = {state.best_matrix.get(0, n - 1)}")

    @staticmethod
    def _fill_best_cell(seq: str, i: int, j: int, state: NussinovFoldState) -> None:
        """
        Fills a single cell `best[i, j]` (with `i < j`).

        Parameters
        ----------
        seq : str
            The RNA sequence.
        i : int
            The 5' start index of the interval.
        j : int
            The 3' end index of the interval.
        state : NussinovFoldState
            The state object containing the DP matrices.
        """
        best_matrix = state.best_matrix

        # Case 1: leave base 'i' unpaired.
        best_score = best_matrix.get(i + 1, j)
        best_back_ptr = NussinovBackPointer(operation=NussinovBacktrackOp.UNPAIRED)

        # Case 2: pair 'i' with some 'k', splitting into the enclosed and the trailing interval.
        for k in range(i + 1, j + 1):
            if not can_pair(seq[i], seq[k]):
                continue

            inside = best_matrix.get_or(i + 1, k - 1, 0)
            outside = best_matrix.get_or(k + 1, j, 0)
            cand_score = 1 + inside + outside

            if cand_score > best_score:
                best_score = cand_score
                best_back_ptr = NussinovBackPointer(operation=NussinovBacktrackOp.PAIR, partner_k=k)

        best_matrix.set(i, j, best_score)
        state.back_ptr.set(i, j, best_back_ptr)
