"""
Unit tests for the Nussinov fill step.

The `best` matrix is checked on small hand-computed sequences, the tie-breaking
rule is pinned through the backpointers, and the overall optimum is compared
against an exhaustive search over all crossing-free pairings.
"""
import pytest

from rnafoldml.analysis import is_pseudoknot
from rnafoldml.folding.nussinov import (
    NussinovBacktrackOp,
    NussinovFoldingConfig,
    NussinovFoldingEngine,
    make_fold_state,
)


@pytest.fixture
def engine():
    return NussinovFoldingEngine(config=NussinovFoldingConfig(verbose=False))


def _fill(engine, seq):
    state = make_fold_state(len(seq))
    engine.fill_all_matrices(seq, state)
    return state


def test_empty_sequence_is_a_no_op(engine):
    state = _fill(engine, "")
    assert state.seq_len == 0


def test_single_bases_keep_base_case(engine):
    state = _fill(engine, "ACGU")
    for i in range(4):
        assert state.best_matrix.get(i, i) == 0
        assert state.back_ptr.get(i, i).operation is NussinovBacktrackOp.NONE


@pytest.mark.parametrize(
    "seq, expected",
    [
        ("AU", 1),
        ("AA", 0),
        ("AAACCCUUU", 3),
        ("AAUUGGCC", 4),
        ("GGACCUUG", 2),
        ("GUGU", 0),
    ],
)
def test_best_score_of_whole_sequence(engine, seq, expected):
    state = _fill(engine, seq)
    assert state.best_matrix.get(0, len(seq) - 1) == expected


def test_pair_backpointer_records_partner(engine):
    state = _fill(engine, "AU")
    bp = state.back_ptr.get(0, 1)
    assert bp.operation is NussinovBacktrackOp.PAIR
    assert bp.partner_k == 1


def test_ties_prefer_leaving_i_unpaired(engine):
    """
    In "AAU" both (0, 2) and (1, 2) give one pair; leaving base 0 unpaired
    comes first in enumeration order and wins.
    """
    state = _fill(engine, "AAU")
    assert state.best_matrix.get(0, 2) == 1
    assert state.back_ptr.get(0, 2).operation is NussinovBacktrackOp.UNPAIRED


def test_ties_between_partners_prefer_smallest_k(engine):
    """
    In "AUU" base 0 can pair with 1 or 2 for the same score; the smaller
    partner wins.
    """
    state = _fill(engine, "AUU")
    bp = state.back_ptr.get(0, 2)
    assert bp.operation is NussinovBacktrackOp.PAIR
    assert bp.partner_k == 1


@pytest.mark.slow
def test_best_matches_exhaustive_search(engine, enumerate_pairings, random_sequences):
    """
    The DP optimum equals the largest crossing-free pairing found by brute force.
    """
    for seq in random_sequences(count=25, min_len=1, max_len=9):
        state = _fill(engine, seq)
        expected = max(
            sum(j is not None for j in pairing) // 2
            for pairing in enumerate_pairings(seq)
            if not is_pseudoknot(pairing)
        )
        assert state.best_matrix.get(0, len(seq) - 1) == expected, seq
