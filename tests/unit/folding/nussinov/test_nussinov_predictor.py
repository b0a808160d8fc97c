"""
End-to-end tests for `nussinov.predict`.
"""
import pytest

from rnafoldml.analysis import is_pseudoknot
from rnafoldml.folding import nussinov
from rnafoldml.io import to_dot_string
from rnafoldml.structures import Rna, SecondaryStructure, validate_pairing


@pytest.mark.parametrize(
    "seq, expected",
    [
        ("AAACCCUUU", "(((...)))"),
        ("AAUUGGCC", "(())(())"),
        ("", ""),
    ],
)
def test_predict_dot_bracket(seq, expected):
    structure = nussinov.predict(Rna.from_string(seq, "test"))
    assert to_dot_string(structure) == expected


def test_predict_returns_named_structure():
    rna = Rna.from_string("GGGAAACCC", "hairpin")
    structure = nussinov.predict(rna, nussinov.NussinovFoldingConfig(verbose=False))

    assert isinstance(structure, SecondaryStructure)
    assert structure.rna == rna
    assert structure.num_pairs == 3


def test_fold_nested_on_raw_string():
    assert nussinov.fold_nested("AU").as_tuples() == [(0, 1)]


def test_predictions_are_valid_crossing_free_and_repeatable(random_sequences):
    """
    Every prediction passes the pairing invariant, never crosses, and
    re-running the folder gives the same pairing.
    """
    for seq in random_sequences(count=20, min_len=0, max_len=30, seed=11):
        rna = Rna.from_string(seq, "random")
        first = nussinov.predict(rna)
        second = nussinov.predict(rna)

        assert validate_pairing(seq, first.pairing) == first.pairing
        assert not is_pseudoknot(first.pairing)
        assert first.pairing == second.pairing
