"""
End-to-end tests for `akutsu.predict`.

The folder returns the simple pseudoknot with the most pairs when it beats the
crossing-free optimum, and the crossing-free optimum otherwise.
"""
import pytest

from rnafoldml.analysis import is_pseudoknot, is_simple_pseudoknot
from rnafoldml.folding import akutsu, nussinov
from rnafoldml.io import to_dot_string
from rnafoldml.structures import Rna, validate_pairing


@pytest.mark.parametrize(
    "seq, expected",
    [
        ("AAACCCUUU", "(((...)))"),
        ("AUAU", "()()"),
        ("", ""),
    ],
)
def test_predict_falls_back_to_crossing_free(seq, expected):
    structure = akutsu.predict(Rna.from_string(seq, ""))
    assert to_dot_string(structure) == expected


def test_predict_known_pseudoknot():
    structure = akutsu.predict(Rna.from_string("GGACCUUG", ""))

    assert list(structure.pairing) == [4, 3, 6, 1, 0, None, 2, None]
    assert is_pseudoknot(structure.pairing)
    assert is_simple_pseudoknot(structure.pairing)


@pytest.mark.slow
def test_predict_is_never_worse_than_crossing_free(random_sequences):
    """
    The result is valid, never has fewer pairs than the Nussinov prediction,
    and is either crossing-free or a simple pseudoknot. Re-running gives the
    same pairing.
    """
    for seq in random_sequences(count=15, min_len=0, max_len=20, seed=13):
        rna = Rna.from_string(seq, "random")
        structure = akutsu.predict(rna, akutsu.AkutsuFoldingConfig(verbose=False))
        nested = nussinov.predict(rna)

        assert validate_pairing(seq, structure.pairing) == structure.pairing
        assert structure.num_pairs >= nested.num_pairs
        assert not is_pseudoknot(structure.pairing) or is_simple_pseudoknot(structure.pairing)
        if structure.num_pairs == nested.num_pairs:
            assert structure.pairing == nested.pairing
        assert akutsu.predict(rna).pairing == structure.pairing
