"""
Unit tests for the base-pairing rules and alphabet checks.

Only canonical Watson-Crick pairs (A-U, C-G) are admitted; the G-U wobble pair
is deliberately excluded. Bases are compared exactly as given, so callers must
normalize case and T/U beforehand.
"""
import pytest

from rnafoldml.rules.constraints import RNA_ALPHABET, can_pair, is_rna_seq


def test_can_pair_allows_watson_crick_in_both_orientations():
    """
    Tests that `can_pair` accepts every Watson-Crick pair in either order.
    """
    allowed = [("A", "U"), ("U", "A"), ("G", "C"), ("C", "G")]
    for i, j in allowed:
        assert can_pair(i, j) is True


@pytest.mark.parametrize("base_i, base_j", [("G", "U"), ("U", "G")])
def test_can_pair_rejects_wobble(base_i, base_j):
    """
    The G-U wobble pair is not part of the pairing model.
    """
    assert can_pair(base_i, base_j) is False


def test_can_pair_rejects_invalid_inputs():
    """
    Ensures that `can_pair` returns False for disallowed pairs and invalid inputs.
    """
    # Non-string inputs.
    assert can_pair(None, "A") is False
    assert can_pair("A", 3) is False
    # Inputs that are not single characters.
    assert can_pair("AU", "A") is False
    assert can_pair("A", "") is False
    # Unnormalized input is not silently fixed.
    assert can_pair("a", "u") is False
    assert can_pair("A", "T") is False
    # Disallowed canonical base combinations.
    assert can_pair("A", "G") is False
    assert can_pair("C", "U") is False
    assert can_pair("A", "A") is False


def test_is_rna_seq():
    """
    `is_rna_seq` accepts only strings over {A, C, G, U}, including the empty string.
    """
    assert RNA_ALPHABET == frozenset("ACGU")
    assert is_rna_seq("ACGUUGCA")
    assert is_rna_seq("")
    assert not is_rna_seq("ACGT")
    assert not is_rna_seq("acgu")
    assert not is_rna_seq("AC GU")
    assert not is_rna_seq(None)
