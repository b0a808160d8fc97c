"""
Unit tests for the structure serializers: dot-bracket strings, `.dot` and `.ct` files.
"""
import logging

import pytest

from rnafoldml.io import assign_layers, to_ct_lines, to_dot_string, write_ct, write_dot
from rnafoldml.structures import Pair, Rna, SecondaryStructure


@pytest.fixture
def hairpin():
    return SecondaryStructure.make(Rna.from_string("AAACCCUUU", "AAA"), [(0, 8), (1, 7), (2, 6)])


@pytest.fixture
def pseudoknot():
    return SecondaryStructure.make(Rna.from_string("GGACCUUG", "pk"), [(0, 4), (1, 3), (2, 6)])


# ---------------------- dot-bracket ----------------------

def test_to_dot_string_nested(hairpin):
    assert to_dot_string(hairpin) == "(((...)))"
    assert to_dot_string(hairpin, multilayer=True) == "(((...)))"


def test_to_dot_string_pseudoknot_single_layer(pseudoknot):
    """
    The plain form only marks which end of a pair each position is.
    """
    assert to_dot_string(pseudoknot) == "((()).)."


def test_to_dot_string_pseudoknot_multilayer(pseudoknot):
    assert to_dot_string(pseudoknot, multilayer=True) == "(([)).]."


def test_to_dot_string_empty():
    empty = SecondaryStructure.make(Rna.from_string("", "Empty"), [])
    assert to_dot_string(empty) == ""


def test_assign_layers_uses_lowest_free_layer():
    pairs = [Pair(0, 4), Pair(2, 6), Pair(3, 8), Pair(5, 7)]
    layers = assign_layers(pairs)

    assert layers[(0, 4)] == 0
    assert layers[(2, 6)] == 1
    # (3, 8) crosses (0, 4) and (2, 6).
    assert layers[(3, 8)] == 2
    # (5, 7) crosses (2, 6) only.
    assert layers[(5, 7)] == 0


# ---------------------- files ----------------------

def test_write_dot(tmp_path, hairpin):
    path = write_dot(tmp_path / "out" / "hairpin.dot", hairpin)

    assert path.read_text(encoding="utf-8").splitlines() == [">AAA", "AAACCCUUU", "(((...)))"]


def test_to_ct_lines(pseudoknot):
    lines = to_ct_lines(pseudoknot)

    assert lines[0] == "8 pk"
    assert lines[1] == "1 G 0 2 5 1"
    assert lines[6] == "6 U 5 7 0 6"
    # The last position has no successor.
    assert lines[8] == "8 G 7 0 0 8"
    assert len(lines) == 9


def test_write_ct(tmp_path, hairpin):
    path = write_ct(tmp_path / "hairpin.ct", hairpin)
    lines = path.read_text(encoding="utf-8").splitlines()

    assert lines[0] == "9 AAA"
    assert lines[1] == "1 A 0 2 9 1"
    assert lines[9] == "9 U 8 0 1 9"


def test_overwrite_logs_warning(tmp_path, hairpin, caplog):
    target = tmp_path / "hairpin.ct"
    target.write_text("old", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="rnafoldml.io.writers"):
        write_ct(target, hairpin)

    assert any("Overwriting" in message for message in caplog.messages)
    assert target.read_text(encoding="utf-8").startswith("9 AAA")
