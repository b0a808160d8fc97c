"""
Unit tests for the `Rna` sequence value and its loaders.

FASTA inputs are written to `tmp_path`, covering multi-line records, comments,
normalization (case, T to U), skipped invalid records and malformed files.
"""
import logging

import pytest

from rnafoldml.errors import FastaFormatError, InvalidSequenceError
from rnafoldml.structures import Rna


# ---------------------- from_string ----------------------

def test_from_string_builds_value():
    rna = Rna.from_string("AAACCCUUU", "AAA")
    assert rna.seq == "AAACCCUUU"
    assert rna.name == "AAA"
    assert len(rna) == 9


def test_from_string_accepts_empty_sequence():
    """
    The empty sequence is a valid RNA of length zero.
    """
    rna = Rna.from_string("", "Empty")
    assert rna.seq == ""
    assert len(rna) == 0


@pytest.mark.parametrize("seq", ["ACGT", "acgu", "AC GU", "ACGN"])
def test_from_string_rejects_invalid_bases(seq):
    """
    Only the upper-case RNA alphabet is accepted; no normalization is applied.
    """
    with pytest.raises(InvalidSequenceError):
        Rna.from_string(seq, "bad")


def test_from_string_rejects_whitespace_in_name():
    with pytest.raises(InvalidSequenceError):
        Rna.from_string("ACGU", "two words")


def test_invalid_sequence_error_is_a_value_error():
    """
    Every library error can be caught as a `ValueError`.
    """
    with pytest.raises(ValueError):
        Rna.from_string("XYZ", "bad")


# ---------------------- from_fasta ----------------------

@pytest.fixture
def write_fasta(tmp_path):
    """
    Provides a helper that writes text to a FASTA file in `tmp_path`.
    """
    def _write(text: str, filename: str = "input.fasta"):
        path = tmp_path / filename
        path.write_text(text, encoding="utf-8")
        return path

    return _write


def test_from_fasta_single_record(write_fasta):
    path = write_fasta(">AAA\nAAACCCUUU\n")
    records = Rna.from_fasta(path)

    assert len(records) == 1
    assert records[0].name == "AAA"
    assert records[0].seq == "AAACCCUUU"


def test_from_fasta_multiple_multiline_records(write_fasta):
    """
    Sequence lines are joined, the name is the first header token, and
    comment and blank lines are ignored.
    """
    text = (
        "; a comment line\n"
        ">Sequence_1 first record\n"
        "AAAGCG\n"
        "GUUUGU\n"
        "\n"
        ">Sequence_2\n"
        "ccacu\n"
        ">Sequence_3\n"
        "GGTTAA\n"
        ">Sequence_4\n"
        "ACGU\n"
    )
    records = Rna.from_fasta(write_fasta(text))

    assert [r.name for r in records] == ["Sequence_1", "Sequence_2", "Sequence_3", "Sequence_4"]
    assert records[0].seq == "AAAGCGGUUUGU"
    # Lower case is upper-cased and T is mapped to U.
    assert records[1].seq == "CCACU"
    assert records[2].seq == "GGUUAA"


def test_from_fasta_empty_file(write_fasta):
    assert Rna.from_fasta(write_fasta("")) == []


def test_from_fasta_skips_invalid_records_with_warning(write_fasta, caplog):
    """
    A record with characters outside the alphabet is dropped and logged; the
    remaining records are still returned.
    """
    path = write_fasta(">good\nACGU\n>bad\nACGNNU\n>also_good\nGGCC\n")

    with caplog.at_level(logging.WARNING, logger="rnafoldml.structures.rna"):
        records = Rna.from_fasta(path)

    assert [r.name for r in records] == ["good", "also_good"]
    assert any("bad" in message for message in caplog.messages)


def test_from_fasta_rejects_data_before_header(write_fasta):
    with pytest.raises(FastaFormatError):
        Rna.from_fasta(write_fasta("ACGU\n>late_header\nACGU\n"))


def test_from_fasta_missing_file(tmp_path):
    with pytest.raises(FastaFormatError):
        Rna.from_fasta(tmp_path / "does_not_exist.fasta")
