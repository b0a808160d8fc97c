from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from rnafoldml.errors import FastaFormatError, InvalidSequenceError
from rnafoldml.rules.constraints import is_rna_seq
from rnafoldml.utils.nucleotide_utils import normalize_seq

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Rna:
    """
    An RNA sequence together with its name.

    Attributes
    ----------
    seq : str
        The bases, over the alphabet {A, C, G, U}.
    name : str
        The sequence name (a FASTA record identifier).
    """
    seq: str
    name: str

    def __len__(self) -> int:
        return len(self.seq)

    @classmethod
    def from_string(cls, seq: str, name: str) -> Rna:
        """
        Builds a validated `Rna` value.

        Parameters
        ----------
        seq : str
            The sequence of bases. Must only contain A, C, G, U.
        name : str
            The sequence name. Must not contain whitespace.

        Returns
        -------
        Rna
            The validated sequence.

        Raises
        ------
        InvalidSequenceError
            If `seq` holds characters outside the alphabet, or `name` holds whitespace.
        """
        if not is_rna_seq(seq):
            bad = next(base for base in seq if not is_rna_seq(base))
            raise InvalidSequenceError(f"Invalid base {bad!r} in sequence {name!r}; only A,C,G,U are allowed.")

        if any(ch.isspace() for ch in name):
            raise InvalidSequenceError(f"Sequence name {name!r} must not contain whitespace.")

        return cls(seq=seq, name=name)

    @classmethod
    def from_fasta(cls, path: str | Path) -> List[Rna]:
        """
        Reads every valid RNA record from a FASTA file.

        Record names are the first whitespace-delimited token of each header
        line. Sequence lines are joined, stripped of whitespace, upper-cased and
        `T` is mapped to `U`. Records that still contain characters outside
        {A, C, G, U} are skipped with a warning.

        Parameters
        ----------
        path : str | Path
            The FASTA file to read.

        Returns
        -------
        List[Rna]
            The valid records in file order; empty for an empty file.

        Raises
        ------
        FastaFormatError
            If the file cannot be read, or holds sequence data before the first header.
        """
        path_obj = Path(path)
        try:
            text = path_obj.read_text(encoding="utf-8")
        except OSError as e:
            raise FastaFormatError(f"Cannot read FASTA file {path_obj}: {e}") from e

        records: List[Rna] = []
        for name, raw_seq in _iter_fasta_records(text, path_obj):
            seq = normalize_seq(raw_seq)
            if not is_rna_seq(seq):
                logger.warning(f"Skipping record '{name}' in {path_obj}: sequence contains non A,C,G,U characters.")
                continue
            records.append(cls(seq=seq, name=name))

        logger.info(f"Loaded {len(records)} RNA record(s) from {path_obj}")
        return records


def _iter_fasta_records(text: str, source: Path) -> List[Tuple[str, str]]:
    """Splits FASTA text into `(name, raw_sequence)` tuples."""
    records: List[Tuple[str, str]] = []
    name: Optional[str] = None
    chunks: List[str] = []

    for line_no, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith(";"):
            continue

        if stripped.startswith(">"):
            if name is not None:
                records.append((name, "".join(chunks)))
            header = stripped[1:].split()
            name = header[0] if header else ""
            chunks = []
        elif name is None:
            raise FastaFormatError(f"{source}:{line_no}: sequence data before the first '>' header.")
        else:
            chunks.append(stripped)

    if name is not None:
        records.append((name, "".join(chunks)))

    return records
