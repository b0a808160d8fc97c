from __future__ import annotations


class RnaFoldError(ValueError):
    """Base class for every error raised by `rnafoldml`."""


class InvalidSequenceError(RnaFoldError):
    """A sequence contains characters outside {A, C, G, U}, or a name contains whitespace."""


class InvalidStructureError(RnaFoldError):
    """
    A pairing violates the secondary structure representation invariant.

    Covers length mismatch, self-pairing, asymmetric partners, out-of-range
    partners and chemically invalid (non Watson-Crick) pairs.
    """


class ConstructionConflictError(RnaFoldError):
    """The same index was used by more than one pair when building a pairing."""


class LengthMismatchError(RnaFoldError):
    """Two structures that must have equal sequence length do not."""


class FastaFormatError(RnaFoldError):
    """A FASTA file is unreadable or malformed."""


class ConfigError(RnaFoldError):
    """A YAML configuration file holds unknown keys or values of the wrong type."""
