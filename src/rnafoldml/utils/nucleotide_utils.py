def normalize_base(base_raw: str) -> str:
    """
    Upper-case a nucleotide base and map T->U so RNA logic can be applied uniformly.

    Parameters
    ----------
    base_raw : str
        Raw single-character nucleotide base.

    Returns
    -------
    str
        Normalized base. Characters outside the nucleotide alphabet are
        upper-cased and otherwise returned unchanged.
    """
    if not isinstance(base_raw, str):
        return base_raw

    if len(base_raw) != 1:
        return base_raw

    base_norm = base_raw.upper()

    return "U" if base_norm == "T" else base_norm


def normalize_seq(raw_sequence: str) -> str:
    """
    Normalize a raw sequence string for RNA processing.

    All whitespace is removed (sequences may be wrapped over several lines),
    every base is upper-cased and `T` is mapped to `U`. No validation of the
    alphabet is done here.

    Parameters
    ----------
    raw_sequence : str
        The raw sequence text.

    Returns
    -------
    str
        The normalized sequence.
    """
    return "".join(normalize_base(base) for base in raw_sequence if not base.isspace())
