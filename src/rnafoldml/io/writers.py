"""
Text renderings of secondary structures: dot-bracket strings, `.dot` files
and `.ct` connectivity tables.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, List, Tuple, Union

from rnafoldml.structures import Pair, SecondaryStructure

logger = logging.getLogger(__name__)

# Layers → bracket glyphs
BRACKETS: List[Tuple[str, str]] = [('(', ')'), ('[', ']'), ('{', '}'), ('<', '>')]

PathLike = Union[str, Path]


def assign_layers(pairs: List[Pair]) -> Dict[Tuple[int, int], int]:
    """
    Greedily places pairs on bracket layers so that no two pairs on the same
    layer cross.

    Pairs are visited by 5' index and each goes to the lowest layer holding
    no pair it crosses. A crossing-free structure therefore uses layer 0 only.

    Parameters
    ----------
    pairs : List[Pair]
        Base pairs with `base_i < base_j`.

    Returns
    -------
    Dict[Tuple[int, int], int]
        Layer index for every pair, keyed by `(i, j)`.
    """
    layers: List[List[Pair]] = []
    pair_layer: Dict[Tuple[int, int], int] = {}

    for pair in sorted(pairs, key=lambda pr: (pr.base_i, pr.base_j)):
        for layer, members in enumerate(layers):
            if not any(pair.crosses(other) for other in members):
                members.append(pair)
                pair_layer[pair.as_tuple()] = layer
                break
        else:
            layers.append([pair])
            pair_layer[pair.as_tuple()] = len(layers) - 1

    return pair_layer


def to_dot_string(structure: SecondaryStructure, multilayer: bool = False) -> str:
    """
    Renders a structure in dot-bracket notation.

    Each paired position gets `(` when it is the lower index of its pair and
    `)` when it is the higher one; unpaired positions get `.`. The plain form
    is ambiguous for pseudoknots. With `multilayer=True` crossing pairs are
    spread over the bracket styles `()`, `[]`, `{}`, `<>` (see `assign_layers`);
    more than four layers wrap around.

    Parameters
    ----------
    structure : SecondaryStructure
        The structure to render.
    multilayer : bool
        If True, use distinct bracket styles for crossing pairs.

    Returns
    -------
    str
        One character per position.
    """
    pairs = structure.pair_list()
    pair_layer = assign_layers(pairs) if multilayer else {}

    chars = ['.'] * len(structure)
    for pr in pairs:
        layer = pair_layer.get(pr.as_tuple(), 0)
        br_open, br_close = BRACKETS[layer % len(BRACKETS)]
        chars[pr.base_i] = br_open
        chars[pr.base_j] = br_close

    return ''.join(chars)


def _prepare_target(path: PathLike) -> Path:
    target = Path(path)
    if target.exists():
        logger.warning(f"Overwriting existing file: {target}")
    target.parent.mkdir(parents=True, exist_ok=True)
    return target


def write_dot(path: PathLike, structure: SecondaryStructure, multilayer: bool = False) -> Path:
    """
    Writes a structure as a three-line `.dot` file: `>name`, sequence, dot-bracket.

    Parameters
    ----------
    path : str | Path
        Destination file. Parent directories are created as needed.
    structure : SecondaryStructure
        The structure to write.
    multilayer : bool
        Render crossing pairs with distinct brackets.

    Returns
    -------
    Path
        The written file.
    """
    target = _prepare_target(path)
    lines = [f">{structure.name}", structure.seq, to_dot_string(structure, multilayer=multilayer)]
    target.write_text("\n".join(lines) + "\n", encoding="utf-8")
    logger.info(f"Wrote dot-bracket file: {target}")

    return target


def to_ct_lines(structure: SecondaryStructure) -> List[str]:
    """
    Connectivity-table lines for `structure`.

    The header is `n name`. Each following line describes one position with
    1-based indices: position, base, previous position, next position
    (0 for the last one), partner (0 if unpaired) and the position again.
    """
    n = len(structure)
    lines = [f"{n} {structure.name}"]

    for i, (base, partner) in enumerate(zip(structure.seq, structure.pairing)):
        pos = i + 1
        next_pos = pos + 1 if pos < n else 0
        partner_pos = partner + 1 if partner is not None else 0
        lines.append(f"{pos} {base} {pos - 1} {next_pos} {partner_pos} {pos}")

    return lines


def write_ct(path: PathLike, structure: SecondaryStructure) -> Path:
    """
    Writes a structure as a `.ct` connectivity table (see `to_ct_lines`).

    Parameters
    ----------
    path : str | Path
        Destination file. Parent directories are created as needed.
    structure : SecondaryStructure
        The structure to write.

    Returns
    -------
    Path
        The written file.
    """
    target = _prepare_target(path)
    target.write_text("\n".join(to_ct_lines(structure)) + "\n", encoding="utf-8")
    logger.info(f"Wrote connectivity table: {target}")

    return target
