#!/usr/bin/env python3
"""
Predict RNA secondary structure (crossing-free or simple pseudoknot) from the command line.

This script folds one RNA sequence, or every record of a FASTA file, with
either the crossing-free Nussinov folder or the simple-pseudoknot-aware Akutsu
folder, and reports the structure with its pseudoknot classification.

Examples:
  - python predict_rna.py "GGGAAACCCAAAGGGUUUCCC"
  - python predict_rna.py --engine akutsu --multilayer --json "GGACCUUG"
  - python predict_rna.py -vv --fasta /path/to/input.fa --ct out/structure.ct
  - python predict_rna.py --config /path/to/defaults.yaml "ACGU..."

"""

# --- Standard Library Imports ---
from __future__ import annotations
import argparse
import json
import sys
import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Local Application Imports ---
from rnafoldml.errors import RnaFoldError, InvalidSequenceError
from rnafoldml.utils.logging_utils import setup_logger, verbosity_to_level, DEFAULT_LOG_DIR
from rnafoldml.utils.config_utils import load_cli_defaults
from rnafoldml.utils.nucleotide_utils import normalize_seq
from rnafoldml.structures import Rna, SecondaryStructure
from rnafoldml.analysis import is_pseudoknot, is_simple_pseudoknot
from rnafoldml.folding import akutsu, nussinov
from rnafoldml.io import to_dot_string, write_ct, write_dot

# Set up module logger
logger = logging.getLogger(__name__)

ENGINES = ("nussinov", "akutsu")


# --------------------------
# Logging Configuration
# --------------------------
def setup_cli_logging(verbose_level: int, log_file: Optional[str] = None) -> None:
    """
    Configures logging for the application based on command-line arguments.

    Parameters
    ----------
    verbose_level : int
        The verbosity level: 0 for WARNING, 1 for INFO, 2 for DEBUG.
    log_file : Optional[str]
        The path to a specific log file. If not provided, a default timestamped
        log file is created in the `var/log/` directory when verbosity is > 0.
    """
    log_level = verbosity_to_level(verbose_level)

    should_log_to_file = (verbose_level > 0) or (log_file is not None)

    loggers_to_configure = [
        __name__,
        "rnafoldml.folding",
        "rnafoldml.structures",
        "rnafoldml.analysis",
        "rnafoldml.io",
    ]

    for logger_name in loggers_to_configure:
        setup_logger(
            logger_name,
            level=log_level,
            log_file=log_file,
            enable_file_logging=should_log_to_file,
            enable_tqdm=True
        )

    if should_log_to_file and log_file is None:
        logger.info(f"Logs will be saved to: {DEFAULT_LOG_DIR.resolve()}")


# --------------------------
# Helpers
# --------------------------
def load_inputs(sequence: Optional[str], fasta: Optional[str], name: str) -> List[Rna]:
    """
    Builds the list of sequences to fold from the positional argument or a FASTA file.

    Parameters
    ----------
    sequence : Optional[str]
        Raw sequence text from the command line.
    fasta : Optional[str]
        Path to a FASTA file.
    name : str
        Name given to a command-line sequence.

    Returns
    -------
    List[Rna]
        The validated inputs.

    Raises
    ------
    InvalidSequenceError
        If the command-line sequence is empty or has invalid characters, or
        the FASTA file holds no valid record.
    FastaFormatError
        If the FASTA file is unreadable or malformed.
    """
    if fasta is not None:
        records = Rna.from_fasta(fasta)
        if not records:
            raise InvalidSequenceError(f"No valid RNA records found in {fasta}.")
        return records

    logger.debug(f"Validating sequence: {sequence[:50]}{'...' if len(sequence) > 50 else ''}")
    normalized_sequence = normalize_seq(sequence)
    if not normalized_sequence:
        raise InvalidSequenceError("Sequence is empty.")

    rna = Rna.from_string(normalized_sequence, name)
    logger.info(f"Sequence validated: length={len(rna)}")
    return [rna]


def fold(rna: Rna, engine: str, verbose: bool) -> SecondaryStructure:
    """
    Runs the requested folder on one sequence.

    Parameters
    ----------
    rna : Rna
        The sequence to fold.
    engine : str
        `"nussinov"` or `"akutsu"`.
    verbose : bool
        Show progress bars.

    Returns
    -------
    SecondaryStructure
        The predicted structure.
    """
    logger.info("=" * 60)
    logger.info(f"Folding '{rna.name}' with the {engine} algorithm")
    logger.info("=" * 60)
    start_time = time.perf_counter()

    if engine == "akutsu":
        structure = akutsu.predict(rna, akutsu.AkutsuFoldingConfig(verbose=verbose))
    else:
        structure = nussinov.predict(rna, nussinov.NussinovFoldingConfig(verbose=verbose))

    elapsed = time.perf_counter() - start_time
    logger.info(f"Prediction completed in {elapsed:.2f}s")

    return structure


def summarize(structure: SecondaryStructure, engine: str, multilayer: bool) -> Dict[str, Any]:
    """Collects the values reported for one predicted structure."""
    return {
        "engine": engine,
        "name": structure.name,
        "sequence": structure.seq,
        "dot_bracket": to_dot_string(structure, multilayer=multilayer),
        "num_pairs": structure.num_pairs,
        "is_pseudoknot": is_pseudoknot(structure.pairing),
        "is_simple_pseudoknot": is_simple_pseudoknot(structure.pairing),
        "length": len(structure),
    }


def output_path(path: str, name: str, multiple: bool) -> Path:
    """
    Destination for one record's output file; with several records the record
    name is appended to the file stem.
    """
    target = Path(path)
    if not multiple:
        return target
    return target.with_name(f"{target.stem}_{name}{target.suffix}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Predict RNA secondary structure by maximum base pairing.")
    parser.add_argument("sequence", nargs="?", default=None,
                        help="RNA sequence (A,C,G,U; T will be converted to U)")
    parser.add_argument("--fasta", default=None,
                        help="Fold every record of this FASTA file instead of a single sequence.")
    parser.add_argument("--name", default="sequence",
                        help="Name of the command-line sequence (default: sequence).")
    parser.add_argument("--engine", choices=ENGINES, default="nussinov",
                        help="Which predictor to use (default: nussinov).")
    parser.add_argument("--json", action="store_true",
                        help="Emit JSON instead of human-readable text.")
    parser.add_argument("--multilayer", action="store_true",
                        help="Render crossing pairs with [], {}, <> brackets.")
    parser.add_argument("--dot", default=None,
                        help="Also write the structure to this .dot file.")
    parser.add_argument("--ct", default=None,
                        help="Also write the structure to this .ct file.")
    parser.add_argument("--config", default=None,
                        help="YAML file with default values for engine, json, multilayer, verbose, log_file.")

    # Logging arguments
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase verbosity (-v=INFO, -vv=DEBUG)")
    parser.add_argument("--log-file", dest="log_file", default=None,
                        help="Path to log file (default: var/log/<logger>_TIMESTAMP.log if verbose)")
    parser.add_argument("--quiet", action="store_true",
                        help="Suppress all output except final result")
    return parser


# --------------------------
# Command-Line Interface
# --------------------------
def main(argv=None) -> int:
    """
    Parses command-line arguments and orchestrates the RNA folding prediction.
    """
    parser = build_parser()

    # Config values only replace defaults; explicit flags still win.
    pre_args, _ = parser.parse_known_args(argv)
    if pre_args.config is not None:
        try:
            parser.set_defaults(**load_cli_defaults(pre_args.config))
        except (RnaFoldError, OSError) as e:
            print(f"Error: invalid config file: {e}", file=sys.stderr)
            return 2

    cli_args = parser.parse_args(argv)
    if cli_args.engine not in ENGINES:
        print(f"Error: unknown engine '{cli_args.engine}' (choose from {', '.join(ENGINES)})", file=sys.stderr)
        return 2

    # --- Setup ---
    verbose_level = 0 if cli_args.quiet else cli_args.verbose
    setup_cli_logging(verbose_level, cli_args.log_file)

    logger.info("=" * 60)
    logger.info("RNA Structure Prediction CLI")
    logger.info("=" * 60)

    if (cli_args.sequence is None) == (cli_args.fasta is None):
        logger.error("Exactly one of a sequence or --fasta must be given.")
        print("Error: give either a sequence or --fasta PATH.", file=sys.stderr)
        return 2

    try:
        inputs = load_inputs(cli_args.sequence, cli_args.fasta, cli_args.name)
    except RnaFoldError as e:
        logger.error(f"Input validation failed: {e}")
        if not cli_args.json:
            print(f"Error: {e}", file=sys.stderr)
        return 2

    # --- Prediction ---
    show_progress = verbose_level > 0
    multiple = len(inputs) > 1
    summaries: List[Dict[str, Any]] = []

    try:
        for rna in inputs:
            structure = fold(rna, cli_args.engine, show_progress)
            summaries.append(summarize(structure, cli_args.engine, cli_args.multilayer))

            if cli_args.dot is not None:
                write_dot(output_path(cli_args.dot, rna.name, multiple), structure, multilayer=cli_args.multilayer)
            if cli_args.ct is not None:
                write_ct(output_path(cli_args.ct, rna.name, multiple), structure)
    except Exception as e:
        logger.error(f"Prediction failed: {e}", exc_info=True)
        if not cli_args.json:
            print(f"Prediction failed: {e}", file=sys.stderr)
        return 1

    logger.info("=" * 60)
    logger.info("Prediction successful")
    logger.info("=" * 60)

    # --- Output ---
    if cli_args.json:
        payload = summaries if cli_args.fasta is not None else summaries[0]
        print(json.dumps(payload, indent=2))
    else:
        for summary in summaries:
            print(f"Engine : {summary['engine']}")
            print(f"Name : {summary['name']}")
            print(f"Sequence Length : {summary['length']}")
            print(f"Sequence : {summary['sequence']}")
            print(f"Dot-Bracket Notation: {summary['dot_bracket']}")
            print(f"Base Pairs : {summary['num_pairs']}")
            print(f"Pseudoknot : {summary['is_pseudoknot']}")
            print(f"Simple Pseudoknot : {summary['is_simple_pseudoknot']}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
