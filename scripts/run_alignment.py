#!/usr/bin/env python3
"""Align two sequences and print the alignment."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Tuple

# Ensure repository modules are importable when invoked as a script
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from chainalign.types import GenericSequence  # pylint: disable=C0413
from chainalign.utils import (  # pylint: disable=C0413
    format_alignment,
    read_fasta,
    save_results_yaml,
    write_pairwise_fasta,
)

from scripts.common import add_aligner_arguments, aligner_from_args  # pylint: disable=C0413
from scripts.constants import ALIGNMENTS_FOLDER, DEFAULT_LINE_WIDTH  # pylint: disable=C0413


def _load_pair(
    args: argparse.Namespace, parser: argparse.ArgumentParser
) -> Tuple[Any, Any]:
    """Return the two sequences named on the command line."""
    if args.fasta is not None:
        try:
            records = read_fasta(args.fasta, kind=args.kind, ids=args.ids)
        except (OSError, ValueError) as exc:
            parser.error(str(exc))
        if len(records) < 2:
            parser.error(
                f"{args.fasta} holds {len(records)} matching record(s); need two"
            )
        return records[0], records[1]

    if args.seq1 is None or args.seq2 is None:
        parser.error("give two sequences or --fasta")
    return (
        GenericSequence(identifier="seq1", residues=tuple(args.seq1)),
        GenericSequence(identifier="seq2", residues=tuple(args.seq2)),
    )


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Align two sequences (inline or from a FASTA file)."
    )
    parser.add_argument("seq1", nargs="?", help="First sequence.")
    parser.add_argument("seq2", nargs="?", help="Second sequence.")
    parser.add_argument(
        "-f",
        "--fasta",
        type=Path,
        default=None,
        help="FASTA file; the first two (or the --ids) records are aligned.",
    )
    parser.add_argument(
        "--ids",
        nargs=2,
        default=None,
        help="Record identifiers to align from --fasta.",
    )
    parser.add_argument(
        "--kind",
        choices=["nucleotide", "protein", "generic"],
        default="generic",
        help="Residue validation applied to FASTA records.",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_LINE_WIDTH,
        help=f"Columns per block (default: {DEFAULT_LINE_WIDTH}).",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help=f"Also write FASTA and YAML output under {ALIGNMENTS_FOLDER}.",
    )
    add_aligner_arguments(parser)
    args = parser.parse_args()

    aligner = aligner_from_args(args, parser)
    seq1, seq2 = _load_pair(args, parser)

    print(f"Aligning {seq1.identifier} ({len(seq1)}) vs {seq2.identifier} ({len(seq2)})")
    try:
        result = aligner.align(seq1, seq2)
    except (KeyError, ValueError) as exc:
        parser.error(str(exc))

    print(format_alignment(result, width=args.width, scoring=aligner.scoring))

    if args.save:
        stem = f"{seq1.identifier}_vs_{seq2.identifier}_{result.mode.value}"
        fasta_path = ALIGNMENTS_FOLDER / f"{stem}.fa"
        yaml_path = ALIGNMENTS_FOLDER / f"{stem}.yaml"
        write_pairwise_fasta(fasta_path, result)
        save_results_yaml([result], yaml_path)
        print(f"Wrote {fasta_path}")
        print(f"Wrote {yaml_path}")


if __name__ == "__main__":
    main()
