#!/usr/bin/env python3
"""Align every pair of records in a FASTA file and write a CSV summary."""

from __future__ import annotations

import argparse
import sys
from itertools import combinations
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

# Ensure repository modules are importable when invoked as a script
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from chainalign.algorithms import PairwiseAligner  # pylint: disable=C0413
from chainalign.evaluation.metrics import summarize  # pylint: disable=C0413
from chainalign.types import SequenceType  # pylint: disable=C0413
from chainalign.utils import read_fasta  # pylint: disable=C0413

from scripts.common import add_aligner_arguments, aligner_from_args  # pylint: disable=C0413
from scripts.constants import PRECISION, SUMMARIES_FOLDER  # pylint: disable=C0413


def summarize_pairs(
    records: List[SequenceType],
    aligner: PairwiseAligner,
    max_pairs: int | None = None,
) -> pd.DataFrame:
    """Align all record pairs and collect one summary row per pair."""
    rows: List[Dict[str, Any]] = []
    for index, (seq1, seq2) in enumerate(combinations(records, 2)):
        if max_pairs is not None and index >= max_pairs:
            break
        try:
            result = aligner.align(seq1, seq2)
        except (KeyError, ValueError) as exc:
            print(
                f"[skip] {seq1.identifier} vs {seq2.identifier}: {exc}",
                file=sys.stderr,
            )
            continue

        row: Dict[str, Any] = {
            "id1": seq1.identifier,
            "id2": seq2.identifier,
            "len1": len(seq1),
            "len2": len(seq2),
            "mode": result.mode.value,
            "start1": result.start1,
            "end1": result.end1,
            "start2": result.start2,
            "end2": result.end2,
        }
        row.update(summarize(result, aligner.scoring).as_row())
        rows.append(row)

    return pd.DataFrame(rows)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Align all record pairs of a FASTA file."
    )
    parser.add_argument("fasta", type=Path, help="Input FASTA file.")
    parser.add_argument(
        "--kind",
        choices=["nucleotide", "protein", "generic"],
        default="generic",
        help="Residue validation applied to FASTA records.",
    )
    parser.add_argument(
        "--max-pairs",
        type=int,
        default=None,
        help="Stop after this many pairs.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="CSV output path (default: results/summaries/<fasta stem>_<mode>.csv).",
    )
    add_aligner_arguments(parser)
    args = parser.parse_args()

    aligner = aligner_from_args(args, parser)
    try:
        records = read_fasta(args.fasta, kind=args.kind)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))
    if len(records) < 2:
        parser.error(f"{args.fasta} holds {len(records)} record(s); need at least two")

    n_pairs = len(records) * (len(records) - 1) // 2
    print(f"Aligning {n_pairs} pairs from {args.fasta} ({aligner.mode.value})")
    df = summarize_pairs(records, aligner, args.max_pairs)

    output = args.output or SUMMARIES_FOLDER / f"{args.fasta.stem}_{aligner.mode.value}.csv"
    output.parent.mkdir(parents=True, exist_ok=True)
    df.round(PRECISION).to_csv(output, index=False)
    print(f"Wrote {len(df)} rows to {output}")

    if not df.empty:
        print(df[["score", "identity", "gaps"]].describe().to_string())


if __name__ == "__main__":
    main()
