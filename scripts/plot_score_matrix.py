#!/usr/bin/env python3
"""Plot the filled score matrix of a pairwise alignment with its traceback path."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Tuple

import numpy as np
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # pylint: disable=C0413

# Ensure repo importability
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from chainalign.types import AlignmentResult, EditOp, GenericSequence  # pylint: disable=C0413

from scripts.common import add_aligner_arguments, aligner_from_args  # pylint: disable=C0413
from scripts.constants import (  # pylint: disable=C0413
    PATH_COLOR,
    PLOT_DPI,
    PLOT_TITLE_FONTSIZE,
    PLOT_XLABEL_FONTSIZE,
    PLOT_YLABEL_FONTSIZE,
    SCORE_MATRIX_FOLDER,
)


def traceback_cells(result: AlignmentResult) -> List[Tuple[int, int]]:
    """Grid cells visited by the core, from the stop cell to the start cell."""
    i, j = result.start1, result.start2
    cells = [(i, j)]
    for op in result.operations:
        if op.op is EditOp.MATCH:
            i, j = i + 1, j + 1
        elif op.op is EditOp.DELETE:
            i += 1
        else:
            j += 1
        cells.append((i, j))
    return cells


def plot_score_matrix(
    matrix: np.ndarray,
    result: AlignmentResult,
    out_path: Path,
    dpi: int = PLOT_DPI,
) -> None:
    """Save a heatmap of ``matrix`` with the traceback path of ``result``."""
    arr = np.where(np.isfinite(matrix), matrix, np.nan)

    fig, ax = plt.subplots(1, 1, figsize=(7, 6))
    im = ax.imshow(arr, origin="upper", aspect="auto", cmap="viridis")
    fig.colorbar(im, ax=ax, label="best cell score")

    cells = traceback_cells(result)
    rows = [i for i, _ in cells]
    cols = [j for _, j in cells]
    ax.plot(cols, rows, color=PATH_COLOR, linewidth=1.5, marker="o", markersize=3)

    seq1 = "".join(str(x) for x in result.aligned_portion()[0])
    labels1 = [""] + [str(x) for x in result.sequence1]
    labels2 = [""] + [str(y) for y in result.sequence2]
    if len(labels1) <= 60 and len(labels2) <= 60:
        ax.set_yticks(range(len(labels1)))
        ax.set_yticklabels(labels1)
        ax.set_xticks(range(len(labels2)))
        ax.set_xticklabels(labels2)

    ax.set_ylabel("i (position in sequence 1)", fontsize=PLOT_YLABEL_FONTSIZE)
    ax.set_xlabel("j (position in sequence 2)", fontsize=PLOT_XLABEL_FONTSIZE)
    ax.set_title(
        f"{out_path.stem} (score {result.score}, core {seq1 or 'empty'})",
        fontsize=PLOT_TITLE_FONTSIZE,
    )
    fig.tight_layout()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_path, dpi=dpi)
    plt.close(fig)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Plot the DP score matrix and traceback path for two sequences."
    )
    parser.add_argument("seq1", help="First sequence.")
    parser.add_argument("seq2", help="Second sequence.")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output image (default: results/score_matrices/<mode>_<seq1>_<seq2>.png).",
    )
    parser.add_argument("--dpi", type=int, default=PLOT_DPI, help="Figure DPI.")
    add_aligner_arguments(parser)
    args = parser.parse_args()

    aligner = aligner_from_args(args, parser)
    seq1 = GenericSequence(identifier="seq1", residues=tuple(args.seq1))
    seq2 = GenericSequence(identifier="seq2", residues=tuple(args.seq2))

    try:
        result = aligner.align(seq1, seq2)
        matrix = aligner.score_matrix(seq1, seq2)
    except (KeyError, ValueError) as exc:
        parser.error(str(exc))

    out_path = args.output or (
        SCORE_MATRIX_FOLDER / f"{aligner.mode.value}_{args.seq1[:20]}_{args.seq2[:20]}.png"
    )
    plot_score_matrix(matrix, result, out_path, dpi=args.dpi)
    print(f"Wrote {out_path}")


if __name__ == "__main__":
    main()
