"""Argument handling shared by the alignment scripts."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure repository modules are importable when invoked as a script
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from chainalign.algorithms import PairwiseAligner  # pylint: disable=C0413
from chainalign.pairwise import aligner_from_config  # pylint: disable=C0413
from chainalign.types import (  # pylint: disable=C0413
    AffineGap,
    AlignerConfig,
    LinearGap,
    MatchMismatchScoring,
    get_matrix,
)
from chainalign.utils.serialization import load_aligner_config  # pylint: disable=C0413

from scripts.constants import (  # pylint: disable=C0413
    DEFAULT_CONFIG_YAML,
    DEFAULT_GAP_COST,
    DEFAULT_MATRIX,
    DEFAULT_MODE,
    MODES,
)


def add_aligner_arguments(parser: argparse.ArgumentParser) -> None:
    """Register the mode, scoring and gap options on ``parser``."""
    group = parser.add_argument_group("aligner")
    group.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"YAML aligner configuration, e.g. {DEFAULT_CONFIG_YAML}; overrides the options below.",
    )
    group.add_argument(
        "--mode",
        choices=MODES,
        default=DEFAULT_MODE,
        help=f"Alignment mode (default: {DEFAULT_MODE}).",
    )
    group.add_argument(
        "--matrix",
        default=DEFAULT_MATRIX,
        help=f"Substitution matrix known to Biopython, or NUC44 (default: {DEFAULT_MATRIX}).",
    )
    group.add_argument(
        "--match",
        type=float,
        default=None,
        help="Match score; with --mismatch replaces the matrix.",
    )
    group.add_argument(
        "--mismatch",
        type=float,
        default=None,
        help="Mismatch score; with --match replaces the matrix.",
    )
    group.add_argument(
        "--gap",
        type=float,
        default=None,
        help="Linear gap cost (non-positive).",
    )
    group.add_argument(
        "--gap-open",
        type=float,
        default=None,
        help="Affine gap open cost (non-positive); requires --gap-extend.",
    )
    group.add_argument(
        "--gap-extend",
        type=float,
        default=None,
        help="Affine gap extend cost (non-positive); requires --gap-open.",
    )
    group.add_argument(
        "--max-cells",
        type=int,
        default=None,
        help="Reject inputs whose DP grid exceeds this many cells.",
    )


def _as_number(value: float):
    """Keep integral CLI values as ints so scores print without decimals."""
    return int(value) if value is not None and float(value).is_integer() else value


def config_from_args(
    args: argparse.Namespace, parser: argparse.ArgumentParser
) -> AlignerConfig:
    """Build an AlignerConfig from parsed arguments, reporting misuse via ``parser``."""
    try:
        if args.config is not None:
            return load_aligner_config(args.config)

        if (args.match is None) != (args.mismatch is None):
            parser.error("--match and --mismatch must be given together")
        if args.match is not None:
            scoring = MatchMismatchScoring(
                _as_number(args.match), _as_number(args.mismatch)
            )
        else:
            scoring = get_matrix(args.matrix)

        if (args.gap_open is None) != (args.gap_extend is None):
            parser.error("--gap-open and --gap-extend must be given together")
        if args.gap_open is not None and args.gap is not None:
            parser.error("use either --gap or --gap-open/--gap-extend")
        if args.gap_open is not None:
            gap = AffineGap(_as_number(args.gap_open), _as_number(args.gap_extend))
        else:
            cost = args.gap if args.gap is not None else DEFAULT_GAP_COST
            gap = LinearGap(_as_number(cost))

        return AlignerConfig(
            mode=args.mode, scoring=scoring, gap=gap, max_cells=args.max_cells
        )
    except (ValueError, OSError) as exc:
        parser.error(str(exc))


def aligner_from_args(
    args: argparse.Namespace, parser: argparse.ArgumentParser
) -> PairwiseAligner:
    """Instantiate the aligner described by the command line."""
    return aligner_from_config(config_from_args(args, parser))


__all__ = ["add_aligner_arguments", "config_from_args", "aligner_from_args"]
