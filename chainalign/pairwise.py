"""Convenience entry points for pairwise alignment."""

from __future__ import annotations

from typing import Any, Optional, Union

from chainalign.algorithms.base import PairwiseAligner
from chainalign.algorithms.modes import ALIGNERS
from chainalign.types import AlignerConfig, AlignmentMode, AlignmentResult
from chainalign.types.alignment import view_alignment
from chainalign.types.parameters import ScoringFunction


def get_aligner(
    mode: Union[str, AlignmentMode],
    scoring: ScoringFunction,
    gap: Any,
    max_cells: Optional[int] = None,
) -> PairwiseAligner:
    """Instantiate the aligner registered for ``mode``."""
    aligner_cls = ALIGNERS[AlignmentMode.parse(mode)]
    return aligner_cls(scoring, gap, max_cells=max_cells)


def aligner_from_config(config: AlignerConfig) -> PairwiseAligner:
    """Instantiate the aligner described by ``config``."""
    return get_aligner(config.mode, config.scoring, config.gap, config.max_cells)


def align(
    mode: Union[str, AlignmentMode],
    scoring: ScoringFunction,
    gap: Any,
    seq1: Any,
    seq2: Any,
    *,
    max_cells: Optional[int] = None,
) -> AlignmentResult:
    """Align ``seq1`` against ``seq2``.

    Args:
        mode: ``"global"``, ``"local"``, ``"semiglobal"`` or an AlignmentMode
        scoring: Callable returning the substitution score of two elements
        gap: LinearGap/AffineGap, a number (linear) or an (open, extend) pair
        seq1: First sequence (str, list, tuple or SequenceType)
        seq2: Second sequence
        max_cells: Optional upper bound on the DP grid size

    Returns:
        AlignmentResult holding the score, core columns and spans.

    Example:
        >>> from chainalign import NUC44, align, view_alignment
        >>> view_alignment(align("local", NUC44, -10, "AATTTAA", "AAAA"))
        ('AATTT--AA', '-----AAAA')
    """
    aligner = get_aligner(mode, scoring, gap, max_cells=max_cells)
    return aligner.align(seq1, seq2)


__all__ = ["align", "get_aligner", "aligner_from_config", "view_alignment"]
