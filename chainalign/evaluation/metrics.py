"""Descriptive statistics over the core of an alignment."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from chainalign.types import AlignmentResult, AlignmentStats, EditOp
from chainalign.types.alignment import elements_of
from chainalign.types.parameters import GapModel, ScoringFunction, coerce_gap_model


def _safe_divide(numerator: float, denominator: float) -> float:
    """Divide with zero-denominator protection."""
    return numerator / denominator if denominator else 0.0


def _gap_runs(result: AlignmentResult) -> List[Tuple[EditOp, int]]:
    """Maximal runs of consecutive gap columns of the same kind in the core."""
    runs: List[Tuple[EditOp, int]] = []
    previous: Optional[EditOp] = None
    for op in result.operations:
        if op.op is not EditOp.MATCH:
            if op.op is previous:
                runs[-1] = (op.op, runs[-1][1] + 1)
            else:
                runs.append((op.op, 1))
        previous = op.op
    return runs


def alignment_length(result: AlignmentResult) -> int:
    """Number of core columns."""
    return len(result.operations)


def match_count(result: AlignmentResult) -> int:
    """Core columns pairing two equal elements."""
    return sum(
        1
        for a, b in result.core_columns()
        if a is not None and b is not None and a == b
    )


def identity(result: AlignmentResult) -> float:
    """Fraction of core columns pairing two equal elements."""
    return _safe_divide(match_count(result), alignment_length(result))


def similarity(result: AlignmentResult, scoring: ScoringFunction) -> float:
    """Fraction of core columns whose substitution score is positive."""
    positive = sum(
        1
        for a, b in result.core_columns()
        if a is not None and b is not None and scoring(a, b) > 0
    )
    return _safe_divide(positive, alignment_length(result))


def gap_count(result: AlignmentResult) -> int:
    """Core columns holding a gap."""
    return sum(1 for op in result.operations if op.op is not EditOp.MATCH)


def gap_openings(result: AlignmentResult) -> int:
    """Number of maximal gap runs in the core."""
    return len(_gap_runs(result))


def rescore_alignment(
    result: AlignmentResult, scoring: ScoringFunction, gap: Any
) -> float:
    """Sum substitution scores and gap-run costs over the core columns.

    A run is a maximal block of consecutive columns that consume the same
    sequence; switching from one gap kind to the other opens a new run.
    """
    gap_model: GapModel = coerce_gap_model(gap)
    a = elements_of(result.sequence1)
    b = elements_of(result.sequence2)

    total = sum(
        scoring(a[op.i], b[op.j])
        for op in result.operations
        if op.op is EditOp.MATCH
    )
    for _, length in _gap_runs(result):
        total += gap_model.run_cost(length)
    return total


def summarize(
    result: AlignmentResult, scoring: Optional[ScoringFunction] = None
) -> AlignmentStats:
    """Collect the descriptive statistics of one alignment."""
    return AlignmentStats(
        score=result.score,
        length=alignment_length(result),
        matches=match_count(result),
        identity=identity(result),
        gaps=gap_count(result),
        gap_openings=gap_openings(result),
        similarity=similarity(result, scoring) if scoring is not None else None,
    )


__all__ = [
    "alignment_length",
    "match_count",
    "identity",
    "similarity",
    "gap_count",
    "gap_openings",
    "rescore_alignment",
    "summarize",
]
