"""Tests for the descriptive alignment statistics."""

from __future__ import annotations

from chainalign import NUC44, AffineGap, LinearGap, MatchMismatchScoring, align
from chainalign.evaluation import summarize
from chainalign.evaluation.metrics import (
    gap_count,
    gap_openings,
    identity,
    rescore_alignment,
    similarity,
)
from chainalign.types import AlignmentMode, AlignmentResult, Operation

SCORING = MatchMismatchScoring(1, -1)


def _reference() -> AlignmentResult:
    """ACGT / A-GT, the optimal global alignment."""
    return align("global", SCORING, LinearGap(-1), "ACGT", "AGT")


def test_reference_alignment_shape():
    """Sanity check of the fixture used below."""
    reference = _reference()
    assert reference.view() == ("ACGT", "A-GT")
    assert reference.score == 2


def test_descriptive_statistics():
    """Identity, gap counts and similarity over the core."""
    reference = _reference()
    assert identity(reference) == 0.75
    assert gap_count(reference) == 1
    assert gap_openings(reference) == 1
    assert similarity(reference, SCORING) == 0.75

    stats = summarize(reference, SCORING)
    assert stats.length == 4
    assert stats.matches == 3
    assert stats.as_row()["gaps"] == 1
    assert summarize(reference).similarity is None


def test_similarity_counts_positive_substitutions():
    """Ambiguity codes with positive scores count as similar but not identical."""
    result = align("global", NUC44, -10, "AR", "AA")
    assert result.view() == ("AR", "AA")
    assert identity(result) == 0.5
    assert similarity(result, NUC44) == 1.0


def test_empty_core_statistics():
    """An empty core has zero identity rather than dividing by zero."""
    result = align("local", NUC44, -10, "A", "G")
    assert identity(result) == 0.0
    assert gap_openings(result) == 0


def test_rescore_counts_each_gap_run_once():
    """Affine rescoring charges one open per maximal run."""
    result = align("global", NUC44, AffineGap(-10, -1), "ATGCATGCATGC", "CATGCA")
    assert gap_openings(result) == 2
    assert rescore_alignment(result, NUC44, AffineGap(-10, -1)) == 30 - 13 - 13
    assert rescore_alignment(result, NUC44, -1) == 30 - 6


def test_rescore_distinguishes_adjacent_gap_kinds():
    """A deletion followed by an insertion opens two runs."""
    result = AlignmentResult(
        score=0,
        operations=(Operation.delete(0), Operation.insert(0)),
        sequence1="A",
        sequence2="C",
        mode=AlignmentMode.GLOBAL,
        start1=0,
        end1=1,
        start2=0,
        end2=1,
    )
    assert gap_openings(result) == 2
    assert rescore_alignment(result, SCORING, (-5, -1)) == -12
