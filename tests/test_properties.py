"""Structural properties every alignment must satisfy."""

from __future__ import annotations

import itertools

import pytest

from chainalign import NUC44, AffineGap, LinearGap, MatchMismatchScoring, align
from chainalign.evaluation.metrics import gap_openings, rescore_alignment
from chainalign.types import EditOp, transpose_scoring

GAPS = (LinearGap(-10), AffineGap(-10, -1), LinearGap(-3), AffineGap(-5, -2))
MODES = ("global", "local", "semiglobal")

PAIRS = (
    ("A", "A"),
    ("A", "G"),
    ("ACGT", "AGT"),
    ("AATTTAA", "AAAA"),
    ("ATGCATGCATGC", "CATGCA"),
    ("GATTACA", "GCATGCT"),
    ("TTTTTTTTAAAAAATTTTTTTTTTTT", "CCCCCCCCCCCCCAAAAAACCCCCCCCCCC"),
    ("AAAAAAAAAATTTTTTTTTTT", "TTTTTTTTTCCCCCCCCCCC"),
    ("CCGGTTAA", "GGAACCTT"),
    ("ACACACACGT", "ACGT"),
)

CASES = [
    (mode, gap, seq1, seq2)
    for mode, gap, (seq1, seq2) in itertools.product(MODES, GAPS, PAIRS)
]


def _skewed(a: str, b: str) -> int:
    """Asymmetric substitution score."""
    if a == b:
        return 3
    return -1 if a < b else -3


@pytest.mark.parametrize("mode,gap,seq1,seq2", CASES)
def test_view_round_trips_to_inputs(mode, gap, seq1, seq2):
    """Removing gaps from the view gives back the inputs."""
    result = align(mode, NUC44, gap, seq1, seq2)
    top, bottom = result.view()

    assert len(top) == len(bottom)
    assert top.replace("-", "") == seq1
    assert bottom.replace("-", "") == seq2
    assert all(not (x == "-" and y == "-") for x, y in zip(top, bottom))


@pytest.mark.parametrize("mode,gap,seq1,seq2", CASES)
def test_core_reproduces_aligned_portion(mode, gap, seq1, seq2):
    """The core columns spell out exactly the covered slices."""
    result = align(mode, NUC44, gap, seq1, seq2)
    core = result.core_columns()
    portion1, portion2 = result.aligned_portion()

    assert "".join(x for x, _ in core if x is not None) == portion1
    assert "".join(y for _, y in core if y is not None) == portion2
    assert len(result.view()[0]) == len(seq1) + len(seq2) - sum(
        1 for x, y in core if x is not None and y is not None
    )


@pytest.mark.parametrize(
    "mode,gap,seq1,seq2",
    [case for case in CASES if not (case[0] == "local" and isinstance(case[1], AffineGap))],
)
def test_score_equals_rescored_core(mode, gap, seq1, seq2):
    """The reported score is the score of the reported columns."""
    result = align(mode, NUC44, gap, seq1, seq2)
    assert rescore_alignment(result, NUC44, gap) == result.score


@pytest.mark.parametrize("gap", [gap for gap in GAPS if isinstance(gap, AffineGap)])
@pytest.mark.parametrize("seq1,seq2", PAIRS)
def test_local_affine_score_bounds_rescored_core(gap, seq1, seq2):
    """A linked gap run may only lower the rescored core below the score.

    Without gap columns the two agree, and the core is bounded by pairs.
    """
    result = align("local", NUC44, gap, seq1, seq2)
    rescored = rescore_alignment(result, NUC44, gap)
    assert rescored <= result.score
    if gap_openings(result) == 0:
        assert rescored == result.score
    if result.operations:
        assert result.operations[0].op is EditOp.MATCH
        assert result.operations[-1].op is EditOp.MATCH


@pytest.mark.parametrize("mode,gap,seq1,seq2", CASES)
def test_alignment_is_deterministic(mode, gap, seq1, seq2):
    """Repeated runs give identical results."""
    assert align(mode, NUC44, gap, seq1, seq2) == align(mode, NUC44, gap, seq1, seq2)


@pytest.mark.parametrize("mode,gap,seq1,seq2", CASES)
def test_score_is_symmetric_under_transposed_scoring(mode, gap, seq1, seq2):
    """Swapping inputs and transposing the scoring keeps the optimum."""
    forward = align(mode, _skewed, gap, seq1, seq2)
    backward = align(mode, transpose_scoring(_skewed), gap, seq2, seq1)
    assert forward.score == backward.score


@pytest.mark.parametrize("mode", ["global", "semiglobal"])
@pytest.mark.parametrize("gap", GAPS)
def test_score_never_below_free_end_floor(mode, gap):
    """Free end gaps can only improve on a global alignment."""
    for seq1, seq2 in PAIRS:
        global_score = align("global", NUC44, gap, seq1, seq2).score
        other = align(mode, NUC44, gap, seq1, seq2).score
        local = align("local", NUC44, gap, seq1, seq2).score
        assert other >= global_score
        if isinstance(gap, LinearGap):
            assert local >= other


@pytest.mark.parametrize("mode", MODES)
def test_local_scores_are_never_negative(mode):
    """Only global alignments can report a negative score."""
    result = align(mode, NUC44, LinearGap(-10), "ATATA", "GCGCG")
    if mode == "global":
        assert result.score < 0
    else:
        assert result.score == 0


def test_affine_gaps_favour_one_long_run():
    """With affine costs a single gap run replaces scattered gaps."""
    scoring = MatchMismatchScoring(2, -3)
    seq1, seq2 = "ACGTTTTACG", "ACGACG"

    affine = align("global", scoring, AffineGap(-5, -1), seq1, seq2)
    assert gap_openings(affine) == 1
    assert affine.view() == ("ACGTTTTACG", "ACG----ACG")
    assert affine.score == 12 - 9
