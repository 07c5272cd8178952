"""Unit tests for the dynamic programming score tables."""

from __future__ import annotations

import math

import numpy as np
import pytest

from chainalign.algorithms import (
    AffineScoreTable,
    GlobalAligner,
    LinearScoreTable,
    LocalAligner,
    build_score_table,
)
from chainalign.algorithms.tables import NEG_INF
from chainalign.types import NUC44, AffineGap, LinearGap, MatchMismatchScoring

SCORING = MatchMismatchScoring(1, -1)


def _substitutions(seq1: str, seq2: str):
    return [[SCORING(a, b) for b in seq2] for a in seq1]


def _filled(gap, seq1: str, seq2: str, free: bool, restart: bool):
    table = build_score_table(gap, len(seq1), len(seq2))
    table.initialize_borders(free=free)
    table.fill(_substitutions(seq1, seq2), restart=restart)
    return table


def test_build_score_table_dispatches_on_gap_model():
    """Each gap model gets its own recurrence."""
    assert isinstance(build_score_table(LinearGap(-1), 2, 3), LinearScoreTable)
    assert isinstance(build_score_table(AffineGap(-2, -1), 2, 3), AffineScoreTable)
    with pytest.raises(TypeError):
        build_score_table(-1, 2, 3)


def test_linear_global_borders_and_fill():
    """Global borders accumulate gap costs; interior follows the recurrence."""
    table = _filled(LinearGap(-2), "AC", "A", free=False, restart=False)

    expected = np.array([[0, -2], [-2, 1], [-4, -1]], dtype=float)
    np.testing.assert_array_equal(table.score_matrix(), expected)
    assert table.pointers[1][1] == "M"
    assert table.pointers[2][1] == "X"
    assert table.pointers[1][0] == "X"
    assert table.pointers[0][1] == "Y"
    assert table.best_state(0, 0) is None


def test_linear_free_borders_start_no_path():
    """Free borders are zero and carry no backpointer."""
    table = _filled(LinearGap(-2), "AC", "GA", free=True, restart=False)
    assert [table.cell_score(i, 0) for i in range(3)] == [0, 0, 0]
    assert [table.cell_score(0, j) for j in range(3)] == [0, 0, 0]
    assert table.pointers[2][0] is None


def test_linear_restart_clamps_to_zero():
    """A non-positive cell restarts the path when restarts are allowed."""
    table = _filled(LinearGap(-1), "A", "C", free=True, restart=True)
    assert table.cell_score(1, 1) == 0
    assert table.best_state(1, 1) is None

    table = _filled(LinearGap(-1), "A", "C", free=True, restart=False)
    assert table.cell_score(1, 1) == -1
    assert table.best_state(1, 1) == "M"


def test_linear_tie_break_prefers_diagonal_then_first_sequence():
    """Equal candidates resolve diagonal first, then a gap in sequence 2."""
    table = _filled(LinearGap(-1), "AB", "AB", free=False, restart=False)
    # Cell (1, 2): diagonal = -1 + (-1) = -2, up = -2 + -1 = -3,
    # left = 1 + -1 = 0 -> Y.
    assert table.best_state(1, 2) == "Y"
    # Cell (2, 1): diagonal = -1 + (-1) = -2, up = 1 + -1 = 0 -> X.
    assert table.best_state(2, 1) == "X"

    tied = _filled(LinearGap(-1), "A", "B", free=False, restart=False)
    # Diagonal 0 + -1, up -1 + -1, left -1 + -1: diagonal wins outright.
    assert tied.best_state(1, 1) == "M"
    tied = _filled(LinearGap(-1), "AA", "A", free=False, restart=False)
    # Cell (2, 1): diagonal -1 + 1 = 0, up 1 - 1 = 0: diagonal wins the tie.
    assert tied.best_state(2, 1) == "M"


def test_affine_global_states():
    """The three Gotoh states are filled with their own predecessors."""
    table = _filled(AffineGap(-2, -1), "A", "A", free=False, restart=False)

    assert table.V["M"][1][1] == 1
    assert table.Psi["M"][1][1] == "M"
    assert table.V["X"][1][0] == -3
    assert table.V["Y"][0][1] == -3
    assert table.V["X"][1][1] == -6
    assert table.Psi["X"][1][1] == "Y"
    assert table.V["Y"][1][1] == -6
    assert table.Psi["Y"][1][1] == "X"
    assert table.cell_score(1, 1) == 1
    assert table.best_state(1, 1) == "M"


def test_affine_global_border_runs_link_back_to_origin():
    """Border gap runs open once and extend afterwards."""
    table = _filled(AffineGap(-3, -1), "AAA", "", free=False, restart=False)
    assert [table.V["X"][i][0] for i in range(1, 4)] == [-4, -5, -6]
    assert [table.Psi["X"][i][0] for i in range(1, 4)] == ["M", "X", "X"]
    assert table.V["M"][3][0] == NEG_INF


def test_affine_local_restart_drops_match_prefix():
    """A match opened from a non-positive cell starts a new path."""
    local = _filled(AffineGap(-2, -1), "A", "A", free=True, restart=True)
    assert local.V["M"][1][1] == 1
    assert local.Psi["M"][1][1] is None

    semiglobal = _filled(AffineGap(-2, -1), "A", "A", free=True, restart=False)
    assert semiglobal.V["M"][1][1] == 1
    assert semiglobal.Psi["M"][1][1] == "M"


def _nuc44_local(seq1: str, seq2: str, gap):
    table = build_score_table(gap, len(seq1), len(seq2))
    table.initialize_borders(free=True)
    table.fill([[NUC44(a, b) for b in seq2] for a in seq1], restart=True)
    return table


def test_affine_local_restart_drops_gap_run_from_border():
    """A gap run opened from a non-positive cell does not prefix a new match."""
    table = _nuc44_local("CAT", "AAT", AffineGap(-2, -1))

    # X(1, 1) opens from the free border and beats the mismatch M(1, 1).
    assert table.V["X"][1][1] == -3
    assert table.V["M"][1][1] == -4
    assert not table.anchored["X"][1][1]
    assert table.V["M"][2][2] == 5
    assert table.Psi["M"][2][2] is None

    # Y(2, 2) opens from the positive M(2, 1).
    assert table.V["Y"][2][2] == 2
    assert table.anchored["Y"][2][2]


def test_affine_local_restart_keeps_gap_run_from_positive_match():
    """A gap run opened from a positive match stays linked through a restart."""
    table = _nuc44_local("AATTTAA", "AAAA", AffineGap(-10, -1))

    assert table.V["M"][2][2] == 10
    assert table.V["X"][5][2] == -3
    assert table.anchored["X"][5][2]
    assert table.V["M"][6][3] == 5
    assert table.Psi["M"][6][3] == "X"


def test_affine_best_state_on_empty_cell():
    """A cell unreachable in every state has no traceback state."""
    table = AffineScoreTable(AffineGap(-2, -1), 1, 1)
    assert table.best_state(1, 1) is None
    assert math.isinf(table.cell_score(1, 1))


@pytest.mark.parametrize("gap", [LinearGap(-2), AffineGap(-3, -1)])
def test_score_matrix_shape(gap):
    """The exposed matrix covers the full grid including borders."""
    matrix = GlobalAligner(SCORING, gap).score_matrix("ACGT", "AG")
    assert matrix.shape == (5, 3)
    assert matrix[0, 0] == 0
    assert matrix[4, 2] == GlobalAligner(SCORING, gap).score("ACGT", "AG")


def test_local_score_matrix_is_non_negative_for_linear_gaps():
    """Restarts keep every local cell at zero or above."""
    matrix = LocalAligner(SCORING, LinearGap(-1)).score_matrix("ACGTTGCA", "TTGA")
    assert (matrix >= 0).all()
    assert matrix.max() == 3
