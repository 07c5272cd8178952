"""Dynamic programming tables, one implementation per gap model.

Every table uses the same state names: ``M`` for a column that pairs two
elements, ``X`` for a column that consumes ``sequence1`` against a gap and
``Y`` for a column that consumes ``sequence2`` against a gap. A backpointer
names the state of the predecessor cell; ``None`` marks a path start.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from chainalign.types.parameters import AffineGap, GapModel, LinearGap

NEG_INF = float("-inf")
STATES = ("M", "X", "Y")
MOVES: Dict[str, Tuple[int, int]] = {"M": (1, 1), "X": (1, 0), "Y": (0, 1)}

Grid = List[List[float]]
PointerGrid = List[List[Optional[str]]]


class ScoreTable(ABC):
    """Score and backpointer storage for an ``(n + 1) x (m + 1)`` grid."""

    def __init__(self, n: int, m: int) -> None:
        self.n = n
        self.m = m

    def _grid(self, value) -> list:
        return [[value] * (self.m + 1) for _ in range(self.n + 1)]

    @abstractmethod
    def initialize_borders(self, free: bool) -> None:
        """Seed row 0 and column 0.

        With ``free`` the borders score 0 and start no path; otherwise they
        carry the cumulative cost of a gap run from the origin.
        """
        raise NotImplementedError

    @abstractmethod
    def fill(self, substitutions: Sequence[Sequence[float]], restart: bool) -> None:
        """Fill the interior row by row.

        ``substitutions[i][j]`` is the score of pairing ``sequence1[i]`` with
        ``sequence2[j]``. With ``restart`` a path may begin at any cell
        instead of extending a non-positive prefix.
        """
        raise NotImplementedError

    @abstractmethod
    def cell_score(self, i: int, j: int) -> float:
        """Best score over all states at ``(i, j)``."""
        raise NotImplementedError

    @abstractmethod
    def best_state(self, i: int, j: int) -> Optional[str]:
        """State in which a traceback from ``(i, j)`` starts."""
        raise NotImplementedError

    @abstractmethod
    def previous(self, state: str, i: int, j: int) -> Optional[str]:
        """State of the predecessor of ``state`` at ``(i, j)``."""
        raise NotImplementedError

    def score_matrix(self) -> np.ndarray:
        """Per-cell best scores as a float array."""
        return np.array(
            [[self.cell_score(i, j) for j in range(self.m + 1)] for i in range(self.n + 1)],
            dtype=float,
        )


class LinearScoreTable(ScoreTable):
    """Single-matrix recurrence for a linear gap penalty.

    The pointer at a cell is the move that produced it, so the traceback
    state at a cell is read straight from the pointer grid.
    """

    def __init__(self, gap: LinearGap, n: int, m: int) -> None:
        super().__init__(n, m)
        self.cost = gap.cost
        self.values: Grid = self._grid(0)
        self.pointers: PointerGrid = self._grid(None)

    def initialize_borders(self, free: bool) -> None:
        if free:
            return
        for i in range(1, self.n + 1):
            self.values[i][0] = i * self.cost
            self.pointers[i][0] = "X"
        for j in range(1, self.m + 1):
            self.values[0][j] = j * self.cost
            self.pointers[0][j] = "Y"

    def fill(self, substitutions: Sequence[Sequence[float]], restart: bool) -> None:
        S, P, g = self.values, self.pointers, self.cost
        for i in range(1, self.n + 1):
            row_sub = substitutions[i - 1]
            for j in range(1, self.m + 1):
                # Order is the tie-break: diagonal, then X, then Y.
                candidates = (
                    S[i - 1][j - 1] + row_sub[j - 1],
                    S[i - 1][j] + g,
                    S[i][j - 1] + g,
                )
                max_val = max(candidates)
                if restart and max_val <= 0:
                    S[i][j] = 0
                    P[i][j] = None
                    continue
                S[i][j] = max_val
                P[i][j] = STATES[candidates.index(max_val)]

    def cell_score(self, i: int, j: int) -> float:
        return self.values[i][j]

    def best_state(self, i: int, j: int) -> Optional[str]:
        return self.pointers[i][j]

    def previous(self, state: str, i: int, j: int) -> Optional[str]:
        di, dj = MOVES[state]
        return self.pointers[i - di][j - dj]


class AffineScoreTable(ScoreTable):
    """Three-state Gotoh recurrence for an affine gap penalty."""

    def __init__(self, gap: AffineGap, n: int, m: int) -> None:
        super().__init__(n, m)
        self.open = gap.open
        self.extend = gap.extend
        self.V: Dict[str, Grid] = {state: self._grid(NEG_INF) for state in STATES}
        self.Psi: Dict[str, PointerGrid] = {state: self._grid(None) for state in STATES}
        # Whether the gap run at a cell was opened from a positive match cell.
        self.anchored: Dict[str, List[List[bool]]] = {
            state: self._grid(False) for state in ("X", "Y")
        }
        self.V["M"][0][0] = 0

    def initialize_borders(self, free: bool) -> None:
        V_M, V_X, V_Y = self.V["M"], self.V["X"], self.V["Y"]
        if free:
            for i in range(1, self.n + 1):
                V_M[i][0] = 0
            for j in range(1, self.m + 1):
                V_M[0][j] = 0
            return

        Psi_X, Psi_Y = self.Psi["X"], self.Psi["Y"]
        for i in range(1, self.n + 1):
            V_X[i][0] = self.open + i * self.extend
            Psi_X[i][0] = "M" if i == 1 else "X"
        for j in range(1, self.m + 1):
            V_Y[0][j] = self.open + j * self.extend
            Psi_Y[0][j] = "M" if j == 1 else "Y"

    def fill(self, substitutions: Sequence[Sequence[float]], restart: bool) -> None:
        V_M, V_X, V_Y = self.V["M"], self.V["X"], self.V["Y"]
        Psi_M, Psi_X, Psi_Y = self.Psi["M"], self.Psi["X"], self.Psi["Y"]
        anchored = self.anchored
        A_X, A_Y = anchored["X"], anchored["Y"]
        gap_open = self.open + self.extend
        gap_extend = self.extend

        for i in range(1, self.n + 1):
            row_sub = substitutions[i - 1]
            for j in range(1, self.m + 1):
                candidates = (V_M[i - 1][j - 1], V_X[i - 1][j - 1], V_Y[i - 1][j - 1])
                max_val = max(candidates)
                best_prev: Optional[str] = STATES[candidates.index(max_val)]
                if restart and max_val <= 0:
                    # A match prefix or a gap run opened from a cell scoring
                    # 0 or less is dropped. A gap run opened from a positive
                    # match stays linked to it.
                    if best_prev == "M" or not anchored[best_prev][i - 1][j - 1]:
                        best_prev = None
                    max_val = 0
                V_M[i][j] = max_val + row_sub[j - 1]
                Psi_M[i][j] = best_prev

                candidates = (
                    V_M[i - 1][j] + gap_open,
                    V_X[i - 1][j] + gap_extend,
                    V_Y[i - 1][j] + gap_open,
                )
                max_val = max(candidates)
                state = STATES[candidates.index(max_val)]
                V_X[i][j] = max_val
                Psi_X[i][j] = state
                A_X[i][j] = (
                    V_M[i - 1][j] > 0 if state == "M" else anchored[state][i - 1][j]
                )

                candidates = (
                    V_M[i][j - 1] + gap_open,
                    V_X[i][j - 1] + gap_open,
                    V_Y[i][j - 1] + gap_extend,
                )
                max_val = max(candidates)
                state = STATES[candidates.index(max_val)]
                V_Y[i][j] = max_val
                Psi_Y[i][j] = state
                A_Y[i][j] = (
                    V_M[i][j - 1] > 0 if state == "M" else anchored[state][i][j - 1]
                )

    def cell_score(self, i: int, j: int) -> float:
        return max(self.V[state][i][j] for state in STATES)

    def best_state(self, i: int, j: int) -> Optional[str]:
        candidates = tuple(self.V[state][i][j] for state in STATES)
        max_val = max(candidates)
        if max_val == NEG_INF:
            return None
        return STATES[candidates.index(max_val)]

    def previous(self, state: str, i: int, j: int) -> Optional[str]:
        return self.Psi[state][i][j]


def build_score_table(gap: GapModel, n: int, m: int) -> ScoreTable:
    """Allocate the table matching ``gap``'s model."""
    if isinstance(gap, LinearGap):
        return LinearScoreTable(gap, n, m)
    if isinstance(gap, AffineGap):
        return AffineScoreTable(gap, n, m)
    raise TypeError(f"Unsupported gap model: {type(gap).__name__}")


__all__ = [
    "NEG_INF",
    "STATES",
    "MOVES",
    "ScoreTable",
    "LinearScoreTable",
    "AffineScoreTable",
    "build_score_table",
]
