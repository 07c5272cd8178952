"""Shared dynamic programming skeleton for the pairwise aligners.

Each alignment mode is one ``PairwiseAligner`` subclass that decides how the
borders are seeded, whether cells may restart, where the traceback begins and
when it stops. The gap model decides the recurrence through the score table
built for it, so every mode works with every gap model through the single
``align`` implementation below.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, List, Optional, Sequence, Tuple

import numpy as np

from chainalign.algorithms.tables import ScoreTable, build_score_table
from chainalign.algorithms.traceback import trace_path
from chainalign.types import AlignerConfig, AlignmentMode, AlignmentResult
from chainalign.types.alignment import elements_of
from chainalign.types.parameters import ScoringFunction


class PairwiseAligner(ABC):
    """Abstract base class for pairwise alignment algorithms."""

    mode: ClassVar[AlignmentMode]
    free_borders: ClassVar[bool] = False
    restart: ClassVar[bool] = False

    def __init__(
        self,
        scoring: ScoringFunction,
        gap: Any,
        max_cells: Optional[int] = None,
    ) -> None:
        config = AlignerConfig(
            mode=self.mode, scoring=scoring, gap=gap, max_cells=max_cells
        )
        self.scoring = config.scoring
        self.gap = config.gap
        self.max_cells = config.max_cells

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(scoring={self.scoring!r}, gap={self.gap!r}, "
            f"max_cells={self.max_cells!r})"
        )

    @property
    def config(self) -> AlignerConfig:
        return AlignerConfig(
            mode=self.mode, scoring=self.scoring, gap=self.gap, max_cells=self.max_cells
        )

    @abstractmethod
    def _terminus(self, table: ScoreTable) -> Tuple[int, int]:
        """Cell where the traceback begins."""
        raise NotImplementedError

    @abstractmethod
    def _expandable(self, i: int, j: int, state: Optional[str]) -> bool:
        """Whether the traceback continues from ``(i, j)`` in ``state``."""
        raise NotImplementedError

    def _start_state(self, table: ScoreTable, i: int, j: int) -> Optional[str]:
        return table.best_state(i, j)

    def _check_size(self, n: int, m: int) -> None:
        if self.max_cells is not None and (n + 1) * (m + 1) > self.max_cells:
            raise ValueError(
                f"Alignment of lengths {n} x {m} needs {(n + 1) * (m + 1)} cells, "
                f"more than max_cells={self.max_cells}"
            )

    def _substitution_scores(
        self, x: Sequence[Any], y: Sequence[Any]
    ) -> List[List[float]]:
        """Score every element pair up front; a partial scoring fails here."""
        scoring = self.scoring
        return [[scoring(a, b) for b in y] for a in x]

    def _fill_table(self, x: Sequence[Any], y: Sequence[Any]) -> ScoreTable:
        n, m = len(x), len(y)
        self._check_size(n, m)
        substitutions = self._substitution_scores(x, y)
        table = build_score_table(self.gap, n, m)
        table.initialize_borders(free=self.free_borders)
        table.fill(substitutions, restart=self.restart)
        return table

    def align(self, seq1: Any, seq2: Any) -> AlignmentResult:
        """Align two sequences and return the optimal alignment."""
        x = elements_of(seq1)
        y = elements_of(seq2)
        table = self._fill_table(x, y)

        end1, end2 = self._terminus(table)
        state = self._start_state(table, end1, end2)
        operations, (start1, start2) = trace_path(
            table, end1, end2, state, self._expandable
        )

        return AlignmentResult(
            score=table.cell_score(end1, end2),
            operations=tuple(operations),
            sequence1=seq1,
            sequence2=seq2,
            mode=self.mode,
            start1=start1,
            end1=end1,
            start2=start2,
            end2=end2,
        )

    def score(self, seq1: Any, seq2: Any) -> float:
        """Optimal score without building the alignment."""
        table = self._fill_table(elements_of(seq1), elements_of(seq2))
        end1, end2 = self._terminus(table)
        return table.cell_score(end1, end2)

    def score_matrix(self, seq1: Any, seq2: Any) -> np.ndarray:
        """Filled ``(len(seq1) + 1) x (len(seq2) + 1)`` matrix of best scores."""
        table = self._fill_table(elements_of(seq1), elements_of(seq2))
        return table.score_matrix()


__all__ = ["PairwiseAligner"]
