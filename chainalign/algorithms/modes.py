"""Global, local and semiglobal aligners."""

from __future__ import annotations

from typing import Dict, Optional, Tuple, Type

from chainalign.algorithms.base import PairwiseAligner
from chainalign.algorithms.tables import ScoreTable
from chainalign.types import AlignmentMode


class GlobalAligner(PairwiseAligner):
    """Needleman-Wunsch: both sequences are consumed end to end."""

    mode = AlignmentMode.GLOBAL

    def _terminus(self, table: ScoreTable) -> Tuple[int, int]:
        return table.n, table.m

    def _expandable(self, i: int, j: int, state: Optional[str]) -> bool:
        return i > 0 or j > 0


class LocalAligner(PairwiseAligner):
    """Smith-Waterman: best-scoring pair of contiguous subsequences.

    Among equally scoring cells the last one in row-major order is the
    traceback start.
    """

    mode = AlignmentMode.LOCAL
    free_borders = True
    restart = True

    def _terminus(self, table: ScoreTable) -> Tuple[int, int]:
        best = table.cell_score(0, 0)
        cell = (0, 0)
        for i in range(table.n + 1):
            for j in range(table.m + 1):
                value = table.cell_score(i, j)
                if value >= best:
                    best = value
                    cell = (i, j)
        return cell

    def _start_state(self, table: ScoreTable, i: int, j: int) -> Optional[str]:
        if table.cell_score(i, j) <= 0:
            return None
        return table.best_state(i, j)

    def _expandable(self, i: int, j: int, state: Optional[str]) -> bool:
        return state is not None and i > 0 and j > 0


class SemiglobalAligner(PairwiseAligner):
    """Fitting alignment: leading and trailing gaps are free on both sides.

    The traceback starts from the best cell of the last row, unless a cell of
    the last column scores strictly higher.
    """

    mode = AlignmentMode.SEMIGLOBAL
    free_borders = True

    def _terminus(self, table: ScoreTable) -> Tuple[int, int]:
        n, m = table.n, table.m
        best = table.cell_score(n, 0)
        cell = (n, 0)
        for j in range(1, m + 1):
            value = table.cell_score(n, j)
            if value > best:
                best = value
                cell = (n, j)
        for i in range(n + 1):
            value = table.cell_score(i, m)
            if value > best:
                best = value
                cell = (i, m)
        return cell

    def _expandable(self, i: int, j: int, state: Optional[str]) -> bool:
        return i > 0 and j > 0


ALIGNERS: Dict[AlignmentMode, Type[PairwiseAligner]] = {
    AlignmentMode.GLOBAL: GlobalAligner,
    AlignmentMode.LOCAL: LocalAligner,
    AlignmentMode.SEMIGLOBAL: SemiglobalAligner,
}


__all__ = ["GlobalAligner", "LocalAligner", "SemiglobalAligner", "ALIGNERS"]
