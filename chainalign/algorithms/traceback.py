"""Traceback over a filled score table."""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from chainalign.algorithms.tables import MOVES, ScoreTable
from chainalign.types.alignment import Operation

ContinuePredicate = Callable[[int, int, Optional[str]], bool]


def _column(state: str, i: int, j: int) -> Operation:
    """Column emitted when leaving ``(i, j)`` in ``state``."""
    if state == "M":
        return Operation.match(i - 1, j - 1)
    if state == "X":
        return Operation.delete(i - 1)
    return Operation.insert(j - 1)


def trace_path(
    table: ScoreTable,
    i: int,
    j: int,
    state: Optional[str],
    expandable: ContinuePredicate,
) -> Tuple[List[Operation], Tuple[int, int]]:
    """Follow backpointers from ``(i, j)`` while ``expandable`` holds.

    Returns the columns in sequence order together with the cell where the
    walk stopped.
    """
    operations: List[Operation] = []
    while expandable(i, j, state):
        operations.append(_column(state, i, j))
        prev_state = table.previous(state, i, j)
        di, dj = MOVES[state]
        i -= di
        j -= dj
        state = prev_state

    operations.reverse()
    return operations, (i, j)


__all__ = ["trace_path", "ContinuePredicate"]
