"""Alignment types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, NamedTuple, Optional, Sequence, Tuple

from .parameters import AlignmentMode
from .sequence import SequenceType

GAP = "-"


class EditOp(str, Enum):
    """Kind of a single alignment column."""

    MATCH = "match"
    DELETE = "delete"
    INSERT = "insert"


class Operation(NamedTuple):
    """One aligned column.

    ``MATCH`` pairs ``sequence1[i]`` with ``sequence2[j]``; ``DELETE`` puts
    ``sequence1[i]`` against a gap (``j`` is None); ``INSERT`` puts a gap
    against ``sequence2[j]`` (``i`` is None). Indices are zero-based.
    """

    op: EditOp
    i: Optional[int]
    j: Optional[int]

    @classmethod
    def match(cls, i: int, j: int) -> "Operation":
        return cls(EditOp.MATCH, i, j)

    @classmethod
    def delete(cls, i: int) -> "Operation":
        return cls(EditOp.DELETE, i, None)

    @classmethod
    def insert(cls, j: int) -> "Operation":
        return cls(EditOp.INSERT, None, j)


def elements_of(sequence: Any) -> Sequence[Any]:
    """Return the index-addressable elements behind an alignment input."""
    if isinstance(sequence, SequenceType):
        return sequence.residues
    if isinstance(sequence, (str, list, tuple, range)):
        return sequence
    if hasattr(sequence, "__len__") and hasattr(sequence, "__getitem__"):
        return sequence
    raise TypeError(
        f"Sequences must be index-addressable, got {type(sequence).__name__}"
    )


@dataclass(frozen=True)
class AlignmentResult:
    """Result of a pairwise alignment.

    Attributes:
        score: Value of the traceback start cell
        operations: Aligned columns of the core, in sequence order
        sequence1: First input sequence
        sequence2: Second input sequence
        mode: Alignment mode that produced the result
        start1, end1: Half-open span of ``sequence1`` covered by the core
        start2, end2: Half-open span of ``sequence2`` covered by the core
    """

    score: float
    operations: Tuple[Operation, ...]
    sequence1: Any
    sequence2: Any
    mode: AlignmentMode
    start1: int
    end1: int
    start2: int
    end2: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "operations", tuple(self.operations))
        n = len(elements_of(self.sequence1))
        m = len(elements_of(self.sequence2))
        if not 0 <= self.start1 <= self.end1 <= n:
            raise ValueError(
                f"Invalid span [{self.start1}, {self.end1}) for sequence of length {n}"
            )
        if not 0 <= self.start2 <= self.end2 <= m:
            raise ValueError(
                f"Invalid span [{self.start2}, {self.end2}) for sequence of length {m}"
            )
        consumed1 = sum(op.i is not None for op in self.operations)
        consumed2 = sum(op.j is not None for op in self.operations)
        if consumed1 != self.end1 - self.start1 or consumed2 != self.end2 - self.start2:
            raise ValueError("Operations do not cover the declared spans.")

    @property
    def length(self) -> int:
        """Number of columns in the core."""
        return len(self.operations)

    def core_columns(self) -> List[Tuple[Any, Any]]:
        """Core columns as element pairs; gaps are ``None``."""
        a = elements_of(self.sequence1)
        b = elements_of(self.sequence2)
        return [
            (
                a[op.i] if op.i is not None else None,
                b[op.j] if op.j is not None else None,
            )
            for op in self.operations
        ]

    def columns(self) -> List[Tuple[Any, Any]]:
        """All columns, unaligned flanks included; gaps are ``None``."""
        a = elements_of(self.sequence1)
        b = elements_of(self.sequence2)
        cols: List[Tuple[Any, Any]] = []
        cols.extend((x, None) for x in a[: self.start1])
        cols.extend((None, y) for y in b[: self.start2])
        cols.extend(self.core_columns())
        cols.extend((x, None) for x in a[self.end1 :])
        cols.extend((None, y) for y in b[self.end2 :])
        return cols

    def check_gap_marker(self, gap: Any) -> None:
        """Raise ValueError if either input contains ``gap`` as an element."""
        for label, sequence in (("sequence1", self.sequence1), ("sequence2", self.sequence2)):
            if any(element == gap for element in elements_of(sequence)):
                raise ValueError(
                    f"{label} contains the gap marker {gap!r}; pass a different gap"
                )

    def view(self, gap: Any = GAP) -> Tuple[Any, Any]:
        """Return the two gapped sequences.

        Strings are returned when both inputs are strings and ``gap`` is a
        string; otherwise lists with ``gap`` at every gap position. ``gap``
        must differ from every input element.
        """
        self.check_gap_marker(gap)
        cols = self.columns()
        gapped1 = [gap if x is None else x for x, _ in cols]
        gapped2 = [gap if y is None else y for _, y in cols]
        if (
            isinstance(self.sequence1, str)
            and isinstance(self.sequence2, str)
            and isinstance(gap, str)
        ):
            return "".join(gapped1), "".join(gapped2)
        return gapped1, gapped2

    def aligned_portion(self) -> Tuple[Any, Any]:
        """Slices of both inputs covered by the core."""
        a = elements_of(self.sequence1)
        b = elements_of(self.sequence2)
        return a[self.start1 : self.end1], b[self.start2 : self.end2]

    def __str__(self) -> str:
        class_name = self.__class__.__name__
        cols = self.columns()
        sep = "" if isinstance(self.sequence1, str) and isinstance(self.sequence2, str) else " "
        top = sep.join(GAP if x is None else str(x) for x, _ in cols)
        bottom = sep.join(GAP if y is None else str(y) for _, y in cols)
        return (
            f"{class_name} (\n"
            f"   mode: {self.mode.value}\n"
            f"   score: {self.score}\n"
            f"   span1: [{self.start1}, {self.end1})  span2: [{self.start2}, {self.end2})\n"
            f"   {top}\n"
            f"   {bottom}\n"
            f")"
        )


def view_alignment(result: AlignmentResult, gap: Any = GAP) -> Tuple[Any, Any]:
    """Return ``(gapped_a, gapped_b)`` for ``result``."""
    return result.view(gap)


__all__ = [
    "GAP",
    "EditOp",
    "Operation",
    "AlignmentResult",
    "elements_of",
    "view_alignment",
]
