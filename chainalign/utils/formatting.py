"""Human-readable rendering of pairwise alignments."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

from chainalign.types import AlignmentResult, SequenceType
from chainalign.types.parameters import ScoringFunction


def _symbol(element: Any) -> str:
    text = str(element)
    return text if len(text) == 1 else text[:1]


def match_line(
    result: AlignmentResult, scoring: Optional[ScoringFunction] = None
) -> str:
    """One character per column of ``result.columns()``.

    ``|`` identical, ``:`` positive score under ``scoring``, ``.`` other
    substitution, space for a gap.
    """
    marks: List[str] = []
    for a, b in result.columns():
        if a is None or b is None:
            marks.append(" ")
        elif a == b:
            marks.append("|")
        elif scoring is not None and scoring(a, b) > 0:
            marks.append(":")
        else:
            marks.append(".")
    return "".join(marks)


def _names(result: AlignmentResult, names: Optional[Sequence[str]]) -> Tuple[str, str]:
    if names is not None:
        first, second = names
        return first, second
    labels = []
    for index, seq in enumerate((result.sequence1, result.sequence2), start=1):
        labels.append(seq.identifier if isinstance(seq, SequenceType) else f"seq{index}")
    return labels[0], labels[1]


def format_alignment(
    result: AlignmentResult,
    width: int = 60,
    names: Optional[Sequence[str]] = None,
    scoring: Optional[ScoringFunction] = None,
    gap: str = "-",
) -> str:
    """Return the alignment as blocks of ``width`` columns.

    Each block shows the first sequence, the match line and the second
    sequence, prefixed by the names and followed by the score line.
    """
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    result.check_gap_marker(gap)

    top_name, bottom_name = _names(result, names)
    label_width = max(len(top_name), len(bottom_name))
    columns = result.columns()
    top = "".join(gap if a is None else _symbol(a) for a, _ in columns)
    bottom = "".join(gap if b is None else _symbol(b) for _, b in columns)
    marks = match_line(result, scoring)

    lines: List[str] = []
    for offset in range(0, len(columns), width):
        stop = offset + width
        lines.append(f"{top_name:>{label_width}}  {top[offset:stop]}")
        lines.append(f"{'':>{label_width}}  {marks[offset:stop]}")
        lines.append(f"{bottom_name:>{label_width}}  {bottom[offset:stop]}")
        lines.append("")
    lines.append(f"Score: {result.score}  Mode: {result.mode.value}")
    return "\n".join(lines)


__all__ = ["format_alignment", "match_line"]
