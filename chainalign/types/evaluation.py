"""Alignment statistics record."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class AlignmentStats:
    """Descriptive statistics over the core of one alignment."""

    score: float
    length: int
    matches: int
    identity: float
    gaps: int
    gap_openings: int
    similarity: Optional[float] = None

    def as_row(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["AlignmentStats"]
