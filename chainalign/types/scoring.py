"""Substitution scoring functions."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Hashable, List, Mapping, Optional, Tuple, Union

from Bio.Align import substitution_matrices

PairKey = Tuple[Hashable, Hashable]


class ResidueNotFoundError(KeyError):
    """Raised when a scoring table has no entry for an element pair."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


@dataclass(frozen=True)
class SubstitutionMatrix:
    """Score lookup keyed by ``(a, b)`` element pairs.

    String elements are uppercased before lookup unless ``case_sensitive``.
    The matrix does not need to be symmetric.
    """

    scores: Dict[PairKey, float]
    name: Optional[str] = None
    case_sensitive: bool = False

    def __post_init__(self) -> None:
        normalized: Dict[PairKey, float] = {}
        for (a, b), value in self.scores.items():
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ValueError(
                    f"Score for ({a!r}, {b!r}) must be numeric, got {value!r}"
                )
            if not math.isfinite(value):
                raise ValueError(f"Score for ({a!r}, {b!r}) must be finite")
            normalized[(self._fold(a), self._fold(b))] = value
        object.__setattr__(self, "scores", normalized)

    def _fold(self, element: Any) -> Any:
        if not self.case_sensitive and isinstance(element, str):
            return element.upper()
        return element

    def __call__(self, a: Any, b: Any) -> float:
        try:
            return self.scores[(self._fold(a), self._fold(b))]
        except KeyError:
            label = self.name or "substitution matrix"
            raise ResidueNotFoundError(
                f"No score for pair ({a!r}, {b!r}) in {label}"
            ) from None

    def __contains__(self, pair: PairKey) -> bool:
        a, b = pair
        return (self._fold(a), self._fold(b)) in self.scores

    @property
    def alphabet(self) -> List[Hashable]:
        """Symbols that appear in any key, in first-seen order."""
        seen: Dict[Hashable, None] = {}
        for a, b in self.scores:
            seen.setdefault(a, None)
            seen.setdefault(b, None)
        return list(seen)

    @property
    def is_symmetric(self) -> bool:
        return all(
            self.scores.get((b, a)) == value for (a, b), value in self.scores.items()
        )

    def transposed(self) -> "SubstitutionMatrix":
        """Matrix scoring ``(a, b)`` as this one scores ``(b, a)``."""
        return SubstitutionMatrix(
            {(b, a): value for (a, b), value in self.scores.items()},
            name=self.name,
            case_sensitive=self.case_sensitive,
        )

    def to_nested(self) -> Dict[Hashable, Dict[Hashable, float]]:
        nested: Dict[Hashable, Dict[Hashable, float]] = {}
        for (a, b), value in self.scores.items():
            nested.setdefault(a, {})[b] = value
        return nested

    @classmethod
    def from_nested(
        cls,
        table: Mapping[Hashable, Mapping[Hashable, float]],
        name: Optional[str] = None,
        case_sensitive: bool = False,
    ) -> "SubstitutionMatrix":
        """Build from ``{a: {b: score}}``."""
        scores = {(a, b): value for a, row in table.items() for b, value in row.items()}
        return cls(scores, name=name, case_sensitive=case_sensitive)

    @classmethod
    def from_biopython(cls, array: Any, name: Optional[str] = None) -> "SubstitutionMatrix":
        """Wrap a two-dimensional ``Bio.Align.substitution_matrices.Array``.

        Integral scores are stored as ``int`` so totals print without a
        fractional part.
        """
        scores: Dict[PairKey, float] = {}
        for a in array.alphabet:
            for b in array.alphabet:
                value = float(array[a, b])
                scores[(a, b)] = int(value) if value.is_integer() else value
        return cls(scores, name=name)

    @classmethod
    def from_file(cls, path: Union[str, Path], name: Optional[str] = None) -> "SubstitutionMatrix":
        """Read a matrix in NCBI/EMBOSS text layout."""
        array = substitution_matrices.read(str(path))
        return cls.from_biopython(array, name=name or Path(path).name)


@dataclass(frozen=True)
class MatchMismatchScoring:
    """Scores equal elements ``match`` and all other pairs ``mismatch``."""

    match: float = 1
    mismatch: float = -1

    def __post_init__(self) -> None:
        for label, value in (("match", self.match), ("mismatch", self.mismatch)):
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ValueError(f"{label} score must be numeric, got {value!r}")

    def __call__(self, a: Any, b: Any) -> float:
        return self.match if a == b else self.mismatch


def transpose_scoring(scoring: Callable[[Any, Any], float]) -> Callable[[Any, Any], float]:
    """Return ``scoring'`` with ``scoring'(x, y) == scoring(y, x)``."""
    if isinstance(scoring, SubstitutionMatrix):
        return scoring.transposed()
    if isinstance(scoring, MatchMismatchScoring):
        return scoring

    def transposed(a: Any, b: Any) -> float:
        return scoring(b, a)

    return transposed


__all__ = [
    "ResidueNotFoundError",
    "SubstitutionMatrix",
    "MatchMismatchScoring",
    "transpose_scoring",
]
