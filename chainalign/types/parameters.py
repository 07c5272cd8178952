"""
This module defines the configuration types of the alignment engine: the
alignment mode enumeration, the linear and affine gap penalty models, and the
aggregate aligner configuration. All of them validate eagerly so that a bad
configuration is rejected before any dynamic programming work starts.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Sequence, Union

ScoringFunction = Callable[[Any, Any], float]

_MODE_ALIASES = {
    "fitting": "semiglobal",
    "end-gap-free": "semiglobal",
    "semi-global": "semiglobal",
}


class AlignmentMode(str, Enum):
    """Alignment semantics supported by the engine."""

    GLOBAL = "global"
    LOCAL = "local"
    SEMIGLOBAL = "semiglobal"

    @classmethod
    def parse(cls, value: Union[str, "AlignmentMode"]) -> "AlignmentMode":
        """Resolve a mode from a member or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Alignment mode must be a string, got {value!r}")
        key = value.strip().lower()
        key = _MODE_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            allowed = [mode.value for mode in cls]
            raise ValueError(
                f"Unknown alignment mode {value!r}; allowed: {allowed}"
            ) from None


def _validate_penalty(value: object, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValueError(f"{name} must be a real number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value!r}")
    if value > 0:
        raise ValueError(
            f"{name} must be non-positive (a penalty), got {value!r}"
        )


@dataclass(frozen=True)
class LinearGap:
    """Linear gap penalty: every gap symbol costs ``cost``."""

    cost: float

    def __post_init__(self) -> None:
        _validate_penalty(self.cost, "Linear gap cost")

    def run_cost(self, length: int) -> float:
        """Total penalty of a contiguous gap run of ``length`` symbols."""
        return length * self.cost


@dataclass(frozen=True)
class AffineGap:
    """Affine (Gotoh) gap penalty.

    A run of ``k`` gap symbols costs ``open + k * extend``: the open cost is
    charged once per run and the extend cost for every symbol, the first one
    included.
    """

    open: float
    extend: float

    def __post_init__(self) -> None:
        _validate_penalty(self.open, "Affine gap open")
        _validate_penalty(self.extend, "Affine gap extend")

    def run_cost(self, length: int) -> float:
        """Total penalty of a contiguous gap run of ``length`` symbols."""
        if length <= 0:
            return 0
        return self.open + length * self.extend


GapModel = Union[LinearGap, AffineGap]


def coerce_gap_model(value: Any) -> GapModel:
    """Build a gap model from a model instance, number, pair or mapping.

    - ``LinearGap``/``AffineGap`` instances are returned unchanged.
    - A bare number becomes ``LinearGap(number)``.
    - An ``(open, extend)`` pair becomes ``AffineGap(open, extend)``.
    - A mapping with ``cost`` or with ``open`` and ``extend`` keys.
    """
    if isinstance(value, (LinearGap, AffineGap)):
        return value
    if isinstance(value, Mapping):
        keys = set(value)
        if keys == {"cost"}:
            return LinearGap(value["cost"])
        if keys == {"open", "extend"}:
            return AffineGap(value["open"], value["extend"])
        raise ValueError(
            "Gap mapping must have exactly 'cost' or 'open' and 'extend', "
            f"got keys {sorted(keys)}"
        )
    if isinstance(value, Sequence) and not isinstance(value, str):
        if len(value) != 2:
            raise ValueError(
                f"Affine gap must be an (open, extend) pair, got {value!r}"
            )
        return AffineGap(value[0], value[1])
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return LinearGap(value)
    raise ValueError(f"Cannot interpret {value!r} as a gap model")


@dataclass(frozen=True)
class AlignerConfig:
    """Complete configuration for one aligner."""

    mode: AlignmentMode
    scoring: ScoringFunction
    gap: GapModel
    max_cells: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", AlignmentMode.parse(self.mode))
        object.__setattr__(self, "gap", coerce_gap_model(self.gap))
        if not callable(self.scoring):
            raise TypeError(
                f"Scoring must be callable, got {type(self.scoring).__name__}"
            )
        if self.max_cells is not None:
            if isinstance(self.max_cells, bool) or not isinstance(
                self.max_cells, numbers.Integral
            ):
                raise ValueError(
                    f"max_cells must be a positive integer, got {self.max_cells!r}"
                )
            if self.max_cells <= 0:
                raise ValueError(
                    f"max_cells must be a positive integer, got {self.max_cells!r}"
                )


__all__ = [
    "AlignmentMode",
    "LinearGap",
    "AffineGap",
    "GapModel",
    "AlignerConfig",
    "ScoringFunction",
    "coerce_gap_model",
]
