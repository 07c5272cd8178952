"""Serialization utilities for aligner configurations and alignment results."""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Union

import yaml

from chainalign.types import (
    AffineGap,
    AlignerConfig,
    AlignmentResult,
    LinearGap,
    MatchMismatchScoring,
    SequenceType,
    SubstitutionMatrix,
    get_matrix,
)
from chainalign.types.matrices import MATRICES

CONFIG_KEYS = {"mode", "gap", "scoring", "max_cells"}


def _convert_values(value: Any, precision: int | None) -> Any:
    """
    Recursively convert dataclasses/enums/dicts/lists and optionally round floats.
    """
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value):
        return _convert_values(asdict(value), precision)
    if isinstance(value, dict):
        return {key: _convert_values(val, precision) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [_convert_values(item, precision) for item in value]
    if isinstance(value, float) and precision is not None:
        return round(value, precision)
    return value


def scoring_from_dict(payload: Mapping[str, Any]) -> Any:
    """Build a scoring function from its YAML description.

    Accepted forms: ``{matrix: NAME}``, ``{match: M, mismatch: X}`` and
    ``{table: {a: {b: score}}, name: NAME}``.
    """
    if not isinstance(payload, Mapping):
        raise ValueError(f"Scoring block must be a mapping, got {payload!r}")
    keys = set(payload)
    if keys == {"matrix"}:
        return get_matrix(str(payload["matrix"]))
    if keys and keys <= {"match", "mismatch"}:
        return MatchMismatchScoring(**payload)
    if "table" in keys and keys <= {"table", "name", "case_sensitive"}:
        return SubstitutionMatrix.from_nested(
            payload["table"],
            name=payload.get("name"),
            case_sensitive=bool(payload.get("case_sensitive", False)),
        )
    raise ValueError(f"Unrecognized scoring block with keys {sorted(keys)}")


def scoring_to_dict(scoring: Any) -> Dict[str, Any]:
    """Inverse of :func:`scoring_from_dict` for the built-in scoring types."""
    if isinstance(scoring, SubstitutionMatrix):
        if scoring.name and MATRICES.get(scoring.name.upper()) == scoring:
            return {"matrix": scoring.name}
        payload: Dict[str, Any] = {"table": scoring.to_nested()}
        if scoring.name:
            payload["name"] = scoring.name
        if scoring.case_sensitive:
            payload["case_sensitive"] = True
        return payload
    if isinstance(scoring, MatchMismatchScoring):
        return {"match": scoring.match, "mismatch": scoring.mismatch}
    raise ValueError(
        f"Cannot serialize scoring of type {type(scoring).__name__}; "
        "use a SubstitutionMatrix or MatchMismatchScoring"
    )


def config_from_dict(payload: Mapping[str, Any]) -> AlignerConfig:
    """Validate a configuration mapping and build an AlignerConfig."""
    unexpected = set(payload) - CONFIG_KEYS
    if unexpected:
        raise ValueError(f"Aligner config has unexpected keys: {sorted(unexpected)}")
    missing = {"mode", "gap", "scoring"} - set(payload)
    if missing:
        raise ValueError(f"Aligner config missing keys: {sorted(missing)}")

    return AlignerConfig(
        mode=payload["mode"],
        scoring=scoring_from_dict(payload["scoring"]),
        gap=payload["gap"],
        max_cells=payload.get("max_cells"),
    )


def config_to_dict(config: AlignerConfig) -> Dict[str, Any]:
    """Convert an AlignerConfig into a plain dictionary suitable for YAML."""
    if isinstance(config.gap, LinearGap):
        gap: Dict[str, Any] = {"cost": config.gap.cost}
    elif isinstance(config.gap, AffineGap):
        gap = {"open": config.gap.open, "extend": config.gap.extend}
    else:
        raise ValueError(f"Unsupported gap model: {config.gap!r}")

    payload: Dict[str, Any] = {
        "mode": config.mode.value,
        "gap": gap,
        "scoring": scoring_to_dict(config.scoring),
    }
    if config.max_cells is not None:
        payload["max_cells"] = config.max_cells
    return payload


def load_aligner_config(yaml_path: Union[str, Path]) -> AlignerConfig:
    """Load an aligner configuration from a YAML file."""
    path = Path(yaml_path)
    with path.open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle)

    if not isinstance(payload, Mapping):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return config_from_dict(payload.get("aligner", payload))


def save_aligner_config(config: AlignerConfig, yaml_path: Union[str, Path]) -> None:
    """Write an aligner configuration as YAML."""
    path = Path(yaml_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(config_to_dict(config), handle, sort_keys=False)


def _label(sequence: Any, fallback: str) -> str:
    if isinstance(sequence, SequenceType):
        return sequence.identifier
    return fallback


def result_to_dict(
    result: AlignmentResult, float_precision: int | None = 6
) -> Dict[str, Any]:
    """Convert an AlignmentResult into a plain dictionary suitable for YAML."""
    top, bottom = result.view()
    if not isinstance(top, str):
        top = [str(x) for x in top]
        bottom = [str(y) for y in bottom]
    payload = {
        "mode": result.mode,
        "score": result.score,
        "ids": [_label(result.sequence1, "seq1"), _label(result.sequence2, "seq2")],
        "span1": [result.start1, result.end1],
        "span2": [result.start2, result.end2],
        "aligned": [top, bottom],
    }
    return _convert_values(payload, float_precision)


def save_results_yaml(
    results: Iterable[AlignmentResult],
    yaml_path: Union[str, Path],
    float_precision: int | None = 6,
) -> None:
    """Write a list of alignment results as YAML."""
    path = Path(yaml_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"alignments": [result_to_dict(r, float_precision) for r in results]}
    with path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(payload, handle, sort_keys=False)


__all__ = [
    "scoring_from_dict",
    "scoring_to_dict",
    "config_from_dict",
    "config_to_dict",
    "load_aligner_config",
    "save_aligner_config",
    "result_to_dict",
    "save_results_yaml",
]
