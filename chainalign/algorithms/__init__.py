"""Algorithms for the project."""

from .base import PairwiseAligner
from .modes import ALIGNERS, GlobalAligner, LocalAligner, SemiglobalAligner
from .tables import AffineScoreTable, LinearScoreTable, ScoreTable, build_score_table


__all__ = [
    "PairwiseAligner",
    "GlobalAligner",
    "LocalAligner",
    "SemiglobalAligner",
    "ALIGNERS",
    "ScoreTable",
    "LinearScoreTable",
    "AffineScoreTable",
    "build_score_table",
]
