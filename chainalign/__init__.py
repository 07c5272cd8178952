"""Generic pairwise sequence alignment (global, local and semiglobal)."""

from .types import (
    AffineGap,
    AlignmentMode,
    AlignmentResult,
    BLOSUM62,
    LinearGap,
    MatchMismatchScoring,
    NUC44,
    SubstitutionMatrix,
    view_alignment,
)
from .algorithms import GlobalAligner, LocalAligner, SemiglobalAligner
from .pairwise import align, get_aligner

__version__ = "0.1.0"

__all__ = [
    "align",
    "get_aligner",
    "view_alignment",
    "AlignmentMode",
    "AlignmentResult",
    "LinearGap",
    "AffineGap",
    "SubstitutionMatrix",
    "MatchMismatchScoring",
    "NUC44",
    "BLOSUM62",
    "GlobalAligner",
    "LocalAligner",
    "SemiglobalAligner",
]
