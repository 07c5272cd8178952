"""Types for the project."""

from .sequence import (
    SequenceType,
    GenericSequence,
    NucleotideSequence,
    ProteinSequence,
)
from .parameters import (
    AlignmentMode,
    LinearGap,
    AffineGap,
    GapModel,
    AlignerConfig,
    coerce_gap_model,
)
from .alignment import GAP, EditOp, Operation, AlignmentResult, view_alignment
from .scoring import (
    ResidueNotFoundError,
    SubstitutionMatrix,
    MatchMismatchScoring,
    transpose_scoring,
)
from .matrices import NUC44, BLOSUM62, get_matrix
from .evaluation import AlignmentStats


__all__ = [
    "SequenceType",
    "GenericSequence",
    "NucleotideSequence",
    "ProteinSequence",
    "AlignmentMode",
    "LinearGap",
    "AffineGap",
    "GapModel",
    "AlignerConfig",
    "coerce_gap_model",
    "GAP",
    "EditOp",
    "Operation",
    "AlignmentResult",
    "view_alignment",
    "ResidueNotFoundError",
    "SubstitutionMatrix",
    "MatchMismatchScoring",
    "transpose_scoring",
    "NUC44",
    "BLOSUM62",
    "get_matrix",
    "AlignmentStats",
]
