"""Built-in substitution matrices, loaded through Biopython."""

from typing import Dict, List

from Bio.Align import substitution_matrices

from .scoring import SubstitutionMatrix

NUC44 = SubstitutionMatrix.from_biopython(
    substitution_matrices.load("NUC.4.4"), name="NUC44"
)
BLOSUM62 = SubstitutionMatrix.from_biopython(
    substitution_matrices.load("BLOSUM62"), name="BLOSUM62"
)

# Keyed by upper-case name; other Biopython matrices are added on first use.
MATRICES: Dict[str, SubstitutionMatrix] = {
    "NUC44": NUC44,
    "NUC.4.4": NUC44,
    "BLOSUM62": BLOSUM62,
}


def available_matrices() -> List[str]:
    """Names accepted by :func:`get_matrix`."""
    return sorted(set(substitution_matrices.load()) | {"NUC44"})


def get_matrix(name: str) -> SubstitutionMatrix:
    """Look up a matrix by case-insensitive name."""
    key = name.strip().upper()
    if key in MATRICES:
        return MATRICES[key]

    known = {available.upper(): available for available in substitution_matrices.load()}
    if key not in known:
        raise ValueError(
            f"Unknown substitution matrix {name!r}; available: {available_matrices()}"
        )
    matrix = SubstitutionMatrix.from_biopython(
        substitution_matrices.load(known[key]), name=known[key]
    )
    MATRICES[key] = matrix
    return matrix


__all__ = ["NUC44", "BLOSUM62", "MATRICES", "available_matrices", "get_matrix"]
