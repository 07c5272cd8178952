"""Sequence types."""

from dataclasses import dataclass
from typing import ClassVar, FrozenSet, Iterator, Optional, Tuple

IUPAC_NUCLEOTIDES: FrozenSet[str] = frozenset("ACGTURYSWKMBDHVN")
AMINO_ACIDS: FrozenSet[str] = frozenset("ACDEFGHIKLMNPQRSTVWYBZX*")


@dataclass(frozen=True)
class SequenceType:
    """Identified, immutable sequence of residues.

    Instances behave like read-only sequences (``len``, indexing, iteration),
    so they can be handed to the aligners directly.
    """

    identifier: str
    residues: Tuple[str, ...]
    description: Optional[str] = None

    alphabet: ClassVar[Optional[FrozenSet[str]]] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "residues", tuple(self.residues))
        self._validate()

    def __len__(self) -> int:
        return len(self.residues)

    def __getitem__(self, index):
        return self.residues[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.residues)

    def __str__(self) -> str:
        class_name = self.__class__.__name__
        joined_residues = "".join(self.residues)
        return (
            f"{class_name} (\n"
            f"   id: {self.identifier}\n"
            f"   description: {self.description}\n"
            f"   residues: {joined_residues}\n"
            f")"
        )

    @property
    def text(self) -> str:
        """Residues joined into a single string."""
        return "".join(self.residues)

    def _validate(self) -> None:
        """Raise ValueError if a residue falls outside the class alphabet."""
        if self.alphabet is None:
            return
        invalid = {ch for ch in self.residues if ch not in self.alphabet}
        if invalid:
            raise ValueError(
                f"Invalid {self.__class__.__name__} residues: {sorted(invalid)}; "
                f"allowed: {sorted(self.alphabet)}"
            )


@dataclass(frozen=True)
class GenericSequence(SequenceType):
    """Sequence over an arbitrary alphabet; no residue validation."""


@dataclass(frozen=True)
class NucleotideSequence(SequenceType):
    """DNA/RNA sequence over the IUPAC nucleotide codes."""

    alphabet: ClassVar[Optional[FrozenSet[str]]] = IUPAC_NUCLEOTIDES

    def __post_init__(self) -> None:
        # Uppercase all residues on initialization, then validate
        object.__setattr__(self, "residues", tuple(r.upper() for r in self.residues))
        super().__post_init__()


@dataclass(frozen=True)
class ProteinSequence(SequenceType):
    """Protein sequence over the one-letter amino-acid codes."""

    alphabet: ClassVar[Optional[FrozenSet[str]]] = AMINO_ACIDS

    def __post_init__(self) -> None:
        object.__setattr__(self, "residues", tuple(r.upper() for r in self.residues))
        super().__post_init__()


__all__ = [
    "SequenceType",
    "GenericSequence",
    "NucleotideSequence",
    "ProteinSequence",
    "IUPAC_NUCLEOTIDES",
    "AMINO_ACIDS",
]
