"""Functions for working with FASTA files."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Type, Union

import skbio.io
from skbio import Sequence as SkbioSequence

from chainalign.types import (
    AlignmentResult,
    GenericSequence,
    NucleotideSequence,
    ProteinSequence,
    SequenceType,
)

SEQUENCE_KINDS: Dict[str, Type[SequenceType]] = {
    "nucleotide": NucleotideSequence,
    "protein": ProteinSequence,
    "generic": GenericSequence,
}


def sequence_from_skbio(
    record: SkbioSequence, seq_cls: Type[SequenceType] = GenericSequence
) -> SequenceType:
    """Convert a scikit-bio record to a SequenceType."""
    metadata = getattr(record, "metadata", {}) or {}
    identifier = metadata.get("id") or ""
    description = metadata.get("description") or None
    return seq_cls(
        identifier=identifier,
        residues=tuple(str(record)),
        description=description,
    )


def read_fasta(
    file_path: Union[str, Path],
    kind: str = "generic",
    ids: Optional[Sequence[str]] = None,
) -> List[SequenceType]:
    """Read a FASTA file into SequenceType records.

    Args:
        file_path: FASTA file to read
        kind: "nucleotide", "protein" or "generic"; selects residue validation
        ids: Optional identifiers to keep, in file order

    Raises:
        ValueError: unknown kind, or a record with residues outside the alphabet
    """
    if kind not in SEQUENCE_KINDS:
        raise ValueError(
            f"Unknown sequence kind {kind!r}; allowed: {sorted(SEQUENCE_KINDS)}"
        )
    seq_cls = SEQUENCE_KINDS[kind]

    sequences: List[SequenceType] = []
    for record in skbio.io.read(str(file_path), format="fasta"):
        if ids and record.metadata.get("id") not in ids:
            continue
        try:
            sequences.append(sequence_from_skbio(record, seq_cls))
        except ValueError as exc:
            raise ValueError(
                f"{file_path}: record {record.metadata.get('id')!r}: {exc}"
            ) from exc
    return sequences


def write_pairwise_fasta(
    file_path: Union[str, Path],
    result: AlignmentResult,
    ids: Optional[Sequence[str]] = None,
    gap: str = "-",
) -> None:
    """Write the gapped pair of ``result`` as a two-record FASTA file."""
    if ids is None:
        ids = [
            seq.identifier if isinstance(seq, SequenceType) else f"seq{index}"
            for index, seq in enumerate((result.sequence1, result.sequence2), start=1)
        ]
    gapped = result.view(gap)

    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        for identifier, row in zip(ids, gapped):
            text = row if isinstance(row, str) else "".join(str(x) for x in row)
            handle.write(f">{identifier}\n{text}\n")


__all__ = ["read_fasta", "write_pairwise_fasta", "sequence_from_skbio", "SEQUENCE_KINDS"]
