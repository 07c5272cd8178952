"""Tests for FASTA input and pairwise FASTA output."""

from __future__ import annotations

from pathlib import Path

import pytest

from chainalign import NUC44, align
from chainalign.types import GenericSequence, NucleotideSequence, ProteinSequence
from chainalign.utils import read_fasta, write_pairwise_fasta

FASTA_TEXT = """\
>s1 first record
acgt
>s2
AGT
>s3 protein-like
MKVLA
"""


def _fasta(tmp_path: Path) -> Path:
    path = tmp_path / "records.fa"
    path.write_text(FASTA_TEXT, encoding="utf-8")
    return path


def test_read_fasta_generic(tmp_path):
    """Generic records keep residues as written."""
    records = read_fasta(_fasta(tmp_path))
    assert [r.identifier for r in records] == ["s1", "s2", "s3"]
    assert all(isinstance(r, GenericSequence) for r in records)
    assert records[0].text == "acgt"
    assert records[0].description == "first record"
    assert records[1].description is None


def test_read_fasta_filters_ids(tmp_path):
    """Only the requested identifiers are returned, in file order."""
    records = read_fasta(_fasta(tmp_path), ids=["s2", "s1"])
    assert [r.identifier for r in records] == ["s1", "s2"]


def test_read_fasta_nucleotide_validation(tmp_path):
    """Nucleotide records are uppercased; non-IUPAC residues are rejected."""
    records = read_fasta(_fasta(tmp_path), kind="nucleotide", ids=["s1", "s2"])
    assert all(isinstance(r, NucleotideSequence) for r in records)
    assert records[0].residues == ("A", "C", "G", "T")

    with pytest.raises(ValueError, match="s3"):
        read_fasta(_fasta(tmp_path), kind="nucleotide")


def test_read_fasta_protein(tmp_path):
    """Protein validation accepts amino-acid codes."""
    (record,) = read_fasta(_fasta(tmp_path), kind="protein", ids=["s3"])
    assert isinstance(record, ProteinSequence)
    assert len(record) == 5


def test_read_fasta_unknown_kind(tmp_path):
    """The sequence kind must be one of the registered kinds."""
    with pytest.raises(ValueError, match="kind"):
        read_fasta(_fasta(tmp_path), kind="rna")


def test_records_align_directly(tmp_path):
    """FASTA records can be handed to the aligners."""
    seq1, seq2 = read_fasta(_fasta(tmp_path), kind="nucleotide", ids=["s1", "s2"])
    result = align("global", NUC44, -10, seq1, seq2)
    assert result.score == 5


def test_write_pairwise_fasta(tmp_path):
    """The gapped pair is written with the sequence identifiers."""
    seq1 = NucleotideSequence(identifier="x", residues=tuple("ACGT"))
    seq2 = NucleotideSequence(identifier="y", residues=tuple("AGT"))
    result = align("global", NUC44, -10, seq1, seq2)

    path = tmp_path / "out" / "pair.fa"
    write_pairwise_fasta(path, result)
    assert path.read_text(encoding="utf-8") == ">x\nACGT\n>y\nA-GT\n"

    records = read_fasta(path)
    assert [r.text for r in records] == ["ACGT", "A-GT"]


def test_write_pairwise_fasta_plain_strings(tmp_path):
    """Plain string inputs get positional identifiers unless given."""
    result = align("local", NUC44, -10, "AATTTAA", "AAAA")
    path = tmp_path / "local.fa"
    write_pairwise_fasta(path, result, gap=".")
    assert path.read_text(encoding="utf-8") == ">seq1\nAATTT..AA\n>seq2\n.....AAAA\n"

    write_pairwise_fasta(path, result, ids=["a", "b"])
    assert path.read_text(encoding="utf-8").startswith(">a\n")
