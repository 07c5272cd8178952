"""Alignment statistics for the project."""

from .metrics import identity, rescore_alignment, summarize

__all__ = [
    "identity",
    "rescore_alignment",
    "summarize",
]
