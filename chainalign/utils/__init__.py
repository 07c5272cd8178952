"""Utility functions for the project."""

from .fasta import read_fasta, write_pairwise_fasta
from .formatting import format_alignment, match_line
from .serialization import (
    config_to_dict,
    load_aligner_config,
    result_to_dict,
    save_aligner_config,
    save_results_yaml,
)

__all__ = [
    "read_fasta",
    "write_pairwise_fasta",
    "format_alignment",
    "match_line",
    "config_to_dict",
    "load_aligner_config",
    "result_to_dict",
    "save_aligner_config",
    "save_results_yaml",
]
