"""Constants for the project."""

from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).parent.parent

# ============================================================================
# Configuration
# ============================================================================
CONFIG_FOLDER = PROJECT_ROOT / "configs"
DEFAULT_CONFIG_YAML = CONFIG_FOLDER / "default.yaml"

# ============================================================================
# Results directories
# ============================================================================
RESULTS_FOLDER = PROJECT_ROOT / "results"

# Alignments written by run_alignment.py
ALIGNMENTS_FOLDER = RESULTS_FOLDER / "alignments"

# Pairwise summaries (CSV files from align_fasta_pairs.py)
SUMMARIES_FOLDER = RESULTS_FOLDER / "summaries"

# Score matrix heatmaps (from plot_score_matrix.py)
SCORE_MATRIX_FOLDER = RESULTS_FOLDER / "score_matrices"

# ============================================================================
# Aligner defaults
# ============================================================================
DEFAULT_MODE = "global"
MODES: List[str] = ["global", "local", "semiglobal"]
DEFAULT_MATRIX = "NUC44"
DEFAULT_GAP_COST = -10
DEFAULT_LINE_WIDTH = 60
PRECISION = 6

# ============================================================================
# Plot styling
# ============================================================================
PATH_COLOR = "#ff3b30"
PLOT_DPI = 150
PLOT_XLABEL_FONTSIZE = 12
PLOT_YLABEL_FONTSIZE = 12
PLOT_TITLE_FONTSIZE = 14
