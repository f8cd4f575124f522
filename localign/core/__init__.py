from .sequence import Sequence, ResidueClass, ResiduePair
from .matrix import ScoringParams, ScoringMatrix, build_matrix, NO_PREDECESSOR
from .traceback import traceback
from .stats import SequenceStats, AlignmentStats, compute_stats
from .errors import AlignmentError, InvalidSequenceError, ResourceExceededError, ConfigError
from .aligner import LocalAligner, AlignmentResult, NoSignificantAlignment, align, DEFAULT_MAX_CELLS

__all__ = [
    "Sequence",
    "ResidueClass",
    "ResiduePair",
    "ScoringParams",
    "ScoringMatrix",
    "build_matrix",
    "NO_PREDECESSOR",
    "traceback",
    "SequenceStats",
    "AlignmentStats",
    "compute_stats",
    "AlignmentError",
    "InvalidSequenceError",
    "ResourceExceededError",
    "ConfigError",
    "LocalAligner",
    "AlignmentResult",
    "NoSignificantAlignment",
    "align",
    "DEFAULT_MAX_CELLS",
]
