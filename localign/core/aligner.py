from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple
import logging
from localign.core.sequence import Sequence, ResiduePair
from localign.core.matrix import ScoringParams, ScoringMatrix, build_matrix
from localign.core.traceback import traceback
from localign.core.stats import AlignmentStats, compute_stats
from localign.core.errors import InvalidSequenceError, ResourceExceededError

logger = logging.getLogger(__name__)

DEFAULT_MAX_CELLS = 25_000_000

@dataclass(frozen=True)
class AlignmentResult:
    sequence1: Sequence
    sequence2: Sequence
    alignment: Tuple[ResiduePair, ...]
    stats: AlignmentStats
    max_score: int

    @property
    def significant(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.max_score,
            "significant": self.significant,
            "stats": self.stats.to_dict(),
            "alignment": [r.to_dict() for r in self.alignment],
        }

@dataclass(frozen=True)
class NoSignificantAlignment(AlignmentResult):
    """No positive-scoring local region exists; ``alignment`` is empty."""

    @property
    def significant(self) -> bool:
        return False

class LocalAligner:
    def __init__(self,
                 params: Optional[ScoringParams] = None,
                 max_cells: Optional[int] = DEFAULT_MAX_CELLS) -> None:
        self.params = params or ScoringParams()
        self.max_cells = max_cells

    def check(self, seq1: Sequence, seq2: Sequence) -> int:
        """Validate a pair before any allocation; returns the matrix cell count."""
        for label, seq in (("sequence1", seq1), ("sequence2", seq2)):
            if not isinstance(seq.residues, str):
                raise InvalidSequenceError(f"{label} residues must be a string, got {type(seq.residues).__name__}", seq.name)
            if not seq.residues:
                raise InvalidSequenceError(f"{label} ({seq.name or 'unnamed'}) has no residues", seq.name)
        cells = (len(seq1.residues) + 1) * (len(seq2.residues) + 1)
        if self.max_cells is not None and cells > self.max_cells:
            raise ResourceExceededError(cells, self.max_cells)
        return cells

    def build(self, seq1: Sequence, seq2: Sequence) -> ScoringMatrix:
        self.check(seq1, seq2)
        return build_matrix(seq1.residues, seq2.residues, self.params)

    def align(self, seq1: Sequence, seq2: Sequence) -> AlignmentResult:
        cells = self.check(seq1, seq2)
        logger.debug("aligning %s (%d) with %s (%d): %d cells",
                     seq1.name, len(seq1.residues), seq2.name, len(seq2.residues), cells)

        matrix = build_matrix(seq1.residues, seq2.residues, self.params)
        alignment = traceback(matrix, seq1.residues, seq2.residues)
        stats = compute_stats(alignment, seq1, seq2)

        if not alignment:
            logger.info("no significant local alignment between %s and %s", seq1.name, seq2.name)
            return NoSignificantAlignment(seq1, seq2, alignment, stats, matrix.max_score)

        logger.debug("best local score %d, alignment length %d", matrix.max_score, stats.alignment_length)
        return AlignmentResult(seq1, seq2, alignment, stats, matrix.max_score)

    def align_many(self, pairs: Iterable[Tuple[Sequence, Sequence]], max_workers: int = 4) -> List[AlignmentResult]:
        """
        Align independent pairs on a thread pool. Each run builds its own matrix,
        so nothing is shared between workers. Results keep the input order and
        the first failing pair re-raises its error.
        """
        pairs = list(pairs)
        with ThreadPoolExecutor(max_workers, thread_name_prefix="local-alignment") as pool:
            futures = [pool.submit(self.align, s1, s2) for s1, s2 in pairs]
            return [f.result() for f in futures]

    @staticmethod
    def default() -> "LocalAligner":
        return LocalAligner()

def align(seq1: Sequence, seq2: Sequence, **kwargs) -> AlignmentResult:
    """Align two sequences with a LocalAligner built from ``kwargs``."""
    return LocalAligner(**kwargs).align(seq1, seq2)
