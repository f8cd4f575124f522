from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import numpy as np
from localign.core.errors import ConfigError

NO_PREDECESSOR = -1

@dataclass(frozen=True)
class ScoringParams:
    match_reward: int = 1
    gap_penalty: int = 1

    def __post_init__(self) -> None:
        for key in ("match_reward", "gap_penalty"):
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigError(f"'{key}' must be a positive integer, got {value!r}")

    @property
    def mismatch_penalty(self) -> int:
        return -self.match_reward

@dataclass
class ScoringMatrix:
    """
    Local-alignment grid over two residue strings.

    Cells are stored row-major in two parallel flat arrays: ``scores`` and
    ``predecessors``. Cell (x, y) lives at ``y * width + x`` where x walks
    sequence A (width = len(A) + 1) and y walks sequence B
    (height = len(B) + 1). Row 0 and column 0 are the zero boundary.
    """
    width: int
    height: int
    scores: np.ndarray
    predecessors: np.ndarray
    max_index: int = 0
    max_score: int = 0

    @property
    def size(self) -> int:
        return self.width * self.height

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def coords(self, index: int) -> Tuple[int, int]:
        return index % self.width, index // self.width

    def score_at(self, x: int, y: int) -> int:
        return int(self.scores[self.index(x, y)])

    def predecessor_at(self, x: int, y: int) -> int:
        return int(self.predecessors[self.index(x, y)])

    def as_grid(self) -> np.ndarray:
        # (height, width) view, rows follow sequence B
        return self.scores.reshape(self.height, self.width)

def build_matrix(seq_a: str, seq_b: str, params: ScoringParams | None = None) -> ScoringMatrix:
    params = params or ScoringParams()
    match_reward = params.match_reward
    mismatch_penalty = params.mismatch_penalty
    gap = params.gap_penalty

    width = len(seq_a) + 1
    height = len(seq_b) + 1
    scores = np.zeros(width * height, dtype=np.int64)
    predecessors = np.full(width * height, NO_PREDECESSOR, dtype=np.int64)

    max_score = 0
    max_index = 0

    # Rows are filled as Python lists and copied into the arrays once complete;
    # the scan order (y outer, x inner) decides which maximum wins a tie.
    prev_row = [0] * width
    for y in range(1, height):
        row = [0] * width
        row_pred = [NO_PREDECESSOR] * width
        b = seq_b[y - 1]
        base = y * width
        for x in range(1, width):
            diag = prev_row[x - 1] + (match_reward if seq_a[x - 1] == b else mismatch_penalty)
            left = row[x - 1] - gap
            top = prev_row[x] - gap
            score = max(diag, left, top, 0)

            if score == diag:
                row_pred[x] = base - width + x - 1
            elif score == left:
                row_pred[x] = base + x - 1
            elif score == top:
                row_pred[x] = base - width + x

            if score > max_score:
                max_score = score
                max_index = base + x
            row[x] = score

        scores[base:base + width] = row
        predecessors[base:base + width] = row_pred
        prev_row = row

    return ScoringMatrix(
        width=width,
        height=height,
        scores=scores,
        predecessors=predecessors,
        max_index=max_index,
        max_score=max_score,
    )
