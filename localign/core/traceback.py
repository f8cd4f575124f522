from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple
from localign.core.matrix import ScoringMatrix, NO_PREDECESSOR
from localign.core.sequence import ResidueClass, ResiduePair

@dataclass
class _TracebackState:
    """Residue indices of the step emitted just before the current one (tail side)."""
    prev_a: Optional[int] = None
    prev_b: Optional[int] = None

    def classify(self, seq_a: str, seq_b: str, ia: int, ib: int) -> ResidueClass:
        if seq_a[ia] == seq_b[ib]:
            return ResidueClass.MATCH
        # Walking tail to head, the previous step is the one further along the alignment.
        if ia == self.prev_a:
            return ResidueClass.GAP_IN_SEQ2
        if ib == self.prev_b:
            return ResidueClass.GAP_IN_SEQ1
        return ResidueClass.MISMATCH

    def advance(self, ia: int, ib: int) -> None:
        self.prev_a = ia
        self.prev_b = ib

def traceback(matrix: ScoringMatrix, seq_a: str, seq_b: str) -> Tuple[ResiduePair, ...]:
    """
    Walk predecessor pointers from the maximal cell back to the zero boundary.

    Returns the alignment head to tail (lowest residue indices first). An empty
    tuple means no positive-scoring local region exists.
    """
    state = _TracebackState()
    records: List[ResiduePair] = []
    current = matrix.max_index

    while current != NO_PREDECESSOR and matrix.scores[current] > 0:
        x, y = matrix.coords(current)
        ia, ib = x - 1, y - 1
        res = state.classify(seq_a, seq_b, ia, ib)
        records.append(ResiduePair(index_a=ia, index_b=ib, residue_class=res))
        state.advance(ia, ib)
        current = int(matrix.predecessors[current])

    records.reverse()
    return tuple(records)
