import numpy as np
from localign.core.matrix import build_matrix, ScoringMatrix, NO_PREDECESSOR
from localign.core.traceback import traceback
from localign.core.sequence import ResidueClass

M = ResidueClass.MATCH
X = ResidueClass.MISMATCH

def _chain_matrix():
    # 3x3 grid: (2,2) -> left (1,2) -> top (1,1) -> origin
    scores = np.zeros(9, dtype=np.int64)
    preds = np.full(9, NO_PREDECESSOR, dtype=np.int64)
    scores[8], preds[8] = 3, 7
    scores[7], preds[7] = 2, 4
    scores[4], preds[4] = 1, 0
    return ScoringMatrix(width=3, height=3, scores=scores, predecessors=preds, max_index=8, max_score=3)

def test_textbook_traceback():
    a, b = "ACACACTA", "AGCACACA"
    aln = traceback(build_matrix(a, b), a, b)
    assert [(r.index_a, r.index_b) for r in aln] == [(1, 2), (2, 3), (3, 4), (4, 5), (5, 6)]
    assert all(r.residue_class is M for r in aln)
    assert "".join(a[r.index_a] for r in aln) == "CACAC"

def test_substitution_inside_alignment():
    a, b = "AAGAA", "AACAA"
    m = build_matrix(a, b)
    assert m.max_score == 3
    aln = traceback(m, a, b)
    assert [r.residue_class for r in aln] == [M, M, X, M, M]
    assert [(r.index_a, r.index_b) for r in aln] == [(i, i) for i in range(5)]

def test_skipped_residue_next_to_mismatch():
    a, b = "ACGTT", "ACTT"
    m = build_matrix(a, b)
    assert m.max_score == 3
    aln = traceback(m, a, b)
    # the G of seq1 is consumed by a left move; neither index repeats against
    # the step toward the tail, so it is reported as a substitution
    assert [(r.index_a, r.index_b, r.residue_class) for r in aln] == [
        (0, 0, M), (1, 1, M), (2, 1, X), (3, 2, M), (4, 3, M),
    ]

def test_repeated_seq2_index_is_gap_in_seq1():
    aln = traceback(_chain_matrix(), "CA", "CA")
    assert [(r.index_a, r.index_b, r.residue_class) for r in aln] == [
        (0, 0, M), (0, 1, ResidueClass.GAP_IN_SEQ1), (1, 1, M),
    ]

def test_repeated_seq1_index_is_gap_in_seq2():
    aln = traceback(_chain_matrix(), "CA", "GA")
    assert [r.residue_class for r in aln] == [
        ResidueClass.GAP_IN_SEQ2, ResidueClass.GAP_IN_SEQ1, M,
    ]

def test_stops_at_zero_score_predecessor():
    m = _chain_matrix()
    m.scores[4] = 0
    aln = traceback(m, "CA", "CA")
    assert len(aln) == 2
    assert aln[0].index_b == 1

def test_empty_when_no_positive_cell():
    a, b = "AAAA", "TTTT"
    assert traceback(build_matrix(a, b), a, b) == ()
