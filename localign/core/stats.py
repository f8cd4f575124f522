from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence as Seq
from localign.core.sequence import Sequence, ResidueClass, ResiduePair

@dataclass(frozen=True)
class SequenceStats:
    name: str
    length: int
    start: Optional[int] = None
    end: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "length": self.length, "start": self.start, "end": self.end}

@dataclass(frozen=True)
class AlignmentStats:
    permutations: int
    alignment_length: int
    alignment_match_percent: Optional[float]
    sequence1: SequenceStats
    sequence2: SequenceStats
    matches: int = 0
    mismatches: int = 0
    gaps: int = 0

    @property
    def is_empty(self) -> bool:
        return self.alignment_length == 0

    def to_dict(self) -> Dict[str, Any]:
        # camelCase keys are kept for consumers of the original stats payload
        return {
            "permutations": self.permutations,
            "alignmentLength": self.alignment_length,
            "alignmentMatchPercent": self.alignment_match_percent,
            "sequence1": self.sequence1.to_dict(),
            "sequence2": self.sequence2.to_dict(),
            "matches": self.matches,
            "mismatches": self.mismatches,
            "gaps": self.gaps,
        }

def compute_stats(alignment: Seq[ResiduePair], seq1: Sequence, seq2: Sequence) -> AlignmentStats:
    """
    Summarize a head-to-tail alignment.

    ``start``/``end`` are the first and last residue index touched in each
    sequence. An empty alignment yields sentinel values: length 0 and ``None``
    for the match percent and the per-sequence offsets.
    """
    permutations = (len(seq1.residues) + 1) * (len(seq2.residues) + 1)

    if not alignment:
        return AlignmentStats(
            permutations=permutations,
            alignment_length=0,
            alignment_match_percent=None,
            sequence1=SequenceStats(seq1.name, len(seq1.residues)),
            sequence2=SequenceStats(seq2.name, len(seq2.residues)),
        )

    matches = sum(1 for r in alignment if r.residue_class is ResidueClass.MATCH)
    mismatches = sum(1 for r in alignment if r.residue_class is ResidueClass.MISMATCH)
    gaps = sum(1 for r in alignment if r.residue_class.is_gap)
    head, tail = alignment[0], alignment[-1]

    return AlignmentStats(
        permutations=permutations,
        alignment_length=len(alignment),
        alignment_match_percent=matches / len(alignment),
        sequence1=SequenceStats(seq1.name, len(seq1.residues), start=head.index_a, end=tail.index_a),
        sequence2=SequenceStats(seq2.name, len(seq2.residues), start=head.index_b, end=tail.index_b),
        matches=matches,
        mismatches=mismatches,
        gaps=gaps,
    )
