from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict
from localign.core.errors import InvalidSequenceError


@dataclass(frozen=True)
class Sequence:
    name: str
    residues: str

    def __len__(self) -> int:
        return len(self.residues)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "sequence": self.residues}

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Sequence":
        name = d.get("name")
        residues = d.get("sequence")
        if name is not None and not isinstance(name, str):
            raise InvalidSequenceError(f"sequence name must be a string, got {type(name).__name__}")
        if not isinstance(residues, str):
            raise InvalidSequenceError(f"sequence {name or '(unnamed)'} residues must be a string, got {type(residues).__name__}", name)
        return Sequence(name=name or "", residues=residues)


class ResidueClass(Enum):
    MISMATCH = "mismatch"
    GAP_IN_SEQ2 = "gap_in_seq2"  # seq2 has no counterpart for seq1's residue
    GAP_IN_SEQ1 = "gap_in_seq1"  # seq1 has no counterpart for seq2's residue
    MATCH = "match"

    @property
    def is_gap(self) -> bool:
        return self in (ResidueClass.GAP_IN_SEQ1, ResidueClass.GAP_IN_SEQ2)


@dataclass(frozen=True)
class ResiduePair:
    index_a: int
    index_b: int
    residue_class: ResidueClass

    def to_dict(self) -> Dict[str, Any]:
        return {"iA": self.index_a, "iB": self.index_b, "res": self.residue_class.value}
