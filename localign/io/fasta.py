from __future__ import annotations
import re
from pathlib import Path
from localign.core.sequence import Sequence
from localign.core.errors import InvalidSequenceError

def parse_fasta(text: str) -> Sequence:
    """
    Parse the first record of a FASTA text.

    Header lines start with '>'; the first one names the record and a later
    one ends it. Blank lines are skipped and residue lines are concatenated.
    """
    name = ""
    residues = []
    for raw in re.split(r"\r?\n", text):
        line = raw.strip()
        if not line:
            continue
        if line.startswith(">"):
            if residues:
                break
            name = line[1:].strip()
            continue
        residues.append(line)

    seq = "".join(residues)
    if not seq:
        raise InvalidSequenceError(f"FASTA record {name or '(unnamed)'} has no residues", name)
    return Sequence(name=name, residues=seq)

def read_fasta(path: str | Path) -> Sequence:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        return parse_fasta(f.read())
