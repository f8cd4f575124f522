from pathlib import Path
import pytest
from localign.core.sequence import Sequence
from localign.core.errors import InvalidSequenceError
from localign.io.fasta import parse_fasta, read_fasta
from localign.io.json_io import save_json, load_sequence

def test_parse_first_record_only():
    text = ">NC_0001 test record\r\nACGT\n\nTTGA\n>second\nCCCC\n"
    seq = parse_fasta(text)
    assert seq.name == "NC_0001 test record"
    assert seq.residues == "ACGTTTGA"

def test_parse_without_header():
    seq = parse_fasta("  acgt  \nNN\n")
    assert seq.name == ""
    assert seq.residues == "acgtNN"

def test_parse_rejects_empty_record():
    with pytest.raises(InvalidSequenceError):
        parse_fasta(">only a header\n\n")

def test_read_fasta_file(tmp_path: Path):
    p = tmp_path / "seq.fasta"
    p.write_text(">seq\nGATTACA\n", encoding="utf-8")
    assert read_fasta(p) == Sequence("seq", "GATTACA")

def test_sequence_json_file(tmp_path: Path):
    p = tmp_path / "nested" / "seq.json"
    save_json(p, Sequence("s", "ACGT").to_dict())
    assert load_sequence(p) == Sequence("s", "ACGT")

def test_sequence_json_unrecognized(tmp_path: Path):
    p = tmp_path / "bad.json"
    save_json(p, {"residues": "ACGT"})
    with pytest.raises(InvalidSequenceError):
        load_sequence(p)

@pytest.mark.parametrize("doc", [
    {"name": "a", "sequence": None},
    {"name": "a", "sequence": 123},
    {"name": "a", "sequence": ["A", "C"]},
    {"name": 7, "sequence": "ACGT"},
])
def test_sequence_json_rejects_non_string_fields(tmp_path: Path, doc):
    p = tmp_path / "seq.json"
    save_json(p, doc)
    with pytest.raises(InvalidSequenceError):
        load_sequence(p)

def test_sequence_json_null_name_is_unnamed(tmp_path: Path):
    p = tmp_path / "seq.json"
    save_json(p, {"name": None, "sequence": "ACGT"})
    assert load_sequence(p) == Sequence("", "ACGT")
