import json
from pathlib import Path
from localign import __version__
from localign.cli import main

def _write(tmp_path: Path, name: str, text: str) -> str:
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return str(p)

def test_align_writes_json_report(tmp_path: Path):
    s1 = _write(tmp_path, "a.fasta", ">a\nACACACTA\n")
    s2 = _write(tmp_path, "b.fasta", ">b\nAGCACACA\n")
    out = tmp_path / "out" / "report.json"
    assert main(["align", "--seq1", s1, "--seq2", s2, "--out", str(out)]) == 0
    report = json.loads(out.read_text(encoding="utf-8"))
    assert report["score"] == 5
    assert report["stats"]["sequence1"]["name"] == "a"

def test_align_prints_text_report(tmp_path: Path, capsys):
    s1 = _write(tmp_path, "a.fasta", ">a\nGATTACA\n")
    s2 = _write(tmp_path, "b.json", json.dumps({"name": "b", "sequence": "TTAC"}))
    assert main(["align", "--seq1", s1, "--seq2", s2, "--rows", "2"]) == 0
    out = capsys.readouterr().out
    assert "Score:       4" in out
    assert "seq2  TTAC" in out

def test_align_uses_config(tmp_path: Path, capsys):
    s1 = _write(tmp_path, "a.fasta", ">a\nACGT\n")
    s2 = _write(tmp_path, "b.fasta", ">b\nACGT\n")
    cfg = _write(tmp_path, "cfg.json", json.dumps({"limits": {"max_cells": 4}}))
    assert main(["align", "--seq1", s1, "--seq2", s2, "--config", cfg]) == 2
    assert "ceiling" in capsys.readouterr().err

def test_align_reports_invalid_input(tmp_path: Path, capsys):
    s1 = _write(tmp_path, "a.fasta", ">a\n\n")
    s2 = _write(tmp_path, "b.fasta", ">b\nACGT\n")
    assert main(["align", "--seq1", s1, "--seq2", s2]) == 2
    assert "no residues" in capsys.readouterr().err

def test_version(capsys):
    assert main(["version"]) == 0
    assert capsys.readouterr().out.strip() == __version__

def test_align_rejects_null_json_sequence(tmp_path: Path, capsys):
    s1 = _write(tmp_path, "a.json", json.dumps({"name": "a", "sequence": None}))
    s2 = _write(tmp_path, "b.fasta", ">b\nNONE\n")
    assert main(["align", "--seq1", s1, "--seq2", s2]) == 2
    captured = capsys.readouterr()
    assert "Score:" not in captured.out
    assert "must be a string" in captured.err

def test_align_rejects_unrecognized_json_layout(tmp_path: Path, capsys):
    s1 = _write(tmp_path, "a.json", json.dumps({"residues": "ACGT"}))
    s2 = _write(tmp_path, "b.fasta", ">b\nACGT\n")
    assert main(["align", "--seq1", s1, "--seq2", s2]) == 2
    assert "Unrecognized sequence JSON format" in capsys.readouterr().err
