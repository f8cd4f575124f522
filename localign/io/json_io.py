from __future__ import annotations
import json
from typing import Any, Dict
from pathlib import Path
from localign.core.sequence import Sequence
from localign.core.errors import InvalidSequenceError

def save_json(path: str | Path, obj: Dict[str, Any]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(obj, f, ensure_ascii=False, indent=2)

def load_json(path: str | Path) -> Any:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        return json.load(f)

def load_sequence(path: str | Path) -> Sequence:
    data = load_json(path)
    if isinstance(data, dict) and "sequence" in data:
        return Sequence.from_dict(data)
    raise InvalidSequenceError(f"Unrecognized sequence JSON format in {path}")
