from __future__ import annotations
from typing import Any, Dict, Optional
import json
from pathlib import Path

from localign.core.aligner import LocalAligner, DEFAULT_MAX_CELLS
from localign.core.matrix import ScoringParams
from localign.core.errors import ConfigError

def load_config(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        text = f.read()
    suffix = p.suffix.lower()
    if suffix in (".yaml", ".yml"):
        try:
            import yaml  # type: ignore
        except Exception as e:
            raise ImportError("PyYAML is required to load YAML config files. Install with `pip install pyyaml`.") from e
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {p}: {e}") from e
    else:
        # default to JSON
        try:
            data = json.loads(text or "{}")
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {p}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config {p} must contain a mapping at the top level")
    return data

def _positive_int(spec: Dict[str, Any], key: str, default: int) -> int:
    value = spec.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or int(value) != value:
        raise ConfigError(f"'{key}' must be an integer, got {value!r}")
    if value <= 0:
        raise ConfigError(f"'{key}' must be positive, got {value!r}")
    return int(value)

def _section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    spec = cfg.get(name)
    if spec is None:
        return {}
    if not isinstance(spec, dict):
        raise ConfigError(f"'{name}' section must be a mapping")
    return spec

def _make_params(spec: Dict[str, Any]) -> ScoringParams:
    if not spec:
        return ScoringParams()
    return ScoringParams(
        match_reward=_positive_int(spec, "match_reward", 1),
        gap_penalty=_positive_int(spec, "gap_penalty", 1),
    )

def _make_max_cells(spec: Dict[str, Any]) -> Optional[int]:
    if "max_cells" in spec and spec["max_cells"] is None:
        return None  # ceiling disabled
    return _positive_int(spec, "max_cells", DEFAULT_MAX_CELLS)

def build_from_config(cfg: Dict[str, Any]) -> LocalAligner:
    params = _make_params(_section(cfg, "scoring"))
    max_cells = _make_max_cells(_section(cfg, "limits"))
    return LocalAligner(params=params, max_cells=max_cells)
