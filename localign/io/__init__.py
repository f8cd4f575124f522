from .fasta import parse_fasta, read_fasta
from .json_io import save_json, load_json, load_sequence
from .config_loader import load_config, build_from_config

__all__ = ["parse_fasta", "read_fasta", "save_json", "load_json", "load_sequence", "load_config", "build_from_config"]
