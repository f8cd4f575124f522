"""
localign: local pairwise alignment of biological sequences.

This package provides a small, dependency-light core for:
- Representing named residue sequences (DNA, RNA or protein strings)
- Building the Smith-Waterman scoring matrix with a linear gap penalty
- Tracing back the best local alignment with per-residue classification
  (match, mismatch, gap in either sequence)
- Summarizing the alignment (length, match percentage, per-sequence offsets)

FASTA ingestion, JSON/YAML configuration, text/JSON reports and a CLI sit
on top of the core in ``localign.io``, ``localign.reporting`` and
``localign.cli``.
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
