from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional
from localign.core.aligner import LocalAligner
from localign.core.errors import AlignmentError
from localign.core.sequence import Sequence
from localign.io import read_fasta, load_sequence, save_json, load_config, build_from_config
from localign.reporting import format_text_report, build_json_report
from localign import __version__

logger = logging.getLogger(__name__)

def _load_input(path: str) -> Sequence:
    if Path(path).suffix.lower() == ".json":
        return load_sequence(path)
    return read_fasta(path)

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="localign", description="Local pairwise sequence alignment")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_align = sub.add_parser("align", help="Find the best local alignment between two sequences")
    p_align.add_argument("--seq1", required=True, help="Path to the first sequence (FASTA, or JSON with name/sequence)")
    p_align.add_argument("--seq2", required=True, help="Path to the second sequence (FASTA, or JSON with name/sequence)")
    p_align.add_argument("--config", required=False, help="Path to configuration file (JSON/YAML)")
    p_align.add_argument("--out", required=False, help="Path to write the JSON report")
    p_align.add_argument("--width", type=int, default=60, help="Alignment line width in the text report")
    p_align.add_argument("--rows", type=int, default=0, help="Also print the first N residue pairs as a table")
    sub.add_parser("version", help="Show localign version and exit")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "version":
        print(__version__)
        return 0

    if args.cmd == "align":
        try:
            aligner = build_from_config(load_config(args.config)) if args.config else LocalAligner.default()
            seq1 = _load_input(args.seq1)
            seq2 = _load_input(args.seq2)
            result = aligner.align(seq1, seq2)
        except AlignmentError as e:
            logger.debug("alignment failed", exc_info=True)
            print(f"localign: error: {e}", file=sys.stderr)
            return 2

        if args.out:
            report: Dict[str, Any] = build_json_report(result)
            save_json(args.out, report)
        else:
            print(format_text_report(result, width=args.width, max_rows=args.rows))
    return 0

if __name__ == "__main__":
    sys.exit(main())
