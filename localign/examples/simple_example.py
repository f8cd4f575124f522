"""
Simple localign example that aligns two short FASTA records and prints a report.
"""
from localign.io.fasta import parse_fasta
from localign.core import LocalAligner
from localign.reporting import format_text_report

SEQ1 = """>seq1 textbook query
ACACACTA
"""

SEQ2 = """>seq2 textbook subject
AGCACACA
"""


def main() -> None:
    seq1 = parse_fasta(SEQ1)
    seq2 = parse_fasta(SEQ2)

    aligner = LocalAligner.default()
    res = aligner.align(seq1, seq2)

    print(format_text_report(res, max_rows=10, title="localign Simple Example"))


if __name__ == "__main__":
    main()
