from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple

from localign.core.aligner import AlignmentResult
from localign.core.sequence import ResidueClass
from localign.core.stats import AlignmentStats, SequenceStats

_MIDDLE = {
    ResidueClass.MATCH: "|",
    ResidueClass.MISMATCH: ".",
    ResidueClass.GAP_IN_SEQ1: " ",
    ResidueClass.GAP_IN_SEQ2: " ",
}

_SYMBOL = {
    ResidueClass.MATCH: "✓",
    ResidueClass.MISMATCH: "✗",
    ResidueClass.GAP_IN_SEQ1: "-",
    ResidueClass.GAP_IN_SEQ2: "-",
}


def build_alignment_rows(result: AlignmentResult) -> List[Dict[str, Any]]:
    """
    Turn an alignment into display-friendly rows, one per residue pair.

    ``a``/``b`` hold the residues at ``iA``/``iB``; the residue of the sequence
    that carries the gap is reported as None.
    """
    seq_a = result.sequence1.residues
    seq_b = result.sequence2.residues
    rows: List[Dict[str, Any]] = []
    for idx, r in enumerate(result.alignment, start=1):
        a: Optional[str] = seq_a[r.index_a]
        b: Optional[str] = seq_b[r.index_b]
        if r.residue_class is ResidueClass.GAP_IN_SEQ1:
            a = None
        elif r.residue_class is ResidueClass.GAP_IN_SEQ2:
            b = None
        rows.append(
            {
                "index": idx,
                "iA": r.index_a,
                "iB": r.index_b,
                "a": a,
                "b": b,
                "class": r.residue_class.value,
            }
        )
    return rows


def format_alignment_strings(result: AlignmentResult) -> Tuple[str, str, str]:
    """Gapped top/middle/bottom lines for the alignment (seq1 on top)."""
    top: List[str] = []
    mid: List[str] = []
    bot: List[str] = []
    for row, r in zip(build_alignment_rows(result), result.alignment):
        top.append(row["a"] or "-")
        mid.append(_MIDDLE[r.residue_class])
        bot.append(row["b"] or "-")
    return "".join(top), "".join(mid), "".join(bot)


def format_alignment_block(result: AlignmentResult, *, width: int = 60) -> str:
    if not result.alignment:
        return "(no significant local alignment)"
    top, mid, bot = format_alignment_strings(result)
    label_w = 6
    out_lines: List[str] = []
    for off in range(0, len(top), width):
        if off:
            out_lines.append("")
        out_lines.append(f"{'seq1':<{label_w}}{top[off:off + width]}")
        out_lines.append(f"{'':<{label_w}}{mid[off:off + width]}")
        out_lines.append(f"{'seq2':<{label_w}}{bot[off:off + width]}")
    return "\n".join(out_lines)


def format_alignment_table(rows: List[Dict[str, Any]], *, max_rows: int = 50) -> str:
    """
    Pretty-print a text table of residue pairs.

    Columns:
      IDX | iA | A | iB | B | CLASS
    """
    header = f"{'IDX':>5} | {'iA':>6} | {'A':^3} | {'iB':>6} | {'B':^3} | {'CLASS':<12}"
    sep = "-" * len(header)
    out_lines = [header, sep]
    shown = 0
    for r in rows:
        if shown >= max_rows:
            break
        cls = ResidueClass(r["class"])
        a = r["a"] if r["a"] is not None else "-"
        b = r["b"] if r["b"] is not None else "-"
        out_lines.append(
            f"{r['index']:>5} | {r['iA']:>6} | {a:^3} | {r['iB']:>6} | {b:^3} | {_SYMBOL[cls]} {cls.value:<10}"
        )
        shown += 1
    if shown < len(rows):
        out_lines.append(f"... ({len(rows) - shown} more rows)")
    return "\n".join(out_lines)


def _format_sequence_stats(label: str, s: SequenceStats) -> str:
    span = "—" if s.start is None else f"{s.start}..{s.end}"
    return f"- {label}: {s.name or '(unnamed)'} length={s.length} span={span}"


def format_stats_summary(stats: AlignmentStats) -> str:
    lines: List[str] = []
    lines.append(f"- permutations: {stats.permutations}")
    lines.append(f"- alignment length: {stats.alignment_length}")
    if stats.alignment_match_percent is None:
        lines.append("- match: n/a")
    else:
        lines.append(f"- match: {stats.alignment_match_percent * 100:.1f}%")
        lines.append(f"  · matches={stats.matches}, mismatches={stats.mismatches}, gaps={stats.gaps}")
    lines.append(_format_sequence_stats("sequence1", stats.sequence1))
    lines.append(_format_sequence_stats("sequence2", stats.sequence2))
    return "\n".join(lines)


def build_json_report(result: AlignmentResult) -> Dict[str, Any]:
    """
    Create a JSON-serializable report: score, stats with the camelCase keys,
    raw residue-pair records and display rows.
    """
    report: Dict[str, Any] = result.to_dict()
    report["alignment_rows"] = build_alignment_rows(result)
    if result.alignment:
        top, mid, bot = format_alignment_strings(result)
        report["aligned"] = {"sequence1": top, "markup": mid, "sequence2": bot}
    return report


def format_text_report(
    result: AlignmentResult,
    *,
    width: int = 60,
    max_rows: int = 0,
    title: Optional[str] = None,
) -> str:
    """
    Build a human-friendly text report with:
      - header + best local score,
      - statistics summary,
      - wrapped alignment block,
      - optional per-residue table (first max_rows, off by default).
    """
    lines: List[str] = []
    hdr = title or "Local Alignment Report"
    lines.append("=" * 80)
    lines.append(hdr)
    lines.append("=" * 80)
    lines.append(f"Score:       {result.max_score}")
    lines.append(f"Significant: {result.significant}")
    lines.append("")
    lines.append("Statistics:")
    lines.append(format_stats_summary(result.stats))
    lines.append("")
    lines.append("Alignment:")
    lines.append(format_alignment_block(result, width=width))
    if max_rows and result.alignment:
        lines.append("")
        lines.append("Residue pairs:")
        lines.append(format_alignment_table(build_alignment_rows(result), max_rows=max_rows))
    lines.append("=" * 80)
    return "\n".join(lines)
