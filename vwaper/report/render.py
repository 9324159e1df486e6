from __future__ import annotations

from typing import List

from vwaper.models.report import Report


def fmt_number(value: float) -> str:
    """Shortest general form, 6 significant digits (80, 184.1, 33.3333)."""
    return f"{value:g}"


def render_lines(report: Report) -> List[str]:
    lines: List[str] = []

    for row in report.percentages:
        lines.append(f"{row.symbol},{row.interval},{fmt_number(row.percentage)}")

    lines.append(report.delimiter)

    for row in report.high_low:
        lines.append(f"{row.symbol},{fmt_number(row.max_high)},{fmt_number(row.min_low)}")

    return lines


def render_text(report: Report) -> str:
    return "\n".join(render_lines(report)) + "\n"
