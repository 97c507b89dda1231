"""Plain-text formatting helpers for sessions, rules and summaries."""

from __future__ import annotations

from matrix_training.models.enums import WEIGHT_UNIT, Category
from matrix_training.models.rules import Rule
from matrix_training.models.session import Session
from matrix_training.models.summary import WeeklySummary


def format_number(value: float) -> str:
    """Drop a trailing ``.0``. e.g. 100.0 -> '100', 102.5 -> '102.5'."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def format_weight(value: float | None) -> str:
    """e.g. 102.5 -> '102.5 lb'; None -> '—'."""
    if value is None:
        return "—"
    return f"{format_number(value)} {WEIGHT_UNIT}"


def format_session(session: Session | None) -> str:
    """Compact reps@weight list. e.g. '8@100, 7@100'."""
    if session is None:
        return "None"
    return ", ".join(f"{s.reps}@{format_number(s.weight)}" for s in session.sets)


def format_rep_range(rule: Rule) -> str:
    """e.g. '6–8'."""
    return f"{rule.rep_floor}–{rule.rep_ceiling}"


def format_prescription(rule: Rule) -> str:
    """e.g. '3×6–8'."""
    return f"{rule.set_count}×{format_rep_range(rule)}"


def format_summary(summary: WeeklySummary) -> str:
    """Text table of the weekly summary with percentage columns."""
    lines = [
        "Last 7 Days Summary",
        f"{'Type':<6} {'Sets':>5} {'Top Reps':>12} {'Top Weight':>12}",
    ]
    for category in Category:
        t = summary[category]
        lines.append(
            f"{category.name:<6} {t.total_sets:>5} "
            f"{t.top_rep_sets:>4} ({t.top_rep_ratio:>4.0%}) "
            f"{t.top_weight_sets:>4} ({t.top_weight_ratio:>4.0%})"
        )
    return "\n".join(lines)
