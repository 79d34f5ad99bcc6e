"""
Small explainability formatting helpers.

Used by the CLI to print compact summaries and copyable analyst notes.
Subscore rounding here is display-only; the aggregate uses the unrounded values.
"""

from __future__ import annotations

from stockfit.domain.models import METRIC_LABELS, METRIC_NAMES, Evaluation


def _fmt_raw(value: float | None) -> str:
    return "?" if value is None else f"{value:g}"


def one_line_summary(evaluation: Evaluation) -> str:
    """Render a compact single-line summary for an evaluation."""
    parts = [f"score={evaluation.score} verdict={evaluation.verdict.label.value}"]
    for name in METRIC_NAMES:
        sub = getattr(evaluation.subscores, name)
        weight = getattr(evaluation.weights, name)
        parts.append(f"{name}={round(sub)} (w={weight:g})")
    return " | ".join(parts)


POLICY_FIT = (
    "Why it fits the policy:",
    "- Long-horizon growth toward the 10-year portfolio target",
    "- Supports steady annual drawdowns via stability and dividends",
    "- ESG alignment with community-first, sustainability-minded values",
)

NEXT_STEPS = (
    "Next Steps:",
    "- Compare against 2-3 peers; confirm valuation vs. sector median",
    "- Read latest 10-K/earnings call for qualitative risks",
    "- Validate ESG score from at least two sources",
)


def analyst_notes(evaluation: Evaluation) -> str:
    """Render copyable plain-text notes: verdict, policy rationale, per-metric breakdown, next steps."""
    lines = [
        f"Ticker: {evaluation.ticker or '(none)'}",
        f"Overall Score: {evaluation.score}/100 - {evaluation.verdict.label.value}",
        "",
        *POLICY_FIT,
        "",
        "Key Metrics:",
    ]
    for name in METRIC_NAMES:
        raw = getattr(evaluation.metrics, name)
        sub = getattr(evaluation.subscores, name)
        lines.append(f"- {METRIC_LABELS[name]}: {_fmt_raw(raw)}  | Subscore: {round(sub)}")
    if evaluation.missing_metrics:
        lines.append("")
        lines.append("Missing (scored 0): " + ", ".join(evaluation.missing_metrics))
    lines.append("")
    lines.extend(NEXT_STEPS)
    return "\n".join(lines)
