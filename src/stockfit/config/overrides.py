"""
Per-request weight overrides.

The CLI and API let callers tune individual metric weights for a single
evaluation without editing config. This module:
- validates the override keys against the known metric names (camelCase aliases accepted),
- merges the override values onto a base `WeightSet`,
- re-validates with Pydantic so negative or non-finite weights are rejected.
"""

from __future__ import annotations

from typing import Any, Mapping

from stockfit.domain.models import METRIC_NAMES, MetricName, WeightSet

# camelCase spellings used by JSON clients map onto the canonical metric names.
_WEIGHT_KEY_ALIASES: dict[str, MetricName] = {
    "peRatio": "pe",
    "epsGrowth": "eps_growth",
    "epsGrowth5yPct": "eps_growth",
    "debtEquity": "debt_equity",
    "debtToEquity": "debt_equity",
    "profitMargin": "profit_margin",
    "profitMarginPct": "profit_margin",
    "dividendYield": "dividend_yield",
    "dividendYieldPct": "dividend_yield",
    "esgScore": "esg_score",
}


def _canonical_key(key: str) -> MetricName:
    if key in METRIC_NAMES:
        return key  # type: ignore[return-value]
    if key in _WEIGHT_KEY_ALIASES:
        return _WEIGHT_KEY_ALIASES[key]
    raise ValueError(
        f"weights contains an unknown metric: '{key}' (expected one of {', '.join(METRIC_NAMES)})"
    )


def apply_weight_overrides(weights: WeightSet, overrides: Mapping[str, Any] | None) -> WeightSet:
    # No overrides: return the base object unchanged (fast path).
    if not overrides:
        return weights

    # `None` values mean "not provided" (e.g. unset CLI flags) and keep the base weight.
    updates = {_canonical_key(k): v for k, v in overrides.items() if v is not None}
    if not updates:
        return weights

    merged = weights.model_dump()
    merged.update(updates)
    # Re-validate so the result obeys the same constraints as any other WeightSet.
    return WeightSet.model_validate(merged)
