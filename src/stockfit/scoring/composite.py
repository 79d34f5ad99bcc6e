"""
Shared scoring utilities.

This module contains small, reusable helpers used across metric normalizers
and the aggregator:
- `clamp` / `clamp100`: keep values within a closed range for stable output
- `safe_number`: parse loosely-typed input into a float, or NaN when absent
- `is_absent`: a single definition of "no usable value"
- `linear_tent`: the shared "linear decay from a center" curve
- `apply_adjustments`: run ordered post-formula overrides
- `normalize_weights`: turn a weight set into 1.0-summing shares without overflow
- `round_half_up`: the aggregate score rounding rule
"""

from __future__ import annotations

import math
from typing import Any, Callable, Iterable

# An adjustment receives the raw metric value and the score so far, and returns the new score.
Adjustment = Callable[[float, float], float]


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp a number into the [lo, hi] range."""
    return max(lo, min(hi, float(x)))


def clamp100(x: float) -> float:
    """Clamp a number into the [0.0, 100.0] subscore range."""
    return clamp(x, 0.0, 100.0)


def safe_number(value: Any) -> float:
    """Parse `value` into a finite float, or return NaN.

    `None`, empty/blank strings, unparseable strings, booleans and non-finite
    numbers all map to NaN so callers have exactly one "absent" representation.
    """
    if value is None or isinstance(value, bool):
        return math.nan
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return math.nan
    try:
        n = float(value)
    except (TypeError, ValueError):
        return math.nan
    return n if math.isfinite(n) else math.nan


def is_absent(value: float | None) -> bool:
    """True when a metric value is missing (None) or NaN."""
    return value is None or math.isnan(value)


def linear_tent(x: float, *, center: float, tolerance: float) -> float:
    """Score 100 at `center`, decaying linearly to 0 at `center +/- tolerance`."""
    return clamp100(100.0 - 100.0 * abs(x - center) / tolerance)


def apply_adjustments(raw: float, base: float, adjustments: Iterable[Adjustment]) -> float:
    """Apply post-formula adjustments in order, starting from `base`."""
    score = base
    for adjust in adjustments:
        score = adjust(raw, score)
    return score


def normalize_weights(weights: dict[str, float]) -> dict[str, float]:
    """Normalize non-negative weights so they sum to 1.0 (all 0.0 when every weight is 0).

    Weights are first scaled by the largest one, so huge finite weights never
    overflow the sum.
    """
    cleaned = {k: max(0.0, float(v)) for k, v in weights.items()}
    largest = max(cleaned.values(), default=0.0)
    if largest <= 0:
        return {k: 0.0 for k in cleaned}
    scaled = {k: v / largest for k, v in cleaned.items()}
    total = sum(scaled.values())
    return {k: v / total for k, v in scaled.items()}


def round_half_up(x: float) -> int:
    """Round to the nearest integer with halves going up (64.5 -> 65)."""
    return int(math.floor(x + 0.5))
