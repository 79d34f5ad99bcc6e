"""
Weighted aggregation and verdict classification.

`aggregate()` combines the seven subscores with a caller-supplied `WeightSet`:
- total weight 0 -> score 0 (no division by zero, no error)
- otherwise the weighted mean, rounded half-up to an integer in [0, 100]

The verdict is a fixed three-band classification of the rounded score; lower
bounds are inclusive (80 is Strong Buy, 65 is Moderate Buy, 64 is Avoid).
"""

from __future__ import annotations

from stockfit.domain.models import METRIC_NAMES, Subscores, Verdict, VerdictBand, WeightSet
from stockfit.scoring.composite import clamp, normalize_weights, round_half_up

STRONG_BUY_MIN = 80
MODERATE_BUY_MIN = 65

_BANDS: dict[Verdict, VerdictBand] = {
    Verdict.STRONG_BUY: VerdictBand(label=Verdict.STRONG_BUY, band="top", color="green"),
    Verdict.MODERATE_BUY: VerdictBand(label=Verdict.MODERATE_BUY, band="middle", color="amber"),
    Verdict.AVOID: VerdictBand(label=Verdict.AVOID, band="bottom", color="red"),
}


def weighted_mean(subscores: Subscores, weights: WeightSet) -> float:
    """Unrounded weighted mean of the subscores (0.0 when all weights are zero)."""
    shares = normalize_weights({name: getattr(weights, name) for name in METRIC_NAMES})
    return sum(getattr(subscores, name) * share for name, share in shares.items())


def classify_verdict(score: int) -> VerdictBand:
    if score >= STRONG_BUY_MIN:
        return _BANDS[Verdict.STRONG_BUY]
    if score >= MODERATE_BUY_MIN:
        return _BANDS[Verdict.MODERATE_BUY]
    return _BANDS[Verdict.AVOID]


def aggregate(subscores: Subscores, weights: WeightSet) -> tuple[int, VerdictBand]:
    """Combine subscores into an integer score and its verdict band."""
    score = int(clamp(round_half_up(weighted_mean(subscores, weights)), 0, 100))
    return score, classify_verdict(score)
