"""
Metric normalizers.

Each `score_*` function converts one raw metric into a 0..100 desirability
subscore. All of them are total: absent (None/NaN) or out-of-domain input
scores 0, never raises.

Curves are built as "base formula, then ordered adjustments". Adjustments are
plain functions `(raw, score) -> score` so each override can be tested alone:
- P/E: linear tent around 20, then `pe_band_bonus`
- Dividend yield: Gaussian bump around 2.5%, then `dividend_residual_floor`, `cap_at_100`
- Beta: linear tent around 0.95, then `high_beta_cap`
"""

from __future__ import annotations

import functools
import math
from typing import Callable

from stockfit.domain.models import METRIC_NAMES, MetricName, MetricsRecord, Subscores
from stockfit.scoring.composite import (
    Adjustment,
    apply_adjustments,
    clamp100,
    is_absent,
    linear_tent,
)

Normalizer = Callable[[float | None], float]

PE_CENTER = 20.0
PE_TOLERANCE = 20.0
PE_BAND = (12.0, 28.0)
PE_BAND_BONUS = 5.0

EPS_GROWTH_CEILING = 30.0
EPS_GROWTH_FLOOR_SCORE = 30.0

DEBT_EQUITY_BEST = 0.3
DEBT_EQUITY_WORST = 3.0

PROFIT_MARGIN_CEILING = 30.0

DIVIDEND_ZERO_SCORE = 40.0
DIVIDEND_RED_FLAG = 12.0
DIVIDEND_PEAK = 2.5
DIVIDEND_SPREAD = 2.0
DIVIDEND_RESIDUAL_FLOOR = 10.0

BETA_CENTER = 0.95
BETA_TOLERANCE = 0.35
BETA_HIGH_VOLATILITY = 1.5
BETA_HIGH_VOLATILITY_CAP = 35.0


def _absent_scores_zero(fn: Callable[[float], float]) -> Normalizer:
    @functools.wraps(fn)
    def wrapper(value: float | None) -> float:
        if is_absent(value):
            return 0.0
        return fn(float(value))

    return wrapper


# --- Adjustments ---


def pe_band_bonus(pe: float, score: float) -> float:
    """+5 for a "reasonably priced growth" P/E inside [12, 28], re-clamped."""
    lo, hi = PE_BAND
    if lo <= pe <= hi:
        return clamp100(score + PE_BAND_BONUS)
    return score


def dividend_residual_floor(_: float, score: float) -> float:
    """Any positive yield under the red-flag threshold keeps at least 10 points."""
    return max(score, DIVIDEND_RESIDUAL_FLOOR)


def cap_at_100(_: float, score: float) -> float:
    return min(score, 100.0)


def high_beta_cap(beta: float, score: float) -> float:
    """High-volatility instruments (beta > 1.5) never score above 35."""
    if beta > BETA_HIGH_VOLATILITY:
        return min(score, BETA_HIGH_VOLATILITY_CAP)
    return score


PE_ADJUSTMENTS: tuple[Adjustment, ...] = (pe_band_bonus,)
DIVIDEND_ADJUSTMENTS: tuple[Adjustment, ...] = (dividend_residual_floor, cap_at_100)
BETA_ADJUSTMENTS: tuple[Adjustment, ...] = (high_beta_cap,)


# --- Normalizers ---


@_absent_scores_zero
def score_pe(pe: float) -> float:
    """Price/earnings: peak at 20; loss-making (non-positive) multiples score 0."""
    if pe <= 0:
        return 0.0
    base = linear_tent(pe, center=PE_CENTER, tolerance=PE_TOLERANCE)
    return apply_adjustments(pe, base, PE_ADJUSTMENTS)


@_absent_scores_zero
def score_eps_growth(growth_pct: float) -> float:
    """5y EPS CAGR (%): 0 for no growth, 30-point baseline ramping to 100 at 30%."""
    if growth_pct <= 0:
        return 0.0
    if growth_pct >= EPS_GROWTH_CEILING:
        return 100.0
    ramp = (100.0 - EPS_GROWTH_FLOOR_SCORE) * growth_pct / EPS_GROWTH_CEILING
    return clamp100(EPS_GROWTH_FLOOR_SCORE + ramp)


@_absent_scores_zero
def score_debt_equity(ratio: float) -> float:
    """Debt/equity: lower is better; 100 at <= 0.3, 0 at >= 3.0."""
    if ratio < 0:
        return 0.0
    if ratio <= DEBT_EQUITY_BEST:
        return 100.0
    if ratio >= DEBT_EQUITY_WORST:
        return 0.0
    span = DEBT_EQUITY_WORST - DEBT_EQUITY_BEST
    return clamp100(100.0 - 100.0 * (ratio - DEBT_EQUITY_BEST) / span)


@_absent_scores_zero
def score_profit_margin(margin_pct: float) -> float:
    if margin_pct <= 0:
        return 0.0
    if margin_pct >= PROFIT_MARGIN_CEILING:
        return 100.0
    return clamp100(100.0 * margin_pct / PROFIT_MARGIN_CEILING)


@_absent_scores_zero
def score_dividend_yield(yield_pct: float) -> float:
    """Dividend yield (%): sustainable yields around 2.5% score best.

    A zero yield is acceptable (growth stocks) and scores a flat 40; yields
    above 12% are a payout red flag and score 0.
    """
    if yield_pct < 0:
        return 0.0
    if yield_pct == 0:
        return DIVIDEND_ZERO_SCORE
    if yield_pct > DIVIDEND_RED_FLAG:
        return 0.0
    z = (yield_pct - DIVIDEND_PEAK) / DIVIDEND_SPREAD
    base = 100.0 * math.exp(-0.5 * z * z)
    return apply_adjustments(yield_pct, base, DIVIDEND_ADJUSTMENTS)


@_absent_scores_zero
def score_esg(esg: float) -> float:
    if esg < 0:
        return 0.0
    return clamp100(esg)


@_absent_scores_zero
def score_beta(beta: float) -> float:
    """Beta: stability matters for yearly drawdowns; best around 0.95."""
    if beta <= 0:
        return 0.0
    base = linear_tent(beta, center=BETA_CENTER, tolerance=BETA_TOLERANCE)
    return apply_adjustments(beta, base, BETA_ADJUSTMENTS)


NORMALIZERS: dict[MetricName, Normalizer] = {
    "pe": score_pe,
    "eps_growth": score_eps_growth,
    "debt_equity": score_debt_equity,
    "profit_margin": score_profit_margin,
    "dividend_yield": score_dividend_yield,
    "esg_score": score_esg,
    "beta": score_beta,
}


def score_metrics(metrics: MetricsRecord) -> Subscores:
    """Normalize every metric of a record into its subscore."""
    return Subscores(**{name: NORMALIZERS[name](getattr(metrics, name)) for name in METRIC_NAMES})
