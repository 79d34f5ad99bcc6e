"""
Domain models (Pydantic).

These types represent the stable "contract" between layers:
- scoring inputs (`MetricsRecord`, `WeightSet`)
- normalizer output (`Subscores`)
- aggregate output (`VerdictBand`, `Evaluation`)

Keeping these models in one place helps:
- validation (loose CLI/JSON input is parsed once, at the edge),
- typed refactors,
- consistent JSON output across CLI/API.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from stockfit.scoring.composite import safe_number

MetricName = Literal[
    "pe",
    "eps_growth",
    "debt_equity",
    "profit_margin",
    "dividend_yield",
    "esg_score",
    "beta",
]

METRIC_NAMES: tuple[MetricName, ...] = (
    "pe",
    "eps_growth",
    "debt_equity",
    "profit_margin",
    "dividend_yield",
    "esg_score",
    "beta",
)

METRIC_LABELS: dict[MetricName, str] = {
    "pe": "P/E",
    "eps_growth": "EPS Growth 5y %",
    "debt_equity": "Debt/Equity",
    "profit_margin": "Profit Margin %",
    "dividend_yield": "Dividend Yield %",
    "esg_score": "ESG Score",
    "beta": "Beta",
}


def _metric_field(name: str, *aliases: str, **kwargs: Any) -> Any:
    return Field(validation_alias=AliasChoices(name, *aliases), **kwargs)


class MetricsRecord(BaseModel):
    """The seven raw financial inputs. `None` means the value is absent."""

    pe: float | None = _metric_field("pe", "peRatio", default=None)
    eps_growth: float | None = _metric_field("eps_growth", "epsGrowth", "epsGrowth5yPct", default=None)
    debt_equity: float | None = _metric_field("debt_equity", "debtEquity", "debtToEquity", default=None)
    profit_margin: float | None = _metric_field(
        "profit_margin", "profitMargin", "profitMarginPct", default=None
    )
    dividend_yield: float | None = _metric_field(
        "dividend_yield", "dividendYield", "dividendYieldPct", default=None
    )
    esg_score: float | None = _metric_field("esg_score", "esgScore", default=None)
    beta: float | None = _metric_field("beta", default=None)

    @field_validator("*", mode="before")
    @classmethod
    def _parse_loose_number(cls, value: Any) -> float | None:
        n = safe_number(value)
        return None if math.isnan(n) else n

    def missing(self) -> list[MetricName]:
        """Names of metrics with no usable value, in canonical order."""
        return [name for name in METRIC_NAMES if getattr(self, name) is None]


class WeightSet(BaseModel):
    """Non-negative per-metric weights. The sum is advisory (100 by convention)."""

    model_config = ConfigDict(allow_inf_nan=False)

    pe: float = _metric_field("pe", "peRatio", default=0.0, ge=0)
    eps_growth: float = _metric_field("eps_growth", "epsGrowth", "epsGrowth5yPct", default=0.0, ge=0)
    debt_equity: float = _metric_field("debt_equity", "debtEquity", "debtToEquity", default=0.0, ge=0)
    profit_margin: float = _metric_field(
        "profit_margin", "profitMargin", "profitMarginPct", default=0.0, ge=0
    )
    dividend_yield: float = _metric_field(
        "dividend_yield", "dividendYield", "dividendYieldPct", default=0.0, ge=0
    )
    esg_score: float = _metric_field("esg_score", "esgScore", default=0.0, ge=0)
    beta: float = _metric_field("beta", default=0.0, ge=0)

    @property
    def total(self) -> float:
        return sum(getattr(self, name) for name in METRIC_NAMES)


class Subscores(BaseModel):
    """Per-metric desirability values, each in [0, 100]."""

    pe: float = Field(..., ge=0, le=100)
    eps_growth: float = Field(..., ge=0, le=100)
    debt_equity: float = Field(..., ge=0, le=100)
    profit_margin: float = Field(..., ge=0, le=100)
    dividend_yield: float = Field(..., ge=0, le=100)
    esg_score: float = Field(..., ge=0, le=100)
    beta: float = Field(..., ge=0, le=100)


class Verdict(str, Enum):
    STRONG_BUY = "Strong Buy"
    MODERATE_BUY = "Moderate Buy"
    AVOID = "Avoid"


class VerdictBand(BaseModel):
    """A verdict label plus its display band and color tag."""

    model_config = ConfigDict(frozen=True)

    label: Verdict
    band: Literal["top", "middle", "bottom"]
    color: Literal["green", "amber", "red"]


class Evaluation(BaseModel):
    """One scored stock: inputs, subscores, aggregate score and verdict."""

    ticker: str | None = None
    metrics: MetricsRecord
    weights: WeightSet
    subscores: Subscores
    score: int = Field(..., ge=0, le=100)
    verdict: VerdictBand
    missing_metrics: list[MetricName] = Field(default_factory=list)
