from __future__ import annotations

# This module is the "orchestrator" for one stock evaluation.
# It wires together:
# - domain input (MetricsRecord + WeightSet)
# - metric normalization (seven independent 0..100 curves)
# - weighted aggregation + verdict classification
# - an explainable result (Evaluation)
#
# Design goal:
# - Keep each layer focused (catalog supplies metrics; scoring does math; this file does orchestration).
# - Missing metrics are scored as worst case (0), never dropped from the weighted mean.

import logging
from typing import Any, Mapping

from stockfit.catalog.demo import get_demo_metrics, load_demo_metrics
from stockfit.config.settings import Settings, get_settings
from stockfit.domain.models import Evaluation, MetricsRecord, WeightSet
from stockfit.scoring.aggregate import aggregate
from stockfit.scoring.normalize import score_metrics

logger = logging.getLogger(__name__)


def _as_metrics(metrics: MetricsRecord | Mapping[str, Any]) -> MetricsRecord:
    if isinstance(metrics, MetricsRecord):
        return metrics
    return MetricsRecord.model_validate(dict(metrics))


def evaluate(
    metrics: MetricsRecord | Mapping[str, Any],
    *,
    weights: WeightSet | None = None,
    ticker: str | None = None,
    settings: Settings | None = None,
) -> Evaluation:
    # ---- Step 1: Resolve the weight set for THIS evaluation ----
    # Callers own their weights; when none are given we use the configured default set.
    if weights is None:
        settings = settings or get_settings()
        weights = settings.scoring.default_weights

    # ---- Step 2: Validate loose input (dicts from JSON/CLI) into a typed record ----
    record = _as_metrics(metrics)

    # ---- Step 3: Normalize + aggregate (pure functions, no I/O) ----
    subscores = score_metrics(record)
    score, verdict = aggregate(subscores, weights)

    missing = record.missing()
    logger.debug(
        "evaluated ticker=%s score=%d verdict=%s missing=%s",
        ticker or "-",
        score,
        verdict.label.value,
        ",".join(missing) or "none",
    )

    return Evaluation(
        ticker=ticker,
        metrics=record,
        weights=weights,
        subscores=subscores,
        score=score,
        verdict=verdict,
        missing_metrics=missing,
    )


def evaluate_demo(
    ticker: str,
    *,
    weights: WeightSet | None = None,
    settings: Settings | None = None,
) -> Evaluation:
    """Evaluate a ticker from the demo catalog (raises ValueError for unknown tickers)."""
    settings = settings or get_settings()
    catalog = load_demo_metrics(settings.catalog.demo_path)
    metrics = get_demo_metrics(ticker, catalog)
    return evaluate(metrics, weights=weights, ticker=ticker.strip().upper(), settings=settings)
