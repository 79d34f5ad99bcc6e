"""
API routes.

Endpoints:
- POST `/api/evaluate`: score a metrics record (optional partial weight overrides).
- GET  `/api/weights/default`: the configured default weight set.
- GET  `/api/demo`: tickers available in the demo catalog.
- GET  `/api/demo/{ticker}`: evaluate a demo ticker with the default weights.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from stockfit.catalog.demo import load_demo_metrics
from stockfit.config.overrides import apply_weight_overrides
from stockfit.config.settings import get_settings
from stockfit.domain.models import Evaluation, MetricsRecord, WeightSet
from stockfit.evaluator.evaluate import evaluate, evaluate_demo

logger = logging.getLogger(__name__)

router = APIRouter()


class EvaluationRequest(BaseModel):
    """Request body for `/api/evaluate`. `weights` is a partial override of the defaults."""

    ticker: str | None = None
    metrics: MetricsRecord = Field(default_factory=MetricsRecord)
    weights: dict[str, float | None] | None = None


@router.post("/api/evaluate", response_model=Evaluation)
def post_evaluate(request: EvaluationRequest) -> Evaluation:
    settings = get_settings()
    try:
        weights = apply_weight_overrides(settings.scoring.default_weights, request.weights)
    except ValueError as e:
        # Invalid user input -> 400 (not a server error).
        raise HTTPException(status_code=400, detail=str(e)) from e
    ticker = request.ticker.strip().upper() if request.ticker else None
    return evaluate(request.metrics, weights=weights, ticker=ticker, settings=settings)


@router.get("/api/weights/default", response_model=WeightSet)
def get_default_weights() -> WeightSet:
    return get_settings().scoring.default_weights


@router.get("/api/demo")
def get_demo_tickers() -> dict:
    """Return the tickers available in the demo catalog."""
    settings = get_settings()
    return {"tickers": sorted(load_demo_metrics(settings.catalog.demo_path))}


@router.get("/api/demo/{ticker}", response_model=Evaluation)
def get_demo_evaluation(ticker: str) -> Evaluation:
    try:
        return evaluate_demo(ticker)
    except ValueError as e:
        logger.info("demo lookup failed: %s", e)
        raise HTTPException(status_code=404, detail=str(e)) from e
