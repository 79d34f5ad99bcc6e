"""
Demo metrics catalog.

The catalog is a JSON file mapping ticker -> metrics record. By default the
packaged `stockfit/catalog/demo_metrics.json` is used; `catalog.demo_path` in
settings (or an explicit path) points at a replacement file. We validate it
into typed Pydantic models so the scoring code can assume a consistent shape.
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path

from pydantic import TypeAdapter

from stockfit.core.env import resolve_project_path
from stockfit.domain.models import MetricsRecord

_CATALOG_ADAPTER = TypeAdapter(dict[str, MetricsRecord])


def _normalize_tickers(catalog: dict[str, MetricsRecord]) -> dict[str, MetricsRecord]:
    return {ticker.strip().upper(): metrics for ticker, metrics in catalog.items() if ticker.strip()}


@lru_cache
def _packaged_demo_metrics() -> dict[str, MetricsRecord]:
    text = resources.files("stockfit.catalog").joinpath("demo_metrics.json").read_text(encoding="utf-8")
    return _normalize_tickers(_CATALOG_ADAPTER.validate_python(json.loads(text)))


def load_demo_metrics(path: str | Path | None = None) -> dict[str, MetricsRecord]:
    """Load and validate a demo catalog (packaged fixtures when `path` is None)."""
    if path is None:
        return dict(_packaged_demo_metrics())
    resolved = resolve_project_path(path)
    payload = json.loads(resolved.read_text(encoding="utf-8"))
    return _normalize_tickers(_CATALOG_ADAPTER.validate_python(payload))


def get_demo_metrics(ticker: str, catalog: dict[str, MetricsRecord] | None = None) -> MetricsRecord:
    """Look up a ticker (case-insensitive); raises ValueError for unknown tickers."""
    catalog = catalog if catalog is not None else load_demo_metrics()
    key = ticker.strip().upper()
    if key not in catalog:
        known = ", ".join(sorted(catalog)) or "(none)"
        raise ValueError(f"Unknown demo ticker '{ticker}'. Known tickers: {known}.")
    return catalog[key]
