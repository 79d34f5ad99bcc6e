# src/stockfit/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/stockfit/config/defaults.yaml`, then optionally overridden by:
- environment variables (e.g., `STOCKFIT_LOG_LEVEL`, `STOCKFIT_DEMO_PATH`)
- an external YAML file via `STOCKFIT_CONFIG_PATH`

Design rule:
- Tuning knobs (the default weight set) live in YAML, not hard-coded in business logic.
- Settings only *supply* defaults; the aggregator always receives weights explicitly.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from stockfit.core.env import load_dotenv_if_present
from stockfit.domain.models import WeightSet


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `stockfit.config`."""
    text = resources.files("stockfit.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "StockFit"
    log_level: str = "INFO"


class CatalogSettings(BaseModel):
    # None means "use the packaged demo fixtures".
    demo_path: str | None = None


def _default_weight_set() -> WeightSet:
    return WeightSet(
        pe=15,
        eps_growth=20,
        debt_equity=15,
        profit_margin=10,
        dividend_yield=10,
        esg_score=20,
        beta=10,
    )


class ScoringSettings(BaseModel):
    default_weights: WeightSet = Field(default_factory=_default_weight_set)


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    scoring: ScoringSettings = Field(default_factory=ScoringSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload.

    Note: We intentionally keep this whitelist small.
    """
    load_dotenv_if_present()
    data = dict(data)

    log_level = os.getenv("STOCKFIT_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    demo_path = os.getenv("STOCKFIT_DEMO_PATH")
    if demo_path:
        data.setdefault("catalog", {})["demo_path"] = demo_path

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("STOCKFIT_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
