"""
StockFit CLI entrypoint.

This CLI is intended for quick local scoring without the HTTP API.
It delegates all scoring logic to `stockfit.evaluator.evaluate`.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from stockfit.catalog.demo import get_demo_metrics, load_demo_metrics
from stockfit.config.overrides import apply_weight_overrides
from stockfit.config.settings import get_settings
from stockfit.core.logging import configure_logging
from stockfit.domain.models import METRIC_NAMES
from stockfit.evaluator.evaluate import evaluate
from stockfit.scoring.explain import analyst_notes, one_line_summary


def _flag(name: str) -> str:
    return name.replace("_", "-")


def _collect(args: argparse.Namespace, prefix: str = "") -> dict[str, Any]:
    """Collect per-metric CLI values that were actually provided."""
    out: dict[str, Any] = {}
    for name in METRIC_NAMES:
        v = getattr(args, f"{prefix}{name}")
        if v is not None:
            out[name] = v
    return out


def _cmd_evaluate(args: argparse.Namespace) -> int:
    """Handle the `evaluate` subcommand."""
    settings = get_settings()

    metrics: dict[str, Any] = {}
    if args.demo:
        if not args.ticker:
            raise ValueError("--demo requires --ticker")
        catalog = load_demo_metrics(settings.catalog.demo_path)
        metrics = get_demo_metrics(args.ticker, catalog).model_dump()
    # Explicit metric flags win over demo values.
    metrics.update(_collect(args))

    weights = apply_weight_overrides(settings.scoring.default_weights, _collect(args, prefix="w_"))
    ticker = args.ticker.strip().upper() if args.ticker else None

    result = evaluate(metrics, weights=weights, ticker=ticker, settings=settings)

    if args.json:
        print(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2))
        return 0
    if args.notes:
        print(analyst_notes(result))
        return 0

    print(f"{ticker or '(manual)'}: {one_line_summary(result)}")
    return 0


def _cmd_demo_list(_: argparse.Namespace) -> int:
    settings = get_settings()
    for ticker in sorted(load_demo_metrics(settings.catalog.demo_path)):
        print(ticker)
    return 0


def _cmd_weights(_: argparse.Namespace) -> int:
    settings = get_settings()
    print(json.dumps(settings.scoring.default_weights.model_dump(), indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the StockFit CLI."""
    parser = argparse.ArgumentParser(prog="stockfit")
    sub = parser.add_subparsers(dest="command", required=True)

    ev = sub.add_parser("evaluate", help="Score one stock from metric values and weights.")
    ev.add_argument("--ticker", type=str, default=None)
    ev.add_argument("--demo", action="store_true", help="Load metrics for --ticker from the demo catalog.")

    # Metric values are kept as strings; the domain model parses them (blank/invalid -> absent).
    for name in METRIC_NAMES:
        ev.add_argument(f"--{_flag(name)}", dest=name, type=str, default=None)
    for name in METRIC_NAMES:
        ev.add_argument(
            f"--w-{_flag(name)}",
            dest=f"w_{name}",
            type=float,
            default=None,
            help=f"Weight override for {name} (>= 0).",
        )

    ev.add_argument("--notes", action="store_true", help="Print multi-line analyst notes")
    ev.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    ev.set_defaults(func=_cmd_evaluate)

    demo = sub.add_parser("demo-list", help="List tickers available in the demo catalog.")
    demo.set_defaults(func=_cmd_demo_list)

    w = sub.add_parser("weights", help="Print the configured default weight set.")
    w.set_defaults(func=_cmd_weights)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m stockfit.cli`."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    func: Any = getattr(args, "func")
    try:
        return int(func(args))
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
