import math

import pytest

from stockfit.config.settings import ScoringSettings, Settings, get_settings
from stockfit.domain.models import MetricsRecord, Verdict, WeightSet
from stockfit.evaluator.evaluate import evaluate, evaluate_demo

AAPL = {
    "pe": 30.2,
    "eps_growth": 18.5,
    "debt_equity": 1.6,
    "profit_margin": 26.1,
    "dividend_yield": 0.6,
    "esg_score": 76,
    "beta": 1.12,
}

DEFAULT_WEIGHTS = WeightSet(
    pe=15, eps_growth=20, debt_equity=15, profit_margin=10, dividend_yield=10, esg_score=20, beta=10
)


def test_aapl_golden_score_with_default_weights():
    result = evaluate(AAPL, weights=DEFAULT_WEIGHTS)
    assert result.score == 65
    assert result.verdict.label is Verdict.MODERATE_BUY
    assert result.verdict.band == "middle"
    assert result.missing_metrics == []


def test_default_weights_come_from_settings():
    assert get_settings().scoring.default_weights == DEFAULT_WEIGHTS
    assert evaluate(AAPL).score == 65


def test_injected_settings_default_weights_are_used():
    settings = Settings(scoring=ScoringSettings(default_weights=WeightSet(esg_score=1)))
    result = evaluate(AAPL, settings=settings)
    assert result.score == 76
    assert result.weights.total == 1


def test_camel_case_string_input_matches_typed_input():
    loose = {
        "pe": "30.2",
        "epsGrowth": "18.5",
        "debtEquity": "1.6",
        "profitMargin": "26.1",
        "dividendYield": "0.6",
        "esgScore": "76",
        "beta": "1.12",
    }
    assert evaluate(loose, weights=DEFAULT_WEIGHTS).score == evaluate(AAPL, weights=DEFAULT_WEIGHTS).score


def test_missing_metrics_score_as_worst_case_not_excluded():
    absent = dict(AAPL, pe=None, dividend_yield=math.nan, beta="")
    worst = dict(AAPL, pe=-10, dividend_yield=-1, beta=0)

    missing_result = evaluate(absent, weights=DEFAULT_WEIGHTS)
    worst_result = evaluate(worst, weights=DEFAULT_WEIGHTS)

    assert missing_result.score == worst_result.score
    assert missing_result.subscores == worst_result.subscores
    assert missing_result.missing_metrics == ["pe", "dividend_yield", "beta"]
    # Excluding them would have renormalized over the remaining 65 weight points.
    assert missing_result.score < evaluate(AAPL, weights=DEFAULT_WEIGHTS).score


def test_unparseable_values_are_treated_as_absent():
    record = MetricsRecord.model_validate({"pe": "n/a", "esg_score": "inf", "beta": True})
    assert record.pe is None
    assert record.esg_score is None
    assert record.beta is None


@pytest.mark.parametrize(
    "ticker,score,label",
    [
        ("AAPL", 65, Verdict.MODERATE_BUY),
        ("msft", 81, Verdict.STRONG_BUY),
        ("NEE", 76, Verdict.MODERATE_BUY),
        ("JNJ", 71, Verdict.MODERATE_BUY),
        ("TSLA", 55, Verdict.AVOID),
    ],
)
def test_demo_tickers_with_default_weights(ticker, score, label):
    result = evaluate_demo(ticker)
    assert result.ticker == ticker.upper()
    assert result.score == score
    assert result.verdict.label is label


def test_evaluate_demo_rejects_unknown_ticker():
    with pytest.raises(ValueError, match="Unknown demo ticker 'ZZZZ'"):
        evaluate_demo("ZZZZ")
