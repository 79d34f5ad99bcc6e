import json

import pytest

from stockfit.catalog.demo import get_demo_metrics, load_demo_metrics


def test_packaged_catalog_has_demo_tickers():
    catalog = load_demo_metrics()
    assert sorted(catalog) == ["AAPL", "JNJ", "MSFT", "NEE", "TSLA"]
    assert catalog["AAPL"].pe == pytest.approx(30.2)
    # A zero dividend is a real value, not an absent one.
    assert catalog["TSLA"].dividend_yield == 0
    assert catalog["TSLA"].missing() == []


def test_lookup_is_case_insensitive():
    assert get_demo_metrics(" nee ").esg_score == 84


def test_unknown_ticker_lists_known_tickers():
    with pytest.raises(ValueError, match="Known tickers: AAPL, JNJ, MSFT, NEE, TSLA"):
        get_demo_metrics("ZZZZ")


def test_load_custom_catalog_file(tmp_path):
    path = tmp_path / "demo.json"
    path.write_text(
        json.dumps({"acme": {"pe": "18", "epsGrowth": 12, "esgScore": ""}}),
        encoding="utf-8",
    )

    catalog = load_demo_metrics(path)

    assert list(catalog) == ["ACME"]
    acme = get_demo_metrics("acme", catalog)
    assert acme.pe == 18
    assert acme.eps_growth == 12
    assert acme.esg_score is None
    assert "esg_score" in acme.missing()
