import json

from stockfit.cli import main


def test_cli_evaluate_demo_json(capsys):
    assert main(["evaluate", "--ticker", "aapl", "--demo", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["ticker"] == "AAPL"
    assert data["score"] == 65
    assert data["verdict"]["label"] == "Moderate Buy"


def test_cli_metric_flags_override_demo_values(capsys):
    # Weight only ESG, then override the demo ESG value.
    argv = ["evaluate", "--ticker", "AAPL", "--demo", "--esg-score", "90", "--json"]
    for flag in ["pe", "eps-growth", "debt-equity", "profit-margin", "dividend-yield", "beta"]:
        argv += [f"--w-{flag}", "0"]
    assert main(argv) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["score"] == 90
    assert data["verdict"]["label"] == "Strong Buy"


def test_cli_manual_entry_summary(capsys):
    assert main(["evaluate", "--pe", "20", "--beta", "0.95"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("(manual): score=")
    assert "pe=100 (w=15)" in out


def test_cli_unknown_demo_ticker_exits_2(capsys):
    assert main(["evaluate", "--ticker", "ZZZZ", "--demo"]) == 2
    assert "Unknown demo ticker" in capsys.readouterr().err


def test_cli_negative_weight_exits_2(capsys):
    assert main(["evaluate", "--pe", "20", "--w-pe", "-1"]) == 2
    assert capsys.readouterr().err.startswith("error:")


def test_cli_demo_list_and_weights(capsys):
    assert main(["demo-list"]) == 0
    assert capsys.readouterr().out.split() == ["AAPL", "JNJ", "MSFT", "NEE", "TSLA"]

    assert main(["weights"]) == 0
    weights = json.loads(capsys.readouterr().out)
    assert sum(weights.values()) == 100
