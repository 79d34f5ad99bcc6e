from stockfit.evaluator.evaluate import evaluate, evaluate_demo
from stockfit.scoring.explain import analyst_notes, one_line_summary


def test_one_line_summary_lists_score_verdict_and_components():
    line = one_line_summary(evaluate_demo("AAPL"))
    assert line.startswith("score=65 verdict=Moderate Buy | ")
    assert "pe=49 (w=15)" in line
    assert "esg_score=76 (w=20)" in line


def test_analyst_notes_show_raw_values_and_missing_metrics():
    result = evaluate({"pe": 30.2, "esg_score": 76}, ticker="ACME")
    notes = analyst_notes(result)

    assert "Ticker: ACME" in notes
    assert f"Overall Score: {result.score}/100 - {result.verdict.label.value}" in notes
    assert "- P/E: 30.2  | Subscore: 49" in notes
    assert "- Beta: ?  | Subscore: 0" in notes
    assert "Missing (scored 0): eps_growth, debt_equity, profit_margin, dividend_yield, beta" in notes


def test_analyst_notes_include_policy_rationale_and_next_steps():
    notes = analyst_notes(evaluate_demo("NEE"))
    lines = notes.splitlines()

    assert lines[3] == "Why it fits the policy:"
    assert lines.index("Why it fits the policy:") < lines.index("Key Metrics:") < lines.index("Next Steps:")
    assert lines[-1] == "- Validate ESG score from at least two sources"
    # No metric is missing, so there is no "Missing" line.
    assert not any(line.startswith("Missing") for line in lines)
