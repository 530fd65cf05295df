"""
Integration tests for the prophedge CLI.
"""

import io
import json
from unittest.mock import patch

import pytest
from rich.console import Console

from prophedge.cli.main import EXIT_CONFIGURATION_ERROR, main


pytestmark = pytest.mark.integration


@pytest.fixture(autouse=True)
def mock_setup_logging():
    with patch("prophedge.cli.main.setup_logging"):
        yield


@pytest.fixture()
def capture():
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, color_system=None)
    return console, buffer


def test_plan_json_output(capture):
    console, buffer = capture
    code = main(["plan", "--runs", "200", "--seed", "1", "--output-format", "json"], console)

    assert code == 0
    payload = json.loads(buffer.getvalue())
    assert payload["derived"]["daily_dd_amount"] == 1000.0
    assert payload["risk_limits"]["max_consecutive_losses"] == 13
    assert payload["deposit"]["base_buffer"] == 360.0
    assert payload["outcomes"][0]["scenario"] == "full_pass"
    assert payload["monte_carlo"]["runs"] == 200
    assert len(payload["compliance"]) == 4


def test_plan_text_output(capture):
    console, buffer = capture
    code = main(["plan", "--runs", "100", "--seed", "1"], console)

    output = buffer.getvalue()
    assert code == 0
    assert "Prop Hedge Plan" in output
    assert "4-Day Plan" in output
    assert "Broker Deposit" in output
    assert "Outcome Tree" in output
    assert "Monte Carlo (100 runs)" in output


def test_plan_text_lists_warnings(capture):
    console, buffer = capture
    main(["plan", "--runs", "10", "--seed", "1", "--set", "propRisk=600"], console)
    assert "Prop risk per trade is high" in buffer.getvalue()


def test_overrides_applied(capture):
    console, buffer = capture
    main(
        [
            "plan", "--runs", "10", "--seed", "1", "--output-format", "json",
            "--set", "accountSize=50000", "--set", "refundableFee=false",
        ],
        console,
    )
    payload = json.loads(buffer.getvalue())
    assert payload["derived"]["daily_dd_amount"] == 2000.0
    # break-even leaf loses the fee when it is not refundable
    assert payload["outcomes"][3]["cash_result"] == -100.0


def test_config_file(capture, tmp_path):
    console, buffer = capture
    path = tmp_path / "plan.json"
    path.write_text(json.dumps({"accountSize": 100000, "maxLosingStreak": 10}))

    main(
        ["plan", "--config", str(path), "--runs", "10", "--seed", "1", "--output-format", "json"],
        console,
    )
    payload = json.loads(buffer.getvalue())
    assert payload["derived"]["max_dd_amount"] == 10000.0
    assert payload["deposit"]["base_buffer"] == 600.0


def test_simulate_is_reproducible_with_seed():
    outputs = []
    for _ in range(2):
        buffer = io.StringIO()
        console = Console(file=buffer, width=200, color_system=None)
        main(["simulate", "--runs", "300", "--seed", "9", "--output-format", "json"], console)
        outputs.append(json.loads(buffer.getvalue()))

    assert outputs[0] == outputs[1]
    assert [b["bucket"] for b in outputs[0]["histogram"]] == [
        "Fail P1", "Pass P1", "Pass P2", "Payout",
    ]


def test_configuration_error_exit_code(capture, capsys):
    console, _ = capture
    code = main(["plan", "--runs", "10", "--set", "propRisk=0"], console)

    assert code == EXIT_CONFIGURATION_ERROR
    assert "Configuration error" in capsys.readouterr().err


def test_zero_runs_rejected(capture, capsys):
    console, _ = capture
    code = main(["simulate", "--runs", "0"], console)

    assert code == EXIT_CONFIGURATION_ERROR
    assert "run count" in capsys.readouterr().err


def test_malformed_override_rejected(capture):
    console, _ = capture
    with pytest.raises(SystemExit):
        main(["plan", "--set", "propRisk"], console)


def test_snake_case_override_applied(capture):
    console, buffer = capture
    code = main(
        [
            "plan", "--runs", "10", "--seed", "1", "--output-format", "json",
            "--set", "account_size=50000",
        ],
        console,
    )
    payload = json.loads(buffer.getvalue())
    assert code == 0
    assert payload["derived"]["daily_dd_amount"] == 2000.0


def test_unknown_override_key_rejected(capture, capsys):
    console, buffer = capture
    code = main(["plan", "--runs", "10", "--set", "propRsk=200"], console)

    assert code == EXIT_CONFIGURATION_ERROR
    assert "Unknown configuration field" in capsys.readouterr().err
    assert buffer.getvalue() == ""


def test_plan_summary_output(capture):
    console, buffer = capture
    code = main(["plan", "--runs", "10", "--seed", "1", "--summary"], console)

    assert code == 0
    assert buffer.getvalue().splitlines() == [
        "Prop Hedge Planner",
        "Daily DD: $1,000",
        "Max DD: $2,500",
        "Phase 1 Target: $2,000",
        "Phase 2 Target: $1,500",
        "Daily Target: $500",
        "Max losses/day: 5",
    ]
