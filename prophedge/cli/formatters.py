"""
Output formatters for planner results.

Renders a PlanReport or MonteCarloResult either as Rich tables for the
terminal or as a JSON document.
"""

import json
import logging
from dataclasses import asdict

from rich.console import Console
from rich.table import Table

from prophedge.models.plan import MonteCarloResult, PhasePlan, PlanReport


logger = logging.getLogger(__name__)


def _money(value: float) -> str:
    return f"{value:,.2f}"


def format_json_output(result: PlanReport | MonteCarloResult) -> str:
    """
    Serialize a plan report or Monte Carlo result as indented JSON.

    Scenario enums are str subclasses and serialize as their values.

    Examples:
        >>> from prophedge.models.plan import HistogramBucket, MonteCarloResult
        >>> result = MonteCarloResult(1, 1.0, 0.0, 0.0, (HistogramBucket("Pass P1", 1),))
        >>> '"runs": 1' in format_json_output(result)
        True
    """
    return json.dumps(asdict(result), indent=2)


def _key_value_table(title: str, rows: list[tuple[str, str]]) -> Table:
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Metric", style="cyan", width=28)
    table.add_column("Value", style="green", justify="right")
    for name, value in rows:
        table.add_row(name, value)
    return table


def _phase_rows(plan: PhasePlan) -> list[tuple[str, str]]:
    return [
        ("Total Target", _money(plan.total_target)),
        ("Daily Target", _money(plan.daily_target)),
        ("Estimated Days", str(plan.estimated_days)),
        ("Trades (1/day)", str(plan.trades_if_one_per_day)),
        ("Trades (2/day)", str(plan.trades_if_two_per_day)),
    ]


def render_monte_carlo(result: MonteCarloResult, console: Console) -> None:
    """Print Monte Carlo probabilities and histogram."""
    console.print(
        _key_value_table(
            f"Monte Carlo ({result.runs:,} runs)",
            [
                ("Pass Phase 1", f"{result.pass_phase1_probability:.2%}"),
                ("Pass Phase 2", f"{result.pass_phase2_probability:.2%}"),
                ("Payout", f"{result.payout_probability:.2%}"),
            ],
        )
    )

    histogram = Table(title="Trial Outcomes", header_style="bold magenta")
    histogram.add_column("Bucket", style="cyan")
    histogram.add_column("Count", justify="right")
    for bucket in result.histogram:
        histogram.add_row(bucket.bucket, f"{bucket.count:,}")
    console.print(histogram)


def render_plan(report: PlanReport, console: Console) -> None:
    """Print every section of a plan report as Rich tables."""
    derived = report.derived
    risk = report.risk_limits

    console.print("\n[bold cyan]═══ Prop Hedge Plan ═══[/bold cyan]\n")
    console.print(
        _key_value_table(
            "Overview",
            [
                ("Daily Drawdown", _money(derived.daily_dd_amount)),
                ("Max Drawdown", _money(derived.max_dd_amount)),
                ("Phase 1 Target", _money(derived.phase1_target_amount)),
                ("Phase 2 Target", _money(derived.phase2_target_amount)),
                ("Min Daily Profit", _money(derived.min_daily_profit_amount)),
                ("Max Losses/Day (prop)", str(risk.max_losses_daily_prop)),
                ("Max Losses/Day (total)", str(risk.max_losses_daily_total)),
                ("Max Consecutive Losses", str(risk.max_consecutive_losses)),
                ("Daily Stop (losses)", str(risk.stop_losses_daily)),
                ("Stop Drawdown", f"{risk.stop_drawdown_percent}%"),
            ],
        )
    )

    schedule = Table(title="4-Day Plan", header_style="bold magenta")
    for column in ("Day", "Target", "Trades", "Prop TP", "Prop SL", "Broker TP", "Broker SL"):
        schedule.add_column(column, justify="right" if column != "Day" else "left")
    for row in report.compliance:
        schedule.add_row(
            row.day,
            _money(row.daily_target),
            str(row.recommended_trades),
            _money(row.prop_tp),
            _money(row.prop_sl),
            _money(row.broker_tp),
            _money(row.broker_sl),
        )
    console.print(schedule)
    console.print(f"[dim]{report.compliance[0].stop_rule}[/dim]")

    console.print(_key_value_table("Phase 1 Plan", _phase_rows(report.phase1_plan)))
    console.print(_key_value_table("Phase 2 Plan", _phase_rows(report.phase2_plan)))

    deposit = report.deposit
    console.print(
        _key_value_table(
            "Broker Deposit",
            [
                ("Base Buffer", _money(deposit.base_buffer)),
                ("Minimum", _money(deposit.minimum)),
                ("Recommended", _money(deposit.recommended)),
                ("Conservative", _money(deposit.conservative)),
            ],
        )
    )

    outcomes = Table(title="Outcome Tree", header_style="bold magenta")
    for column in ("Scenario", "Status", "Prop", "Broker", "Cash"):
        outcomes.add_column(column, justify="left" if column in ("Scenario", "Status") else "right")
    for leaf in report.outcomes:
        outcomes.add_row(
            leaf.label,
            leaf.status,
            _money(leaf.prop_result),
            _money(leaf.broker_result),
            _money(leaf.cash_result),
        )
    console.print(outcomes)

    render_monte_carlo(report.monte_carlo, console)

    if report.warnings:
        console.print("\n[bold yellow]Warnings[/bold yellow]")
        for message in report.warnings:
            console.print(f"[yellow]- {message}[/yellow]")
