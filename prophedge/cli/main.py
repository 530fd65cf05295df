import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console

from prophedge.cli.formatters import format_json_output, render_monte_carlo, render_plan
from prophedge.cli.logging_setup import setup_logging
from prophedge.config.parameters import (
    PlannerConfiguration,
    flat_field_name,
    load_configuration,
    load_configuration_file,
)
from prophedge.models.enums import OutputFormat
from prophedge.models.exceptions import ConfigurationError
from prophedge.orchestrator import build_plan, summarize_plan
from prophedge.planner.derived import compute_derived_metrics
from prophedge.simulation.monte_carlo import DEFAULT_RUNS, run_monte_carlo
from prophedge.simulation.random_source import (
    default_random_source,
    seeded_random_source,
)


logger = logging.getLogger(__name__)

EXIT_CONFIGURATION_ERROR = 2


def _parse_override(text: str) -> tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got '{text}'")
    return key.strip(), value.strip()


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON file with configuration fields (camelCase or snake_case keys)",
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        type=_parse_override,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help=(
            "Override a configuration field by camelCase or snake_case name, "
            "e.g. --set propRisk=200 (repeatable)"
        ),
    )
    parser.add_argument(
        "--runs",
        type=int,
        default=DEFAULT_RUNS,
        help=f"Monte Carlo trial count (default: {DEFAULT_RUNS})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for a reproducible simulation (default: non-deterministic)",
    )
    parser.add_argument(
        "--output-format",
        type=OutputFormat,
        choices=list(OutputFormat),
        default=OutputFormat.TEXT,
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Optional file to append logs to",
    )


def _resolve_configuration(args: argparse.Namespace) -> PlannerConfiguration:
    """Merge the config file (if any) with --set overrides."""
    base = (
        load_configuration_file(args.config)
        if args.config is not None
        else load_configuration()
    )
    if not args.overrides:
        return base
    merged = base.to_flat_mapping()
    for key, value in args.overrides:
        merged[flat_field_name(key)] = value
    return PlannerConfiguration.from_flat_mapping(merged)


def run_plan_command(args: argparse.Namespace, console: Console) -> int:
    config = _resolve_configuration(args)
    rng = (
        seeded_random_source(args.seed)
        if args.seed is not None
        else default_random_source()
    )
    report = build_plan(config, runs=args.runs, random_source=rng)

    if args.summary:
        console.out(summarize_plan(report))
    elif args.output_format == OutputFormat.JSON:
        console.out(format_json_output(report))
    else:
        render_plan(report, console)
    return 0


def run_simulate_command(args: argparse.Namespace, console: Console) -> int:
    config = _resolve_configuration(args)
    rng = (
        seeded_random_source(args.seed)
        if args.seed is not None
        else default_random_source()
    )
    result = run_monte_carlo(
        config, compute_derived_metrics(config), runs=args.runs, rng=rng
    )

    if args.output_format == OutputFormat.JSON:
        console.out(format_json_output(result))
    else:
        render_monte_carlo(result, console)
    return 0


def main(args: Optional[list[str]] = None, console: Optional[Console] = None) -> int:
    """
    Main entry point for the 'prophedge' CLI.
    """
    parser = argparse.ArgumentParser(
        description="Prop Hedge Planner: challenge risk limits, phase plans and pass estimates"
    )
    subparsers = parser.add_subparsers(
        dest="command", required=True, help="Subcommands"
    )

    plan_parser = subparsers.add_parser(
        "plan",
        help="Compute the full challenge plan",
        description="Compute limits, schedules, deposit tiers, outcomes and Monte Carlo estimates.",
    )
    _add_common_arguments(plan_parser)
    plan_parser.add_argument(
        "--summary",
        action="store_true",
        help="Print only the short plain-text plan summary",
    )

    simulate_parser = subparsers.add_parser(
        "simulate",
        help="Run only the Monte Carlo simulation",
        description="Estimate phase pass and payout probabilities by simulation.",
    )
    _add_common_arguments(simulate_parser)

    parsed_args = parser.parse_args(args)
    setup_logging(level=parsed_args.log_level, log_file=parsed_args.log_file)

    if console is None:
        console = Console()

    try:
        if parsed_args.command == "plan":
            return run_plan_command(parsed_args, console)
        if parsed_args.command == "simulate":
            return run_simulate_command(parsed_args, console)
    except ConfigurationError as exc:
        logger.error("Configuration error: %s", exc)
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIGURATION_ERROR

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
