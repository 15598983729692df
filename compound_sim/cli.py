"""Command-line interface for the Compound Drop Simulator.

Provides the entry point for argument-driven runs, falling back to interactive
prompts when no simulation parameters are given.
"""

from __future__ import annotations

import argparse
import json
import logging
import math
from typing import Any, Sequence

from compound_sim.constants import DEFAULT_RUNS, DROP_NAMES
from compound_sim.logging_config import setup_logging
from compound_sim.metrics import run_monte_carlo
from compound_sim.models import DropSpec, SimulationInput
from compound_sim.prompts import InteractivePrompter
from compound_sim.report import ReportWriteError, print_report, save_report
from compound_sim.sampling import make_rng
from compound_sim.simulator import simulate

logger = logging.getLogger(__name__)


def parse_drop(text: str) -> DropSpec:
    """Parse a `SEVERITY:COUNT` drop argument.

    SEVERITY is either a fraction such as 0.15 or one of the catalog names
    (small, correction, recession).
    """
    severity_text, sep, count_text = text.partition(":")
    if not sep:
        raise argparse.ArgumentTypeError(
            f"Drop must look like SEVERITY:COUNT, got {text!r}"
        )

    severity_text = severity_text.strip().lower()
    if severity_text in DROP_NAMES:
        severity = DROP_NAMES[severity_text]
    else:
        try:
            severity = float(severity_text)
        except ValueError:
            raise argparse.ArgumentTypeError(
                f"Unknown drop severity: {severity_text!r}"
            ) from None

    count_text = count_text.strip()
    if not count_text.isdecimal():
        raise argparse.ArgumentTypeError(
            f"Drop count must be a non-negative integer, got {count_text!r}"
        )

    try:
        return DropSpec(severity=severity, occurrences=int(count_text))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not a valid float: {text!r}") from None
    if not math.isfinite(value) or value <= 0:
        raise argparse.ArgumentTypeError(f"Must be a positive amount, got {text!r}")
    return value


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not a valid integer: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"Must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compound Drop Simulator")

    parser.add_argument(
        "monthly_contribution",
        type=positive_float,
        nargs="?",
        help="Amount invested each month",
    )
    parser.add_argument(
        "annual_growth_rate",
        type=float,
        nargs="?",
        help="Yearly return on investment (e.g., 0.04)",
    )
    parser.add_argument(
        "horizon_years",
        type=positive_int,
        nargs="?",
        help="Number of years to compound",
    )
    parser.add_argument(
        "--drop",
        type=parse_drop,
        action="append",
        default=[],
        metavar="SEVERITY:COUNT",
        help="Add a drop class, e.g. 0.15:2 or recession:1 (repeatable)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--runs",
        type=positive_int,
        default=DEFAULT_RUNS,
        help="Number of simulation runs; more than one prints a Monte Carlo summary",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Write the report to a text file (single runs without --json only)",
    )
    parser.add_argument(
        "--output-dir", default=".", help="Directory for saved reports"
    )
    parser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Ask for parameters on the terminal",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    return parser


def input_from_args(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> SimulationInput | None:
    """Build a SimulationInput from positional arguments, or None if absent."""
    positional = (args.monthly_contribution, args.annual_growth_rate, args.horizon_years)
    if all(value is None for value in positional):
        return None
    if any(value is None for value in positional):
        parser.error(
            "monthly_contribution, annual_growth_rate and horizon_years "
            "must be given together"
        )

    return SimulationInput(
        monthly_contribution=args.monthly_contribution,
        annual_growth_rate=args.annual_growth_rate,
        horizon_years=args.horizon_years,
        drops=tuple(args.drop),
    )


def print_monte_carlo(results: dict[str, Any]) -> None:
    summary = results["summary"]
    print("Compound Drop Simulator Results")
    print("=" * 40)
    print(f"Runs: {results['runs']}")
    print(f"Invested capital: ${results['invested_capital']:.2f}")
    print()

    print("PnL Statistics:")
    print(f"Mean: ${summary['pnl_mean']:.2f}")
    print(f"SD: ${summary['pnl_sd']:.2f}")
    print(f"Quantiles: {summary['pnl_quantiles']}")
    print()

    print("ROI Statistics:")
    print(f"Mean: {summary['roi_mean']:.2f}%")
    print(f"SD: {summary['roi_sd']:.2f}%")
    print(f"Quantiles: {summary['roi_quantiles']}")
    print(f"P(roi < 100%): {summary['prob_loss']:.3f}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.save and (args.json or args.runs > 1):
        parser.error("--save cannot be combined with --json or --runs above 1")
    setup_logging(args.verbose)

    sim_input = None if args.interactive else input_from_args(parser, args)
    prompter = None
    if sim_input is None:
        prompter = InteractivePrompter()
        try:
            sim_input = prompter.prompt_input()
        except EOFError:
            raise SystemExit("ERROR: Failed to read from stdin") from None

    rng = make_rng(args.seed)

    if args.runs > 1:
        results = run_monte_carlo(rng, sim_input, args.runs)
        if args.json:
            print(json.dumps(results, indent=2))
        else:
            print_monte_carlo(results)
        return

    stats = simulate(sim_input, rng)

    if args.json:
        print(json.dumps(stats.to_dict(), indent=2))
        return

    save = args.save
    if not save and prompter is not None:
        try:
            save = prompter.confirm("Do you want to save to file? y/n")
        except EOFError:
            raise SystemExit("ERROR: Failed to read from stdin") from None

    if save:
        try:
            save_report(sim_input, stats, args.output_dir)
        except ReportWriteError as exc:
            logger.error("%s", exc)
            raise SystemExit(1) from exc
    else:
        print_report(stats)


if __name__ == "__main__":
    main()
