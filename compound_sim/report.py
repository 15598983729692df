"""Report rendering and persistence for the Compound Drop Simulator."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

import numpy as np

from compound_sim.models import SimulationInput, Stats

logger = logging.getLogger(__name__)


class ReportWriteError(OSError):
    """Raised when a report file cannot be created or written."""


def format_number(value: float) -> str:
    """Shortest plain rendering of a number, without a trailing '.0'."""
    return np.format_float_positional(float(value), trim="-")


def render_report(stats: Stats) -> list[str]:
    """Render the summary lines followed by one line per year boundary."""
    lines = [
        f" invested_capital: ${stats.invested_capital:.2f}",
        f" roi: {stats.roi:.2f}%",
        f" pnl: ${stats.pnl:.2f}",
        f" monthly avg: ${stats.avg:.2f}",
    ]
    for i, investment in stats.yearly_snapshots():
        lines.append(f"\tInvestment #{i}. Pnl: ${investment:.2f}")
    return lines


def print_report(stats: Stats, stream: TextIO | None = None) -> None:
    for line in render_report(stats):
        print(line, file=stream)


def report_filename(sim_input: SimulationInput) -> str:
    """Build the `{contribution}-{rate}-{years}.txt` report name."""
    return "{}-{}-{}.txt".format(
        format_number(sim_input.monthly_contribution),
        format_number(sim_input.annual_growth_rate),
        sim_input.horizon_years,
    )


def save_report(
    sim_input: SimulationInput, stats: Stats, output_dir: str | Path = "."
) -> Path:
    """Write the report to a text file in `output_dir`.

    The whole report is rendered before the file is opened. If writing fails,
    any partially written file is removed and ReportWriteError is raised.

    Returns:
        Path of the written file
    """
    path = Path(output_dir) / report_filename(sim_input)
    content = "".join(f"{line}\n" for line in render_report(stats))

    created = False
    try:
        with path.open("w", encoding="utf-8") as fh:
            created = True
            fh.write(content)
    except OSError as exc:
        if created:
            path.unlink(missing_ok=True)
        raise ReportWriteError(f"Unable to write report to {path}: {exc}") from exc

    logger.info("Saved report to %s", path)
    return path
