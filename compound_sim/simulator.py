"""Simulation engine for the Compound Drop Simulator.

Each monthly contribution is tracked as its own tranche and compounded from the
month it was added. A month struck by a drop shrinks every tranche held so far
instead of growing it.
"""

from __future__ import annotations

import logging

import numpy as np

from compound_sim.models import SimulationInput, Stats
from compound_sim.sampling import assign_drop_months

logger = logging.getLogger(__name__)


def simulate(
    sim_input: SimulationInput, rng: np.random.Generator | None = None
) -> Stats:
    """Run a single simulation.

    Args:
        sim_input: Contribution, growth rate, horizon and drops
        rng: Random number generator used for drop placement. If None, a fresh
            entropy-seeded generator is used.

    Returns:
        Stats with invested capital, roi, pnl, monthly average and the final
        value of every tranche. A zero horizon yields NaN roi and avg.
    """
    if rng is None:
        rng = np.random.default_rng()

    growth_factor = 1.0 + sim_input.monthly_growth_rate
    months = sim_input.horizon_months

    # Step 1: Place drops
    drop_months = assign_drop_months(rng, sim_input.drops, months)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Placed %d drop month(s) over %d months: %s",
            len(drop_months),
            months,
            {m: d.severity for m, d in sorted(drop_months.items())},
        )

    # Step 2: Contribute and compound, month by month
    series = np.empty(months, dtype=float)
    for i in range(months):
        series[i] = sim_input.monthly_contribution
        drop = drop_months.get(i)
        if drop is not None:
            series[: i + 1] *= 1.0 - drop.severity
        else:
            series[: i + 1] *= growth_factor

    # Step 3: Aggregate
    pnl = float(series.sum())
    invested_capital = float(months * sim_input.monthly_contribution)
    with np.errstate(divide="ignore", invalid="ignore"):
        roi = float(np.float64(pnl) / invested_capital * 100.0)
        avg = float(np.float64(pnl) / months)

    return Stats(
        invested_capital=invested_capital,
        roi=roi,
        pnl=pnl,
        avg=avg,
        investments=series,
    )
