"""Metrics and analysis utilities for the Compound Drop Simulator.

Functions for repeating simulations and summarizing their outcomes.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from compound_sim.models import SimulationInput
from compound_sim.simulator import simulate

logger = logging.getLogger(__name__)


def quantiles(
    arr: np.ndarray, qs: tuple[float, ...] = (0.05, 0.5, 0.95)
) -> dict[float, float]:
    """Compute quantiles of an array.

    Args:
        arr: Input array
        qs: Quantile values to compute

    Returns:
        Dictionary mapping quantile values to computed quantiles
    """
    if len(arr) == 0:
        return {q: 0.0 for q in qs}

    computed_quantiles = np.quantile(arr, qs)
    return {q: float(v) for q, v in zip(qs, computed_quantiles)}


def summary(pnls: np.ndarray, rois: np.ndarray) -> dict[str, float | dict[float, float]]:
    """Generate summary statistics for repeated simulation results.

    Args:
        pnls: Array of pnl values across runs
        rois: Array of roi values across runs

    Returns:
        Dictionary with summary statistics
    """
    if len(pnls) == 0:
        return {
            "pnl_mean": 0.0,
            "pnl_sd": 0.0,
            "pnl_quantiles": {0.05: 0.0, 0.5: 0.0, 0.95: 0.0},
            "roi_mean": 0.0,
            "roi_sd": 0.0,
            "roi_quantiles": {0.05: 0.0, 0.5: 0.0, 0.95: 0.0},
            "prob_loss": 0.0,
        }

    return {
        "pnl_mean": float(np.mean(pnls)),
        "pnl_sd": float(np.std(pnls)),
        "pnl_quantiles": quantiles(pnls),
        "roi_mean": float(np.mean(rois)),
        "roi_sd": float(np.std(rois)),
        "roi_quantiles": quantiles(rois),
        "prob_loss": float(np.mean(rois < 100.0)),
    }


def run_monte_carlo(
    rng: np.random.Generator, sim_input: SimulationInput, runs: int
) -> dict[str, Any]:
    """Repeat the simulation with fresh drop placements.

    Args:
        rng: Random number generator shared by all runs
        sim_input: Simulation parameters
        runs: Number of simulation runs

    Returns:
        Dictionary with run count, invested capital and summary statistics
    """
    if runs <= 0:
        raise ValueError(f"Number of runs must be positive, got {runs}")

    pnls = np.empty(runs)
    rois = np.empty(runs)
    invested_capital = 0.0

    for i in range(runs):
        stats = simulate(sim_input, rng)
        pnls[i] = stats.pnl
        rois[i] = stats.roi
        invested_capital = stats.invested_capital

        if runs >= 20:
            step = max(1, runs // 20)
            if (i + 1) % step == 0 or i + 1 == runs:
                logger.info("Progress: %d/%d", i + 1, runs)

    return {
        "runs": runs,
        "invested_capital": invested_capital,
        "summary": summary(pnls, rois),
    }
