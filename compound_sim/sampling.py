"""Sampling utilities for the Compound Drop Simulator.

Centralized, reproducible randomness for drop placement.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from compound_sim.models import DropSpec


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create a seeded random number generator.

    Args:
        seed: Random seed. If None, uses system entropy.

    Returns:
        NumPy Generator instance
    """
    return np.random.default_rng(seed)


def assign_drop_months(
    rng: np.random.Generator, drops: Sequence[DropSpec], horizon_months: int
) -> dict[int, DropSpec]:
    """Place every drop occurrence on a uniformly random month.

    Drops are processed in the given order and each one draws `occurrences`
    months in [0, horizon_months). When two draws land on the same month the
    later one replaces the earlier one, so the map may hold fewer entries
    than the total number of occurrences requested.

    Args:
        rng: Random number generator
        drops: Drop specifications, in resolution order
        horizon_months: Number of simulated months

    Returns:
        Mapping of month index to the drop that strikes it
    """
    if horizon_months < 0:
        raise ValueError("Cannot place drops on a negative horizon")

    assignment: dict[int, DropSpec] = {}
    if horizon_months == 0:
        return assignment

    for drop in drops:
        if drop.occurrences == 0:
            continue
        months = rng.integers(0, horizon_months, size=drop.occurrences)
        for month in months:
            assignment[int(month)] = drop

    return assignment
