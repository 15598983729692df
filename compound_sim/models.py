"""Data models for the Compound Drop Simulator.

Contains DropSpec, SimulationInput and Stats value objects with basic validation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator

import numpy as np

from compound_sim.constants import MONTHS_PER_YEAR, SNAPSHOT_INTERVAL


@dataclass(frozen=True)
class DropSpec:
    """A class of drawdown events placed at random months."""

    severity: float
    occurrences: int

    def __post_init__(self) -> None:
        """Validate severity and occurrence count."""
        if not (0.0 < self.severity <= 1.0):
            raise ValueError(
                f"Drop severity must be in (0, 1], got {self.severity}"
            )
        if self.occurrences < 0:
            raise ValueError(
                f"Drop occurrences must be non-negative, got {self.occurrences}"
            )


@dataclass(frozen=True)
class SimulationInput:
    """Parameters of a single simulation run."""

    monthly_contribution: float
    annual_growth_rate: float
    horizon_years: int
    drops: tuple[DropSpec, ...] = ()

    def __post_init__(self) -> None:
        """Validate contribution and horizon, normalise drops to a tuple."""
        if not (math.isfinite(self.monthly_contribution) and self.monthly_contribution > 0):
            raise ValueError(
                f"Monthly contribution must be a positive amount, got {self.monthly_contribution}"
            )
        if self.horizon_years < 0:
            raise ValueError(
                f"Horizon must be non-negative, got {self.horizon_years} years"
            )
        object.__setattr__(self, "drops", tuple(self.drops))

    @property
    def monthly_growth_rate(self) -> float:
        return self.annual_growth_rate / MONTHS_PER_YEAR

    @property
    def horizon_months(self) -> int:
        return self.horizon_years * MONTHS_PER_YEAR


@dataclass(frozen=True, eq=False)
class Stats:
    """Result of a simulation run."""

    invested_capital: float
    roi: float
    pnl: float
    avg: float
    investments: np.ndarray = field(default_factory=lambda: np.zeros(0))

    def yearly_snapshots(self) -> Iterator[tuple[int, float]]:
        """Yield (month index, tranche value) for every month at a year boundary."""
        for i in range(0, len(self.investments), SNAPSHOT_INTERVAL):
            yield i, float(self.investments[i])

    def to_dict(self) -> dict[str, float | list[float]]:
        """JSON-friendly representation."""
        return {
            "invested_capital": self.invested_capital,
            "roi": self.roi,
            "pnl": self.pnl,
            "avg": self.avg,
            "investments": [float(v) for v in self.investments],
        }
