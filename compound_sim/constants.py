from __future__ import annotations

from typing import Dict, Tuple

MONTHS_PER_YEAR: int = 12
SNAPSHOT_INTERVAL: int = MONTHS_PER_YEAR

# Menu key -> (label, severity)
DROP_CATALOG: Dict[str, Tuple[str, float]] = {
    "1": ("Small dips ~ 5%", 0.05),
    "2": ("Correction ~ 15%", 0.15),
    "3": ("Recession ~ 40%", 0.40),
}
EXIT_OPTION: str = "4"

# CLI names for the same catalog entries
DROP_NAMES: Dict[str, float] = {
    "small": 0.05,
    "correction": 0.15,
    "recession": 0.40,
}

DEFAULT_RUNS: int = 1
