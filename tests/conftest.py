from __future__ import annotations

import numpy as np
import pytest


class ScriptedRng:
    """Generator stand-in returning scripted month draws in order."""

    def __init__(self, *draws: list[int]) -> None:
        self.draws = [list(d) for d in draws]
        self.calls: list[tuple[int, int, int]] = []

    def integers(self, low: int, high: int, size: int) -> np.ndarray:
        self.calls.append((low, high, size))
        values = self.draws.pop(0)
        assert len(values) == size
        return np.array(values, dtype=np.int64)


@pytest.fixture
def scripted_rng():
    return ScriptedRng
