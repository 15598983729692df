"""Tests for sampling module."""

import pytest

from compound_sim.models import DropSpec
from compound_sim.sampling import assign_drop_months, make_rng


def test_make_rng_with_seed():
    """Test RNG creation with fixed seed."""
    rng1 = make_rng(42)
    rng2 = make_rng(42)

    # Same seed should produce same sequence
    assert rng1.random() == rng2.random()
    assert rng1.random() == rng2.random()


def test_make_rng_without_seed():
    """Test RNG creation without seed."""
    rng1 = make_rng(None)
    rng2 = make_rng(None)

    # Different instances should produce different sequences
    assert rng1.random() != rng2.random()


def test_assign_drop_months_no_drops():
    """Test an empty drop list yields an empty assignment."""
    assert assign_drop_months(make_rng(42), [], 120) == {}


def test_assign_drop_months_zero_horizon():
    """Test no months are assigned when the horizon is empty."""
    drops = [DropSpec(0.4, 5)]

    assert assign_drop_months(make_rng(42), drops, 0) == {}


def test_assign_drop_months_negative_horizon():
    """Test a negative horizon is rejected."""
    with pytest.raises(ValueError, match="negative horizon"):
        assign_drop_months(make_rng(42), [], -12)


def test_assign_drop_months_within_range():
    """Test all assigned months fall inside the horizon."""
    rng = make_rng(42)
    drops = [DropSpec(0.05, 50), DropSpec(0.15, 20), DropSpec(0.40, 5)]

    for horizon in (1, 12, 60, 240):
        assignment = assign_drop_months(rng, drops, horizon)
        assert assignment
        assert all(0 <= month < horizon for month in assignment)
        assert all(drop in drops for drop in assignment.values())


def test_assign_drop_months_count_bound():
    """Test the assignment never holds more months than occurrences drawn."""
    rng = make_rng(7)
    drops = [DropSpec(0.05, 3), DropSpec(0.15, 4)]

    assignment = assign_drop_months(rng, drops, 600)

    assert 1 <= len(assignment) <= 7


def test_assign_drop_months_single_month_horizon():
    """Test every draw lands on month 0 when the horizon is one month."""
    drops = [DropSpec(0.05, 3)]

    assert assign_drop_months(make_rng(1), drops, 1) == {0: drops[0]}


def test_assign_drop_months_later_drop_wins(scripted_rng):
    """Test a later drop overwrites an earlier one on the same month."""
    small = DropSpec(0.05, 2)
    recession = DropSpec(0.40, 1)
    rng = scripted_rng([3, 7], [7])

    assignment = assign_drop_months(rng, [small, recession], 12)

    assert assignment == {3: small, 7: recession}
    assert rng.calls == [(0, 12, 2), (0, 12, 1)]


def test_assign_drop_months_repeated_draws_collapse(scripted_rng):
    """Test repeated draws of one drop occupy a single month."""
    drop = DropSpec(0.15, 3)
    rng = scripted_rng([5, 5, 5])

    assert assign_drop_months(rng, [drop], 12) == {5: drop}


def test_assign_drop_months_skips_zero_occurrences(scripted_rng):
    """Test drops with zero occurrences draw nothing."""
    rng = scripted_rng([2])
    drops = [DropSpec(0.05, 0), DropSpec(0.40, 1)]

    assignment = assign_drop_months(rng, drops, 12)

    assert assignment == {2: drops[1]}
    assert rng.calls == [(0, 12, 1)]


def test_assign_drop_months_reproducible():
    """Test identical seeds give identical assignments."""
    drops = [DropSpec(0.05, 4), DropSpec(0.40, 2)]

    first = assign_drop_months(make_rng(123), drops, 120)
    second = assign_drop_months(make_rng(123), drops, 120)

    assert first == second
