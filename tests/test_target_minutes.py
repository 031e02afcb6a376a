"""Tests for fair-share field minute calculations."""

from fractions import Fraction

import pytest

from rotation_planner.models import DEFAULT_CONFIG, RotationConfig
from rotation_planner.services import (
    InsufficientRosterError, calculate_target_field_minutes, fair_share_quotas,
    initialize_field_minutes
)


def test_fixed_goalie_target_excludes_goalie():
    assert calculate_target_field_minutes(DEFAULT_CONFIG, 8, True) == pytest.approx(360 / 7)


def test_rotating_goalie_target_includes_everyone():
    assert calculate_target_field_minutes(DEFAULT_CONFIG, 8, False) == 45


def test_target_scales_with_config():
    config = RotationConfig(num_periods=2, period_length=25, field_players_on_pitch=10)
    assert calculate_target_field_minutes(config, 11, True) == 50


def test_target_needs_someone_to_share():
    with pytest.raises(InsufficientRosterError):
        calculate_target_field_minutes(DEFAULT_CONFIG, 1, True)


def test_initialize_field_minutes_keeps_roster_order():
    minutes = initialize_field_minutes(["Cy", "Ann", "Bo"])

    assert list(minutes) == ["Cy", "Ann", "Bo"]
    assert set(minutes.values()) == {0}


def test_quotas_split_evenly_when_everyone_is_available():
    quotas = fair_share_quotas({"A": 60, "B": 60, "C": 60}, 120)
    assert quotas == {"A": 40, "B": 40, "C": 40}


def test_quotas_cap_players_with_less_availability():
    quotas = fair_share_quotas({"A": 20, "B": 60, "C": 60}, 120)

    assert quotas["A"] == 20
    assert quotas["B"] == quotas["C"] == 50
    assert sum(quotas.values()) == 120


def test_quotas_are_exact_fractions():
    quotas = fair_share_quotas({"A": 60, "B": 60, "C": 60}, 100)

    assert all(isinstance(q, Fraction) for q in quotas.values())
    assert sum(quotas.values()) == 100
    assert quotas["A"] == Fraction(100, 3)
