"""Unit tests for risk-adjusted rates, teaser rates and balloon caps"""

import pytest
from lumina_finance.domain.models import RiskProfile
from lumina_finance.domain.rates import (
    adjust_rate,
    clamp_balloon_percent,
    get_marketing_config,
    max_balloon_percent,
)

CURRENT_YEAR = 2026


def test_adjust_rate_all_adjustments():
    """Old coupe with a large deposit"""
    profile = RiskProfile(vehicle_year=CURRENT_YEAR - 7, body_type="Coupe", deposit_percent=25)

    adjustment = adjust_rate(13.5, profile, current_year=CURRENT_YEAR)

    assert adjustment.base_rate == 13.5
    assert adjustment.age_penalty == 1.5
    assert adjustment.type_penalty == 0.5
    assert adjustment.deposit_bonus == -1.0
    assert adjustment.final_rate == 14.5


def test_adjust_rate_thresholds_are_exclusive():
    """Six years old and a 20% deposit do not trigger adjustments"""
    profile = RiskProfile(vehicle_year=CURRENT_YEAR - 6, body_type="Hatchback", deposit_percent=20)

    adjustment = adjust_rate(12.0, profile, current_year=CURRENT_YEAR)

    assert adjustment.age_penalty == 0
    assert adjustment.type_penalty == 0
    assert adjustment.deposit_bonus == 0
    assert adjustment.final_rate == 12.0


@pytest.mark.parametrize("body_type", ["SPORTS", "sport", " Convertible ", "coupe"])
def test_adjust_rate_body_type_case_insensitive(body_type):
    adjustment = adjust_rate(10.0, RiskProfile(body_type=body_type), current_year=CURRENT_YEAR)
    assert adjustment.type_penalty == 0.5


def test_adjust_rate_missing_year_and_type():
    adjustment = adjust_rate(11.0, RiskProfile(deposit_percent=5), current_year=CURRENT_YEAR)

    assert adjustment.age_penalty == 0
    assert adjustment.type_penalty == 0
    assert adjustment.final_rate == 11.0


@pytest.mark.parametrize("base_rate", [-20.0, -1.0, -0.5, 0.0, 0.5])
def test_adjust_rate_never_negative(base_rate):
    profile = RiskProfile(vehicle_year=CURRENT_YEAR, deposit_percent=50)

    adjustment = adjust_rate(base_rate, profile, current_year=CURRENT_YEAR)

    assert adjustment.final_rate >= 0


def test_adjust_rate_defaults_to_this_year():
    adjustment = adjust_rate(13.0, RiskProfile(vehicle_year=1990))
    assert adjustment.age_penalty == 1.5


def test_marketing_config_personalized_rate():
    config = get_marketing_config(400_000, 13.5, True, 11.75)

    assert config.term == 72
    assert config.rate == 11.75


def test_marketing_config_personalized_flag_without_rate_uses_teaser():
    config = get_marketing_config(100_000, 13.5, True, None)

    assert config.term == 72
    assert config.rate == 12.5


@pytest.mark.parametrize(
    "price, expected_term",
    [(250_001, 96), (250_000, 72), (99_000, 72)],
)
def test_marketing_config_teaser_term(price, expected_term):
    config = get_marketing_config(price, 13.5, False)

    assert config.term == expected_term
    assert config.rate == 12.5


def test_marketing_config_teaser_rate_floor():
    assert get_marketing_config(100_000, 0.5, False).rate == 0


@pytest.mark.parametrize(
    "age, expected",
    [(0, 35), (1, 35), (2, 30), (5, 15), (8, 0), (15, 0)],
)
def test_max_balloon_percent_by_age(age, expected):
    assert max_balloon_percent(CURRENT_YEAR - age, 35, current_year=CURRENT_YEAR) == expected


def test_max_balloon_percent_without_year_uses_global_max():
    assert max_balloon_percent(None, 30, current_year=CURRENT_YEAR) == 30


def test_max_balloon_percent_never_exceeds_global_max():
    for global_max in (0, 10, 25, 40, 60):
        for year in range(CURRENT_YEAR - 12, CURRENT_YEAR + 2):
            assert max_balloon_percent(year, global_max, current_year=CURRENT_YEAR) <= global_max


def test_clamp_balloon_percent():
    three_years_old = CURRENT_YEAR - 3

    assert clamp_balloon_percent(40, three_years_old, 35, current_year=CURRENT_YEAR) == 25
    assert clamp_balloon_percent(20, three_years_old, 35, current_year=CURRENT_YEAR) == 20
    assert clamp_balloon_percent(-5, three_years_old, 35, current_year=CURRENT_YEAR) == 0
