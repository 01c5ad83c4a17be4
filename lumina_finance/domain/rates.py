"""Interest rate and balloon policy - risk pricing, teaser rates, balloon caps"""

from datetime import date
from typing import Optional
from lumina_finance.domain.models import RiskProfile, RateAdjustment, MarketingRateConfig

RISKY_BODY_TYPES = frozenset({"coupe", "sport", "sports", "convertible"})

AGE_PENALTY = 1.5
TYPE_PENALTY = 0.5
DEPOSIT_BONUS = -1.0

PENALTY_AGE_YEARS = 6
BONUS_DEPOSIT_PERCENT = 20

PERSONALIZED_TERM_MONTHS = 72
TEASER_LONG_TERM_MONTHS = 96
TEASER_LONG_TERM_PRICE = 250_000
TEASER_RATE_DISCOUNT = 1.0

NEW_VEHICLE_BALLOON_PERCENT = 40
BALLOON_STEP_PER_YEAR = 5


def _current_year(current_year: Optional[int]) -> int:
    return current_year if current_year is not None else date.today().year


def adjust_rate(
    base_rate: float,
    risk_profile: RiskProfile,
    current_year: Optional[int] = None,
) -> RateAdjustment:
    """
    Adjust a base interest rate for the risk of the vehicle being financed.

    Adjustments (percentage points):
    - +1.5 when the vehicle is more than 6 years old
    - +0.5 for coupe, sport, sports and convertible body types
    - -1.0 when the deposit is more than 20% of the price

    The final rate never drops below 0. Every component is returned so the
    breakdown can be shown next to the quote.
    """
    year = _current_year(current_year)

    age_penalty = 0.0
    if risk_profile.vehicle_year:
        if year - risk_profile.vehicle_year > PENALTY_AGE_YEARS:
            age_penalty = AGE_PENALTY

    type_penalty = 0.0
    if risk_profile.body_type and risk_profile.body_type.strip().lower() in RISKY_BODY_TYPES:
        type_penalty = TYPE_PENALTY

    deposit_bonus = 0.0
    if risk_profile.deposit_percent > BONUS_DEPOSIT_PERCENT:
        deposit_bonus = DEPOSIT_BONUS

    final_rate = max(0.0, base_rate + age_penalty + type_penalty + deposit_bonus)

    return RateAdjustment(
        base_rate=base_rate,
        age_penalty=age_penalty,
        type_penalty=type_penalty,
        deposit_bonus=deposit_bonus,
        final_rate=final_rate,
    )


def get_marketing_config(
    vehicle_price: float,
    default_site_rate: float,
    has_personalized_rate: bool,
    personalized_rate: Optional[float] = None,
) -> MarketingRateConfig:
    """
    Term and rate for catalog cards.

    A personalized rate from a bank offer is used as-is over 72 months.
    Otherwise a teaser is returned: 96 months above R250k (72 below) at one
    point under the site rate. Teaser figures are for display only.
    """
    if has_personalized_rate and personalized_rate is not None:
        return MarketingRateConfig(term=PERSONALIZED_TERM_MONTHS, rate=personalized_rate)

    term = TEASER_LONG_TERM_MONTHS if vehicle_price > TEASER_LONG_TERM_PRICE else PERSONALIZED_TERM_MONTHS
    rate = max(0.0, default_site_rate - TEASER_RATE_DISCOUNT)

    return MarketingRateConfig(term=term, rate=rate)


def max_balloon_percent(
    vehicle_year: Optional[int],
    global_max_percent: float,
    current_year: Optional[int] = None,
) -> float:
    """
    Highest balloon percentage allowed for a vehicle.

    Banks allow 40% on a new vehicle and 5 points less per year of age, down
    to 0. The result never exceeds the site-wide maximum.
    """
    if vehicle_year is None:
        return global_max_percent

    vehicle_age = _current_year(current_year) - vehicle_year
    age_ceiling = max(0, NEW_VEHICLE_BALLOON_PERCENT - vehicle_age * BALLOON_STEP_PER_YEAR)

    return min(age_ceiling, global_max_percent)


def clamp_balloon_percent(
    selected_percent: float,
    vehicle_year: Optional[int],
    global_max_percent: float,
    current_year: Optional[int] = None,
) -> float:
    """Pull a selected balloon percentage down to the vehicle's ceiling"""
    ceiling = max_balloon_percent(vehicle_year, global_max_percent, current_year)
    return max(0, min(selected_percent, ceiling))
