"""Quote building - catalog, personalized and multi-option client quotes"""

from typing import Optional
from lumina_finance.domain.models import (
    CatalogQuote,
    QuoteOption,
    RiskProfile,
    SitePolicy,
    Vehicle,
    VehicleQuote,
)
from lumina_finance.domain.amortization import catalog_payment, compute_installment
from lumina_finance.domain.rates import adjust_rate, clamp_balloon_percent, get_marketing_config


def catalog_quote(
    vehicle: Vehicle,
    policy: SitePolicy,
    personalized_rate: Optional[float] = None,
) -> CatalogQuote:
    """
    Installment shown on a vehicle card.

    Uses the client's best bank rate when one exists, otherwise the teaser
    rate and term from the marketing policy.
    """
    has_personalized_rate = personalized_rate is not None
    config = get_marketing_config(
        vehicle.price,
        policy.default_interest_rate,
        has_personalized_rate,
        personalized_rate,
    )
    installment = catalog_payment(
        vehicle.price,
        interest_rate=config.rate,
        term_months=config.term,
        deposit_percent=policy.catalog_deposit_percent,
    )

    return CatalogQuote(
        term=config.term,
        rate=config.rate,
        installment=installment,
        is_teaser=not has_personalized_rate,
    )


def vehicle_quote(
    vehicle: Vehicle,
    policy: SitePolicy,
    deposit_percent: float,
    balloon_percent: float,
    term_months: int,
    base_rate: Optional[float] = None,
    current_year: Optional[int] = None,
) -> VehicleQuote:
    """
    Personalized quote for a vehicle.

    Flow:
    1. Risk-adjust the base rate (site default when not given)
    2. Clamp the balloon to the vehicle's age-based ceiling
    3. Finance price less deposit with the balloon taken on the full price
    """
    rate = adjust_rate(
        policy.default_interest_rate if base_rate is None else base_rate,
        RiskProfile(
            vehicle_year=vehicle.year,
            body_type=vehicle.body_type,
            deposit_percent=deposit_percent,
        ),
        current_year=current_year,
    )

    balloon_percent = clamp_balloon_percent(
        balloon_percent,
        vehicle.year,
        policy.max_balloon_percent,
        current_year=current_year,
    )

    deposit_amount = vehicle.price * (deposit_percent / 100)
    balloon_amount = vehicle.price * (balloon_percent / 100)
    principal = vehicle.price - deposit_amount

    return VehicleQuote(
        rate=rate,
        term_months=term_months,
        deposit_amount=deposit_amount,
        principal=principal,
        balloon_percent=balloon_percent,
        balloon_amount=balloon_amount,
        installment=compute_installment(principal, rate.final_rate, term_months, balloon_amount),
    )


def build_quote_option(
    title: str,
    price: float,
    rate: float,
    term: int,
    deposit_amount: float,
    balloon_percent: float,
) -> QuoteOption:
    """One scenario for the client quote: price less deposit, balloon on price"""
    principal = price - deposit_amount
    balloon_amount = price * (balloon_percent / 100)

    return QuoteOption(
        title=title,
        price=price,
        rate=rate,
        term=term,
        deposit=deposit_amount,
        balloon_percent=balloon_percent,
        installment=compute_installment(principal, rate, term, balloon_amount),
    )
