"""Bank offer selection - best rate across competing offers"""

from dataclasses import replace
from typing import List, Optional
from lumina_finance.domain.models import BankOffer, OfferTerms
from lumina_finance.domain.amortization import BALLOON_PERCENT_CEILING, compute_installment, round_currency


def best_rate(offer: BankOffer) -> Optional[float]:
    """Lowest of the linked and fixed rates, None when the offer has neither"""
    rates = [
        rate
        for rate in (offer.interest_rate_linked, offer.interest_rate_fixed)
        if rate is not None
    ]
    return min(rates) if rates else None


def pick_best(offers: List[BankOffer]) -> Optional[BankOffer]:
    """
    Pick the offer with the lowest interest rate.

    Offers without any rate are skipped. On a tie the earlier offer wins.
    """
    best_offer = None
    lowest = None

    for offer in offers:
        rate = best_rate(offer)
        if rate is None:
            continue
        if lowest is None or rate < lowest:
            lowest = rate
            best_offer = offer

    return best_offer


def normalize_offer(
    offer: BankOffer,
    vehicle_price: float,
    max_balloon_percent: float = BALLOON_PERCENT_CEILING,
) -> OfferTerms:
    """
    Express an offer as a rate and a balloon percentage of the vehicle price.

    The stored balloon amount is converted to a whole percentage and clamped
    to [0, max_balloon_percent].
    """
    balloon_percent = 0
    if offer.balloon_amount and vehicle_price > 0:
        raw_percent = round_currency(offer.balloon_amount / vehicle_price * 100)
        balloon_percent = int(min(max_balloon_percent, max(0, raw_percent)))

    return OfferTerms(rate=best_rate(offer), balloon_percent=balloon_percent)


def principal_debt_of(offer: BankOffer) -> float:
    """
    Amount financed by the bank: the stored principal debt, or the cash price
    plus licence, delivery, admin and initiation fees when none is stored.
    """
    if offer.principal_debt > 0:
        return offer.principal_debt
    return (
        offer.cash_price
        + offer.license_fee
        + offer.delivery_fee
        + offer.admin_fee
        + offer.initiation_fee
    )


def derive_instalments(offer: BankOffer, term_months: int) -> BankOffer:
    """Return a copy of the offer with principal debt and instalments filled in"""
    principal = principal_debt_of(offer)
    balloon = offer.balloon_amount or 0.0

    def instalment(rate: Optional[float]) -> Optional[float]:
        if rate is None:
            return None
        return compute_installment(principal, rate, term_months, balloon)

    return replace(
        offer,
        principal_debt=principal,
        instalment_linked=instalment(offer.interest_rate_linked),
        instalment_fixed=instalment(offer.interest_rate_fixed),
    )
