"""Loan amortization - monthly installment with balloon payment"""

import math

# Ceilings used by the quote tools when syncing amount inputs back to percentages
DEPOSIT_PERCENT_CEILING = 50
BALLOON_PERCENT_CEILING = 75


def round_currency(value: float) -> float:
    """Round to the nearest whole currency unit, halves rounding up"""
    return float(math.floor(value + 0.5))


def compute_installment(
    principal: float,
    annual_rate_percent: float,
    term_months: int,
    balloon_amount: float = 0.0,
) -> float:
    """
    Calculate the level monthly installment for a loan with a balloon.

    Requirements:
    - Zero principal or term gives a 0 installment
    - Zero rate is straight-line: (principal - balloon) / term, not rounded
    - Otherwise the balloon is discounted to present value and the rest is
      amortized with the annuity formula, rounded to a whole currency unit

    Args:
        principal: Amount financed (price less deposit)
        annual_rate_percent: Nominal annual interest rate, e.g. 13.25
        term_months: Number of monthly payments
        balloon_amount: Lump sum due after the last payment

    Returns:
        Monthly installment

    Example:
        R300,000 at 13.25% over 72 months with a R105,000 balloon
        r = 0.1325 / 12, pv_balloon = 105000 / (1 + r)^72
        installment = (300000 - pv_balloon) * r(1+r)^72 / ((1+r)^72 - 1)
    """
    if principal <= 0 or term_months <= 0:
        return 0

    if annual_rate_percent == 0:
        return (principal - balloon_amount) / term_months

    monthly_rate = annual_rate_percent / 100 / 12
    growth = (1 + monthly_rate) ** term_months

    pv_balloon = balloon_amount / growth
    adjusted_principal = principal - pv_balloon

    payment = adjusted_principal * monthly_rate * growth / (growth - 1)
    return round_currency(payment)


def amount_from_percent(price: float, percent: float) -> float:
    """Deposit or balloon amount for a percentage of the vehicle price"""
    return round_currency(price * percent / 100)


def percent_from_amount(price: float, amount: float, ceiling: float) -> int:
    """Whole percentage of the vehicle price, clamped to [0, ceiling]"""
    if price <= 0:
        return 0
    percent = int(round_currency(amount / price * 100))
    return int(min(ceiling, max(0, percent)))


def catalog_payment(
    price: float,
    interest_rate: float = 13,
    term_months: int = 72,
    deposit_percent: float = 10,
) -> float:
    """Installment on a catalog card: price less a percentage deposit, no balloon"""
    deposit = price * (deposit_percent / 100)
    principal = price - deposit
    return compute_installment(principal, interest_rate, term_months)
