"""Deal profitability - gross and net profit of a finalized sale"""

from typing import List
from lumina_finance.domain.models import DealRecord, ProfitSummary, FinanceStructure
from lumina_finance.domain.exceptions import DealLockedError

ZERO_COST_PRICE = "zero_cost_price"
NEGATIVE_GROSS_PROFIT = "negative_gross_profit"


def compute_profit(deal: DealRecord) -> ProfitSummary:
    """
    Calculate the profit position of a deal.

    Income side:
    - Selling price less discount
    - Add-on (VAP) selling prices
    - DIC (bank reward) and referral income

    Cost side:
    - Cost price, reconditioning, dealer deposit contribution
    - Add-on cost prices and referral commission paid out

    Aftersales expenses are kept out of gross profit. They are reported as the
    drift between the profit at closing and the current profit.

    Net profit for commission purposes is gross profit less the sales rep's
    commission.

    Admin and bank initiation fees are pass-through and never touch profit.

    The finalize screen and the partner report both use this formula; see
    finance_structure for the fee and deposit figures shown at finalization.

    Warnings (advisory, the numbers are still returned):
    - zero_cost_price: cost price missing, profit is overstated
    - negative_gross_profit: deal lost money
    """
    addon_income = sum(addon.selling_price for addon in deal.addons_data)
    addon_costs = sum(addon.cost_price for addon in deal.addons_data)

    gross_income = (
        (deal.sold_price - deal.discount_amount)
        + addon_income
        + deal.dic_amount
        + deal.referral_income_amount
    )
    total_costs = (
        deal.cost_price
        + deal.recon_cost
        + deal.dealer_deposit_contribution
        + addon_costs
        + deal.referral_commission_amount
    )
    gross_profit = gross_income - total_costs

    aftersales_total = sum(expense.amount for expense in deal.aftersales_expenses)
    current_profit = gross_profit - aftersales_total

    warnings: List[str] = []
    if deal.cost_price == 0:
        warnings.append(ZERO_COST_PRICE)
    if gross_profit < 0:
        warnings.append(NEGATIVE_GROSS_PROFIT)

    return ProfitSummary(
        gross_income=gross_income,
        total_costs=total_costs,
        gross_profit=gross_profit,
        total_deductions=total_costs,
        net_profit=gross_profit - deal.sales_rep_commission,
        aftersales_total=aftersales_total,
        current_profit=current_profit,
        profit_drift=current_profit - gross_profit,
        warnings=tuple(warnings),
    )


def ensure_deal_open(deal: DealRecord, unlocked: bool = False) -> None:
    """
    Refuse to recompute a closed deal.

    Raises:
        DealLockedError: Deal is closed and the caller has not unlocked it
    """
    if deal.is_closed and not unlocked:
        raise DealLockedError("Deal is closed; unlock it before recalculating")


def finance_structure(deal: DealRecord) -> FinanceStructure:
    """Selling price, gross deal and amount the bank finances"""
    adjusted_selling_price = deal.sold_price - deal.discount_amount
    gross_deal = adjusted_selling_price + deal.external_admin_fee + deal.bank_initiation_fee
    total_deposits = deal.client_deposit + deal.dealer_deposit_contribution

    return FinanceStructure(
        adjusted_selling_price=adjusted_selling_price,
        gross_deal=gross_deal,
        total_deposits=total_deposits,
        total_finance_amount=gross_deal - total_deposits,
    )


def commission_from_percent(retained_profit: float, percent: float) -> float:
    """Sales rep commission as a percentage of the dealership's retained profit"""
    return retained_profit * (percent / 100)
