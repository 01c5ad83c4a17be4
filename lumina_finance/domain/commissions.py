"""Commission ledger and period reporting over a set of deals"""

from typing import Dict, Iterable
from lumina_finance.domain.models import DealRecord, PeriodMetrics
from lumina_finance.domain.profit import compute_profit

UNASSIGNED = "Unassigned"


def aggregate_by_person(deals: Iterable[DealRecord]) -> Dict[str, float]:
    """
    Total sales rep commission per rep.

    Deals without a rep are grouped under "Unassigned". The caller decides
    which deals belong to the period.
    """
    totals: Dict[str, float] = {}
    for deal in deals:
        name = deal.sales_rep_name or UNASSIGNED
        totals[name] = totals.get(name, 0.0) + deal.sales_rep_commission
    return totals


def aggregate_referrals_by_person(deals: Iterable[DealRecord]) -> Dict[str, float]:
    """Total referral commission per referrer, ignoring deals with none"""
    totals: Dict[str, float] = {}
    for deal in deals:
        if not deal.referral_commission_amount:
            continue
        name = deal.referral_person_name or UNASSIGNED
        totals[name] = totals.get(name, 0.0) + deal.referral_commission_amount
    return totals


def summarize_period(deals: Iterable[DealRecord]) -> PeriodMetrics:
    """
    Financial health metrics for the reports dashboard.

    - net_profit: sum of gross profit
    - gross_revenue: sum of sold prices
    - total_costs: cost price plus reconditioning
    - total_expenses: aftersales expenses
    - commission_payouts: rep plus referral commission
    """
    deal_list = list(deals)

    return PeriodMetrics(
        deal_count=len(deal_list),
        net_profit=sum(compute_profit(d).gross_profit for d in deal_list),
        gross_revenue=sum(d.sold_price for d in deal_list),
        total_costs=sum(d.cost_price + d.recon_cost for d in deal_list),
        total_expenses=sum(
            sum(e.amount for e in d.aftersales_expenses) for d in deal_list
        ),
        commission_payouts=sum(
            d.sales_rep_commission + d.referral_commission_amount for d in deal_list
        ),
    )
