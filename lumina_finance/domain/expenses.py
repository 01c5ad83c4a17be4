"""Vehicle expense ledger - pre-sale costs and projected profit"""

from typing import Dict, Iterable, List
from lumina_finance.domain.models import ExpenseEntry, VehicleCostSummary

EXPENSE_CATEGORIES = ("fuel", "toll", "parts", "labor", "transport", "cleaning", "general")


def total_expenses(entries: Iterable[ExpenseEntry]) -> float:
    return sum(entry.amount for entry in entries)


def expenses_by_category(entries: Iterable[ExpenseEntry]) -> Dict[str, float]:
    """Sum expenses per category; unknown categories count as general"""
    totals: Dict[str, float] = {}
    for entry in entries:
        category = entry.category if entry.category in EXPENSE_CATEGORIES else "general"
        totals[category] = totals.get(category, 0.0) + entry.amount
    return totals


def summarize_vehicle_costs(
    purchase_price: float,
    selling_price: float,
    recon_costs: List[float],
    expenses: List[ExpenseEntry],
) -> VehicleCostSummary:
    """
    Cost position of a vehicle before it is sold.

    True cost is purchase price plus reconditioning tasks plus logged
    expenses; projected profit is the asking price less true cost.
    """
    recon_total = sum(recon_costs)
    expense_total = total_expenses(expenses)
    pre_sale_cost = recon_total + expense_total
    true_cost = purchase_price + pre_sale_cost

    return VehicleCostSummary(
        recon_total=recon_total,
        expense_total=expense_total,
        pre_sale_cost=pre_sale_cost,
        true_cost=true_cost,
        projected_profit=selling_price - true_cost,
    )
