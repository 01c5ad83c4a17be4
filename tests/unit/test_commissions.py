"""Unit tests for the commission ledger and period summary"""

from lumina_finance.domain.models import AftersalesExpense, DealRecord
from lumina_finance.domain.commissions import (
    aggregate_by_person,
    aggregate_referrals_by_person,
    summarize_period,
)


def make_deals():
    return [
        DealRecord(
            sold_price=300_000,
            cost_price=240_000,
            recon_cost=8_000,
            sales_rep_name="Thabo",
            sales_rep_commission=4_000,
            referral_person_name="Nadia",
            referral_commission_amount=1_500,
        ),
        DealRecord(
            sold_price=180_000,
            cost_price=150_000,
            sales_rep_name="Thabo",
            sales_rep_commission=2_500,
            aftersales_expenses=[AftersalesExpense(type="tyres", amount=3_600)],
        ),
        DealRecord(
            sold_price=220_000,
            cost_price=190_000,
            recon_cost=2_000,
            sales_rep_name="Lerato",
            sales_rep_commission=3_000,
            referral_commission_amount=1_000,
        ),
        DealRecord(sold_price=90_000, cost_price=80_000, sales_rep_commission=500),
    ]


def test_aggregate_by_person():
    totals = aggregate_by_person(make_deals())

    assert totals == {"Thabo": 6_500, "Lerato": 3_000, "Unassigned": 500}


def test_aggregate_by_person_empty():
    assert aggregate_by_person([]) == {}


def test_aggregate_referrals_by_person():
    totals = aggregate_referrals_by_person(make_deals())

    assert totals == {"Nadia": 1_500, "Unassigned": 1_000}


def test_summarize_period():
    metrics = summarize_period(make_deals())

    assert metrics.deal_count == 4
    # 50500 + 30000 + 27000 + 10000, referral commission counted as a cost
    assert metrics.net_profit == 117_500
    assert metrics.gross_revenue == 790_000
    assert metrics.total_costs == 670_000
    assert metrics.total_expenses == 3_600
    assert metrics.commission_payouts == 12_500


def test_summarize_period_accepts_generator():
    metrics = summarize_period(deal for deal in make_deals()[:1])

    assert metrics.deal_count == 1
    assert metrics.gross_revenue == 300_000
