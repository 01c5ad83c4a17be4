"""Unit tests for partner profit distribution"""

import pytest
from lumina_finance.domain.models import DealRecord, SplitType
from lumina_finance.domain.distribution import distribute, distribute_deal


def test_distribute_percentage():
    result = distribute(100_000, SplitType.PERCENTAGE, 30, 200_000)

    assert result.partner_share == 30_000
    assert result.lumina_share == 70_000
    assert result.partner_payout_total == 230_000


def test_distribute_fixed_ignores_profit_size():
    small = distribute(10_000, SplitType.FIXED, 25_000, 150_000)
    large = distribute(500_000, SplitType.FIXED, 25_000, 150_000)

    assert small.partner_share == large.partner_share == 25_000
    assert small.lumina_share == -15_000
    assert large.lumina_share == 475_000
    assert large.partner_payout_total == 175_000


def test_distribute_accepts_plain_split_type_string():
    assert distribute(80_000, "fixed", 5_000, 0).partner_share == 5_000
    assert distribute(80_000, "percentage", 50, 0).partner_share == 40_000


@pytest.mark.parametrize("profit", [0, 1, 99_999, 123_456.78, -40_000])
@pytest.mark.parametrize("split", [0, 12.5, 33, 50, 100])
def test_distribute_percentage_reconciles(profit, split):
    result = distribute(profit, SplitType.PERCENTAGE, split, 75_000)

    assert result.partner_share + result.lumina_share == pytest.approx(profit, abs=1e-9)
    assert result.partner_payout_total == pytest.approx(75_000 + result.partner_share)


def test_distribute_deal_uses_deal_terms(shared_capital_deal: DealRecord):
    result = distribute_deal(shared_capital_deal, 88_500)

    assert result.partner_share == 26_550
    assert result.lumina_share == 61_950
    assert result.partner_payout_total == 226_550


def test_distribute_deal_without_partner():
    deal = DealRecord(sold_price=200_000, partner_split_value=40, partner_capital_contribution=90_000)

    result = distribute_deal(deal, 30_000)

    assert result.partner_share == 0
    assert result.lumina_share == 30_000
    assert result.partner_payout_total == 0
