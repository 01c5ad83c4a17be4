"""Partner distribution - profit split on shared capital deals"""

from lumina_finance.domain.models import DealRecord, PartnerDistribution, SplitType


def distribute(
    net_shared_profit: float,
    split_type: SplitType,
    split_value: float,
    partner_capital: float,
) -> PartnerDistribution:
    """
    Split shared profit between the capital partner and the dealership.

    - percentage: partner gets split_value% of the profit
    - fixed: partner gets split_value regardless of the profit

    The partner's capital is refunded in full on top of the share and is
    never part of the split.
    """
    if SplitType(split_type) is SplitType.FIXED:
        partner_share = split_value
    else:
        partner_share = net_shared_profit * split_value / 100

    return PartnerDistribution(
        partner_share=partner_share,
        lumina_share=net_shared_profit - partner_share,
        partner_payout_total=partner_capital + partner_share,
    )


def distribute_deal(deal: DealRecord, net_shared_profit: float) -> PartnerDistribution:
    """Distribute using the deal's own partner terms"""
    if not deal.is_shared_capital:
        return PartnerDistribution(
            partner_share=0.0,
            lumina_share=net_shared_profit,
            partner_payout_total=0.0,
        )

    return distribute(
        net_shared_profit,
        deal.partner_split_type,
        deal.partner_split_value,
        deal.partner_capital_contribution,
    )
