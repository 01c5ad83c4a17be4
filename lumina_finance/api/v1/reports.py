"""Report endpoints - commission ledger and period summary"""

from dataclasses import asdict
from fastapi import APIRouter

from lumina_finance.api.v1.schemas import CommissionsResponse, PeriodSummaryResponse, ReportRequest
from lumina_finance.domain.commissions import (
    aggregate_by_person,
    aggregate_referrals_by_person,
    summarize_period,
)

router = APIRouter()


@router.post("/reports/commissions", response_model=CommissionsResponse)
def commission_ledger(body: ReportRequest):
    """
    Commission owed per sales rep and per referrer.

    The deals must already be filtered to the reporting period.
    """
    deals = [deal.to_domain() for deal in body.deals]
    return CommissionsResponse(
        sales_reps=aggregate_by_person(deals),
        referrals=aggregate_referrals_by_person(deals),
    )


@router.post("/reports/summary", response_model=PeriodSummaryResponse)
def period_summary(body: ReportRequest):
    """Financial health metrics for the supplied deals"""
    metrics = summarize_period(deal.to_domain() for deal in body.deals)
    return PeriodSummaryResponse(**asdict(metrics))
