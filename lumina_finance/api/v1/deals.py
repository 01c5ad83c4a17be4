"""Deal endpoints - profit, partner distribution, finance structure, vehicle costs"""

import time
import logging
from dataclasses import asdict
from fastapi import APIRouter, HTTPException, Request

from lumina_finance.api.v1.schemas import (
    DealProfitRequest,
    DealProfitResponse,
    DealStructureRequest,
    DealStructureResponse,
    DistributionRequest,
    PartnerDistributionSchema,
    ProfitSummarySchema,
    VehicleCostsRequest,
    VehicleCostsResponse,
)
from lumina_finance.api.dependencies import get_request_id
from lumina_finance.config import settings
from lumina_finance.domain.profit import (
    commission_from_percent,
    compute_profit,
    ensure_deal_open,
    finance_structure,
)
from lumina_finance.domain.distribution import distribute, distribute_deal
from lumina_finance.domain.expenses import expenses_by_category, summarize_vehicle_costs
from lumina_finance.domain.exceptions import DealLockedError
from lumina_finance.infrastructure.observability.logging import log_deal_profit
from lumina_finance.infrastructure.observability.metrics import (
    locked_deal_rejections_counter,
    record_profit_warnings,
)

router = APIRouter()


@router.post("/deals/profit", response_model=DealProfitResponse)
def calculate_deal_profit(body: DealProfitRequest, request: Request):
    """
    Profit and partner payout of a finalized deal.

    Closed deals are only recalculated when the caller has unlocked them.
    Data-quality warnings are returned with the figures, never as errors.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    deal = body.deal.to_domain()

    try:
        ensure_deal_open(deal, unlocked=body.unlocked)
    except DealLockedError as e:
        locked_deal_rejections_counter.inc()
        logging.warning(f"Locked deal: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=409, detail=str(e))

    profit = compute_profit(deal)
    distribution = distribute_deal(deal, profit.gross_profit)

    duration_ms = (time.time() - start_time) * 1000
    record_profit_warnings(profit.warnings)
    log_deal_profit(request_id, profit.gross_profit, profit.net_profit, profit.warnings, duration_ms)

    return DealProfitResponse(
        profit=ProfitSummarySchema(**asdict(profit)),
        distribution=PartnerDistributionSchema(**asdict(distribution)),
    )


@router.post("/deals/distribution", response_model=PartnerDistributionSchema)
def calculate_distribution(body: DistributionRequest):
    """Split shared profit with a capital partner"""
    distribution = distribute(
        body.net_shared_profit,
        body.split_type,
        body.split_value,
        body.partner_capital,
    )
    return PartnerDistributionSchema(**asdict(distribution))


@router.post("/deals/structure", response_model=DealStructureResponse)
def calculate_deal_structure(body: DealStructureRequest, request: Request):
    """
    Finance figures at finalization.

    Fees missing from the deal fall back to the configured admin and
    initiation fees. Commission is a percentage of the dealership's retained
    profit after the partner share.
    Closed deals are only recalculated when the caller has unlocked them.
    """
    request_id = get_request_id(request)
    deal = body.deal.to_domain(
        default_admin_fee=settings.default_external_admin_fee,
        default_initiation_fee=settings.default_bank_initiation_fee,
    )

    try:
        ensure_deal_open(deal, unlocked=body.unlocked)
    except DealLockedError as e:
        locked_deal_rejections_counter.inc()
        logging.warning(f"Locked deal: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=409, detail=str(e))

    structure = finance_structure(deal)
    profit = compute_profit(deal)
    retained = distribute_deal(deal, profit.gross_profit).lumina_share

    return DealStructureResponse(
        **asdict(structure),
        retained_profit=retained,
        commission_amount=commission_from_percent(retained, body.commission_percent),
    )


@router.post("/vehicles/costs", response_model=VehicleCostsResponse)
def calculate_vehicle_costs(body: VehicleCostsRequest):
    """True cost and projected profit of a vehicle in stock"""
    expenses = [entry.to_domain() for entry in body.expenses]
    summary = summarize_vehicle_costs(
        body.purchase_price,
        body.selling_price,
        body.recon_costs,
        expenses,
    )
    return VehicleCostsResponse(**asdict(summary), by_category=expenses_by_category(expenses))
