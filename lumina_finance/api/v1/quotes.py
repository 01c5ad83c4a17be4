"""Quote endpoints - installments, rate breakdowns, catalog and client quotes"""

from dataclasses import asdict
from fastapi import APIRouter, Depends, Request

from lumina_finance.api.v1.schemas import (
    BankOfferSchema,
    BestOfferRequest,
    BestOfferResponse,
    CatalogQuoteRequest,
    CatalogQuoteResponse,
    InstallmentRequest,
    InstallmentResponse,
    OfferTermsSchema,
    QuoteOptionSchema,
    QuoteOptionsRequest,
    QuoteOptionsResponse,
    RateAdjustmentSchema,
    RateRequest,
    VehicleQuoteRequest,
    VehicleQuoteResponse,
)
from lumina_finance.api.dependencies import get_request_id, get_site_policy
from lumina_finance.domain.models import RiskProfile, SitePolicy
from lumina_finance.domain.amortization import (
    BALLOON_PERCENT_CEILING,
    amount_from_percent,
    compute_installment,
    percent_from_amount,
)
from lumina_finance.domain.rates import adjust_rate, max_balloon_percent
from lumina_finance.domain.offers import derive_instalments, normalize_offer, pick_best
from lumina_finance.domain.quoting import build_quote_option, catalog_quote, vehicle_quote
from lumina_finance.infrastructure.observability.logging import log_quote
from lumina_finance.infrastructure.observability.metrics import record_quote

router = APIRouter()


@router.post("/quotes/installment", response_model=InstallmentResponse)
def calculate_installment(body: InstallmentRequest, request: Request):
    """Monthly installment for explicit loan inputs"""
    installment = compute_installment(
        body.principal,
        body.annual_rate_percent,
        body.term_months,
        body.balloon_amount,
    )

    record_quote("installment", installment)
    log_quote(get_request_id(request), "installment", body.annual_rate_percent, body.term_months, installment)

    return InstallmentResponse(installment=installment)


@router.post("/quotes/rate", response_model=RateAdjustmentSchema)
def calculate_rate(body: RateRequest):
    """Risk-adjusted rate with each adjustment broken out"""
    adjustment = adjust_rate(
        body.base_rate,
        RiskProfile(
            vehicle_year=body.vehicle_year,
            body_type=body.body_type,
            deposit_percent=body.deposit_percent,
        ),
        current_year=body.current_year,
    )
    return RateAdjustmentSchema(**asdict(adjustment))


@router.post("/quotes/catalog", response_model=CatalogQuoteResponse)
def quote_catalog(
    body: CatalogQuoteRequest,
    request: Request,
    policy: SitePolicy = Depends(get_site_policy),
):
    """
    Installment for a vehicle card.

    Teaser figures unless the client has a personalized bank rate.
    """
    quote = catalog_quote(body.vehicle.to_domain(), policy, body.personalized_rate)

    record_quote("catalog", quote.installment)
    log_quote(get_request_id(request), "catalog", quote.rate, quote.term, quote.installment)

    return CatalogQuoteResponse(**asdict(quote))


@router.post("/quotes/vehicle", response_model=VehicleQuoteResponse)
def quote_vehicle(
    body: VehicleQuoteRequest,
    request: Request,
    policy: SitePolicy = Depends(get_site_policy),
):
    """
    Personalized quote for one vehicle.

    Flow:
    1. Risk-adjust the base rate
    2. Clamp the requested balloon to the vehicle's ceiling
    3. Amortize price less deposit
    """
    vehicle = body.vehicle.to_domain()
    balloon_percent = (
        policy.default_balloon_percent if body.balloon_percent is None else body.balloon_percent
    )

    quote = vehicle_quote(
        vehicle,
        policy,
        deposit_percent=body.deposit_percent,
        balloon_percent=balloon_percent,
        term_months=body.term_months,
        base_rate=body.base_rate,
        current_year=body.current_year,
    )

    record_quote("vehicle", quote.installment)
    log_quote(get_request_id(request), "vehicle", quote.rate.final_rate, quote.term_months, quote.installment)

    return VehicleQuoteResponse(
        **asdict(quote),
        max_balloon_percent=max_balloon_percent(vehicle.year, policy.max_balloon_percent, body.current_year),
    )


@router.post("/quotes/options", response_model=QuoteOptionsResponse)
def quote_options(body: QuoteOptionsRequest, request: Request):
    """Multi-scenario quote an admin builds for a client"""
    request_id = get_request_id(request)
    options = []

    for option in body.options:
        if option.deposit_amount is not None:
            deposit_amount = option.deposit_amount
        else:
            deposit_amount = amount_from_percent(body.price, option.deposit_percent or 0.0)

        if option.balloon_percent is not None:
            balloon_percent = option.balloon_percent
        else:
            balloon_percent = percent_from_amount(
                body.price, option.balloon_amount or 0.0, BALLOON_PERCENT_CEILING
            )

        quote = build_quote_option(
            option.title,
            body.price,
            option.rate,
            option.term,
            deposit_amount,
            balloon_percent,
        )
        record_quote("option", quote.installment)
        log_quote(request_id, "option", quote.rate, quote.term, quote.installment)
        options.append(QuoteOptionSchema(**asdict(quote)))

    return QuoteOptionsResponse(options=options)


@router.post("/offers/best", response_model=BestOfferResponse)
def best_offer(body: BestOfferRequest, policy: SitePolicy = Depends(get_site_policy)):
    """
    Lowest-rate bank offer for an application.

    The balloon is clamped to the site maximum, lowered further for older
    vehicles and by any ceiling the caller sends.
    Returns an empty response when no offer carries a rate.
    """
    offers = [offer.to_domain() for offer in body.offers]
    best = pick_best(offers)

    if best is None:
        return BestOfferResponse()

    if body.term_months is not None:
        best = derive_instalments(best, body.term_months)

    ceiling = max_balloon_percent(body.vehicle_year, policy.max_balloon_percent, body.current_year)
    if body.max_balloon_percent is not None:
        ceiling = min(ceiling, body.max_balloon_percent)
    terms = normalize_offer(best, body.vehicle_price, ceiling)

    return BestOfferResponse(
        best=BankOfferSchema(**asdict(best)),
        terms=OfferTermsSchema(**asdict(terms)),
    )
