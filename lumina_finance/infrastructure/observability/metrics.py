"""Prometheus metrics for quote volume, installment distribution and deal data quality"""

from typing import Sequence
from prometheus_client import Counter, Histogram

# Quote metrics
quote_counter = Counter(
    "lumina_quote_total",
    "Total finance quotes calculated",
    ["kind"],  # installment | catalog | vehicle | option
)

installment_histogram = Histogram(
    "lumina_quoted_installment_rand",
    "Monthly installments quoted",
    buckets=[2_000, 4_000, 6_000, 8_000, 10_000, 15_000, 20_000, 30_000, 50_000],
)

# Deal metrics
deal_profit_warning_counter = Counter(
    "lumina_deal_profit_warnings_total",
    "Deal profit calculations raising data-quality warnings",
    ["warning"],  # zero_cost_price | negative_gross_profit
)

locked_deal_rejections_counter = Counter(
    "lumina_locked_deal_rejections_total",
    "Recalculations refused because the deal is closed",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_quote(kind: str, installment: float) -> None:
    """Record a calculated quote"""
    quote_counter.labels(kind=kind).inc()
    installment_histogram.observe(max(0.0, installment))


def record_profit_warnings(warnings: Sequence[str]) -> None:
    """Count each data-quality warning raised on a deal"""
    for warning in warnings:
        deal_profit_warning_counter.labels(warning=warning).inc()
