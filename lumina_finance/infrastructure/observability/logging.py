"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Sequence
from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = "lumina-finance"


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_quote(
    request_id: str,
    kind: str,
    rate: float,
    term_months: int,
    installment: float,
) -> None:
    """Log structured quote outcome"""
    logging.info(
        "Quote calculated",
        extra={
            "request_id": request_id,
            "step": "quote_complete",
            "quote_kind": kind,
            "rate": rate,
            "term_months": term_months,
            "installment": installment,
        },
    )


def log_deal_profit(
    request_id: str,
    gross_profit: float,
    net_profit: float,
    warnings: Sequence[str],
    duration_ms: float,
) -> None:
    """Log deal profit outcome; data-quality warnings are logged at WARNING"""
    extra = {
        "request_id": request_id,
        "step": "deal_profit_complete",
        "gross_profit": gross_profit,
        "net_profit": net_profit,
        "warnings": list(warnings),
        "duration_ms": duration_ms,
    }
    if warnings:
        logging.warning("Deal profit calculated with data-quality warnings", extra=extra)
    else:
        logging.info("Deal profit calculated", extra=extra)
