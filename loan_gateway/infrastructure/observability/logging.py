"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

from loan_gateway.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


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


def log_decision(
    request_id: str,
    country: str,
    approved_amount: Optional[int],
    approved_period: Optional[int],
    requested_period: int,
    duration_ms: float,
) -> None:
    """Log structured decision outcome for analysis (personal code is never logged)"""
    logging.info(
        "Decision completed",
        extra={
            "request_id": request_id,
            "country": country,
            "step": "decision_complete",
            "approval_outcome": "approved",
            "approved_amount": approved_amount,
            "approved_period": approved_period,
            "period_extended": approved_period != requested_period,
            "duration_ms": duration_ms,
        },
    )


def log_rejection(request_id: str, country: str, reason: str, error_message: str) -> None:
    """Log a rejected loan request with the failure kind"""
    logging.warning(
        "Decision rejected",
        extra={
            "request_id": request_id,
            "country": country,
            "step": "decision_complete",
            "approval_outcome": "rejected",
            "reason": reason,
            "error_message": error_message,
        },
    )
