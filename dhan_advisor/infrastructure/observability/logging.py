"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = "dhan-advisor"


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


def log_assessment(
    request_id: str,
    tier: str,
    eligible: bool,
    max_loan_amount: int,
    duration_ms: float,
) -> None:
    """Log structured eligibility outcome for analysis"""
    logging.info(
        "Assessment completed",
        extra={
            "request_id": request_id,
            "step": "assessment_complete",
            "eligibility_outcome": "eligible" if eligible else "ineligible",
            "tier": tier,
            "max_loan_amount": max_loan_amount,
            "duration_ms": duration_ms,
        },
    )


def log_plan(
    request_id: str,
    risk_profile: str,
    monthly_contribution: float,
    duration_ms: float,
) -> None:
    """Log structured investment plan outcome"""
    logging.info(
        "Investment plan completed",
        extra={
            "request_id": request_id,
            "step": "plan_complete",
            "risk_profile": risk_profile,
            "monthly_contribution": monthly_contribution,
            "duration_ms": duration_ms,
        },
    )
