"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

SERVICE_NAME = "growth-gateway"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = SERVICE_NAME


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_projection(
    request_id: str,
    bank_id: str,
    investment_type_id: str,
    duration_months: int,
    final_amount: str,
    duration_ms: float,
) -> None:
    """Log structured projection outcome"""
    logging.info(
        "Projection completed",
        extra={
            "request_id": request_id,
            "step": "projection_complete",
            "bank_id": bank_id,
            "investment_type_id": investment_type_id,
            "duration_months": duration_months,
            "final_amount": final_amount,
            "duration_ms": duration_ms,
        },
    )


def log_recommendations(
    request_id: str,
    user_id: str,
    history_size: int,
    recommendation_ids: list[str],
    duration_ms: float,
) -> None:
    """Log which recommendations were produced for a user"""
    logging.info(
        "Recommendations generated",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "recommendations_complete",
            "history_size": history_size,
            "recommendations": recommendation_ids,
            "duration_ms": duration_ms,
        },
    )
