"""Translate domain exceptions into HTTP errors"""

import logging
from fastapi import HTTPException

from growth_gateway.domain.exceptions import CatalogError, DomainException, ValidationError
from growth_gateway.infrastructure.observability.metrics import validation_error_counter


def to_http_error(error: DomainException, request_id: str) -> HTTPException:
    """Log the failure and build the matching HTTPException"""
    if isinstance(error, ValidationError):
        validation_error_counter.labels(field=error.field).inc()
        logging.warning(f"Validation failed: {error}", extra={"request_id": request_id, "field": error.field})
        return HTTPException(status_code=422, detail={"field": error.field, "reason": error.reason})

    if isinstance(error, CatalogError):
        logging.error(f"Catalog unavailable: {error}", extra={"request_id": request_id})
        return HTTPException(status_code=503, detail="Product catalog unavailable")

    logging.error(f"Unexpected domain error: {error}", extra={"request_id": request_id})
    return HTTPException(status_code=500, detail="Internal server error")
