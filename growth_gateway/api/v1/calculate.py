"""POST /v1/calculate - Investment projection endpoint"""

import time
from fastapi import APIRouter, Depends, Request

from growth_gateway.api.v1.errors import to_http_error
from growth_gateway.api.v1.schemas import CalculationRequest, CalculationResponse
from growth_gateway.api.dependencies import get_catalog, get_request_id
from growth_gateway.domain.exceptions import ValidationError
from growth_gateway.domain.models import RateCatalog
from growth_gateway.domain.projection import project_from_catalog
from growth_gateway.infrastructure.observability.logging import log_projection
from growth_gateway.infrastructure.observability.metrics import record_projection
from growth_gateway.utils.money import to_money

router = APIRouter()


@router.post("/calculate", response_model=CalculationResponse)
def calculate(
    request_body: CalculationRequest,
    request: Request,
    catalog: RateCatalog = Depends(get_catalog),
):
    """
    Project growth of an investment plan.

    Flow:
    1. Convert the request into a domain CalculationInput
    2. Resolve bank/product from the catalog (unknown ids -> 422)
    3. Simulate month by month and aggregate per year
    4. Return totals and both breakdowns, rounded to cents
    """
    start_time = time.perf_counter()
    request_id = get_request_id(request)

    try:
        result = project_from_catalog(request_body.to_domain(), catalog)
    except ValidationError as e:
        raise to_http_error(e, request_id)

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_projection(result.currency.value, request_body.duration_months)
    log_projection(
        request_id,
        result.bank_id,
        result.investment_type_id,
        request_body.duration_months,
        str(to_money(result.final_amount)),
        duration_ms,
    )

    return CalculationResponse.from_result(result)
