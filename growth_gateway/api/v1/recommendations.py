"""POST /v1/recommendations - Ranked suggestions from catalog and saved plans"""

import time
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from growth_gateway.api.v1.errors import to_http_error
from growth_gateway.api.v1.schemas import CalculationRequest, RecommendationSchema
from growth_gateway.api.dependencies import get_catalog, get_request_id, get_rule_settings
from growth_gateway.config import settings
from growth_gateway.domain.exceptions import ValidationError
from growth_gateway.domain.models import RateCatalog
from growth_gateway.domain.recommendations import RuleSettings, recommend
from growth_gateway.infrastructure.database.repositories import ScenarioRepository
from growth_gateway.infrastructure.database.session import get_db
from growth_gateway.infrastructure.observability.logging import log_recommendations
from growth_gateway.infrastructure.observability.metrics import record_recommendations

router = APIRouter()


@router.post("/recommendations", response_model=List[RecommendationSchema])
def create_recommendations(
    request_body: CalculationRequest,
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    locale: Optional[str] = Query(None, description="Display language: en | pt"),
    db: Session = Depends(get_db),
    catalog: RateCatalog = Depends(get_catalog),
    rule_settings: RuleSettings = Depends(get_rule_settings),
):
    """
    Recommend next steps for a user.

    The body is the plan currently on screen. It is validated against the
    catalog like /v1/calculate, but the rules only look at the catalog and
    the user's saved scenarios.
    """
    start_time = time.perf_counter()
    request_id = get_request_id(request)

    try:
        calc_input = request_body.to_domain()
        calc_input.validate()
        catalog.get_product(calc_input.bank_id, calc_input.investment_type_id)
    except ValidationError as e:
        raise to_http_error(e, request_id)

    history = ScenarioRepository(db).load_history(user_id)
    recommendations = recommend(
        catalog,
        history,
        locale=locale or settings.default_locale,
        settings=rule_settings,
    )

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_recommendations(rec.category.value for rec in recommendations)
    log_recommendations(request_id, user_id, len(history), [rec.id for rec in recommendations], duration_ms)

    return [RecommendationSchema.from_domain(rec) for rec in recommendations]
