"""/v1/scenarios - Save, list and delete a user's investment plans"""

import logging
import uuid
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from sqlalchemy.orm import Session

from growth_gateway.api.v1.errors import to_http_error
from growth_gateway.api.v1.schemas import (
    CalculationRequest,
    CalculationResponse,
    ScenarioCreateRequest,
    ScenarioListResponse,
    ScenarioResponse,
)
from growth_gateway.api.dependencies import get_catalog, get_request_id
from growth_gateway.domain.exceptions import ValidationError
from growth_gateway.domain.models import RateCatalog, Scenario
from growth_gateway.domain.projection import project_from_catalog
from growth_gateway.infrastructure.database.models import SavedScenario
from growth_gateway.infrastructure.database.repositories import (
    ScenarioRepository,
    input_from_json,
    result_from_json,
)
from growth_gateway.infrastructure.database.session import get_db

router = APIRouter()


def _to_response(row: SavedScenario) -> ScenarioResponse:
    return ScenarioResponse(
        scenario_id=str(row.id),
        name=row.name,
        input_data=CalculationRequest.from_domain(input_from_json(row.input_data)),
        result=CalculationResponse.from_result(result_from_json(row.result)),
        created_at=row.created_at.isoformat(),
    )


def _parse_scenario_id(scenario_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(scenario_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid scenario ID format")


@router.post("/scenarios", response_model=ScenarioResponse, status_code=201)
def create_scenario(
    request_body: ScenarioCreateRequest,
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    db: Session = Depends(get_db),
    catalog: RateCatalog = Depends(get_catalog),
):
    """
    Project a plan and save it with its result.

    The projection is recomputed server-side so stored results always match
    the catalog the plan was saved against.
    """
    request_id = get_request_id(request)
    calc_input = request_body.input_data.to_domain()

    try:
        result = project_from_catalog(calc_input, catalog)
    except ValidationError as e:
        raise to_http_error(e, request_id)

    row = ScenarioRepository(db).create_scenario(
        user_id, Scenario(input=calc_input, result=result, name=request_body.name)
    )
    db.commit()
    db.refresh(row)

    logging.info(
        "Scenario saved",
        extra={"request_id": request_id, "user_id": user_id, "scenario_id": str(row.id)},
    )
    return _to_response(row)


@router.get("/scenarios", response_model=ScenarioListResponse)
def list_scenarios(
    user_id: str = Query(..., min_length=1, description="User identifier"),
    db: Session = Depends(get_db),
):
    """Return the user's saved scenarios, newest first."""
    rows = ScenarioRepository(db).list_scenarios(user_id)
    return ScenarioListResponse(user_id=user_id, scenarios=[_to_response(row) for row in rows])


@router.delete("/scenarios/{scenario_id}", status_code=204)
def delete_scenario(
    scenario_id: str,
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    db: Session = Depends(get_db),
):
    """Delete one of the user's scenarios."""
    scenario_uuid = _parse_scenario_id(scenario_id)

    if not ScenarioRepository(db).delete_scenario(user_id, scenario_uuid):
        raise HTTPException(status_code=404, detail="Scenario not found")

    db.commit()
    logging.info(
        "Scenario deleted",
        extra={"request_id": get_request_id(request), "user_id": user_id, "scenario_id": scenario_id},
    )
    return Response(status_code=204)
