"""Scenario routes. Any authenticated user may change any scenario."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from learng.auth import get_identity
from learng.dependencies import ScenarioServiceDep, WordServiceDep
from learng.schemas import (
    ScenarioCreate,
    ScenarioResponse,
    ScenarioWithWords,
    UNAUTHORIZED_RESPONSES,
    SuccessResponse,
    WordResponse,
)

router = APIRouter(
    prefix="/scenarios",
    tags=["🎬 Scenarios"],
    dependencies=[Depends(get_identity)],
    responses=UNAUTHORIZED_RESPONSES,
)

_NOT_FOUND = {
    "description": "Not found",
    "content": {"application/json": {"example": {"error": "Scenario not found"}}},
}


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=SuccessResponse[ScenarioResponse],
    status_code=HTTP_201_CREATED,
    summary="Create a scenario",
    responses={
        400: {
            "description": "Bad request",
            "content": {"application/json": {"example": {"error": "journey not found"}}},
        },
    },
    operation_id="scenarios_create",
)
async def create_scenario(
    body: ScenarioCreate,
    service: ScenarioServiceDep,
) -> SuccessResponse[ScenarioResponse]:
    scenario = await service.create_scenario(body)
    return SuccessResponse(data=ScenarioResponse.model_validate(scenario))


@router.get(
    "/{scenario_id}",
    response_class=ORJSONResponse,
    response_model=SuccessResponse[ScenarioWithWords],
    summary="Get scenario by ID",
    description="Scenario with its words in display order.",
    responses={404: _NOT_FOUND},
    operation_id="scenarios_get",
)
async def get_scenario(
    scenario_id: str,
    service: ScenarioServiceDep,
) -> SuccessResponse[ScenarioWithWords]:
    return SuccessResponse(data=await service.get_scenario(scenario_id))


@router.get(
    "/{scenario_id}/words",
    response_class=ORJSONResponse,
    response_model=SuccessResponse[list[WordResponse]],
    summary="List a scenario's words",
    responses={404: _NOT_FOUND},
    operation_id="scenarios_list_words",
)
async def list_scenario_words(
    scenario_id: str,
    service: WordServiceDep,
) -> SuccessResponse[list[WordResponse]]:
    words = await service.list_for_scenario(scenario_id)
    return SuccessResponse(data=[WordResponse.model_validate(word) for word in words])


@router.put(
    "/{scenario_id}",
    response_class=ORJSONResponse,
    response_model=SuccessResponse[ScenarioResponse],
    summary="Update a scenario",
    responses={404: _NOT_FOUND},
    operation_id="scenarios_update",
)
async def update_scenario(
    scenario_id: str,
    patch: Annotated[dict[str, Any], Body(examples=[{"displayOrder": 2}])],
    service: ScenarioServiceDep,
) -> SuccessResponse[ScenarioResponse]:
    scenario = await service.update_scenario(scenario_id, patch)
    return SuccessResponse(data=ScenarioResponse.model_validate(scenario))


@router.delete(
    "/{scenario_id}",
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete a scenario",
    description="Delete a scenario and its words.",
    responses={404: _NOT_FOUND},
    operation_id="scenarios_delete",
)
async def delete_scenario(scenario_id: str, service: ScenarioServiceDep) -> Response:
    await service.delete_scenario(scenario_id)
    return Response(status_code=HTTP_204_NO_CONTENT)
