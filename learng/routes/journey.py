# learng/routes/journey.py

"""
Journey Routes.

Summary
-------
Endpoints include:
  - List journeys (filters and pagination)
  - Get a journey with its scenario tree
  - List a journey's scenarios
  - Create a journey
  - Update a journey (creator only)
  - Delete a journey and everything below it (creator only)

Every endpoint requires a bearer token.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from learng.auth import IdentityDep, get_identity
from learng.dependencies import JourneyServiceDep, ScenarioServiceDep
from learng.repositories import JourneyFilters
from learng.schemas import (
    JourneyCreate,
    JourneyDetail,
    JourneyListResponse,
    JourneyResponse,
    ScenarioResponse,
    UNAUTHORIZED_RESPONSES,
    SuccessResponse,
)

router = APIRouter(
    prefix="/journeys",
    tags=["🧭 Journeys"],
    dependencies=[Depends(get_identity)],
    responses=UNAUTHORIZED_RESPONSES,
)

_NOT_FOUND = {
    "description": "Not found",
    "content": {"application/json": {"example": {"error": "Journey not found"}}},
}


def get_journey_filters(
    status: Annotated[str | None, Query(description="Optional status filter")] = None,
    created_by: Annotated[
        str | None,
        Query(alias="createdBy", description="Optional creator filter"),
    ] = None,
) -> JourneyFilters:
    """
    Dependency to construct `JourneyFilters` from query parameters.

    Returns
    -------
    JourneyFilters
        Aggregated filter object.
    """
    return JourneyFilters(status=status or None, created_by=created_by or None)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=JourneyListResponse,
    summary="List journeys",
    description=(
        "List journeys newest first. `page` below 1 is treated as 1; "
        "`limit` outside 1..100 falls back to 20."
    ),
    operation_id="journeys_list",
)
async def list_journeys(
    filters: Annotated[JourneyFilters, Depends(get_journey_filters)],
    service: JourneyServiceDep,
    page: Annotated[int | None, Query(description="1-based page number")] = None,
    limit: Annotated[int | None, Query(description="Page size")] = None,
) -> JourneyListResponse:
    return await service.list_journeys(filters, page, limit)


@router.get(
    "/{journey_id}",
    response_class=ORJSONResponse,
    response_model=SuccessResponse[JourneyDetail],
    summary="Get journey by ID",
    description="Journey with its scenarios and words in display order, plus counts.",
    responses={404: _NOT_FOUND},
    operation_id="journeys_get",
)
async def get_journey(
    journey_id: str,
    service: JourneyServiceDep,
) -> SuccessResponse[JourneyDetail]:
    return SuccessResponse(data=await service.get_journey(journey_id))


@router.get(
    "/{journey_id}/scenarios",
    response_class=ORJSONResponse,
    response_model=SuccessResponse[list[ScenarioResponse]],
    summary="List a journey's scenarios",
    responses={404: _NOT_FOUND},
    operation_id="journeys_list_scenarios",
)
async def list_journey_scenarios(
    journey_id: str,
    service: ScenarioServiceDep,
) -> SuccessResponse[list[ScenarioResponse]]:
    scenarios = await service.list_for_journey(journey_id)
    return SuccessResponse(data=[ScenarioResponse.model_validate(s) for s in scenarios])


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=SuccessResponse[JourneyResponse],
    status_code=HTTP_201_CREATED,
    summary="Create a journey",
    description="Create a draft journey owned by the caller.",
    responses={
        400: {
            "description": "Bad request",
            "content": {"application/json": {"example": {"error": "title is required"}}},
        },
    },
    operation_id="journeys_create",
)
async def create_journey(
    body: JourneyCreate,
    identity: IdentityDep,
    service: JourneyServiceDep,
) -> SuccessResponse[JourneyResponse]:
    """
    Create a journey.

    Parameters
    ----------
    body : JourneyCreate
        Title, description and language pair.
    identity : RequestIdentity
        Caller; becomes the journey's creator.
    service : JourneyService
        Journey service dependency.

    Returns
    -------
    SuccessResponse[JourneyResponse]
        The created journey, status ``draft``.
    """
    journey = await service.create_journey(identity, body)
    return SuccessResponse(data=JourneyResponse.model_validate(journey))


@router.put(
    "/{journey_id}",
    response_class=ORJSONResponse,
    response_model=SuccessResponse[JourneyResponse],
    summary="Update a journey",
    description="Partially update a journey. Only its creator may do this.",
    responses={
        400: {
            "description": "Bad request",
            "content": {"application/json": {"example": {"error": "invalid status"}}},
        },
        403: {
            "description": "Forbidden",
            "content": {
                "application/json": {
                    "example": {"error": "You don't have permission to update this journey"},
                },
            },
        },
        404: _NOT_FOUND,
    },
    operation_id="journeys_update",
)
async def update_journey(
    journey_id: str,
    patch: Annotated[dict[str, Any], Body(examples=[{"status": "published"}])],
    identity: IdentityDep,
    service: JourneyServiceDep,
) -> SuccessResponse[JourneyResponse]:
    journey = await service.update_journey(identity, journey_id, patch)
    return SuccessResponse(data=JourneyResponse.model_validate(journey))


@router.delete(
    "/{journey_id}",
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete a journey",
    description="Delete a journey with its scenarios and words. Only its creator may do this.",
    responses={404: _NOT_FOUND},
    operation_id="journeys_delete",
)
async def delete_journey(
    journey_id: str,
    identity: IdentityDep,
    service: JourneyServiceDep,
) -> Response:
    await service.delete_journey(identity, journey_id)
    return Response(status_code=HTTP_204_NO_CONTENT)
