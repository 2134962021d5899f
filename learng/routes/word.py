"""Word routes. Any authenticated user may change any word."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from learng.auth import get_identity
from learng.dependencies import WordServiceDep
from learng.schemas import UNAUTHORIZED_RESPONSES, SuccessResponse, WordCreate, WordResponse

router = APIRouter(
    prefix="/words",
    tags=["🔤 Words"],
    dependencies=[Depends(get_identity)],
    responses=UNAUTHORIZED_RESPONSES,
)

_NOT_FOUND = {
    "description": "Not found",
    "content": {"application/json": {"example": {"error": "Word not found"}}},
}


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=SuccessResponse[WordResponse],
    status_code=HTTP_201_CREATED,
    summary="Create a word",
    responses={
        400: {
            "description": "Bad request",
            "content": {"application/json": {"example": {"error": "scenario not found"}}},
        },
    },
    operation_id="words_create",
)
async def create_word(body: WordCreate, service: WordServiceDep) -> SuccessResponse[WordResponse]:
    word = await service.create_word(body)
    return SuccessResponse(data=WordResponse.model_validate(word))


@router.get(
    "/{word_id}",
    response_class=ORJSONResponse,
    response_model=SuccessResponse[WordResponse],
    summary="Get word by ID",
    responses={404: _NOT_FOUND},
    operation_id="words_get",
)
async def get_word(word_id: str, service: WordServiceDep) -> SuccessResponse[WordResponse]:
    word = await service.get_word(word_id)
    return SuccessResponse(data=WordResponse.model_validate(word))


@router.put(
    "/{word_id}",
    response_class=ORJSONResponse,
    response_model=SuccessResponse[WordResponse],
    summary="Update a word",
    responses={
        400: {
            "description": "Bad request",
            "content": {"application/json": {"example": {"error": "invalid generation method"}}},
        },
        404: _NOT_FOUND,
    },
    operation_id="words_update",
)
async def update_word(
    word_id: str,
    patch: Annotated[dict[str, Any], Body(examples=[{"imageUrl": None, "sourceText": "hi"}])],
    service: WordServiceDep,
) -> SuccessResponse[WordResponse]:
    word = await service.update_word(word_id, patch)
    return SuccessResponse(data=WordResponse.model_validate(word))


@router.delete(
    "/{word_id}",
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete a word",
    responses={404: _NOT_FOUND},
    operation_id="words_delete",
)
async def delete_word(word_id: str, service: WordServiceDep) -> Response:
    await service.delete_word(word_id)
    return Response(status_code=HTTP_204_NO_CONTENT)
