"""Chirp routes."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import ValidationError

from app.errors import BadRequestError, NotFoundError
from app.routes.dependencies import get_authenticated_principal, get_chirp_service
from app.schemas.auth import AuthPrincipal
from app.schemas.chirp import Chirp, CreateChirpRequest
from app.schemas.error import ErrorResponse
from app.services.chirps import ChirpService

router = APIRouter(prefix="/chirps", tags=["Chirps"])

_CREATE_CHIRP_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": CreateChirpRequest.model_json_schema()}},
    }
}


def _decode_chirp_payload(raw: bytes) -> CreateChirpRequest:
    try:
        return CreateChirpRequest.model_validate_json(raw)
    except ValidationError as exc:
        errors = [{"loc": list(error["loc"]), "msg": error["msg"]} for error in exc.errors()]
        raise BadRequestError("Invalid chirp payload", details={"errors": errors}) from exc


def _parse_chirp_id(chirp_id: str) -> UUID:
    try:
        return UUID(chirp_id)
    except ValueError as exc:
        raise NotFoundError("Resource not found") from exc


@router.post(
    "",
    response_model=Chirp,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    openapi_extra=_CREATE_CHIRP_BODY,
)
async def create_chirp(
    request: Request,
    principal: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    service: Annotated[ChirpService, Depends(get_chirp_service)],
) -> Chirp:
    # the body is only read once the caller is authenticated
    payload = _decode_chirp_payload(await request.body())
    return service.create_chirp(owner_id=principal.user_id, payload=payload)


@router.get("", response_model=list[Chirp])
async def list_chirps(service: Annotated[ChirpService, Depends(get_chirp_service)]) -> list[Chirp]:
    return service.list_chirps()


@router.get(
    "/{chirpID}",
    response_model=Chirp,
    responses={404: {"model": ErrorResponse}},
)
async def get_chirp(
    chirpID: str,
    service: Annotated[ChirpService, Depends(get_chirp_service)],
) -> Chirp:
    return service.get_chirp(chirp_id=_parse_chirp_id(chirpID))


@router.delete(
    "/{chirpID}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_chirp(
    chirpID: str,
    principal: Annotated[AuthPrincipal, Depends(get_authenticated_principal)],
    service: Annotated[ChirpService, Depends(get_chirp_service)],
) -> Response:
    service.delete_chirp(owner_id=principal.user_id, chirp_id=_parse_chirp_id(chirpID))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
