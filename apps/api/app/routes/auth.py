"""Login route."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.routes.dependencies import get_auth_service
from app.schemas.auth import LoginRequest, LoginResponse
from app.schemas.error import ErrorResponse
from app.services.auth import AuthService

router = APIRouter(tags=["Auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
def login(
    payload: LoginRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> LoginResponse:
    return service.login(payload)
