"""User registration routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.routes.dependencies import get_user_service
from app.schemas.error import ErrorResponse
from app.schemas.user import CreateUserRequest, User
from app.services.users import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def create_user(
    payload: CreateUserRequest,
    service: Annotated[UserService, Depends(get_user_service)],
) -> User:
    return service.register(email=payload.email, password=payload.password)
