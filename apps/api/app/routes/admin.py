"""Health and admin routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import HTMLResponse, PlainTextResponse

from app.routes.dependencies import get_admin_service
from app.schemas.error import ErrorResponse
from app.services.admin import AdminService

health_router = APIRouter(tags=["Health"])
router = APIRouter(prefix="/admin", tags=["Admin"])


@health_router.get("/healthz", response_class=PlainTextResponse)
async def healthz() -> str:
    return "OK"


@router.get("/metrics", response_class=HTMLResponse)
async def metrics(service: Annotated[AdminService, Depends(get_admin_service)]) -> str:
    return service.metrics_page()


@router.post(
    "/reset",
    status_code=status.HTTP_200_OK,
    responses={403: {"model": ErrorResponse}},
)
def reset(service: Annotated[AdminService, Depends(get_admin_service)]) -> Response:
    service.reset()
    return Response(status_code=status.HTTP_200_OK)
