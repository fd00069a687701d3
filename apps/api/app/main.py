"""FastAPI application entrypoint."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response
from starlette.types import Scope

from app.adapters.auth import AuthVerificationError
from app.core.config import get_settings
from app.core.logging_safety import reason_for
from app.errors import ApiError, BadRequestError, ChirpyError, to_api_error
from app.repositories.memory import InMemoryStore
from app.routes import admin_router, auth_router, chirps_router, health_router, users_router
from app.services.admin import HitCounter

logger = logging.getLogger(__name__)

STATIC_PREFIX = "/app"


class PublicStaticFiles(StaticFiles):
    """Static file server that never serves dotfiles or files inside dot-directories."""

    async def get_response(self, path: str, scope: Scope) -> Response:
        parts = path.replace("\\", "/").split("/")
        if any(part.startswith(".") and part not in (".", "..") for part in parts):
            raise StarletteHTTPException(status_code=404)
        return await super().get_response(path, scope)


def _error_response(exc: Exception) -> JSONResponse:
    error = to_api_error(exc)
    return JSONResponse(
        status_code=error.status_code,
        content=error.payload.model_dump(mode="json", exclude_none=True),
    )


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Chirpy API", version="0.1.0")
    app.state.store = InMemoryStore()
    app.state.hit_counter = HitCounter()

    @app.exception_handler(ApiError)
    @app.exception_handler(ChirpyError)
    @app.exception_handler(AuthVerificationError)
    async def handle_api_error(request: Request, exc: Exception) -> JSONResponse:
        response = _error_response(exc)
        if response.status_code >= 500:
            logger.error(
                "request.failed method=%s path=%s reason=%s",
                request.method,
                request.url.path,
                reason_for(exc),
                exc_info=exc,
            )
        return response

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [{"loc": list(error["loc"]), "msg": error["msg"]} for error in exc.errors()]
        return _error_response(BadRequestError("Invalid request payload", details={"errors": errors}))

    api_prefix = "/api"
    app.include_router(health_router, prefix=api_prefix)
    app.include_router(users_router, prefix=api_prefix)
    app.include_router(auth_router, prefix=api_prefix)
    app.include_router(chirps_router, prefix=api_prefix)
    app.include_router(admin_router)

    if settings.static_dir is not None and Path(settings.static_dir).is_dir():
        app.mount(
            STATIC_PREFIX,
            PublicStaticFiles(directory=settings.static_dir, html=True),
            name="static",
        )

        @app.middleware("http")
        async def count_fileserver_hits(request: Request, call_next):
            if request.url.path == STATIC_PREFIX or request.url.path.startswith(f"{STATIC_PREFIX}/"):
                request.app.state.hit_counter.increment()
            return await call_next(request)

    return app
