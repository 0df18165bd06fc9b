"""Application factory for the places catalog API."""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from catalog.core.config import Settings, settings as default_settings
from catalog.core.errors import CatalogError
from catalog.core.logger import logs
from catalog.models.places_model import ErrorResponse, HealthResponse
from catalog.repos.places_store import PlacesStore
from catalog.routes.places_route import router as places_router
from catalog.services.Places_service import PlaceRegistry


async def catalog_error_handler(request: Request, exc: CatalogError):
    level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
    logs.log(level, f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=ErrorResponse(error=exc.message).model_dump())


async def request_validation_handler(request: Request, exc: RequestValidationError):
    logs.log(logging.WARNING, f"{request.method} {request.url.path} -> 400: invalid request body", extra={"errors": exc.errors()})
    return JSONResponse(status_code=400, content=ErrorResponse(error="invalid request body").model_dump())


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(title=settings.SERVICE_NAME)
    app.state.settings = settings
    app.state.registry = PlaceRegistry(PlacesStore(settings.PLACES_FILE))

    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(places_router)

    # --- Root Endpoint ---
    @app.get("/", response_class=PlainTextResponse)
    def root():
        return settings.WELCOME_MESSAGE

    # --- Health Check ---
    @app.get("/health", response_model=HealthResponse)
    def health_check():
        return HealthResponse(status="ok", service=settings.SERVICE_NAME, places=app.state.registry.count())

    logs.log(logging.INFO, f"{settings.SERVICE_NAME} ready with {len(app.state.registry)} places")
    return app
