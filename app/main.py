# app/main.py

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from app.api.v1 import routes_health, routes_trips
from app.core.config import settings
from app.core.errors import GeocodeNotFound, TripPlannerError
from app.core.logger import logger
from app.core.logging_config import setup_logging


async def geocode_not_found_handler(request: Request, exc: GeocodeNotFound) -> PlainTextResponse:
    logger.warning(f"Rejecting {request.url.path}: {exc}")
    return PlainTextResponse("Unable to geocode city names.", status_code=400)


async def server_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    # Malformed input, CollaboratorFailure and anything unexpected end up here
    logger.error(f"Error processing {request.url.path}: {exc}")
    return PlainTextResponse("Error processing trip plan", status_code=500)


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Plans a trip between two places and picks amenity stops along the way.",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(GeocodeNotFound, geocode_not_found_handler)
    app.add_exception_handler(RequestValidationError, server_error_handler)
    app.add_exception_handler(TripPlannerError, server_error_handler)
    app.add_exception_handler(Exception, server_error_handler)

    # Routers
    app.include_router(routes_health.router, prefix="", tags=["health"])
    app.include_router(routes_trips.router, prefix="", tags=["trips"])

    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} ready ({settings.ENVIRONMENT})")
    return app


app = create_app()
