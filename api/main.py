"""
F1 API - FastAPI Backend

Provides read-only REST endpoints for:
- F1 teams
- F1 drivers, listed or looked up by id
- A server health check
"""

import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Path
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse
from loguru import logger

from api.schemas import (
    API_DESCRIPTION,
    API_TITLE,
    API_VERSION,
    DRIVER_NOT_FOUND_MESSAGE,
    EXTERNAL_DOCS,
    OPENAPI_TAGS,
    SERVER_OK_MESSAGE,
    SWAGGER_UI_PARAMETERS,
    DriverResponse,
    DriverSchema,
    DriversResponse,
    MessageResponse,
    TeamSchema,
    TeamsResponse,
)

from src.catalog import find_driver_by_id, list_drivers, list_teams
from src.lib.logging_setup import setup_logging
from src.lib.settings import get_settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info(f"Server listening at http://{settings.host}:{settings.port}")
    logger.info(f"documentação disponível em http://localhost:{settings.port}{app.docs_url}")
    yield


# Initialize FastAPI app
app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
    openapi_tags=OPENAPI_TAGS,
    docs_url="/docs",
    redoc_url="/redoc",
    swagger_ui_parameters=SWAGGER_UI_PARAMETERS,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


def custom_openapi():
    """Build the OpenAPI document once, adding the external docs link."""
    if app.openapi_schema:
        return app.openapi_schema

    schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
        tags=app.openapi_tags,
    )
    schema["externalDocs"] = EXTERNAL_DOCS
    app.openapi_schema = schema
    return app.openapi_schema


app.openapi = custom_openapi


@app.get(
    "/test",
    response_model=MessageResponse,
    tags=["test"],
    description="Testando endpoint",
    response_description="Teste bem-sucedido",
)
def server_test():
    """Health check endpoint."""
    return MessageResponse(message=SERVER_OK_MESSAGE)


@app.get(
    "/teams",
    response_model=TeamsResponse,
    tags=["teams"],
    description="Get all F1 teams",
    response_description="Successful response",
)
def get_teams():
    return TeamsResponse(
        teams=[TeamSchema.model_validate(team) for team in list_teams()]
    )


@app.get(
    "/drivers",
    response_model=DriversResponse,
    tags=["drivers"],
    description="Seleciona todos os pilotos",
    response_description="Resposta bem sucedida",
)
def get_drivers():
    return DriversResponse(
        drivers=[DriverSchema.model_validate(driver) for driver in list_drivers()]
    )


@app.get(
    "/drivers/{id}",
    response_model=DriverResponse,
    responses={404: {"model": MessageResponse, "description": DRIVER_NOT_FOUND_MESSAGE}},
    tags=["drivers"],
    description="pega um piloto pelo id",
    response_description="Piloto encontrado",
)
def get_driver(id: str = Path(..., description="Driver ID")):
    """
    Get a single driver.

    - **id**: Driver ID. Text without a leading integer never matches and
      gets the same 404 as an unknown id.
    """
    driver = find_driver_by_id(id)

    if driver is None:
        logger.debug(f"Driver lookup missed for id={id!r}")
        return driver_not_found()

    return DriverResponse(driver=DriverSchema.model_validate(driver))


# An empty id would otherwise be redirected to the driver listing
@app.get("/drivers/", include_in_schema=False)
def get_driver_without_id():
    logger.debug("Driver lookup missed for an empty id")
    return driver_not_found()


def driver_not_found() -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content=MessageResponse(message=DRIVER_NOT_FOUND_MESSAGE).model_dump(),
    )


def run():
    """Start the server with the configured host and port.

    Startup failures are fatal: the error is logged and the process exits
    with status 1.
    """
    settings = get_settings()
    setup_logging(settings.log_level)

    try:
        uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    except Exception:
        logger.exception("Server failed to start")
        sys.exit(1)


if __name__ == "__main__":
    run()
