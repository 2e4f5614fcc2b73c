"""
Pydantic schemas for the F1 API.

Defines the response models for every endpoint together with the metadata
published in the OpenAPI document.
"""

from typing import List
from pydantic import BaseModel, ConfigDict, Field


API_TITLE = "F1 API"
API_DESCRIPTION = "API para informações sobre a Fórmula 1"
API_VERSION = "1.0.0"

EXTERNAL_DOCS = {
    "url": "https://swagger.io",
    "description": "site swagger",
}

OPENAPI_TAGS = [
    {"name": "teams", "description": "F1 endpoints de times"},
    {"name": "drivers", "description": "F1 endpoints de pilotos"},
    {"name": "test", "description": "Verificação do servidor"},
]

SWAGGER_UI_PARAMETERS = {
    "docExpansion": "full",
    "deepLinking": False,
}

SERVER_OK_MESSAGE = "O server está funcionando"
DRIVER_NOT_FOUND_MESSAGE = "piloto não encontrado"


class TeamSchema(BaseModel):
    """A single F1 team."""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Team ID")
    name: str = Field(..., description="Team name")
    base: str = Field(..., description="Home base location")


class DriverSchema(BaseModel):
    """A single F1 driver."""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Driver ID")
    name: str = Field(..., description="Driver name")
    team: str = Field(..., description="Name of the driver's team")


class TeamsResponse(BaseModel):
    """Response model for the team listing."""
    teams: List[TeamSchema]


class DriversResponse(BaseModel):
    """Response model for the driver listing."""
    drivers: List[DriverSchema]


class DriverResponse(BaseModel):
    """Response model for a single driver lookup."""
    driver: DriverSchema


class MessageResponse(BaseModel):
    """Plain message envelope, used for the health check and for errors."""
    message: str = Field(..., description="Human-readable message")
