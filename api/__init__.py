"""
F1 API - API Module

FastAPI backend serving F1 teams and drivers.
"""

from .main import app
from .schemas import (
    TeamSchema,
    DriverSchema,
    TeamsResponse,
    DriversResponse,
    DriverResponse,
    MessageResponse,
)

__all__ = [
    "app",
    "TeamSchema",
    "DriverSchema",
    "TeamsResponse",
    "DriversResponse",
    "DriverResponse",
    "MessageResponse",
]
